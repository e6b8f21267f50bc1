# gestor/routes/product.py

from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status, Query, Path
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.product import Product as DBProduct
from ..models.enums import EstadoProductoEnum
from ..schemas.product import ProductCreate, ProductUpdate, ProductView, ProductOption
from ..schemas.common import Message
from ..services.product_service import ProductService

router = APIRouter(
    prefix="/products",
    tags=["products"]
)

def get_product_or_404(
    product_id: int = Path(..., title="El ID del producto"),
    db: Session = Depends(get_db)
) -> DBProduct:
    db_product = ProductService.get_product(db, product_id)
    if db_product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Produto não encontrado.")
    return db_product

@router.get("/", response_model=List[ProductView])
def read_products(
    search: Optional[str] = Query(None, description="Texto de búsqueda por nombre o descripción"),
    estado: Optional[EstadoProductoEnum] = Query(None, alias="status", description="Filtrar por estado"),
    db: Session = Depends(get_db),
):
    return [ProductView.from_storage(p) for p in ProductService.list_products(db, search, estado)]

@router.get("/selectable", response_model=List[ProductOption])
def read_selectable_products(db: Session = Depends(get_db)):
    """
    Productos disponibles para las líneas de un pedido nuevo (solo activos).
    """
    return [ProductOption.from_storage(p) for p in ProductService.list_selectable(db)]

@router.get("/{product_id}", response_model=ProductView)
def get_product(db_product: DBProduct = Depends(get_product_or_404)):
    return ProductView.from_storage(db_product)

@router.post("/", response_model=ProductView, status_code=status.HTTP_201_CREATED)
def create_product(
    product_data: ProductCreate,
    db: Session = Depends(get_db),
):
    result = ProductService.create_product(db, product_data)
    if not result.success:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Erro ao criar produto: {result.error}")
    return ProductView.from_storage(result.data)

@router.put("/{product_id}", response_model=ProductView)
def update_product(
    product_data: ProductUpdate,
    db_product: DBProduct = Depends(get_product_or_404),
    db: Session = Depends(get_db),
):
    result = ProductService.update_product(db, db_product, product_data)
    if not result.success:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Erro ao atualizar produto: {result.error}")
    return ProductView.from_storage(result.data)

@router.delete("/{product_id}", response_model=Message)
def delete_product(
    db_product: DBProduct = Depends(get_product_or_404),
    db: Session = Depends(get_db),
):
    result = ProductService.delete_product(db, db_product)
    if not result.success:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Erro ao remover produto: {result.error}")
    return Message(message="Produto removido com sucesso.")
