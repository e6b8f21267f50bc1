# gestor/routes/order.py

from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status, Query, Path
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.order import Order as DBOrder
from ..models.enums import EstadoPedidoEnum
from ..schemas.order import OrderCreate, OrderUpdate, OrderView, OrderDraftIn, OrderDraftView
from ..schemas.product import ProductView, ProductOption
from ..schemas.common import Message
from ..services.order_service import OrderService, available_actions
from ..services.product_service import ProductService
from ..forms.order_form import OrderDraft

router = APIRouter(
    prefix="/orders",
    tags=["orders"]
)

def get_order_or_404(
    order_id: int = Path(..., title="El ID del pedido"),
    db: Session = Depends(get_db)
) -> DBOrder:
    """
    Dependencia para obtener un pedido por ID con su cliente e ítems precargados.
    """
    db_order = OrderService.get_order(db, order_id)
    if db_order is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pedido não encontrado.")
    return db_order

def to_view(db_order: DBOrder) -> OrderView:
    return OrderView.from_storage(db_order, actions=available_actions(db_order.status))

@router.get("/", response_model=List[OrderView])
def read_orders(
    search: Optional[str] = Query(None, description="Buscar por nombre del cliente"),
    estado: Optional[EstadoPedidoEnum] = Query(None, alias="status", description="Filtrar por estado del pedido"),
    db: Session = Depends(get_db),
):
    """
    Lista de pedidos, del más reciente al más antiguo. Cada fila indica las acciones disponibles.
    """
    return [to_view(o) for o in OrderService.list_orders(db, search, estado)]

@router.post("/draft", response_model=OrderDraftView)
def preview_order_draft(
    draft_data: OrderDraftIn,
    db: Session = Depends(get_db),
):
    """
    Recalcula el formulario de pedido (totales de línea y total general) sin guardar nada.
    Solo se ofrecen productos activos, más los que ya tiene el pedido en edición.
    """
    opciones = [ProductView.from_storage(p) for p in ProductService.list_products(db)]
    if draft_data.order_id is not None:
        db_order = OrderService.get_order(db, draft_data.order_id)
        if db_order is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pedido não encontrado.")
        opciones.extend(ProductOption.from_storage(item.product) for item in db_order.order_items if item.product)

    draft = OrderDraft.from_lines(
        draft_data.lines,
        products=opciones,
        client_id=draft_data.client_id,
        order_date=draft_data.order_date,
        with_invoice=draft_data.with_invoice,
    )
    return OrderDraftView.from_draft(draft)

@router.get("/{order_id}", response_model=OrderView)
def get_order(db_order: DBOrder = Depends(get_order_or_404)):
    return to_view(db_order)

@router.post("/", response_model=OrderView, status_code=status.HTTP_201_CREATED)
def create_order(
    order_data: OrderCreate,
    db: Session = Depends(get_db),
):
    """
    Crea un pedido con sus ítems. Los totales se recalculan en el servidor.
    """
    result = OrderService.create_order(db, order_data)
    if not result.success:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Erro ao criar pedido: {result.error}")
    return to_view(result.data)

@router.put("/{order_id}", response_model=OrderView)
def update_order(
    order_data: OrderUpdate,
    db_order: DBOrder = Depends(get_order_or_404),
    db: Session = Depends(get_db),
):
    """
    Actualiza el encabezado y reemplaza todos los ítems. Solo pedidos abiertos.
    """
    result = OrderService.update_order(db, db_order, order_data)
    if not result.success:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Erro ao atualizar pedido: {result.error}")
    return to_view(result.data)

@router.patch("/{order_id}/status", response_model=OrderView)
def update_order_status(
    estado: EstadoPedidoEnum = Query(..., alias="status", description="Nuevo estado del pedido"),
    db_order: DBOrder = Depends(get_order_or_404),
    db: Session = Depends(get_db),
):
    result = OrderService.update_status(db, db_order, estado)
    if not result.success:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Erro ao atualizar status: {result.error}")
    return to_view(result.data)

@router.patch("/{order_id}/close", response_model=OrderView)
def close_order(
    db_order: DBOrder = Depends(get_order_or_404),
    db: Session = Depends(get_db),
):
    """
    Cierra un pedido abierto (confirmación explícita en la interfaz). No hay reapertura.
    """
    result = OrderService.close_order(db, db_order)
    if not result.success:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Erro ao fechar pedido: {result.error}")
    return to_view(result.data)

@router.delete("/{order_id}", response_model=Message)
def delete_order(
    db_order: DBOrder = Depends(get_order_or_404),
    db: Session = Depends(get_db),
):
    result = OrderService.delete_order(db, db_order)
    if not result.success:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Erro ao remover pedido: {result.error}")
    return Message(message="Pedido removido com sucesso.")
