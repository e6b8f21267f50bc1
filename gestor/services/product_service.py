from typing import List, Optional
import logging

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models.product import Product as DBProduct
from ..models.enums import EstadoProductoEnum
from ..schemas.product import ProductCreate, ProductUpdate
from ..schemas.common import OperationResult

logger = logging.getLogger(__name__)


class ProductService:

    @staticmethod
    def list_products(
        db: Session,
        search: Optional[str] = None,
        status: Optional[EstadoProductoEnum] = None,
    ) -> List[DBProduct]:
        query = db.query(DBProduct)

        if status:
            query = query.filter(DBProduct.status == status)

        if search:
            pattern = f"%{search.strip()}%"
            query = query.filter(
                or_(
                    DBProduct.name.ilike(pattern),
                    DBProduct.description.ilike(pattern),
                )
            )

        return query.order_by(DBProduct.name, DBProduct.id).all()

    @staticmethod
    def list_selectable(db: Session) -> List[DBProduct]:
        """Productos que se pueden agregar a un pedido nuevo: solo los activos."""
        return ProductService.list_products(db, status=EstadoProductoEnum.ativo)

    @staticmethod
    def get_product(db: Session, product_id: int) -> Optional[DBProduct]:
        return db.query(DBProduct).filter(DBProduct.id == product_id).first()

    @staticmethod
    def count_products(db: Session) -> int:
        return db.query(DBProduct).count()

    @staticmethod
    def create_product(db: Session, product_data: ProductCreate) -> OperationResult:
        try:
            new_product = DBProduct(**product_data.to_storage())
            new_product.stock_quantity = 0
            db.add(new_product)
            db.commit()
            db.refresh(new_product)
            logger.info("Producto %s creado (id=%s)", new_product.name, new_product.id)
            return OperationResult.ok(new_product)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("Error al crear producto %s: %s", product_data.description, e)
            return OperationResult.fail(str(e))

    @staticmethod
    def update_product(db: Session, db_product: DBProduct, product_data: ProductUpdate) -> OperationResult:
        # Cambiar el precio no altera los pedidos: cada ítem guarda su propio precio unitario
        try:
            for campo, valor in product_data.to_storage().items():
                setattr(db_product, campo, valor)
            db.add(db_product)
            db.commit()
            db.refresh(db_product)
            logger.info("Producto %s actualizado", db_product.id)
            return OperationResult.ok(db_product)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("Error al actualizar producto %s: %s", db_product.id, e)
            return OperationResult.fail(str(e))

    @staticmethod
    def delete_product(db: Session, db_product: DBProduct) -> OperationResult:
        product_id = db_product.id
        try:
            db.delete(db_product)
            db.commit()
            logger.info("Producto %s eliminado", product_id)
            return OperationResult.ok()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("Error al eliminar producto %s: %s", product_id, e)
            return OperationResult.fail(str(e))
