from typing import Iterable, List, Optional
import logging

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from ..models.client import Client as DBClient
from ..models.order import Order as DBOrder
from ..models.order_item import OrderItem as DBOrderItem
from ..models.product import Product as DBProduct
from ..models.enums import EstadoPedidoEnum, EstadoProductoEnum
from ..schemas.order import OrderCreate, OrderUpdate, OrderItemCreate
from ..schemas.common import OperationResult
from ..utils.totals import line_total, order_total

logger = logging.getLogger(__name__)

# Acciones que la lista de pedidos ofrece para cada estado
ACCIONES_PEDIDO_ABIERTO = ["view", "edit", "delete", "close"]
ACCIONES_PEDIDO_CERRADO = ["view"]


def available_actions(estado: str) -> List[str]:
    """Solo los pedidos abiertos se pueden editar, eliminar o cerrar."""
    if estado == EstadoPedidoEnum.aberto.value:
        return list(ACCIONES_PEDIDO_ABIERTO)
    return list(ACCIONES_PEDIDO_CERRADO)


def build_order_items(
    db: Session,
    items_data: Iterable[OrderItemCreate],
    productos_existentes: Iterable[int] = (),
) -> List[DBOrderItem]:
    """
    Construye los ítems del pedido con su total recalculado (cantidad × precio unitario).

    Las líneas nuevas solo pueden usar productos activos; un producto que ya estaba en el
    pedido se mantiene aunque luego haya sido inactivado.
    """
    items_data = list(items_data)
    product_ids = {item.product_id for item in items_data}
    products_map = {
        p.id: p for p in db.query(DBProduct).filter(DBProduct.id.in_(product_ids)).all()
    }
    permitidos = set(productos_existentes)

    items = []
    for item in items_data:
        producto = products_map.get(item.product_id)
        if producto is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Produto com ID {item.product_id} não encontrado."
            )
        if producto.status != EstadoProductoEnum.ativo and producto.id not in permitidos:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"O produto '{producto.name}' está inativo e não pode ser adicionado ao pedido."
            )
        items.append(DBOrderItem(
            product_id=item.product_id,
            quantity=item.quantity,
            unit_price=item.unit_price,
            total_price=line_total(item.quantity, item.unit_price),
        ))
    return items


class OrderService:

    @staticmethod
    def _query(db: Session):
        # Lectura del pedido junto con su cliente y sus ítems
        return db.query(DBOrder).options(
            joinedload(DBOrder.client),
            joinedload(DBOrder.order_items).joinedload(DBOrderItem.product),
        )

    @staticmethod
    def list_orders(
        db: Session,
        search: Optional[str] = None,
        estado: Optional[EstadoPedidoEnum] = None,
    ) -> List[DBOrder]:
        query = OrderService._query(db)

        if estado:
            query = query.filter(DBOrder.status == estado.value)

        if search:
            query = query.filter(DBOrder.client.has(DBClient.name.ilike(f"%{search.strip()}%")))

        return query.order_by(DBOrder.order_date.desc(), DBOrder.id.desc()).all()

    @staticmethod
    def list_all(db: Session) -> List[DBOrder]:
        return OrderService._query(db).all()

    @staticmethod
    def get_order(db: Session, order_id: int) -> Optional[DBOrder]:
        return OrderService._query(db).filter(DBOrder.id == order_id).first()

    @staticmethod
    def _check_client(db: Session, client_id: int):
        if db.query(DBClient.id).filter(DBClient.id == client_id).first() is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Cliente com ID {client_id} não encontrado."
            )

    @staticmethod
    def _check_open(db_order: DBOrder, accion: str):
        if not db_order.is_open:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Pedidos fechados não podem ser {accion}."
            )

    @staticmethod
    def create_order(db: Session, order_data: OrderCreate) -> OperationResult:
        """
        Crea el encabezado y los ítems del pedido en una sola transacción.
        El total enviado por la interfaz se ignora: se recalcula a partir de los ítems.
        """
        OrderService._check_client(db, order_data.client_id)
        items = build_order_items(db, order_data.items)

        try:
            new_order = DBOrder(
                client_id=order_data.client_id,
                order_date=order_data.order_date,
                status=order_data.status.value,
                with_invoice=order_data.with_invoice,
                total_amount=order_total(item.total_price for item in items),
                order_items=items,
            )
            db.add(new_order)
            db.commit()
            logger.info("Pedido %s creado con %s ítems", new_order.id, len(items))
            return OperationResult.ok(OrderService.get_order(db, new_order.id))
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("Error al crear pedido para el cliente %s: %s", order_data.client_id, e)
            return OperationResult.fail(str(e))

    @staticmethod
    def update_order(db: Session, db_order: DBOrder, order_data: OrderUpdate) -> OperationResult:
        """
        Actualiza el encabezado y reemplaza por completo los ítems (borra todos e inserta
        los nuevos), todo dentro de la misma transacción.
        """
        OrderService._check_open(db_order, "editados")
        OrderService._check_client(db, order_data.client_id)
        productos_existentes = [item.product_id for item in db_order.order_items]
        items = build_order_items(db, order_data.items, productos_existentes)

        try:
            db_order.client_id = order_data.client_id
            db_order.order_date = order_data.order_date
            db_order.status = order_data.status.value
            db_order.with_invoice = order_data.with_invoice
            db_order.total_amount = order_total(item.total_price for item in items)

            db_order.order_items.clear()
            db.flush() # Se eliminan los ítems anteriores antes de insertar los nuevos
            db_order.order_items.extend(items)

            db.add(db_order)
            db.commit()
            logger.info("Pedido %s actualizado con %s ítems", db_order.id, len(items))
            return OperationResult.ok(OrderService.get_order(db, db_order.id))
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("Error al actualizar pedido %s: %s", db_order.id, e)
            return OperationResult.fail(str(e))

    @staticmethod
    def update_status(db: Session, db_order: DBOrder, nuevo_estado: EstadoPedidoEnum) -> OperationResult:
        """
        Cambia solo el estado del pedido. La única transición válida es Aberto -> Fechado.
        """
        if not db_order.is_open:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="O pedido já está fechado.")
        if nuevo_estado != EstadoPedidoEnum.fechado:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Transição de status inválida: {db_order.status} -> {nuevo_estado.value}."
            )

        try:
            db_order.status = nuevo_estado.value
            db.add(db_order)
            db.commit()
            db.refresh(db_order)
            logger.info("Pedido %s cambiado a %s", db_order.id, nuevo_estado.value)
            return OperationResult.ok(db_order)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("Error al cambiar estado del pedido %s: %s", db_order.id, e)
            return OperationResult.fail(str(e))

    @staticmethod
    def close_order(db: Session, db_order: DBOrder) -> OperationResult:
        return OrderService.update_status(db, db_order, EstadoPedidoEnum.fechado)

    @staticmethod
    def delete_order(db: Session, db_order: DBOrder) -> OperationResult:
        # Los ítems se eliminan junto con el pedido (cascade delete-orphan)
        OrderService._check_open(db_order, "removidos")
        order_id = db_order.id
        try:
            db.delete(db_order)
            db.commit()
            logger.info("Pedido %s eliminado", order_id)
            return OperationResult.ok()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("Error al eliminar pedido %s: %s", order_id, e)
            return OperationResult.fail(str(e))
