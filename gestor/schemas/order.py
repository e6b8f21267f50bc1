# gestor/schemas/order.py
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import Field

from .common import CamelModel
from ..models.enums import EstadoPedidoEnum
from ..utils.formatting import format_currency, format_date


# Esquema base para los ítems del pedido
class OrderItemBase(CamelModel):
    product_id: int = Field(..., gt=0)
    quantity: Decimal = Field(..., gt=0)
    unit_price: Decimal = Field(..., gt=0)


# Esquema para crear un ítem; el total que envíe la interfaz se ignora y se recalcula
class OrderItemCreate(OrderItemBase):
    product_name: Optional[str] = None
    total: Optional[Decimal] = None


class OrderItemView(OrderItemBase):
    id: int
    product_name: Optional[str] = None
    total: Decimal

    @classmethod
    def from_storage(cls, row) -> "OrderItemView":
        product = row.product
        return cls(
            id=row.id,
            product_id=row.product_id,
            product_name=(product.description or product.name) if product else None,
            quantity=row.quantity,
            unit_price=row.unit_price,
            total=row.total_price,
        )


# Esquema base para el encabezado del pedido
class OrderBase(CamelModel):
    client_id: int = Field(..., gt=0)
    order_date: date = Field(default_factory=date.today, alias="date")
    status: EstadoPedidoEnum = EstadoPedidoEnum.aberto
    with_invoice: bool = False


class OrderCreate(OrderBase):
    items: List[OrderItemCreate] = Field(..., min_length=1)
    total: Optional[Decimal] = None


class OrderUpdate(OrderCreate):
    # Se reemplaza el conjunto completo de ítems
    pass


# Borrador del formulario: líneas todavía sin validar, solo para recalcular totales
class OrderDraftLineIn(CamelModel):
    product_id: Optional[int] = None
    quantity: Decimal = Field(Decimal("1"), gt=0)
    unit_price: Optional[Decimal] = Field(None, ge=0)


class OrderDraftIn(CamelModel):
    order_id: Optional[int] = None # Pedido en edición: sus productos siguen disponibles
    client_id: Optional[int] = None
    order_date: Optional[date] = Field(None, alias="date")
    with_invoice: bool = False
    lines: List[OrderDraftLineIn] = []


class OrderDraftLineView(CamelModel):
    product_id: Optional[int] = None
    product_name: str = ""
    quantity: Decimal
    unit_price: Decimal
    total: Decimal


class OrderDraftView(CamelModel):
    client_id: Optional[int] = None
    order_date: date = Field(..., alias="date")
    with_invoice: bool
    lines: List[OrderDraftLineView]
    total: Decimal
    total_formatted: str

    @classmethod
    def from_draft(cls, draft) -> "OrderDraftView":
        return cls(
            client_id=draft.client_id,
            order_date=draft.order_date,
            with_invoice=draft.with_invoice,
            lines=[
                OrderDraftLineView(
                    product_id=line.product_id,
                    product_name=line.product_name,
                    quantity=line.quantity,
                    unit_price=line.unit_price,
                    total=line.total,
                )
                for line in draft.lines
            ],
            total=draft.total,
            total_formatted=format_currency(draft.total),
        )


class OrderClientSummary(CamelModel):
    id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None


class OrderView(OrderBase):
    id: int
    total: Decimal
    client: Optional[OrderClientSummary] = None
    items: List[OrderItemView] = []
    actions: List[str] = []
    total_formatted: str = ""
    date_formatted: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_storage(cls, row, actions: Optional[List[str]] = None) -> "OrderView":
        return cls(
            id=row.id,
            client_id=row.client_id,
            order_date=row.order_date,
            status=row.status,
            with_invoice=row.with_invoice,
            total=row.total_amount,
            client=OrderClientSummary.model_validate(row.client) if row.client else None,
            items=[OrderItemView.from_storage(item) for item in row.order_items],
            actions=actions or [],
            total_formatted=format_currency(row.total_amount),
            date_formatted=format_date(row.order_date),
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
