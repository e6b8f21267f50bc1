"""
Estado del formulario de pedido mientras se compone: líneas dinámicas con sus totales.

Reglas:
- siempre hay al menos una línea;
- solo se ofrecen productos activos;
- elegir un producto copia su descripción y su precio actual a la línea;
- cambiar cantidad o precio recalcula el total de la línea;
- cualquier cambio de línea recalcula el total general.
"""
from datetime import date
from decimal import Decimal
from typing import Iterable, List, Optional

from ..models.enums import EstadoPedidoEnum, EstadoProductoEnum
from ..schemas.order import OrderCreate, OrderItemCreate
from ..utils.totals import line_total, order_total, to_decimal


class OrderDraftError(ValueError):
    pass


def is_offered(product) -> bool:
    # Las opciones sin estado (ProductOption) ya vienen filtradas
    estado = getattr(product, "status", None)
    return estado is None or estado == EstadoProductoEnum.ativo


class DraftLine:
    def __init__(
        self,
        product_id: Optional[int] = None,
        product_name: str = "",
        quantity=1,
        unit_price=0,
    ):
        self.product_id = product_id
        self.product_name = product_name
        self.quantity = to_decimal(quantity)
        self.unit_price = to_decimal(unit_price)
        self.total = line_total(self.quantity, self.unit_price)

    def recompute(self) -> Decimal:
        self.total = line_total(self.quantity, self.unit_price)
        return self.total

    def __repr__(self):
        return f"<DraftLine(product_id={self.product_id}, quantity={self.quantity}, unit_price={self.unit_price}, total={self.total})>"


class OrderDraft:
    def __init__(
        self,
        client_id: Optional[int] = None,
        order_date: Optional[date] = None,
        status: EstadoPedidoEnum = EstadoPedidoEnum.aberto,
        with_invoice: bool = False,
        lines: Optional[List[DraftLine]] = None,
        products: Iterable = (),
    ):
        self.client_id = client_id
        self.order_date = order_date or date.today()
        self.status = status
        self.with_invoice = with_invoice
        self.lines: List[DraftLine] = list(lines) if lines else [DraftLine()]
        # Opciones de producto (solo activos), indexadas por id
        self.products = {p.id: p for p in products if is_offered(p)}
        self.total = Decimal("0.00")
        self._recompute_total()

    @classmethod
    def from_order(cls, order, products: Iterable = ()) -> "OrderDraft":
        """Carga un pedido existente (OrderView) para editarlo."""
        lines = [
            DraftLine(
                product_id=item.product_id,
                product_name=item.product_name or "",
                quantity=item.quantity,
                unit_price=item.unit_price,
            )
            for item in order.items
        ]
        return cls(
            client_id=order.client_id,
            order_date=order.order_date,
            status=EstadoPedidoEnum(order.status),
            with_invoice=order.with_invoice,
            lines=lines,
            products=products,
        )

    @classmethod
    def from_lines(cls, lines: Iterable, products: Iterable = (), **header) -> "OrderDraft":
        """
        Reproduce la edición de cada línea en el orden del formulario: elegir el producto,
        luego el precio (si se cambió a mano) y la cantidad.
        """
        draft = cls(products=products, **header)
        for index, data in enumerate(lines):
            if index > 0:
                draft.add_line()
            if data.product_id is not None:
                draft.select_product(index, data.product_id)
            if data.unit_price is not None:
                draft.set_unit_price(index, data.unit_price)
            draft.set_quantity(index, data.quantity)
        return draft

    def _line(self, index: int) -> DraftLine:
        try:
            return self.lines[index]
        except IndexError:
            raise OrderDraftError(f"Linha {index} não existe.") from None

    def _recompute_total(self) -> Decimal:
        self.total = order_total(line.total for line in self.lines)
        return self.total

    def add_line(self) -> DraftLine:
        line = DraftLine()
        self.lines.append(line)
        self._recompute_total()
        return line

    def remove_line(self, index: int) -> None:
        if len(self.lines) == 1:
            raise OrderDraftError("O pedido deve ter pelo menos um item.")
        self._line(index)
        del self.lines[index]
        self._recompute_total()

    def select_product(self, index: int, product_id: int) -> DraftLine:
        line = self._line(index)
        product = self.products.get(product_id)
        if product is None:
            # Producto inexistente o inactivo: no se ofrece, la línea queda igual
            return line
        line.product_id = product.id
        line.product_name = product.description
        line.unit_price = to_decimal(product.unit_price)
        line.recompute()
        self._recompute_total()
        return line

    def set_quantity(self, index: int, quantity) -> DraftLine:
        line = self._line(index)
        line.quantity = to_decimal(quantity)
        line.recompute()
        self._recompute_total()
        return line

    def set_unit_price(self, index: int, unit_price) -> DraftLine:
        line = self._line(index)
        line.unit_price = to_decimal(unit_price)
        line.recompute()
        self._recompute_total()
        return line

    def to_payload(self) -> OrderCreate:
        """Valida y produce el payload para la capa de datos (lanza ValidationError)."""
        return OrderCreate(
            client_id=self.client_id or 0,
            order_date=self.order_date,
            status=self.status,
            with_invoice=self.with_invoice,
            items=[
                OrderItemCreate(
                    product_id=line.product_id or 0,
                    product_name=line.product_name,
                    quantity=line.quantity,
                    unit_price=line.unit_price,
                    total=line.total,
                )
                for line in self.lines
            ],
            total=self.total,
        )
