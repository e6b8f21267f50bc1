"""
Cálculo de los KPIs del dashboard.

Todo el cálculo es una reducción pura sobre la colección de pedidos: con los mismos
pedidos, el mismo período y el mismo "ahora", el resultado es siempre idéntico.
Las fechas son locales y sin zona horaria, igual que order_date.
"""
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Iterable, List, Optional, Tuple
import logging

from ..models.enums import EstadoPedidoEnum, PeriodoEnum
from ..schemas.dashboard import DashboardKpis, KpiCard, OpenOrderRow, PeriodWindow
from ..utils.formatting import format_currency, format_date
from ..utils.totals import money, to_decimal

logger = logging.getLogger(__name__)

# Último instante del sábado: 23:59:59.999
FIN_DEL_DIA = time(23, 59, 59, 999000)


def start_of_day(dia: datetime) -> datetime:
    return datetime.combine(dia.date(), time.min)


def start_of_week(ahora: datetime) -> datetime:
    """Domingo 00:00:00 de la semana en curso (la semana empieza el domingo)."""
    # weekday(): lunes=0 ... domingo=6
    dias_desde_domingo = (ahora.weekday() + 1) % 7
    return start_of_day(ahora) - timedelta(days=dias_desde_domingo)


def period_window(periodo: PeriodoEnum, ahora: datetime) -> Tuple[datetime, Optional[datetime]]:
    """
    Devuelve (inicio, fin) del período. fin=None significa "hasta ahora" (sin límite).

    - today: medianoche de hoy
    - thisWeek: domingo 00:00 de esta semana
    - lastWeek: los 7 días anteriores al inicio de esta semana, hasta el sábado 23:59:59.999
    - thisMonth: día 1 del mes en curso
    """
    periodo = PeriodoEnum(periodo)

    if periodo == PeriodoEnum.today:
        return start_of_day(ahora), None

    if periodo == PeriodoEnum.this_week:
        return start_of_week(ahora), None

    if periodo == PeriodoEnum.last_week:
        inicio_semana = start_of_week(ahora)
        inicio = inicio_semana - timedelta(days=7)
        fin = datetime.combine((inicio_semana - timedelta(days=1)).date(), FIN_DEL_DIA)
        return inicio, fin

    # thisMonth
    return start_of_day(ahora).replace(day=1), None


def _as_datetime(valor) -> datetime:
    if isinstance(valor, datetime):
        return valor
    if isinstance(valor, str):
        valor = date.fromisoformat(valor[:10])
    return datetime.combine(valor, time.min)


def filter_orders(orders: Iterable, inicio: datetime, fin: Optional[datetime]) -> List:
    """Pedidos cuya fecha cae dentro de [inicio, fin] (ambos inclusive)."""
    seleccionados = []
    for order in orders:
        fecha = _as_datetime(order.order_date)
        if fecha < inicio:
            continue
        if fin is not None and fecha > fin:
            continue
        seleccionados.append(order)
    return seleccionados


def compute_kpis(
    orders: Iterable,
    total_products: int,
    periodo: PeriodoEnum,
    ahora: Optional[datetime] = None,
) -> DashboardKpis:
    """
    Reduce los pedidos del período a los KPIs del dashboard.

    orders, revenue y productsSold cuentan solo pedidos Fechado; activeCustomers cuenta
    los clientes distintos de todos los pedidos del período, sin importar el estado.
    """
    ahora = ahora or datetime.now()
    inicio, fin = period_window(periodo, ahora)
    del_periodo = filter_orders(orders, inicio, fin)

    cerrados = [o for o in del_periodo if o.status == EstadoPedidoEnum.fechado.value]

    revenue = money(sum((to_decimal(o.total_amount) for o in cerrados), Decimal("0")))
    products_sold = sum(
        (to_decimal(item.quantity) for o in cerrados for item in (o.order_items or [])),
        Decimal("0"),
    )
    active_customers = len({o.client_id for o in del_periodo})

    return DashboardKpis(
        orders=len(cerrados),
        revenue=revenue,
        products_sold=products_sold,
        active_customers=active_customers,
        total_products=total_products,
    )


def build_kpi_cards(kpis: DashboardKpis) -> List[KpiCard]:
    products_sold = kpis.products_sold.normalize() if kpis.products_sold else Decimal("0")
    return [
        KpiCard(title="Pedidos Fechados", value=str(kpis.orders), icon="shopping-cart"),
        KpiCard(title="Faturamento", value=format_currency(kpis.revenue), icon="dollar-sign"),
        KpiCard(title="Clientes Ativos", value=str(kpis.active_customers), icon="users"),
        KpiCard(title="Produtos Vendidos", value=f"{products_sold:f}", icon="package"),
        KpiCard(title="Total de Produtos", value=str(kpis.total_products), icon="package"),
    ]


def open_order_rows(orders: Iterable) -> List[OpenOrderRow]:
    """Filas de la tabla de pedidos abiertos, del más reciente al más antiguo."""
    abiertos = [o for o in orders if o.status == EstadoPedidoEnum.aberto.value]
    abiertos.sort(key=lambda o: (_as_datetime(o.order_date), o.id), reverse=True)
    return [
        OpenOrderRow(
            id=o.id,
            order_date=o.order_date,
            date_formatted=format_date(o.order_date),
            client_name=o.client.name if o.client else None,
            client_email=o.client.email if o.client else None,
            client_phone=o.client.phone if o.client else None,
            total=money(o.total_amount),
            total_formatted=format_currency(o.total_amount),
            with_invoice=bool(o.with_invoice),
        )
        for o in abiertos
    ]


def window_for(periodo: PeriodoEnum, ahora: datetime) -> PeriodWindow:
    inicio, fin = period_window(periodo, ahora)
    return PeriodWindow(start=inicio, end=fin)
