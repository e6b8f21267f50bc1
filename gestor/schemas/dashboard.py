from pydantic import BaseModel
from typing import List, Optional
from datetime import date, datetime
from decimal import Decimal

from .common import CamelModel
from ..models.enums import PeriodoEnum

# --- Esquemas del dashboard ---

class KpiCard(BaseModel):
    title: str
    value: str
    icon: Optional[str] = None

class PeriodWindow(CamelModel):
    start: datetime
    end: Optional[datetime] = None  # None = sin límite superior (hasta ahora)

class DashboardKpis(CamelModel):
    orders: int = 0
    revenue: Decimal = Decimal("0.00")
    products_sold: Decimal = Decimal("0")
    active_customers: int = 0
    total_products: int = 0

class OpenOrderRow(CamelModel):
    id: int
    order_date: date
    date_formatted: str
    client_name: Optional[str] = None
    client_email: Optional[str] = None
    client_phone: Optional[str] = None
    total: Decimal
    total_formatted: str
    with_invoice: bool

# --- Esquema principal ---

class DashboardData(CamelModel):
    period: PeriodoEnum
    window: PeriodWindow
    kpis: DashboardKpis
    kpi_cards: List[KpiCard]
    open_orders: List[OpenOrderRow]
