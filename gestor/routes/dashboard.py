from datetime import datetime
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
import logging

from ..database import get_db
from ..models.enums import PeriodoEnum
from ..schemas.dashboard import DashboardData
from ..services.order_service import OrderService
from ..services.product_service import ProductService
from ..services import dashboard_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/dashboard",
    tags=["Dashboard"]
)

@router.get("/", response_model=DashboardData)
def get_dashboard_data(
    period: PeriodoEnum = Query(PeriodoEnum.today, description="Período de los KPIs: today, thisWeek, lastWeek o thisMonth"),
    db: Session = Depends(get_db),
):
    """
    KPIs del período seleccionado y tabla de pedidos abiertos.
    Los KPIs se calculan sobre la colección completa de pedidos (ver dashboard_service).
    """
    ahora = datetime.now()

    orders = OrderService.list_all(db)
    total_products = ProductService.count_products(db)

    kpis = dashboard_service.compute_kpis(orders, total_products, period, ahora)
    logger.info("Dashboard %s: %s pedidos fechados, faturamento %s", period.value, kpis.orders, kpis.revenue)

    return DashboardData(
        period=period,
        window=dashboard_service.window_for(period, ahora),
        kpis=kpis,
        kpi_cards=dashboard_service.build_kpi_cards(kpis),
        open_orders=dashboard_service.open_order_rows(orders),
    )
