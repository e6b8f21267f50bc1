"""
PRUEBAS DE CAJA BLANCA - Cálculo de KPIs del dashboard

Se usa un "ahora" fijo: miércoles 24/01/2024 15:30.
- Domingo de esta semana: 21/01/2024
- Semana pasada: 14/01/2024 00:00 a 20/01/2024 23:59:59.999
"""
from datetime import date, datetime
from decimal import Decimal
from types import SimpleNamespace

import pytest

from gestor.models.enums import EstadoPedidoEnum, PeriodoEnum
from gestor.services.dashboard_service import (
    period_window, compute_kpis, filter_orders, build_kpi_cards, open_order_rows,
)

AHORA = datetime(2024, 1, 24, 15, 30)


def make_order(order_id, order_date, status=EstadoPedidoEnum.fechado, total="0", client_id=1, quantities=(),
               client=None):
    """Pedido en memoria con la misma forma que el modelo ORM."""
    return SimpleNamespace(
        id=order_id,
        order_date=order_date,
        status=status.value,
        total_amount=Decimal(total),
        client_id=client_id,
        with_invoice=False,
        client=client,
        order_items=[SimpleNamespace(quantity=Decimal(str(q))) for q in quantities],
    )


class TestPeriodWindow:
    """
    Límites de cada período para un "ahora" fijo.
    """

    def test_today_empieza_a_medianoche(self):
        inicio, fin = period_window(PeriodoEnum.today, AHORA)
        assert inicio == datetime(2024, 1, 24, 0, 0)
        assert fin is None

    def test_this_week_empieza_el_domingo(self):
        inicio, fin = period_window(PeriodoEnum.this_week, AHORA)
        assert inicio == datetime(2024, 1, 21, 0, 0)
        assert fin is None

    def test_this_week_en_domingo_es_el_mismo_dia(self):
        domingo = datetime(2024, 1, 21, 10, 0)
        inicio, _ = period_window(PeriodoEnum.this_week, domingo)
        assert inicio == datetime(2024, 1, 21, 0, 0)

    def test_last_week_son_los_siete_dias_anteriores(self):
        inicio, fin = period_window(PeriodoEnum.last_week, AHORA)
        assert inicio == datetime(2024, 1, 14, 0, 0)
        assert fin == datetime(2024, 1, 20, 23, 59, 59, 999000)

    def test_this_month_empieza_el_dia_uno(self):
        inicio, fin = period_window(PeriodoEnum.this_month, AHORA)
        assert inicio == datetime(2024, 1, 1, 0, 0)
        assert fin is None

    def test_acepta_el_valor_del_query(self):
        assert period_window("thisWeek", AHORA) == period_window(PeriodoEnum.this_week, AHORA)


class TestFilterOrders:

    def test_limites_inclusivos_de_la_semana_pasada(self):
        sabado = make_order(1, date(2024, 1, 20))
        domingo_anterior = make_order(2, date(2024, 1, 14))
        domingo_actual = make_order(3, date(2024, 1, 21))
        sabado_previo = make_order(4, date(2024, 1, 13))

        inicio, fin = period_window(PeriodoEnum.last_week, AHORA)
        seleccionados = filter_orders([sabado, domingo_anterior, domingo_actual, sabado_previo], inicio, fin)

        assert [o.id for o in seleccionados] == [1, 2]

    def test_fecha_como_cadena_iso(self):
        pedido = make_order(1, "2024-01-22")
        inicio, fin = period_window(PeriodoEnum.this_week, AHORA)
        assert filter_orders([pedido], inicio, fin) == [pedido]


class TestComputeKpis:
    """
    CAJA BLANCA: compute_kpis

    Ramas:
    1. Pedido fuera del período → ignorado
    2. Pedido Fechado en el período → cuenta en orders, revenue y productsSold
    3. Pedido Aberto en el período → solo cuenta en activeCustomers
    """

    def test_ejemplo_this_week(self):
        """
        Pedido cerrado del lunes (100, dos unidades) y pedido cerrado del martes
        anterior (50): en thisWeek solo cuenta el del lunes.
        """
        # ARRANGE
        lunes = make_order(1, date(2024, 1, 22), total="100.00", quantities=[2])
        martes_pasado = make_order(2, date(2024, 1, 16), total="50.00", quantities=[1])

        # ACT
        kpis = compute_kpis([lunes, martes_pasado], total_products=7, periodo=PeriodoEnum.this_week, ahora=AHORA)

        # ASSERT
        assert kpis.revenue == Decimal("100.00")
        assert kpis.products_sold == Decimal("2")
        assert kpis.orders == 1
        assert kpis.total_products == 7

    def test_last_week_toma_el_martes(self):
        lunes = make_order(1, date(2024, 1, 22), total="100.00", quantities=[2])
        martes_pasado = make_order(2, date(2024, 1, 16), total="50.00", quantities=[1, "0.5"])

        kpis = compute_kpis([lunes, martes_pasado], 0, PeriodoEnum.last_week, AHORA)

        assert kpis.orders == 1
        assert kpis.revenue == Decimal("50.00")
        assert kpis.products_sold == Decimal("1.5")

    def test_clientes_activos_incluye_pedidos_abiertos(self):
        """
        activeCustomers cuenta todos los pedidos del período; el resto de KPIs solo los cerrados.
        """
        # ARRANGE
        cerrado = make_order(1, date(2024, 1, 24), total="30.00", client_id=1, quantities=[3])
        abierto = make_order(2, date(2024, 1, 24), status=EstadoPedidoEnum.aberto, total="80.00",
                             client_id=2, quantities=[8])
        mismo_cliente = make_order(3, date(2024, 1, 24), status=EstadoPedidoEnum.aberto, total="5.00",
                                   client_id=1, quantities=[1])

        # ACT
        kpis = compute_kpis([cerrado, abierto, mismo_cliente], 0, PeriodoEnum.today, AHORA)

        # ASSERT
        assert kpis.orders == 1
        assert kpis.revenue == Decimal("30.00")
        assert kpis.products_sold == Decimal("3")
        assert kpis.active_customers == 2

    def test_sin_pedidos(self):
        kpis = compute_kpis([], 3, PeriodoEnum.this_month, AHORA)

        assert kpis.orders == 0
        assert kpis.revenue == Decimal("0.00")
        assert kpis.products_sold == Decimal("0")
        assert kpis.active_customers == 0
        assert kpis.total_products == 3

    @pytest.mark.parametrize("periodo", list(PeriodoEnum))
    def test_idempotente(self, periodo):
        pedidos = [
            make_order(1, date(2024, 1, 22), total="100.00", quantities=[2]),
            make_order(2, date(2024, 1, 16), total="50.00", client_id=2, quantities=[1]),
            make_order(3, date(2024, 1, 3), status=EstadoPedidoEnum.aberto, total="9.90", client_id=3),
        ]

        primero = compute_kpis(pedidos, 4, periodo, AHORA)
        segundo = compute_kpis(pedidos, 4, periodo, AHORA)

        assert primero == segundo


class TestTarjetasYAbiertos:

    def test_tarjetas_formateadas(self):
        pedido = make_order(1, date(2024, 1, 24), total="1234.50", quantities=[2, 3])
        kpis = compute_kpis([pedido], 10, PeriodoEnum.today, AHORA)

        cards = {card.title: card.value for card in build_kpi_cards(kpis)}

        assert cards["Faturamento"] == "R$ 1.234,50"
        assert cards["Pedidos Fechados"] == "1"
        assert cards["Produtos Vendidos"] == "5"
        assert cards["Total de Produtos"] == "10"

    def test_solo_abiertos_del_mas_reciente_al_mas_antiguo(self):
        cliente = SimpleNamespace(name="Maria", email="maria@email.com", phone="11987654321")
        viejo = make_order(1, date(2024, 1, 2), status=EstadoPedidoEnum.aberto, total="10", client=cliente)
        nuevo = make_order(2, date(2024, 1, 20), status=EstadoPedidoEnum.aberto, total="20", client=cliente)
        cerrado = make_order(3, date(2024, 1, 22), total="30", client=cliente)

        rows = open_order_rows([viejo, cerrado, nuevo])

        assert [row.id for row in rows] == [2, 1]
        assert rows[0].client_name == "Maria"
        assert rows[0].total_formatted == "R$ 20,00"
        assert rows[0].date_formatted == "20/01/2024"

    def test_pedido_sin_cliente(self):
        huerfano = make_order(1, date(2024, 1, 2), status=EstadoPedidoEnum.aberto, total="10")

        rows = open_order_rows([huerfano])

        assert rows[0].client_name is None
