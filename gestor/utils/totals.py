from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Union

CENTAVOS = Decimal("0.01")


def to_decimal(value: Union[Decimal, float, int, str, None]) -> Decimal:
    # str() evita arrastrar el error binario de los float
    return Decimal(str(value if value is not None else 0))


def money(value: Union[Decimal, float, int, str, None]) -> Decimal:
    return to_decimal(value).quantize(CENTAVOS, rounding=ROUND_HALF_UP)


def line_total(quantity, unit_price) -> Decimal:
    """Total de una línea: cantidad × precio unitario, redondeado a centavos."""
    return money(to_decimal(quantity) * to_decimal(unit_price))


def order_total(line_totals: Iterable) -> Decimal:
    return money(sum((to_decimal(t) for t in line_totals), Decimal("0")))
