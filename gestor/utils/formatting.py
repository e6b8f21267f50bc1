import re
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

from ..models.enums import TipoClienteEnum

CURRENCY_SYMBOL = "R$"
CPF_LENGTH = 11
CNPJ_LENGTH = 14

_NON_DIGITS = re.compile(r"\D")

Number = Union[Decimal, float, int]


def only_digits(value: Optional[str]) -> str:
    """Elimina todo lo que no sea dígito. None se trata como cadena vacía."""
    if not value:
        return ""
    return _NON_DIGITS.sub("", value)


def format_currency(value: Optional[Number]) -> str:
    """
    Formatea un valor monetario al estilo pt-BR.

    Ejemplo: 1234.5 -> 'R$ 1.234,50'; -10 -> '-R$ 10,00'
    """
    amount = Decimal(str(value if value is not None else 0)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    # Se formatea con la convención en-US y luego se intercambian separadores
    en_us = f"{abs(amount):,.2f}"
    pt_br = en_us.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}{CURRENCY_SYMBOL} {pt_br}"


def format_date(value: Optional[Union[date, datetime, str]]) -> str:
    """Formatea una fecha como dd/mm/aaaa. Acepta date, datetime o cadena ISO."""
    if value is None or value == "":
        return ""
    if isinstance(value, str):
        value = date.fromisoformat(value[:10])
    return value.strftime("%d/%m/%Y")


def classify_document(document: Optional[str]) -> Optional[TipoClienteEnum]:
    """
    Clasifica un CPF/CNPJ por su cantidad de dígitos.
    11 dígitos -> PF, 14 dígitos -> PJ, cualquier otro largo -> None.
    """
    digits = only_digits(document)
    if len(digits) == CPF_LENGTH:
        return TipoClienteEnum.PF
    if len(digits) == CNPJ_LENGTH:
        return TipoClienteEnum.PJ
    return None


def format_document(document: Optional[str]) -> str:
    digits = only_digits(document)
    if len(digits) == CPF_LENGTH:
        return f"{digits[:3]}.{digits[3:6]}.{digits[6:9]}-{digits[9:]}"
    if len(digits) == CNPJ_LENGTH:
        return f"{digits[:2]}.{digits[2:5]}.{digits[5:8]}/{digits[8:12]}-{digits[12:]}"
    # Documento incompleto o mal formado: se devuelve sin máscara
    return digits


def format_phone(phone: Optional[str]) -> str:
    digits = only_digits(phone)
    if len(digits) == 11:
        return f"({digits[:2]}) {digits[2:7]}-{digits[7:]}"
    if len(digits) == 10:
        return f"({digits[:2]}) {digits[2:6]}-{digits[6:]}"
    return digits


def format_zip_code(zip_code: Optional[str]) -> str:
    digits = only_digits(zip_code)
    if len(digits) == 8:
        return f"{digits[:5]}-{digits[5:]}"
    return digits
