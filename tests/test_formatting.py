"""
PRUEBAS UNITARIAS - Formateo pt-BR y cálculo de totales
"""
from datetime import date, datetime
from decimal import Decimal

from gestor.models.enums import TipoClienteEnum
from gestor.utils.formatting import (
    only_digits, format_currency, format_date, classify_document,
    format_document, format_phone, format_zip_code,
)
from gestor.utils.totals import line_total, order_total, money


class TestFormatCurrency:

    def test_separadores_pt_br(self):
        assert format_currency(Decimal("1234.56")) == "R$ 1.234,56"
        assert format_currency(1234.5) == "R$ 1.234,50"

    def test_millones_y_cero(self):
        assert format_currency(Decimal("1234567.8")) == "R$ 1.234.567,80"
        assert format_currency(0) == "R$ 0,00"
        assert format_currency(None) == "R$ 0,00"

    def test_valor_negativo(self):
        assert format_currency(-10) == "-R$ 10,00"


class TestFormatDate:

    def test_date_datetime_y_cadena(self):
        assert format_date(date(2024, 1, 5)) == "05/01/2024"
        assert format_date(datetime(2024, 12, 31, 23, 59)) == "31/12/2024"
        assert format_date("2024-03-09") == "09/03/2024"

    def test_vacio(self):
        assert format_date(None) == ""
        assert format_date("") == ""


class TestDocumentos:
    """
    Clasificación y máscara de CPF/CNPJ por cantidad de dígitos.
    """

    def test_clasificacion_por_largo(self):
        assert classify_document("123.456.789-09") == TipoClienteEnum.PF
        assert classify_document("12.345.678/0001-95") == TipoClienteEnum.PJ
        assert classify_document("1234") is None
        assert classify_document(None) is None

    def test_mascaras(self):
        assert format_document("12345678909") == "123.456.789-09"
        assert format_document("12345678000195") == "12.345.678/0001-95"
        # Documento incompleto: sin máscara
        assert format_document("12345") == "12345"

    def test_only_digits(self):
        assert only_digits("(11) 98765-4321") == "11987654321"
        assert only_digits(None) == ""


class TestTelefoneYCep:

    def test_telefone_celular_y_fijo(self):
        assert format_phone("11987654321") == "(11) 98765-4321"
        assert format_phone("1133334444") == "(11) 3333-4444"

    def test_cep(self):
        assert format_zip_code("01310100") == "01310-100"
        assert format_zip_code("0131") == "0131"


class TestTotales:

    def test_total_de_linea_redondeado_a_centavos(self):
        assert line_total(3, Decimal("3.335")) == Decimal("10.01")
        assert line_total(Decimal("1.5"), Decimal("10")) == Decimal("15.00")

    def test_float_sin_error_binario(self):
        # 0.1 * 3 en float no es exactamente 0.3
        assert line_total(3, 0.1) == Decimal("0.30")

    def test_total_del_pedido(self):
        assert order_total([Decimal("10.00"), Decimal("5.50"), 2]) == Decimal("17.50")
        assert order_total([]) == Decimal("0.00")
        assert money("7") == Decimal("7.00")
