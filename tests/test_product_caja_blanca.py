"""
PRUEBAS DE CAJA BLANCA - Módulo Productos
"""
from decimal import Decimal

import pytest
from fastapi import HTTPException

from gestor.models.enums import EstadoProductoEnum
from gestor.models.order_item import OrderItem as DBOrderItem
from gestor.routes.product import get_product_or_404


class TestProductApi:

    def test_crear_producto(self, client):
        response = client.post("/products/", json={
            "description": "Caneta Azul",
            "unit": "UN",
            "unitPrice": "2.50",
        })

        assert response.status_code == 201
        data = response.json()
        assert data["description"] == "Caneta Azul"
        assert data["name"] == "Caneta Azul"
        assert data["status"] == "Ativo"
        assert data["stockQuantity"] == 0
        assert data["unitPriceFormatted"] == "R$ 2,50"

    @pytest.mark.parametrize("payload", [
        {"description": "Caneta", "unitPrice": 0},
        {"description": "Caneta", "unitPrice": -1},
        {"description": "C", "unitPrice": 1},
        {"description": "Caneta", "unit": "XX", "unitPrice": 1},
    ])
    def test_validacion_422(self, client, payload):
        assert client.post("/products/", json=payload).status_code == 422

    def test_seleccionables_solo_activos(self, client, create_test_product):
        create_test_product("Caneta Azul", "2.50")
        create_test_product("Lápis Antigo", "1.00", status=EstadoProductoEnum.inativo)

        opciones = client.get("/products/selectable").json()
        todos = client.get("/products/").json()

        assert [p["description"] for p in opciones] == ["Caneta Azul"]
        assert Decimal(opciones[0]["unitPrice"]) == Decimal("2.50")
        assert len(todos) == 2

    def test_filtro_por_estado_y_busqueda(self, client, create_test_product):
        create_test_product("Caneta Azul", "2.50")
        create_test_product("Caneta Vermelha", "2.70", status=EstadoProductoEnum.inativo)
        create_test_product("Papel A4", "32.90")

        inactivos = client.get("/products/", params={"status": "Inativo"}).json()
        canetas = client.get("/products/", params={"search": "caneta"}).json()

        assert [p["description"] for p in inactivos] == ["Caneta Vermelha"]
        assert [p["description"] for p in canetas] == ["Caneta Azul", "Caneta Vermelha"]

    def test_actualizar_precio_no_cambia_pedidos(
        self, client, db_session, create_test_client, create_test_product, create_test_order
    ):
        # ARRANGE: pedido con el precio original
        cliente = create_test_client()
        producto = create_test_product("Caneta Azul", "2.50")
        pedido = create_test_order(cliente, [(producto, 4, "2.50")])

        # ACT
        response = client.put(f"/products/{producto.id}", json={
            "description": "Caneta Azul",
            "unitPrice": "3.00",
            "status": "Ativo",
        })

        # ASSERT
        assert response.status_code == 200
        assert Decimal(response.json()["unitPrice"]) == Decimal("3.00")

        item = db_session.query(DBOrderItem).filter(DBOrderItem.order_id == pedido.id).one()
        assert item.unit_price == Decimal("2.50")
        assert item.total_price == Decimal("10.00")

    def test_inactivar_producto(self, client, create_test_product):
        producto = create_test_product("Caneta Azul", "2.50")

        response = client.put(f"/products/{producto.id}", json={
            "description": "Caneta Azul",
            "unitPrice": "2.50",
            "status": "Inativo",
        })

        assert response.json()["status"] == "Inativo"
        assert client.get("/products/selectable").json() == []

    def test_eliminar(self, client, create_test_product):
        producto = create_test_product()

        response = client.delete(f"/products/{producto.id}")

        assert response.status_code == 200
        assert response.json() == {"message": "Produto removido com sucesso."}
        assert client.get(f"/products/{producto.id}").status_code == 404


class TestGetProductCajaBlanca:

    def test_rama_producto_no_existe(self, db_session):
        with pytest.raises(HTTPException) as exc_info:
            get_product_or_404(999, db_session)

        assert exc_info.value.status_code == 404

    def test_rama_producto_existe(self, db_session, create_test_product):
        producto = create_test_product("Papel A4", "32.90")

        encontrado = get_product_or_404(producto.id, db_session)

        assert encontrado.id == producto.id
        assert encontrado.is_active
