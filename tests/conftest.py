"""
Configuración global para todas las pruebas pytest
"""
import os

# La app crea sus tablas al importarse: se apunta a una base en memoria antes de importarla
os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from gestor.database import get_db
from gestor.main import app
from gestor.models.base import Base
from gestor.models.client import Client as DBClient
from gestor.models.product import Product as DBProduct
from gestor.models.order import Order as DBOrder
from gestor.models.order_item import OrderItem as DBOrderItem
from gestor.models.enums import EstadoPedidoEnum, EstadoProductoEnum, TipoClienteEnum, UnidadEnum
from gestor.utils.totals import line_total, order_total

# Base de datos separada para tests (SQLite en memoria por defecto)
SQLALCHEMY_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite://")
engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

@pytest.fixture
def db_session():
    """
    Crea las tablas para la prueba y las elimina al final.
    Cada prueba parte de una base vacía.
    """
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)

@pytest.fixture
def client(db_session):
    """
    Cliente HTTP de pruebas con la base de datos de test.
    """
    def get_test_db():
        yield db_session

    app.dependency_overrides[get_db] = get_test_db

    with TestClient(app) as client:
        yield client

    # Limpiar overrides después del test
    app.dependency_overrides.clear()

@pytest.fixture
def sample_client_data():
    """
    Datos de ejemplo para crear clientes por la API.
    """
    return {
        "name": "João Silva",
        "type": "PF",
        "document": "123.456.789-09",
        "phone": "(11) 98765-4321",
        "email": "joao@email.com",
        "address": {
            "street": "Rua das Flores",
            "number": "100",
            "neighborhood": "Centro",
            "city": "São Paulo",
            "state": "SP",
            "zipCode": "01310-100",
        },
    }

@pytest.fixture
def create_test_client(db_session):
    """
    Factory function para crear clientes de prueba en la BD.
    """
    def _create_client(name="Cliente Teste", cpf_cnpj="12345678909", phone="11987654321",
                       email="cliente@teste.com", client_type=TipoClienteEnum.PF):
        db_client = DBClient(
            name=name,
            cpf_cnpj=cpf_cnpj,
            client_type=client_type,
            phone=phone,
            email=email,
        )
        db_session.add(db_client)
        db_session.commit()
        db_session.refresh(db_client)
        return db_client

    return _create_client

@pytest.fixture
def create_test_product(db_session):
    """
    Factory function para crear productos de prueba en la BD.
    """
    def _create_product(description="Produto Teste", price="10.00", status=EstadoProductoEnum.ativo,
                        unit=UnidadEnum.UN):
        db_product = DBProduct(
            name=description,
            description=description,
            unit=unit,
            price=Decimal(price),
            status=status,
            stock_quantity=0,
        )
        db_session.add(db_product)
        db_session.commit()
        db_session.refresh(db_product)
        return db_product

    return _create_product

@pytest.fixture
def create_test_order(db_session):
    """
    Factory function para crear pedidos con sus ítems directamente en la BD.
    lines: lista de (producto, cantidad, precio_unitario).
    """
    def _create_order(db_client, lines, order_date=None, status=EstadoPedidoEnum.aberto, with_invoice=False):
        items = [
            DBOrderItem(
                product_id=product.id,
                quantity=Decimal(str(quantity)),
                unit_price=Decimal(str(unit_price)),
                total_price=line_total(quantity, unit_price),
            )
            for product, quantity, unit_price in lines
        ]
        db_order = DBOrder(
            client_id=db_client.id,
            order_date=order_date or date.today(),
            status=status.value,
            with_invoice=with_invoice,
            total_amount=order_total(item.total_price for item in items),
            order_items=items,
        )
        db_session.add(db_order)
        db_session.commit()
        db_session.refresh(db_order)
        return db_order

    return _create_order
