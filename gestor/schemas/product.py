# gestor/schemas/product.py
from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import Field, field_validator

from .common import CamelModel
from ..models.enums import EstadoProductoEnum, UnidadEnum
from ..utils.formatting import format_currency


class ProductBase(CamelModel):
    description: str
    unit: UnidadEnum = UnidadEnum.UN
    unit_price: Decimal = Field(..., gt=0)
    status: EstadoProductoEnum = EstadoProductoEnum.ativo


class ProductCreate(ProductBase):

    @field_validator("description")
    @classmethod
    def validar_descripcion(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 2:
            raise ValueError("Descrição deve ter pelo menos 2 caracteres")
        return v

    def to_storage(self) -> dict:
        # La descripción del formulario alimenta tanto name como description
        return {
            "name": self.description,
            "description": self.description,
            "unit": self.unit,
            "price": self.unit_price,
            "status": self.status,
        }


class ProductUpdate(ProductCreate):
    pass


class ProductView(ProductBase):
    id: int
    name: str
    unit_price_formatted: str = ""
    stock_quantity: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_storage(cls, row) -> "ProductView":
        return cls(
            id=row.id,
            name=row.name,
            description=row.description or row.name,
            unit=row.unit,
            unit_price=row.price,
            status=row.status,
            stock_quantity=row.stock_quantity or 0,
            unit_price_formatted=format_currency(row.price),
            created_at=row.created_at,
            updated_at=row.updated_at,
        )


class ProductOption(CamelModel):
    """Producto ofrecido al componer las líneas de un pedido (solo activos)."""
    id: int
    description: str
    unit: UnidadEnum
    unit_price: Decimal

    @classmethod
    def from_storage(cls, row) -> "ProductOption":
        return cls(id=row.id, description=row.description or row.name, unit=row.unit, unit_price=row.price)
