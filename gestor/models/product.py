# gestor/models/product.py
from sqlalchemy import Column, Integer, String, Text, DECIMAL, DateTime, Enum, CheckConstraint, func
from .base import Base
from .enums import EstadoProductoEnum, UnidadEnum

class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(150), nullable=False, index=True)
    description = Column(Text, nullable=True)
    unit = Column(Enum(UnidadEnum), default=UnidadEnum.UN, nullable=False)
    price = Column(DECIMAL(10, 2), nullable=False)
    status = Column(Enum(EstadoProductoEnum, values_callable=lambda e: [m.value for m in e]), default=EstadoProductoEnum.ativo, nullable=False)
    stock_quantity = Column(Integer, default=0, nullable=False) # Reservado, no se controla stock

    created_at = Column(DateTime, default=func.now(), nullable=False)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)

    __table_args__ = (
        CheckConstraint('price > 0', name='chk_price_positivo'),
    )

    @property
    def is_active(self) -> bool:
        return self.status == EstadoProductoEnum.ativo

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', price={self.price}, status='{self.status}')>"
