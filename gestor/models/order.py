# gestor/models/order.py
from datetime import date
from sqlalchemy import Column, Integer, String, Boolean, Date, DECIMAL, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from .base import Base
from .enums import EstadoPedidoEnum

class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False, index=True)
    order_date = Column(Date, default=date.today, nullable=False, index=True)
    status = Column(String(20), default=EstadoPedidoEnum.aberto.value, nullable=False)
    with_invoice = Column(Boolean, default=False, nullable=False)
    total_amount = Column(DECIMAL(12, 2), default=0, nullable=False)

    created_at = Column(DateTime, default=func.now(), nullable=False)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)

    # El pedido es dueño exclusivo de sus ítems
    order_items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
    )
    client = relationship("Client")

    @property
    def is_open(self) -> bool:
        return self.status == EstadoPedidoEnum.aberto.value

    def __repr__(self):
        return f"<Order(id={self.id}, client_id={self.client_id}, total_amount={self.total_amount}, status='{self.status}')>"
