# gestor/models/client.py
from sqlalchemy import Column, Integer, String, Text, DateTime, Enum, func
from .base import Base
from .enums import TipoClienteEnum

class Client(Base):
    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(150), nullable=False, index=True)
    cpf_cnpj = Column(String(14), nullable=True) # Solo dígitos
    client_type = Column(Enum(TipoClienteEnum), nullable=True) # Persistido explícitamente, ver DESIGN.md
    fantasy_name = Column(String(150), nullable=True) # Solo PJ
    state_registration = Column(String(30), nullable=True) # Solo PJ
    email = Column(String(150), nullable=True)
    phone = Column(String(20), nullable=True) # Solo dígitos

    # Dirección
    street = Column(String(150), nullable=True)
    number = Column(String(20), nullable=True)
    complement = Column(String(100), nullable=True)
    neighborhood = Column(String(100), nullable=True)
    city = Column(String(100), nullable=True)
    state = Column(String(2), nullable=True)
    zip_code = Column(String(8), nullable=True) # Solo dígitos

    observations = Column(Text, nullable=True)

    created_at = Column(DateTime, default=func.now(), nullable=False)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)

    # Sin relación inversa hacia los pedidos: borrar un cliente no debe tocar el client_id de pedidos históricos

    def __repr__(self):
        return f"<Client(id={self.id}, name='{self.name}', cpf_cnpj='{self.cpf_cnpj}')>"
