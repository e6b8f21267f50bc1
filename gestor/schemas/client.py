# gestor/schemas/client.py
from datetime import datetime
from typing import Optional
from pydantic import Field, field_validator, model_validator

from .common import CamelModel
from ..models.enums import TipoClienteEnum
from ..utils.formatting import (
    only_digits, classify_document, format_document, format_phone, format_zip_code,
    CPF_LENGTH, CNPJ_LENGTH,
)
from ..forms.client_form import initial_type

TIPO_LABELS = {
    TipoClienteEnum.PF: "Pessoa Física",
    TipoClienteEnum.PJ: "Pessoa Jurídica",
}


class AddressSchema(CamelModel):
    street: Optional[str] = None
    number: Optional[str] = None
    complement: Optional[str] = None
    neighborhood: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None

    @field_validator("zip_code")
    @classmethod
    def normalizar_cep(cls, v: Optional[str]) -> Optional[str]:
        return only_digits(v) or None


class ClientBase(CamelModel):
    name: str
    document: Optional[str] = None
    client_type: Optional[TipoClienteEnum] = Field(None, alias="type")
    fantasy_name: Optional[str] = None
    state_registration: Optional[str] = None
    phone: str
    email: Optional[str] = None
    address: AddressSchema = Field(default_factory=AddressSchema)
    observations: Optional[str] = None


class ClientCreate(ClientBase):
    """
    Datos del formulario de cliente. Valida y normaliza antes de llegar a la capa de datos:
    documento, teléfono y CEP se guardan solo con dígitos.
    """

    @field_validator("name")
    @classmethod
    def validar_nombre(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 2:
            raise ValueError("Nome deve ter pelo menos 2 caracteres")
        return v

    @field_validator("document")
    @classmethod
    def normalizar_documento(cls, v: Optional[str]) -> Optional[str]:
        digits = only_digits(v)
        if not digits:
            return None
        if len(digits) not in (CPF_LENGTH, CNPJ_LENGTH):
            raise ValueError("CPF deve ter 11 dígitos ou CNPJ 14 dígitos")
        return digits

    @field_validator("phone")
    @classmethod
    def normalizar_telefone(cls, v: str) -> str:
        digits = only_digits(v)
        if len(digits) < 10:
            raise ValueError("Telefone é obrigatório")
        return digits

    @field_validator("email")
    @classmethod
    def validar_email(cls, v: Optional[str]) -> Optional[str]:
        v = (v or "").strip()
        if not v:
            return None
        if "@" not in v:
            raise ValueError("Email inválido")
        return v

    @model_validator(mode="after")
    def resolver_tipo(self):
        inferido = classify_document(self.document)
        if self.client_type is None:
            # Registros sin tipo: se deduce del largo del documento (PF por defecto)
            self.client_type = initial_type(self.document)
        elif inferido is not None and inferido != self.client_type:
            raise ValueError(f"Documento não corresponde ao tipo {self.client_type.value}")

        if self.client_type != TipoClienteEnum.PJ:
            # Nome fantasia e inscrição estadual solo existen para PJ
            self.fantasy_name = None
            self.state_registration = None
        return self

    def to_storage(self) -> dict:
        """Convierte el formulario a las columnas de la tabla clients."""
        return {
            "name": self.name,
            "cpf_cnpj": self.document,
            "client_type": self.client_type,
            "fantasy_name": self.fantasy_name,
            "state_registration": self.state_registration,
            "email": self.email,
            "phone": self.phone,
            "street": self.address.street,
            "number": self.address.number,
            "complement": self.address.complement,
            "neighborhood": self.address.neighborhood,
            "city": self.address.city,
            "state": self.address.state,
            "zip_code": self.address.zip_code,
            "observations": self.observations,
        }


class ClientUpdate(ClientCreate):
    # La edición reenvía el formulario completo
    pass


class ClientView(ClientBase):
    """Cliente tal como lo ve la interfaz (detalle y listado)."""
    id: int
    phone: Optional[str] = None
    type_label: Optional[str] = None
    document_formatted: str = ""
    phone_formatted: str = ""
    zip_code_formatted: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_storage(cls, row) -> "ClientView":
        # Mismo tipo que preselecciona el formulario de edición
        client_type = row.client_type or initial_type(row.cpf_cnpj)
        return cls(
            id=row.id,
            name=row.name,
            document=row.cpf_cnpj,
            client_type=client_type,
            fantasy_name=row.fantasy_name,
            state_registration=row.state_registration,
            phone=row.phone,
            email=row.email,
            address=AddressSchema(
                street=row.street,
                number=row.number,
                complement=row.complement,
                neighborhood=row.neighborhood,
                city=row.city,
                state=row.state,
                zip_code=row.zip_code,
            ),
            observations=row.observations,
            type_label=TIPO_LABELS.get(client_type),
            document_formatted=format_document(row.cpf_cnpj),
            phone_formatted=format_phone(row.phone),
            zip_code_formatted=format_zip_code(row.zip_code),
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
