# gestor/schemas/common.py
from typing import Generic, Optional, TypeVar
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar('T')


class CamelModel(BaseModel):
    """
    Base de los esquemas expuestos a la interfaz: los campos se escriben en
    snake_case en Python y viajan en camelCase en el JSON (clientId, unitPrice...).
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class OperationResult(BaseModel, Generic[T]):
    """Resultado de una operación de la capa de datos: éxito con el registro, o el error."""
    success: bool
    data: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data: Optional[T] = None) -> "OperationResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "OperationResult[T]":
        return cls(success=False, error=error)


class Message(BaseModel):
    message: str
