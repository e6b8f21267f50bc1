"""Configuración del formulario de cliente según el tipo (PF / PJ)."""
from typing import List, Optional

from ..models.enums import TipoClienteEnum
from ..utils.formatting import classify_document

# Máscaras de entrada (9 = dígito)
DOCUMENT_MASKS = {
    TipoClienteEnum.PF: "999.999.999-99",
    TipoClienteEnum.PJ: "99.999.999/9999-99",
}
PHONE_MASK = "(99) 99999-9999"
ZIP_CODE_MASK = "99999-999"

CAMPOS_COMUNES = [
    "name", "document", "phone", "email",
    "address.street", "address.number", "address.complement", "address.neighborhood",
    "address.city", "address.state", "address.zipCode",
    "observations",
]
CAMPOS_SOLO_PJ = ["fantasyName", "stateRegistration"]


def visible_fields(tipo: TipoClienteEnum) -> List[str]:
    """Campos que muestra el formulario: nombre fantasía e inscripción estatal solo para PJ."""
    if tipo == TipoClienteEnum.PJ:
        return CAMPOS_COMUNES[:1] + CAMPOS_SOLO_PJ + CAMPOS_COMUNES[1:]
    return list(CAMPOS_COMUNES)


def document_mask(tipo: TipoClienteEnum) -> str:
    return DOCUMENT_MASKS[TipoClienteEnum(tipo)]


def initial_type(document: Optional[str]) -> TipoClienteEnum:
    """Tipo preseleccionado al editar un cliente sin tipo guardado (PF por defecto)."""
    return classify_document(document) or TipoClienteEnum.PF


def form_config(tipo: TipoClienteEnum) -> dict:
    tipo = TipoClienteEnum(tipo)
    return {
        "type": tipo.value,
        "fields": visible_fields(tipo),
        "masks": {
            "document": document_mask(tipo),
            "phone": PHONE_MASK,
            "address.zipCode": ZIP_CODE_MASK,
        },
    }
