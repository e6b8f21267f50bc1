# gestor/routes/client.py

from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status, Query, Path
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.client import Client as DBClient
from ..models.enums import TipoClienteEnum
from ..schemas.client import ClientCreate, ClientUpdate, ClientView
from ..schemas.common import Message
from ..services.client_service import ClientService
from ..forms.client_form import form_config

router = APIRouter(
    prefix="/clients",
    tags=["clients"]
)

def get_client_or_404(
    client_id: int = Path(..., title="El ID del cliente"),
    db: Session = Depends(get_db)
) -> DBClient:
    db_client = ClientService.get_client(db, client_id)
    if db_client is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cliente não encontrado.")
    return db_client

# --- Endpoint para Listar Clientes ---
@router.get("/", response_model=List[ClientView])
def read_clients(
    search: Optional[str] = Query(None, description="Buscar por nombre, CPF/CNPJ o email"),
    db: Session = Depends(get_db),
):
    """
    Lista de clientes ordenada por nombre, con búsqueda opcional.
    """
    return [ClientView.from_storage(c) for c in ClientService.list_clients(db, search)]

# --- Configuración del formulario según el tipo de cliente ---
@router.get("/form-config")
def read_client_form_config(
    tipo: TipoClienteEnum = Query(TipoClienteEnum.PF, alias="type", description="PF o PJ"),
):
    return form_config(tipo)

# --- Endpoint para Obtener un Cliente por ID ---
@router.get("/{client_id}", response_model=ClientView)
def get_client(db_client: DBClient = Depends(get_client_or_404)):
    return ClientView.from_storage(db_client)

# --- Endpoint para Crear un Nuevo Cliente ---
@router.post("/", response_model=ClientView, status_code=status.HTTP_201_CREATED)
def create_client(
    client_data: ClientCreate,
    db: Session = Depends(get_db),
):
    result = ClientService.create_client(db, client_data)
    if not result.success:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Erro ao criar cliente: {result.error}")
    return ClientView.from_storage(result.data)

# --- Endpoint para Actualizar un Cliente ---
@router.put("/{client_id}", response_model=ClientView)
def update_client(
    client_data: ClientUpdate,
    db_client: DBClient = Depends(get_client_or_404),
    db: Session = Depends(get_db),
):
    result = ClientService.update_client(db, db_client, client_data)
    if not result.success:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Erro ao atualizar cliente: {result.error}")
    return ClientView.from_storage(result.data)

# --- Endpoint para Eliminar un Cliente ---
@router.delete("/{client_id}", response_model=Message)
def delete_client(
    db_client: DBClient = Depends(get_client_or_404),
    db: Session = Depends(get_db),
):
    result = ClientService.delete_client(db, db_client)
    if not result.success:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Erro ao remover cliente: {result.error}")
    return Message(message="Cliente removido com sucesso.")
