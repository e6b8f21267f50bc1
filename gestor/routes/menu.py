# gestor/routes/menu.py
from typing import List
from fastapi import APIRouter, status
import logging

from ..schemas.menu import MenuItem
from ..schemas.common import Message

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/menu",
    tags=["menu"]
)

# Navegación del layout, en el orden en que se muestra
MENU_ITEMS = [
    MenuItem(nombre="Dashboard", ruta="/", icono="layout-dashboard"),
    MenuItem(nombre="Clientes", ruta="/clientes", icono="users"),
    MenuItem(nombre="Produtos", ruta="/produtos", icono="package"),
    MenuItem(nombre="Pedidos", ruta="/pedidos", icono="shopping-cart"),
]

@router.get("/", response_model=List[MenuItem])
def read_menu():
    """
    Obtiene las entradas de navegación del sistema.
    """
    return MENU_ITEMS

# Cierre de sesión del layout. No hay autenticación: el servidor no guarda sesión,
# solo confirma para que la interfaz limpie su estado local.
auth_router = APIRouter(
    prefix="/auth",
    tags=["auth"]
)

@auth_router.post("/logout", response_model=Message, status_code=status.HTTP_200_OK)
def logout():
    logger.info("Sesión terminada")
    return Message(message="Sessão encerrada.")
