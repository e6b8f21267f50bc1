from typing import Optional
from pydantic import BaseModel

class MenuItem(BaseModel):
    nombre: str
    ruta: str
    icono: Optional[str] = None
