#aqui se el __init__.py para importar las clases y funciones necesarias
from .base import Base
from .enums import TipoClienteEnum, EstadoProductoEnum, EstadoPedidoEnum, UnidadEnum, PeriodoEnum # Importa los enums
from .client import Client # Importa el modelo Client
from .product import Product # Importa el modelo Product
from .order import Order # Importa el modelo Order
from .order_item import OrderItem # Importa el modelo OrderItem
