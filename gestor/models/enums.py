from enum import Enum

# Los valores se guardan tal cual en la base de datos, no traducir.

class TipoClienteEnum(str, Enum): # Usamos str, enum.Enum
    PF = "PF"  # Pessoa física (CPF, 11 dígitos)
    PJ = "PJ"  # Pessoa jurídica (CNPJ, 14 dígitos)

class EstadoProductoEnum(str, Enum):
    ativo = "Ativo"
    inativo = "Inativo"

class EstadoPedidoEnum(str, Enum):
    aberto = "Aberto"
    fechado = "Fechado"

class UnidadEnum(str, Enum):
    UN = "UN"
    KG = "KG"
    LT = "LT"
    MT = "MT"
    M2 = "M2"
    M3 = "M3"
    PC = "PC"
    CX = "CX"
    DZ = "DZ"
    GR = "GR"
    ML = "ML"
    CM = "CM"

class PeriodoEnum(str, Enum):
    today = "today"
    this_week = "thisWeek"
    last_week = "lastWeek"
    this_month = "thisMonth"
