from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv
import logging
import os

from gestor.models import Base
from gestor.database import engine
from gestor.routes import client, product, order, dashboard, menu

# --- Carga de Variables de Entorno ---
load_dotenv()

# --- Logging ---
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

# --- Creación de la Aplicación FastAPI ---
app = FastAPI(
    title="Gestor de Pedidos",
    description="API para la gestión de clientes, productos y pedidos, con dashboard de KPIs.",
    version="1.0.0"
)

# --- Middlewares ---
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Creación de Tablas en la Base de Datos (para desarrollo) ---
Base.metadata.create_all(bind=engine)

# --- Inclusión de Routers de la API ---
app.include_router(dashboard.router)
app.include_router(client.router)
app.include_router(product.router)
app.include_router(order.router)
app.include_router(menu.router)
app.include_router(menu.auth_router)
