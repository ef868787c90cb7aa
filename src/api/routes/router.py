"""Agregador de rotas.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.empresas.router import router as empresas_router
from api.routes.health.router import router as health_router

# Listados na resposta 404 e no status da raiz
ENDPOINTS_DISPONIVEIS = [
    "GET /",
    "GET /health",
    "GET /consultar-empresa",
    "POST /consultar-empresa",
]


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados."""
    api_router = APIRouter()

    # Status e liveness na raiz
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(
        empresas_router,
        prefix="/consultar-empresa",
        tags=["empresas"],
    )

    return api_router
