"""Endpoints de status e liveness."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel

from config.settings import VERSAO_API, get_base_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = VERSAO_API


@router.get("/")
async def service_status() -> dict[str, Any]:
    """Documento estático de status do serviço."""
    return {
        "message": "API CNAE Empresas - Casa dos Dados",
        "status": "ativo",
        "endpoints": {
            "consulta": "POST /consultar-empresa",
            "documentacao": "GET /consultar-empresa",
            "health": "GET /health",
        },
    }


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )
