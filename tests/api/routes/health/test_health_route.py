"""Testes dos endpoints de status e health."""

from __future__ import annotations

import pytest

from api.routes.health.router import health_check, service_status
from config.settings import VERSAO_API


@pytest.mark.asyncio
async def test_service_status_lists_endpoints() -> None:
    payload = await service_status()

    assert payload["message"] == "API CNAE Empresas - Casa dos Dados"
    assert payload["status"] == "ativo"
    assert payload["endpoints"]["consulta"] == "POST /consultar-empresa"
    assert payload["endpoints"]["documentacao"] == "GET /consultar-empresa"


@pytest.mark.asyncio
async def test_health_check_reports_healthy() -> None:
    response = await health_check()

    assert response.status == "healthy"
    assert response.service
    assert response.version == VERSAO_API
    assert response.timestamp.endswith("+00:00")
