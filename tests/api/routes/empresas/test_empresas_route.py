"""Testes HTTP da aplicação (rotas, 404, correlation_id, erro global)."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator
from unittest.mock import AsyncMock

import httpx
import pytest
import pytest_asyncio
from starlette.requests import Request

from app.app import app, unhandled_exception_handler
from app.protocols.models import UpstreamSuccess
from app.use_cases.empresas import ConsultarEmpresaUseCase


@pytest.fixture
def upstream_client() -> AsyncMock:
    client = AsyncMock()
    client.consultar_por_cnae.return_value = UpstreamSuccess(
        data={"total": 1, "cnpjs": [{"cnpj": "12345678000199"}]},
        status_code=200,
        total_cnaes_consultados=1,
        limite_por_cnae=100,
    )
    return client


@pytest.fixture(autouse=True)
def _patch_use_case(monkeypatch: pytest.MonkeyPatch, upstream_client: AsyncMock) -> None:
    use_case = ConsultarEmpresaUseCase(upstream_client)
    monkeypatch.setattr(
        "api.routes.empresas.router.get_consultar_empresa_use_case",
        lambda: use_case,
    )


@pytest_asyncio.fixture
async def http_client() -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.mark.asyncio
async def test_root_returns_status_document(http_client: httpx.AsyncClient) -> None:
    response = await http_client.get("/")

    assert response.status_code == 200
    assert response.json()["status"] == "ativo"


@pytest.mark.asyncio
async def test_health_endpoint(http_client: httpx.AsyncClient) -> None:
    response = await http_client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_usage_document(http_client: httpx.AsyncClient) -> None:
    response = await http_client.get("/consultar-empresa")

    assert response.status_code == 200
    body = response.json()
    assert body["descrição"]
    assert set(body["parametros_obrigatórios"]) == {"apiKey", "cnae", "cnaes"}
    assert body["exemplos"]["cnae_unico"]["método"] == "POST"


@pytest.mark.asyncio
async def test_unknown_route_lists_endpoints(http_client: httpx.AsyncClient) -> None:
    response = await http_client.get("/nao-existe")

    assert response.status_code == 404
    assert response.json() == {
        "erro": "Rota não encontrada",
        "endpoints_disponíveis": [
            "GET /",
            "GET /health",
            "GET /consultar-empresa",
            "POST /consultar-empresa",
        ],
    }


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("method", "path"),
    [("PUT", "/consultar-empresa"), ("DELETE", "/"), ("POST", "/"), ("PATCH", "/health")],
)
async def test_unsupported_method_is_unknown_route(
    http_client: httpx.AsyncClient, method: str, path: str
) -> None:
    response = await http_client.request(method, path)

    assert response.status_code == 404
    body = response.json()
    assert body["erro"] == "Rota não encontrada"
    assert "POST /consultar-empresa" in body["endpoints_disponíveis"]


@pytest.mark.asyncio
async def test_correlation_id_is_echoed(http_client: httpx.AsyncClient) -> None:
    response = await http_client.get("/health", headers={"x-correlation-id": "abc-123"})

    assert response.headers["x-correlation-id"] == "abc-123"


@pytest.mark.asyncio
async def test_correlation_id_is_generated(http_client: httpx.AsyncClient) -> None:
    response = await http_client.get("/health")

    assert response.headers["x-correlation-id"]


@pytest.mark.asyncio
async def test_post_passthrough(
    http_client: httpx.AsyncClient, upstream_client: AsyncMock
) -> None:
    response = await http_client.post(
        "/consultar-empresa",
        json={"apiKey": "minha-chave", "cnae": "7112-0/00", "tipo_resultado": "completo"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["cnpjs"] == [{"cnpj": "12345678000199"}]
    assert body["meta_informacoes"]["cnaes_consultados"] == ["7112000"]
    upstream_client.consultar_por_cnae.assert_awaited_once_with(
        "minha-chave", ("7112000",), "completo", 100
    )


@pytest.mark.asyncio
async def test_post_missing_api_key(
    http_client: httpx.AsyncClient, upstream_client: AsyncMock
) -> None:
    response = await http_client.post("/consultar-empresa", json={"cnae": "7112000"})

    assert response.status_code == 400
    assert response.json()["campo"] == "apiKey"
    upstream_client.consultar_por_cnae.assert_not_awaited()


@pytest.mark.asyncio
async def test_post_malformed_body(http_client: httpx.AsyncClient) -> None:
    response = await http_client.post(
        "/consultar-empresa",
        content=b"{nao-e-json",
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["campo"] == "body"


@pytest.mark.asyncio
async def test_unhandled_exception_handler_renders_json() -> None:
    scope = {
        "type": "http",
        "method": "POST",
        "path": "/consultar-empresa",
        "headers": [],
        "query_string": b"",
    }

    response = await unhandled_exception_handler(Request(scope), RuntimeError("falhou"))

    assert response.status_code == 500
    assert json.loads(response.body) == {
        "erro": "Erro interno do servidor",
        "detalhes": "falhou",
    }


@pytest.mark.asyncio
@pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
async def test_post_non_finite_number_is_malformed_body(
    http_client: httpx.AsyncClient, upstream_client: AsyncMock, constant: str
) -> None:
    response = await http_client.post(
        "/consultar-empresa",
        content=f'{{"apiKey": "k", "cnaes": ["7112000", {constant}]}}'.encode(),
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["campo"] == "body"
    upstream_client.consultar_por_cnae.assert_not_awaited()
