"""Entrypoint da aplicação Consulta CNAE.

Relay HTTP entre o chamador e a API de pesquisa da Casa dos Dados.
Expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 3000

Uso (desenvolvimento):
    consulta-cnae
"""

from __future__ import annotations

import time
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes import create_api_router
from api.routes.router import ENDPOINTS_DISPONIVEIS
from app.bootstrap import initialize_app, validate_runtime_settings
from app.observability import (
    CORRELATION_ID_HEADER,
    get_correlation_id,
    record_latency,
    reset_correlation_id,
    set_correlation_id,
)
from config.logging import get_logger
from config.settings import VERSAO_API, get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

    from starlette.responses import Response

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)

# Método sem rota também responde como rota inexistente
_ROUTE_NOT_FOUND_STATUSES = frozenset({404, 405})


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Valida configurações no startup e registra início/fim."""
    settings = get_base_settings()
    logger.info("app_starting", extra={"port": settings.port})
    validate_runtime_settings()
    yield
    logger.info("app_shutting_down")


async def correlation_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Define correlation_id da requisição e registra método, rota e latência."""
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
    started_at = time.perf_counter()
    try:
        response = await call_next(request)
        response.headers[CORRELATION_ID_HEADER] = get_correlation_id()
        latency_ms = (time.perf_counter() - started_at) * 1000
        logger.info(
            "http_request",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
            },
        )
        record_latency("http", f"{request.method} {request.url.path}", latency_ms)
        return response
    finally:
        reset_correlation_id(token)


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """Rota ou método sem handler vira 404 com a lista de endpoints.

    Demais erros HTTP em JSON simples.
    """
    if exc.status_code in _ROUTE_NOT_FOUND_STATUSES:
        return JSONResponse(
            status_code=404,
            content={
                "erro": "Rota não encontrada",
                "endpoints_disponíveis": ENDPOINTS_DISPONIVEIS,
            },
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"erro": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Qualquer erro não tratado vira 500 JSON, sem stack trace."""
    logger.error(
        "unhandled_exception",
        extra={"path": request.url.path, "error_type": type(exc).__name__},
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content={"erro": "Erro interno do servidor", "detalhes": str(exc)},
    )


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="Consulta CNAE",
        description="Relay de consulta de empresas por CNAE (Casa dos Dados)",
        version=VERSAO_API,
        lifespan=lifespan,
    )

    # Chamadores diversos (n8n, front-ends); sem autenticação própria
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    fastapi_app.middleware("http")(correlation_middleware)

    fastapi_app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    fastapi_app.add_exception_handler(Exception, unhandled_exception_handler)

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured")

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta."""
    import uvicorn

    settings = get_base_settings()
    logger.info("Starting Consulta CNAE", extra={"port": settings.port})
    uvicorn.run(
        "app.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
