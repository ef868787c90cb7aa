"""Endpoints da consulta de empresas por CNAE.

Endpoints:
- POST /consultar-empresa: valida a entrada e consulta a Casa dos Dados
- GET /consultar-empresa: documento de uso
"""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from api.routes.empresas._usage import build_usage_document
from app.bootstrap import get_consultar_empresa_use_case
from config.settings import get_base_settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Constante JSON não suportada: {name}")


async def _read_json(request: Request) -> Any:
    """Corpo JSON da requisição; None quando ausente, malformado ou com NaN/Infinity."""
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError:
        logger.info("consulta_body_invalido", extra={"body_size": len(raw)})
        return None


@router.post("")
@router.post("/", include_in_schema=False)
async def consultar_empresa(request: Request) -> JSONResponse:
    """Consulta empresas por um ou mais CNAEs."""
    payload = await _read_json(request)
    use_case = get_consultar_empresa_use_case()
    response = await use_case.execute(payload)
    return JSONResponse(content=response.body, status_code=response.status_code)


@router.get("")
@router.get("/", include_in_schema=False)
async def consultar_empresa_uso() -> dict[str, Any]:
    """Como usar o endpoint de consulta."""
    return build_usage_document(get_base_settings().port)
