"""Corpos de resposta da consulta por CNAE (erros de entrada e sucesso)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from api.validators.cnae import TIPOS_RESULTADO_ACEITOS

if TYPE_CHECKING:
    from api.validators.cnae import CnaeValidationResult
    from app.domain.consulta import ConsultaEmpresaRequest
    from app.protocols.models import UpstreamFailure, UpstreamSuccess

ORIGEM_UPSTREAM = "Casa dos Dados API"

EXEMPLO_CNAE_UNICO: dict[str, Any] = {
    "apiKey": "sua_chave_aqui",
    "cnae": "7112000",
    "tipo_resultado": "simples",
}
EXEMPLO_MULTIPLOS_CNAES: dict[str, Any] = {
    "apiKey": "sua_chave_aqui",
    "cnaes": ["7112000", "6201500", "6204000"],
    "tipo_resultado": "simples",
    "limite_por_cnae": 100,
}


@dataclass(frozen=True, slots=True)
class ConsultaEmpresaResponse:
    """Status HTTP e corpo JSON produzidos pelo use case."""

    status_code: int
    body: dict[str, Any] = field(default_factory=dict)


def now_iso() -> str:
    return datetime.now(UTC).isoformat()


def _exemplos() -> dict[str, Any]:
    return {
        "exemplo_cnae_unico": dict(EXEMPLO_CNAE_UNICO),
        "exemplo_multiplos_cnaes": dict(EXEMPLO_MULTIPLOS_CNAES),
    }


def body_invalido() -> ConsultaEmpresaResponse:
    return ConsultaEmpresaResponse(
        400,
        {"erro": "Corpo da requisição deve ser um objeto JSON", "campo": "body", **_exemplos()},
    )


def api_key_ausente() -> ConsultaEmpresaResponse:
    return ConsultaEmpresaResponse(
        400,
        {"erro": "API Key é obrigatória", "campo": "apiKey", **_exemplos()},
    )


def api_key_invalida() -> ConsultaEmpresaResponse:
    return ConsultaEmpresaResponse(
        400,
        {"erro": "API Key deve ser uma string não vazia", "campo": "apiKey", **_exemplos()},
    )


def cnae_ausente() -> ConsultaEmpresaResponse:
    return ConsultaEmpresaResponse(
        400,
        {
            "erro": (
                'CNAE é obrigatório. Use "cnae" para um único código '
                'ou "cnaes" para múltiplos'
            ),
            "campo": "cnaes",
            "campos_aceitos": ["cnae", "cnaes"],
            **_exemplos(),
        },
    )


def cnaes_invalidos(validacao: CnaeValidationResult) -> ConsultaEmpresaResponse:
    return ConsultaEmpresaResponse(
        400,
        {
            "erro": "Um ou mais CNAEs são inválidos",
            "campo": "cnaes",
            "cnaes_invalidos": list(validacao.invalidos),
            "cnaes_validos": list(validacao.validos),
            "total_invalidos": validacao.total_invalidos,
            "total_validos": validacao.total_validos,
            "regra": "CNAE deve ter 7 dígitos numéricos",
            "exemplo": "CNAE válido: 7112000",
        },
    )


def limite_invalido(motivo: str) -> ConsultaEmpresaResponse:
    return ConsultaEmpresaResponse(
        400,
        {
            "erro": motivo,
            "campo": "limite_por_cnae",
            "regra": "Inteiro entre 0 e 1000 (0 = sem limite)",
            "exemplo": dict(EXEMPLO_MULTIPLOS_CNAES),
        },
    )


def tipo_resultado_invalido(motivo: str) -> ConsultaEmpresaResponse:
    return ConsultaEmpresaResponse(
        400,
        {
            "erro": motivo,
            "campo": "tipo_resultado",
            "valores_aceitos": list(TIPOS_RESULTADO_ACEITOS),
            "exemplo": dict(EXEMPLO_CNAE_UNICO),
        },
    )


def consulta_repassada(
    resultado: UpstreamSuccess,
    consulta: ConsultaEmpresaRequest,
) -> ConsultaEmpresaResponse:
    """Resposta original da API externa com `meta_informacoes` do relay."""
    meta = {
        "total_cnaes_consultados": resultado.total_cnaes_consultados,
        "cnaes_consultados": list(consulta.cnaes),
        "tipo_resultado": consulta.tipo_resultado,
        "limite_por_cnae": consulta.limite_por_cnae,
        "timestamp": now_iso(),
    }
    if isinstance(resultado.data, dict):
        body = {**resultado.data, "meta_informacoes": meta}
    else:
        body = {"dados": resultado.data, "meta_informacoes": meta}
    return ConsultaEmpresaResponse(200, body)


def falha_upstream(
    falha: UpstreamFailure,
    consulta: ConsultaEmpresaRequest,
) -> ConsultaEmpresaResponse:
    return ConsultaEmpresaResponse(
        falha.status_code,
        {
            "erro": falha.error,
            "detalhes": falha.details,
            "origem": ORIGEM_UPSTREAM,
            "cnaes_tentados": list(consulta.cnaes),
        },
    )


def erro_interno(exc: Exception) -> ConsultaEmpresaResponse:
    return ConsultaEmpresaResponse(
        500,
        {
            "erro": "Erro interno do servidor",
            "detalhes": str(exc),
            "timestamp": now_iso(),
        },
    )
