"""Modelos de domínio da consulta de empresas por CNAE.

Nada aqui é persistido: cada instância vive apenas durante uma
requisição.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

FORMATO_CONSOLIDADO = "consolidado_unico"
FORMATO_CONSOLIDADO_COM_ERRO = "consolidado_com_erro"


@dataclass(frozen=True, slots=True)
class ConsultaEmpresaRequest:
    """Consulta já validada e normalizada, pronta para a API externa."""

    api_key: str
    cnaes: tuple[str, ...]
    tipo_resultado: str
    limite_por_cnae: int
    consolidar: bool = False


class ResumoCnae(BaseModel):
    """Totais de um CNAE antes e depois do limite."""

    model_config = ConfigDict(extra="forbid")

    total_encontradas: int = Field(..., ge=0)
    total_retornadas: int = Field(..., ge=0)
    limitado: bool
    empresas_omitidas: int = Field(..., ge=0)


class EstatisticasConsulta(BaseModel):
    """Estatísticas gerais da consolidação."""

    model_config = ConfigDict(extra="forbid")

    total_empresas: int = Field(..., ge=0)
    total_cnaes_consultados: int = Field(..., ge=0)
    limite_por_cnae: int = Field(..., ge=0)
    cnaes_consultados: list[str]


class MetaConsolidacao(BaseModel):
    """Metadados do relatório consolidado."""

    model_config = ConfigDict(extra="forbid")

    timestamp: str
    formato: str = FORMATO_CONSOLIDADO
    versao_api: str


class RelatorioConsolidado(BaseModel):
    """Empresas de todos os CNAEs em lista única, com resumo por CNAE.

    `erro_consolidacao` e `dados_originais` só aparecem no relatório
    degradado (formato "consolidado_com_erro").
    """

    model_config = ConfigDict(extra="forbid")

    empresas: list[dict[str, Any]] = Field(default_factory=list)
    estatisticas: EstatisticasConsulta
    resumo_por_cnae: dict[str, ResumoCnae] = Field(default_factory=dict)
    meta: MetaConsolidacao
    erro_consolidacao: str | None = None
    dados_originais: Any = None

    def to_response(self) -> dict[str, Any]:
        """Serializa para o corpo JSON, sem os campos do caminho degradado vazios."""
        body = self.model_dump(mode="json")
        if self.erro_consolidacao is None:
            body.pop("erro_consolidacao")
            body.pop("dados_originais")
        return body


__all__ = [
    "FORMATO_CONSOLIDADO",
    "FORMATO_CONSOLIDADO_COM_ERRO",
    "ConsultaEmpresaRequest",
    "EstatisticasConsulta",
    "MetaConsolidacao",
    "RelatorioConsolidado",
    "ResumoCnae",
]
