"""Consolidação das empresas de vários CNAEs em uma única lista.

Cada empresa recebe `cnae_consultado` e `indice_cnae` (posição 1-based
do CNAE na consulta). O resumo por CNAE informa quantas empresas foram
encontradas, quantas retornadas e quantas omitidas pelo limite.

A consolidação nunca propaga exceção: formato inesperado gera um
relatório vazio com `erro_consolidacao` e os dados originais.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from app.domain.consulta import (
    FORMATO_CONSOLIDADO,
    FORMATO_CONSOLIDADO_COM_ERRO,
    EstatisticasConsulta,
    MetaConsolidacao,
    RelatorioConsolidado,
    ResumoCnae,
)
from app.services._extraction_strategies import extract_companies
from config.logging import log_fallback
from config.settings import VERSAO_API

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


def _timestamp() -> str:
    return datetime.now(UTC).isoformat()


def resumir_cnae(total_encontradas: int, limite_por_cnae: int) -> ResumoCnae:
    """Resumo de um CNAE; limite 0 significa sem limite."""
    if limite_por_cnae > 0:
        retornadas = min(total_encontradas, limite_por_cnae)
    else:
        retornadas = total_encontradas
    omitidas = total_encontradas - retornadas
    return ResumoCnae(
        total_encontradas=total_encontradas,
        total_retornadas=retornadas,
        limitado=omitidas > 0,
        empresas_omitidas=omitidas,
    )


def _tag_company(empresa: Any, cnae: str, indice: int) -> dict[str, Any]:
    if not isinstance(empresa, dict):
        raise TypeError(f"Empresa em formato inesperado: {type(empresa).__name__}")
    return {**empresa, "cnae_consultado": cnae, "indice_cnae": indice}


def consolidar_resultados(
    dados_originais: Any,
    cnaes_consultados: Sequence[str],
    limite_por_cnae: int,
    versao_api: str = VERSAO_API,
) -> RelatorioConsolidado:
    """Consolida a resposta da API externa em um relatório único.

    Args:
        dados_originais: Payload bruto da Casa dos Dados
        cnaes_consultados: CNAEs na ordem em que foram enviados
        limite_por_cnae: Máximo de empresas por CNAE (0 = sem limite)
        versao_api: Versão informada em `meta`

    Returns:
        RelatorioConsolidado; em caso de formato inesperado, o relatório
        degradado com `erro_consolidacao`.
    """
    cnaes = list(cnaes_consultados)
    try:
        empresas: list[dict[str, Any]] = []
        resumo: dict[str, ResumoCnae] = {}

        for index, cnae in enumerate(cnaes):
            encontradas = extract_companies(dados_originais, cnae, index)
            resumo_cnae = resumir_cnae(len(encontradas), limite_por_cnae)
            empresas.extend(
                _tag_company(empresa, cnae, index + 1)
                for empresa in encontradas[: resumo_cnae.total_retornadas]
            )
            resumo[cnae] = resumo_cnae

        relatorio = RelatorioConsolidado(
            empresas=empresas,
            estatisticas=EstatisticasConsulta(
                total_empresas=len(empresas),
                total_cnaes_consultados=len(cnaes),
                limite_por_cnae=limite_por_cnae,
                cnaes_consultados=cnaes,
            ),
            resumo_por_cnae=resumo,
            meta=MetaConsolidacao(
                timestamp=_timestamp(),
                formato=FORMATO_CONSOLIDADO,
                versao_api=versao_api,
            ),
        )
    except Exception as exc:
        log_fallback(logger, "consolidator", reason=type(exc).__name__)
        return relatorio_com_erro(dados_originais, cnaes, limite_por_cnae, exc, versao_api)

    logger.info(
        "consolidacao_concluida",
        extra={"total_empresas": len(empresas), "total_cnaes": len(cnaes)},
    )
    return relatorio


def relatorio_com_erro(
    dados_originais: Any,
    cnaes_consultados: Sequence[str],
    limite_por_cnae: int,
    exc: Exception,
    versao_api: str = VERSAO_API,
) -> RelatorioConsolidado:
    """Relatório vazio que carrega o diagnóstico e os dados originais."""
    cnaes = list(cnaes_consultados)
    return RelatorioConsolidado(
        empresas=[],
        estatisticas=EstatisticasConsulta(
            total_empresas=0,
            total_cnaes_consultados=len(cnaes),
            limite_por_cnae=max(limite_por_cnae, 0),
            cnaes_consultados=cnaes,
        ),
        resumo_por_cnae={},
        meta=MetaConsolidacao(
            timestamp=_timestamp(),
            formato=FORMATO_CONSOLIDADO_COM_ERRO,
            versao_api=versao_api,
        ),
        erro_consolidacao=str(exc) or type(exc).__name__,
        dados_originais=dados_originais,
    )
