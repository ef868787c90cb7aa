"""Registro de métricas via structured logging.

As métricas são logs estruturados, agregáveis depois pelo
destino dos logs (Cloud Logging, CloudWatch Insights, etc.).

Métricas suportadas:
- Latência: tempo de execução por componente/operação
- Consulta: CNAEs consultados e desfecho de cada requisição
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "casa_dos_dados", "http")
        operation: Nome da operação (ex: "pesquisa")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação (o filter injeta o do contexto se None)
    """
    extra: dict[str, object] = {
        "metric_type": "latency",
        "component": component,
        "operation": operation,
        "latency_ms": round(latency_ms, 2),
    }
    if correlation_id:
        extra["correlation_id"] = correlation_id
    logger.info("metric_latency", extra=extra)


def record_consulta(
    total_cnaes: int,
    status_code: int,
    consolidado: bool,
) -> None:
    """Registra o desfecho de uma consulta por CNAE."""
    logger.info(
        "metric_consulta",
        extra={
            "metric_type": "consulta",
            "total_cnaes": total_cnaes,
            "status_code": status_code,
            "consolidado": consolidado,
        },
    )
