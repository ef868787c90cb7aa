"""Filters de logging para injeção de contexto e mascaramento.

Campos injetados:
- correlation_id: ID de rastreamento da requisição
- service: Nome do serviço (ex: consulta-cnae)

Campos mascarados:
- api_key / apiKey: nunca chegam ao destino do log em claro
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

MASK = "***"
SENSITIVE_FIELDS = frozenset({"api_key", "apiKey", "api-key"})


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia como fallback.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona correlation_id e service ao record.

        Se correlation_id já foi passado via `extra`, preserva o valor.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class SensitiveFieldFilter(logging.Filter):
    """Substitui por máscara qualquer campo sensível passado via `extra`.

    Também mascara chaves sensíveis dentro de dicts (ex: headers).
    """

    def filter(self, record: logging.LogRecord) -> bool:
        for field in SENSITIVE_FIELDS:
            if getattr(record, field, None):
                setattr(record, field, MASK)
        headers = getattr(record, "headers", None)
        if isinstance(headers, dict):
            record.headers = mask_sensitive(headers)
        return True


def mask_sensitive(data: dict[str, object]) -> dict[str, object]:
    """Retorna cópia do dict com valores sensíveis mascarados."""
    return {key: (MASK if key in SENSITIVE_FIELDS else value) for key, value in data.items()}
