"""Contratos canônicos da consulta externa.

A chamada à API externa nunca levanta exceção para o chamador: sucesso
e falha são valores (UpstreamSuccess | UpstreamFailure).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class UpstreamErrorKind(str, Enum):
    """Categoria da falha na consulta externa."""

    UPSTREAM = "upstream"  # API respondeu com status de erro
    CONNECTION = "connection"  # requisição não chegou à API
    INTERNAL = "internal"  # falha local do relay


@dataclass(frozen=True, slots=True)
class UpstreamSuccess:
    """Resposta 2xx da API externa."""

    data: Any
    status_code: int
    total_cnaes_consultados: int
    limite_por_cnae: int

    @property
    def success(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class UpstreamFailure:
    """Falha da consulta já traduzida para o chamador."""

    kind: UpstreamErrorKind
    error: str
    status_code: int
    details: Any = None

    @property
    def success(self) -> bool:
        return False


UpstreamResult = UpstreamSuccess | UpstreamFailure
