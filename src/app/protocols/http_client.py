"""Protocolos HTTP usados pelo app.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.protocols.models import UpstreamResult


class CasaDosDadosClientProtocol(Protocol):
    """Contrato mínimo para o cliente da pesquisa por CNAE."""

    async def consultar_por_cnae(
        self,
        api_key: str,
        cnaes: str | Sequence[str],
        tipo_resultado: str = "simple",
        limite_por_cnae: int = 100,
    ) -> UpstreamResult: ...
