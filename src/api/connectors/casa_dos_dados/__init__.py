"""Conector da API Casa dos Dados.

Uso:
    from api.connectors.casa_dos_dados import create_casa_dos_dados_client

    client = create_casa_dos_dados_client()
    resultado = await client.consultar_por_cnae(api_key, ["7112000"], "simple", 100)
"""

from api.connectors.casa_dos_dados.api_errors import (
    UPSTREAM_ERROR_MESSAGES,
    upstream_error_message,
)
from api.connectors.casa_dos_dados.http_client import (
    CasaDosDadosClient,
    create_casa_dos_dados_client,
)
from api.connectors.casa_dos_dados.models import (
    UpstreamErrorKind,
    UpstreamFailure,
    UpstreamResult,
    UpstreamSuccess,
)

__all__ = [
    "UPSTREAM_ERROR_MESSAGES",
    "CasaDosDadosClient",
    "UpstreamErrorKind",
    "UpstreamFailure",
    "UpstreamResult",
    "UpstreamSuccess",
    "create_casa_dos_dados_client",
    "upstream_error_message",
]
