"""Protocolos e contratos do core da aplicação."""

from .http_client import CasaDosDadosClientProtocol
from .models import (
    UpstreamErrorKind,
    UpstreamFailure,
    UpstreamResult,
    UpstreamSuccess,
)

__all__ = [
    "CasaDosDadosClientProtocol",
    "UpstreamErrorKind",
    "UpstreamFailure",
    "UpstreamResult",
    "UpstreamSuccess",
]
