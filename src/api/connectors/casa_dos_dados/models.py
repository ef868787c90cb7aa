"""Reexports dos contratos de resultado para api/connectors.

Os contratos canônicos residem em app/protocols/models.py.
"""

from __future__ import annotations

from app.protocols.models import (
    UpstreamErrorKind,
    UpstreamFailure,
    UpstreamResult,
    UpstreamSuccess,
)

__all__ = [
    "UpstreamErrorKind",
    "UpstreamFailure",
    "UpstreamResult",
    "UpstreamSuccess",
]
