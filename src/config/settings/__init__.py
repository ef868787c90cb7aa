"""Agregador de settings do Consulta CNAE.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    DEFAULT_PORT,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Upstream settings
from config.settings.casa_dos_dados import (
    CASA_DOS_DADOS_API_URL,
    MAX_TIMEOUT_SECONDS,
    MIN_TIMEOUT_SECONDS,
    VERSAO_API,
    CasaDosDadosSettings,
    get_casa_dos_dados_settings,
)

__all__ = [
    # Constants
    "CASA_DOS_DADOS_API_URL",
    "DEFAULT_PORT",
    "MAX_TIMEOUT_SECONDS",
    "MIN_TIMEOUT_SECONDS",
    "VERSAO_API",
    # Base
    "BaseSettings",
    "CasaDosDadosSettings",
    "Environment",
    "get_base_settings",
    "get_casa_dos_dados_settings",
]
