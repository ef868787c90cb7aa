"""Validadores de entrada da consulta de empresas por CNAE.

Uso:
    from api.validators.cnae import validar_api_key, validar_cnaes, validar_limite

    resultado = validar_cnaes(["7112000", "abc"])
    resultado.todos_validos  # False
"""

from api.validators.cnae.errors import ValidationError
from api.validators.cnae.limits import (
    CNAE_DIGITS,
    DEFAULT_LIMIT_PER_CNAE,
    DEFAULT_TIPO_RESULTADO,
    MAX_LIMIT_PER_CNAE,
    TIPOS_RESULTADO_ACEITOS,
)
from api.validators.cnae.rules import (
    CnaeValidationResult,
    LimitValidationResult,
    normalizar_cnae,
    normalizar_tipo_resultado,
    validar_api_key,
    validar_cnae,
    validar_cnaes,
    validar_limite,
)

__all__ = [
    "CNAE_DIGITS",
    "DEFAULT_LIMIT_PER_CNAE",
    "DEFAULT_TIPO_RESULTADO",
    "MAX_LIMIT_PER_CNAE",
    "TIPOS_RESULTADO_ACEITOS",
    "CnaeValidationResult",
    "LimitValidationResult",
    "ValidationError",
    "normalizar_cnae",
    "normalizar_tipo_resultado",
    "validar_api_key",
    "validar_cnae",
    "validar_cnaes",
    "validar_limite",
]
