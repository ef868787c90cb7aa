"""Regras de validação da consulta por CNAE.

Funções puras: nunca levantam exceção para entradas malformadas,
exceto `normalizar_tipo_resultado`, que sinaliza valor fora da lista
aceita via ValidationError.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from api.validators.cnae.errors import ValidationError
from api.validators.cnae.limits import (
    CNAE_DIGITS,
    DEFAULT_LIMIT_PER_CNAE,
    DEFAULT_TIPO_RESULTADO,
    ERRO_LIMITE_INVALIDO,
    ERRO_LIMITE_MAXIMO,
    MAX_LIMIT_PER_CNAE,
    TIPOS_RESULTADO_ACEITOS,
)

_NON_DIGITS = re.compile(r"\D")
_INTEGER_TEXT = re.compile(r"^[+-]?\d+$")


@dataclass(frozen=True, slots=True)
class CnaeValidationResult:
    """Partição dos CNAEs recebidos em válidos e inválidos."""

    validos: tuple[str, ...]
    invalidos: tuple[Any, ...]

    @property
    def todos_validos(self) -> bool:
        return not self.invalidos

    @property
    def total_validos(self) -> int:
        return len(self.validos)

    @property
    def total_invalidos(self) -> int:
        return len(self.invalidos)


@dataclass(frozen=True, slots=True)
class LimitValidationResult:
    """Resultado da validação de `limite_por_cnae`."""

    valido: bool
    limite: int | None = None
    erro: str | None = None


def validar_api_key(api_key: Any) -> bool:
    """Retorna True se a API key é string não vazia (ignorando espaços)."""
    return isinstance(api_key, str) and bool(api_key.strip())


def _as_text(cnae: Any) -> str | None:
    if isinstance(cnae, bool):
        return None
    if isinstance(cnae, int):
        return str(cnae)
    if isinstance(cnae, str):
        return cnae
    return None


def normalizar_cnae(cnae: Any) -> str:
    """Remove tudo que não for dígito (ex: "7112-0/00" -> "7112000")."""
    text = _as_text(cnae)
    if text is None:
        return ""
    return _NON_DIGITS.sub("", text)


def validar_cnae(cnae: Any) -> bool:
    """Retorna True se restam exatamente 7 dígitos após a normalização."""
    return len(normalizar_cnae(cnae)) == CNAE_DIGITS


def validar_cnaes(cnaes: Any) -> CnaeValidationResult:
    """Valida um CNAE ou uma lista de CNAEs.

    Args:
        cnaes: Código único ou sequência de códigos.

    Returns:
        CnaeValidationResult com válidos normalizados e inválidos na
        forma original, ambos na ordem recebida.
    """
    items = list(cnaes) if isinstance(cnaes, (list, tuple)) else [cnaes]
    validos: list[str] = []
    invalidos: list[Any] = []
    for cnae in items:
        if validar_cnae(cnae):
            validos.append(normalizar_cnae(cnae))
        else:
            invalidos.append(cnae)
    return CnaeValidationResult(validos=tuple(validos), invalidos=tuple(invalidos))


def _parse_limit(limite: Any) -> int | None:
    if isinstance(limite, bool):
        return None
    if isinstance(limite, int):
        return limite
    if isinstance(limite, float):
        return int(limite) if limite.is_integer() else None
    if isinstance(limite, str) and _INTEGER_TEXT.match(limite.strip()):
        return int(limite.strip())
    return None


def validar_limite(limite: Any) -> LimitValidationResult:
    """Valida o limite de empresas por CNAE.

    Ausente (None ou "") assume o padrão de 100. Zero significa sem limite.
    """
    if limite is None or limite == "":
        return LimitValidationResult(valido=True, limite=DEFAULT_LIMIT_PER_CNAE)

    parsed = _parse_limit(limite)
    if parsed is None or parsed < 0:
        return LimitValidationResult(valido=False, erro=ERRO_LIMITE_INVALIDO)

    if parsed > MAX_LIMIT_PER_CNAE:
        return LimitValidationResult(valido=False, erro=ERRO_LIMITE_MAXIMO)

    return LimitValidationResult(valido=True, limite=parsed)


def normalizar_tipo_resultado(tipo_resultado: Any) -> str:
    """Converte o tipo_resultado recebido no literal da API externa.

    Raises:
        ValidationError: Se o valor informado não é aceito.
    """
    if tipo_resultado is None or tipo_resultado == "":
        return DEFAULT_TIPO_RESULTADO
    if not isinstance(tipo_resultado, str) or tipo_resultado not in TIPOS_RESULTADO_ACEITOS:
        raise ValidationError(
            'tipo_resultado deve ser "simples", "completo" ou "simple"',
            campo="tipo_resultado",
        )
    return TIPOS_RESULTADO_ACEITOS[tipo_resultado]
