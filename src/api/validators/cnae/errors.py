"""Erros de validação de entrada da consulta por CNAE."""

from __future__ import annotations


class ValidationError(Exception):
    """Entrada do chamador inválida (sempre mapeada para HTTP 400).

    Attributes:
        campo: Nome do campo do payload que falhou a validação.
    """

    def __init__(self, message: str, campo: str | None = None) -> None:
        super().__init__(message)
        self.campo = campo
