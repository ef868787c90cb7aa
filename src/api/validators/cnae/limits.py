"""Limites e valores aceitos na consulta por CNAE."""

from __future__ import annotations

# CNAE subclasse: 7 dígitos numéricos (ex: 7112000)
CNAE_DIGITS = 7

# Empresas por CNAE
DEFAULT_LIMIT_PER_CNAE = 100
MAX_LIMIT_PER_CNAE = 1000

# tipo_resultado aceito na entrada -> literal esperado pela API externa
TIPOS_RESULTADO_ACEITOS: dict[str, str] = {
    "simples": "simple",
    "simple": "simple",
    "completo": "completo",
}
DEFAULT_TIPO_RESULTADO = "simple"

ERRO_LIMITE_INVALIDO = "Limite deve ser um número inteiro maior ou igual a 0"
ERRO_LIMITE_MAXIMO = f"Limite máximo é {MAX_LIMIT_PER_CNAE} empresas por CNAE"
