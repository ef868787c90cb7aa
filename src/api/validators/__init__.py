"""Validators — validação de entradas recebidas pelo relay.

Estrutura:
- cnae/: API key, códigos CNAE, limite por CNAE e tipo de resultado
"""

__all__: list[str] = []
