"""Conectores de APIs externas.

Estrutura:
- casa_dos_dados/: pesquisa de CNPJ por CNAE (API v5)
"""

__all__: list[str] = []
