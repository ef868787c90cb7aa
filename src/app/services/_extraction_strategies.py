"""Estratégias de extração das empresas de um CNAE na resposta externa.

O formato por CNAE da resposta da Casa dos Dados não é contrato garantido:
pode vir como lista posicional (mesma ordem dos CNAEs enviados) ou como
objeto indexado pelo código. Cada estratégia responde à mesma pergunta:
"dado o payload, o CNAE e sua posição, quais são as empresas?".
"""

from __future__ import annotations

from typing import Any, Protocol

# Chaves onde um bloco por CNAE pode guardar a lista de empresas
_COMPANY_LIST_KEYS = ("empresas", "cnpjs")


class ExtractionStrategy(Protocol):
    """Extrai o bloco bruto de um CNAE; None quando o formato não se aplica."""

    def __call__(self, payload: Any, cnae: str, indice: int) -> Any | None: ...


def _container(payload: Any) -> Any:
    """Conteúdo útil da resposta: `data` quando presente, senão o próprio payload."""
    if isinstance(payload, dict) and "data" in payload:
        return payload["data"]
    return payload


def positional_strategy(payload: Any, cnae: str, indice: int) -> Any | None:
    """Bloco na posição `indice` de uma lista."""
    container = _container(payload)
    if isinstance(container, list) and indice < len(container):
        return container[indice]
    return None


def keyed_strategy(payload: Any, cnae: str, indice: int) -> Any | None:
    """Bloco indexado pelo código (ou pela posição como texto)."""
    container = _container(payload)
    if not isinstance(container, dict):
        return None
    if cnae in container:
        return container[cnae]
    return container.get(str(indice))


DEFAULT_STRATEGIES: tuple[ExtractionStrategy, ...] = (positional_strategy, keyed_strategy)


def _company_list(block: Any) -> list[Any]:
    if isinstance(block, list):
        return block
    if isinstance(block, dict):
        for key in _COMPANY_LIST_KEYS:
            companies = block.get(key)
            if isinstance(companies, list):
                return companies
        return []
    raise TypeError(f"Bloco de CNAE em formato inesperado: {type(block).__name__}")


def extract_companies(
    payload: Any,
    cnae: str,
    indice: int,
    strategies: tuple[ExtractionStrategy, ...] = DEFAULT_STRATEGIES,
) -> list[Any]:
    """Retorna as empresas brutas de um CNAE.

    As estratégias são tentadas em ordem; a primeira que encontra um bloco
    não vazio vence. Sem bloco, retorna lista vazia.

    Raises:
        TypeError: Se o bloco encontrado não é lista nem objeto.
    """
    for strategy in strategies:
        block = strategy(payload, cnae, indice)
        if block:
            return _company_list(block)
    return []
