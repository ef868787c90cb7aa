"""Documento de uso servido em GET /consultar-empresa."""

from __future__ import annotations

import json
from typing import Any

from app.use_cases.empresas._responses import EXEMPLO_CNAE_UNICO, EXEMPLO_MULTIPLOS_CNAES

_CURL_TEMPLATE = """curl -X POST http://localhost:{port}/consultar-empresa \\
-H "Content-Type: application/json" \\
-d '{body}'"""


def _curl(port: int, body: dict[str, Any]) -> str:
    return _CURL_TEMPLATE.format(port=port, body=json.dumps(body, ensure_ascii=False, indent=2))


def build_usage_document(port: int) -> dict[str, Any]:
    """Monta o documento de ajuda (sem lógica de negócio)."""
    return {
        "endpoint": "POST /consultar-empresa",
        "descrição": "Consulta empresas por CNAE usando a API da Casa dos Dados",
        "suporte": "CNAE único ou múltiplos CNAEs em uma única requisição",
        "parametros_obrigatórios": {
            "apiKey": "Sua chave da API da Casa dos Dados",
            "cnae": "Código CNAE de 7 dígitos (para consulta única)",
            "cnaes": "Array de códigos CNAE (para múltiplas consultas)",
        },
        "parametros_opcionais": {
            "tipo_resultado": 'Tipo do resultado: "simples", "completo" ou "simple"',
            "limite_por_cnae": "Máximo de empresas por CNAE, de 0 a 1000 (padrão 100, 0 = sem limite)",
            "consolidar": "true para receber todas as empresas em lista única com resumo por CNAE",
        },
        "exemplos": {
            "cnae_unico": {
                "método": "POST",
                "url": "/consultar-empresa",
                "body": EXEMPLO_CNAE_UNICO,
            },
            "multiplos_cnaes": {
                "método": "POST",
                "url": "/consultar-empresa",
                "body": {**EXEMPLO_MULTIPLOS_CNAES, "consolidar": True},
            },
        },
        "exemplos_curl": {
            "cnae_unico": _curl(port, EXEMPLO_CNAE_UNICO),
            "multiplos_cnaes": _curl(port, EXEMPLO_MULTIPLOS_CNAES),
        },
        "vantagens_multiplos": [
            "Todos os resultados em uma única resposta",
            "Menor uso de requests da API",
            "Mais eficiente para automações",
        ],
    }
