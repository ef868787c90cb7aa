"""Serviços de aplicação.

Unidades puras de transformação (sem IO direto).
"""

from app.services.consolidator import (
    consolidar_resultados,
    relatorio_com_erro,
    resumir_cnae,
)

__all__ = [
    "consolidar_resultados",
    "relatorio_com_erro",
    "resumir_cnae",
]
