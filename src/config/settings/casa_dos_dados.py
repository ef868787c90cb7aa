"""Settings específicas da API Casa dos Dados.

Configurações do cliente de pesquisa de CNPJ por CNAE.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Endpoint de pesquisa da API v5
CASA_DOS_DADOS_API_URL: str = "https://api.casadosdados.com.br/v5/cnpj/pesquisa"

# Faixa aceita para o timeout da chamada externa (segundos)
MIN_TIMEOUT_SECONDS: float = 30.0
MAX_TIMEOUT_SECONDS: float = 60.0

VERSAO_API: str = "1.0.0"


@dataclass(frozen=True)
class CasaDosDadosSettings:
    """Configurações do cliente Casa dos Dados.

    Attributes:
        api_url: URL do endpoint de pesquisa
        request_timeout_seconds: Timeout da chamada externa (30-60s)
        versao_api: Versão do formato de resposta do relay
    """

    api_url: str = CASA_DOS_DADOS_API_URL
    request_timeout_seconds: float = MAX_TIMEOUT_SECONDS
    versao_api: str = VERSAO_API

    def validate(self) -> list[str]:
        """Valida configurações do cliente.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_url.startswith(("http://", "https://")):
            errors.append("CASA_DOS_DADOS_API_URL deve ser uma URL http(s)")

        if not MIN_TIMEOUT_SECONDS <= self.request_timeout_seconds <= MAX_TIMEOUT_SECONDS:
            errors.append(
                "CASA_DOS_DADOS_TIMEOUT_SECONDS deve estar entre "
                f"{MIN_TIMEOUT_SECONDS:.0f} e {MAX_TIMEOUT_SECONDS:.0f}"
            )

        return errors


def _load_casa_dos_dados_from_env() -> CasaDosDadosSettings:
    """Carrega CasaDosDadosSettings de variáveis de ambiente."""
    timeout_raw = os.getenv("CASA_DOS_DADOS_TIMEOUT_SECONDS", str(MAX_TIMEOUT_SECONDS))
    try:
        timeout = float(timeout_raw)
    except ValueError:
        timeout = 0.0
    return CasaDosDadosSettings(
        api_url=os.getenv("CASA_DOS_DADOS_API_URL", CASA_DOS_DADOS_API_URL),
        request_timeout_seconds=timeout,
    )


@lru_cache(maxsize=1)
def get_casa_dos_dados_settings() -> CasaDosDadosSettings:
    """Retorna instância cacheada de CasaDosDadosSettings."""
    return _load_casa_dos_dados_from_env()
