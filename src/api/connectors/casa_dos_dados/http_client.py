"""Cliente HTTP da API Casa dos Dados (pesquisa de CNPJ por CNAE).

Comportamento:
- Uma única chamada POST por consulta, com todos os CNAEs no corpo
- Sem retry: tentativa única, sucesso ou falha
- Timeout limitado (settings) sobre a chamada inteira; estouro vira
  falha de conexão (503)
- Erros HTTP traduzidos por tabela fixa (api_errors)
- Logging estruturado sem a API key
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.casa_dos_dados.api_errors import (
    connection_failure,
    internal_failure,
    upstream_failure,
)
from api.connectors.casa_dos_dados.models import UpstreamSuccess
from app.observability import record_latency

if TYPE_CHECKING:
    from collections.abc import Sequence

    from api.connectors.casa_dos_dados.models import UpstreamResult
    from config.settings import CasaDosDadosSettings

logger = logging.getLogger(__name__)

TIPOS_RESULTADO_UPSTREAM = frozenset({"simple", "completo"})


def build_query_params(tipo_resultado: str | None, limite_por_cnae: int) -> dict[str, Any]:
    """Monta query params, omitindo os que não se aplicam."""
    params: dict[str, Any] = {}
    if tipo_resultado in TIPOS_RESULTADO_UPSTREAM:
        params["tipo_resultado"] = tipo_resultado
    if limite_por_cnae and limite_por_cnae > 0:
        params["limite"] = limite_por_cnae
    return params


def build_request_body(cnaes: Sequence[str]) -> dict[str, list[str]]:
    """Corpo da pesquisa com todos os CNAEs em um único campo."""
    return {"codigo_atividade_principal": list(cnaes)}


class CasaDosDadosClient:
    """Cliente da pesquisa de CNPJ da Casa dos Dados.

    Implementa CasaDosDadosClientProtocol. Aceita um httpx.AsyncClient
    injetado; sem ele, cada consulta abre um cliente próprio.
    """

    __slots__ = ("_api_url", "_http_client", "_timeout_seconds")

    def __init__(
        self,
        api_url: str,
        timeout_seconds: float,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_url = api_url
        self._timeout_seconds = timeout_seconds
        self._http_client = http_client

    async def consultar_por_cnae(
        self,
        api_key: str,
        cnaes: str | Sequence[str],
        tipo_resultado: str = "simple",
        limite_por_cnae: int = 100,
    ) -> UpstreamResult:
        """Consulta empresas por um ou mais CNAEs.

        Args:
            api_key: Chave da API Casa dos Dados (header api-key)
            cnaes: CNAE único ou lista de CNAEs já validados
            tipo_resultado: "simple" ou "completo"
            limite_por_cnae: Máximo de empresas por CNAE (0 = sem limite)

        Returns:
            UpstreamSuccess ou UpstreamFailure; nunca levanta exceção.
        """
        codes = [cnaes] if isinstance(cnaes, str) else list(cnaes)
        params = build_query_params(tipo_resultado, limite_por_cnae)
        logger.info(
            "casa_dos_dados_request",
            extra={
                "total_cnaes": len(codes),
                "tipo_resultado": tipo_resultado,
                "limite_por_cnae": limite_por_cnae,
            },
        )

        started_at = time.perf_counter()
        try:
            response = await asyncio.wait_for(
                self._post(
                    headers={"Content-Type": "application/json", "api-key": api_key},
                    params=params,
                    body=build_request_body(codes),
                ),
                timeout=self._timeout_seconds,
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as exc:
            failure = upstream_failure(exc.response)
            logger.warning(
                "casa_dos_dados_http_error",
                extra={"status_code": failure.status_code, "error": failure.error},
            )
            return failure
        except httpx.TransportError as exc:
            logger.warning(
                "casa_dos_dados_connection_error",
                extra={"error_type": type(exc).__name__},
            )
            return connection_failure()
        except TimeoutError:
            logger.warning(
                "casa_dos_dados_connection_error",
                extra={"error_type": "TimeoutError"},
            )
            return connection_failure()
        except Exception as exc:
            logger.exception("casa_dos_dados_internal_error")
            return internal_failure(exc)
        finally:
            record_latency(
                "casa_dos_dados",
                "pesquisa",
                (time.perf_counter() - started_at) * 1000,
            )

        logger.info(
            "casa_dos_dados_request_ok",
            extra={"status_code": response.status_code, "total_cnaes": len(codes)},
        )
        return UpstreamSuccess(
            data=data,
            status_code=response.status_code,
            total_cnaes_consultados=len(codes),
            limite_por_cnae=limite_por_cnae,
        )

    async def _post(
        self,
        *,
        headers: dict[str, str],
        params: dict[str, Any],
        body: dict[str, Any],
    ) -> httpx.Response:
        if self._http_client is not None:
            return await self._http_client.post(
                self._api_url,
                json=body,
                params=params,
                headers=headers,
                timeout=self._timeout_seconds,
            )
        async with httpx.AsyncClient(timeout=self._timeout_seconds) as client:
            return await client.post(self._api_url, json=body, params=params, headers=headers)


def create_casa_dos_dados_client(
    settings: CasaDosDadosSettings | None = None,
) -> CasaDosDadosClient:
    """Factory para criar cliente com config do ambiente.

    Args:
        settings: CasaDosDadosSettings opcional. Se None, carrega do ambiente.
    """
    # Import local para evitar dependência circular
    from config.settings import get_casa_dos_dados_settings

    config = settings or get_casa_dos_dados_settings()
    return CasaDosDadosClient(
        api_url=config.api_url,
        timeout_seconds=config.request_timeout_seconds,
    )
