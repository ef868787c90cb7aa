"""Mapeamento de erros da API Casa dos Dados para mensagens do relay."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.connectors.casa_dos_dados.models import UpstreamErrorKind, UpstreamFailure

if TYPE_CHECKING:
    import httpx

UPSTREAM_ERROR_MESSAGES: dict[int, str] = {
    400: "Dados inválidos enviados para a API",
    401: "API Key inválida ou não fornecida",
    403: "Acesso negado - verifique sua API Key e saldo",
    404: "Endpoint não encontrado",
    429: "Limite de requisições excedido",
    500: "Erro interno da API da Casa dos Dados",
}
GENERIC_UPSTREAM_ERROR = "Erro na API da Casa dos Dados"

CONNECTION_ERROR = "Erro de conexão com a API da Casa dos Dados"
CONNECTION_ERROR_DETAILS = "Verifique sua conexão com a internet"
CONNECTION_ERROR_STATUS = 503

INTERNAL_ERROR = "Erro interno do serviço"
INTERNAL_ERROR_STATUS = 500


def upstream_error_message(status_code: int) -> str:
    """Mensagem legível para o status HTTP devolvido pela API."""
    return UPSTREAM_ERROR_MESSAGES.get(status_code, GENERIC_UPSTREAM_ERROR)


def response_details(response: httpx.Response) -> Any:
    """Corpo da resposta de erro: JSON quando possível, senão texto."""
    try:
        return response.json()
    except ValueError:
        return response.text or None


def upstream_failure(response: httpx.Response) -> UpstreamFailure:
    """Traduz resposta HTTP de erro da API externa."""
    return UpstreamFailure(
        kind=UpstreamErrorKind.UPSTREAM,
        error=upstream_error_message(response.status_code),
        status_code=response.status_code,
        details=response_details(response),
    )


def connection_failure() -> UpstreamFailure:
    """Falha de transporte (DNS, conexão recusada, timeout)."""
    return UpstreamFailure(
        kind=UpstreamErrorKind.CONNECTION,
        error=CONNECTION_ERROR,
        status_code=CONNECTION_ERROR_STATUS,
        details=CONNECTION_ERROR_DETAILS,
    )


def internal_failure(exc: Exception) -> UpstreamFailure:
    """Falha local inesperada durante a consulta."""
    return UpstreamFailure(
        kind=UpstreamErrorKind.INTERNAL,
        error=INTERNAL_ERROR,
        status_code=INTERNAL_ERROR_STATUS,
        details=str(exc),
    )
