"""Use case da consulta de empresas por CNAE.

Sequência por requisição (sem estado entre requisições):
1. Extrai apiKey, cnaes/cnae, tipo_resultado, limite_por_cnae, consolidar
2. Valida apiKey, CNAEs, limite e tipo_resultado (400 na primeira falha)
3. Faz uma única chamada à Casa dos Dados
4. Consolida (se pedido) ou repassa a resposta com metadados
Qualquer falha inesperada vira 500 com timestamp.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.validators.cnae import (
    ValidationError,
    normalizar_tipo_resultado,
    validar_api_key,
    validar_cnaes,
    validar_limite,
)
from app.domain.consulta import ConsultaEmpresaRequest
from app.observability import record_consulta
from app.services.consolidator import consolidar_resultados
from app.use_cases.empresas import _responses as responses

if TYPE_CHECKING:
    from app.protocols.http_client import CasaDosDadosClientProtocol
    from app.use_cases.empresas._responses import ConsultaEmpresaResponse

logger = logging.getLogger(__name__)

_TRUE_VALUES = frozenset({"true", "1", "sim", "yes"})


def _extract_cnaes(payload: dict[str, Any]) -> Any:
    """Lista `cnaes` tem precedência sobre `cnae`; vazios contam como ausentes."""
    for campo in ("cnaes", "cnae"):
        value = payload.get(campo)
        if value not in (None, "", [], ()):
            return value
    return None


def _parse_consolidar(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_VALUES
    return value is True


class ConsultarEmpresaUseCase:
    """Orquestra validação, consulta externa e consolidação."""

    def __init__(self, client: CasaDosDadosClientProtocol) -> None:
        self._client = client

    async def execute(self, payload: Any) -> ConsultaEmpresaResponse:
        """Executa a consulta; sempre retorna uma resposta, nunca levanta."""
        try:
            response = await self._execute(payload)
        except Exception as exc:
            logger.exception("consulta_empresa_unexpected_error")
            response = responses.erro_interno(exc)
        return response

    async def _execute(self, payload: Any) -> ConsultaEmpresaResponse:
        if not isinstance(payload, dict):
            logger.info("consulta_rejeitada", extra={"campo": "body"})
            return responses.body_invalido()

        consulta_or_error = self.validate(payload)
        if not isinstance(consulta_or_error, ConsultaEmpresaRequest):
            return consulta_or_error
        consulta = consulta_or_error

        logger.info(
            "consulta_validada",
            extra={
                "total_cnaes": len(consulta.cnaes),
                "tipo_resultado": consulta.tipo_resultado,
                "limite_por_cnae": consulta.limite_por_cnae,
                "consolidar": consulta.consolidar,
            },
        )
        resultado = await self._client.consultar_por_cnae(
            consulta.api_key,
            consulta.cnaes,
            consulta.tipo_resultado,
            consulta.limite_por_cnae,
        )

        if not resultado.success:
            response = responses.falha_upstream(resultado, consulta)
        elif consulta.consolidar:
            relatorio = consolidar_resultados(
                resultado.data,
                consulta.cnaes,
                consulta.limite_por_cnae,
            )
            response = responses.ConsultaEmpresaResponse(200, relatorio.to_response())
        else:
            response = responses.consulta_repassada(resultado, consulta)

        record_consulta(len(consulta.cnaes), response.status_code, consulta.consolidar)
        return response

    @staticmethod
    def validate(payload: dict[str, Any]) -> ConsultaEmpresaRequest | ConsultaEmpresaResponse:
        """Aplica os gates de entrada na ordem: apiKey, CNAEs, limite, tipo.

        Returns:
            ConsultaEmpresaRequest normalizada ou a resposta 400 do
            primeiro gate que falhou.
        """
        api_key = payload.get("apiKey")
        if api_key is None or api_key == "":
            logger.info("consulta_rejeitada", extra={"campo": "apiKey", "motivo": "ausente"})
            return responses.api_key_ausente()
        if not validar_api_key(api_key):
            logger.info("consulta_rejeitada", extra={"campo": "apiKey", "motivo": "invalida"})
            return responses.api_key_invalida()

        cnae_input = _extract_cnaes(payload)
        if cnae_input is None:
            logger.info("consulta_rejeitada", extra={"campo": "cnaes", "motivo": "ausente"})
            return responses.cnae_ausente()

        validacao = validar_cnaes(cnae_input)
        if not validacao.todos_validos:
            logger.info(
                "consulta_rejeitada",
                extra={"campo": "cnaes", "total_invalidos": validacao.total_invalidos},
            )
            return responses.cnaes_invalidos(validacao)

        limite = validar_limite(payload.get("limite_por_cnae"))
        if not limite.valido:
            logger.info("consulta_rejeitada", extra={"campo": "limite_por_cnae"})
            return responses.limite_invalido(limite.erro or "")

        try:
            tipo_resultado = normalizar_tipo_resultado(payload.get("tipo_resultado"))
        except ValidationError as exc:
            logger.info("consulta_rejeitada", extra={"campo": exc.campo})
            return responses.tipo_resultado_invalido(str(exc))

        return ConsultaEmpresaRequest(
            api_key=api_key,
            cnaes=validacao.validos,
            tipo_resultado=tipo_resultado,
            limite_por_cnae=limite.limite if limite.limite is not None else 0,
            consolidar=_parse_consolidar(payload.get("consolidar")),
        )
