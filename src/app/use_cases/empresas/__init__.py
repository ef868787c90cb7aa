"""Use cases da consulta de empresas por CNAE."""

from app.use_cases.empresas._responses import ConsultaEmpresaResponse
from app.use_cases.empresas.consultar_empresa import ConsultarEmpresaUseCase

__all__ = [
    "ConsultaEmpresaResponse",
    "ConsultarEmpresaUseCase",
]
