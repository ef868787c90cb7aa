"""Testes do composition root."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from api.connectors.casa_dos_dados import CasaDosDadosClient
from app.bootstrap import get_consultar_empresa_use_case
from app.use_cases.empresas import ConsultarEmpresaUseCase
from config.settings import get_casa_dos_dados_settings


@pytest.fixture(autouse=True)
def _clear_caches() -> Iterator[None]:
    get_consultar_empresa_use_case.cache_clear()
    get_casa_dos_dados_settings.cache_clear()
    yield
    get_consultar_empresa_use_case.cache_clear()
    get_casa_dos_dados_settings.cache_clear()


def test_use_case_is_wired_with_real_client() -> None:
    use_case = get_consultar_empresa_use_case()

    assert isinstance(use_case, ConsultarEmpresaUseCase)
    assert isinstance(use_case._client, CasaDosDadosClient)


def test_use_case_is_a_singleton() -> None:
    assert get_consultar_empresa_use_case() is get_consultar_empresa_use_case()


def test_factory_declares_use_case_return_type() -> None:
    annotation = get_consultar_empresa_use_case.__wrapped__.__annotations__["return"]
    assert annotation == "ConsultarEmpresaUseCase"
