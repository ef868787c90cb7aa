"""Testes para config.settings (base e Casa dos Dados)."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from config.settings import (
    CASA_DOS_DADOS_API_URL,
    DEFAULT_PORT,
    BaseSettings,
    CasaDosDadosSettings,
    get_base_settings,
    get_casa_dos_dados_settings,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    get_base_settings.cache_clear()
    get_casa_dos_dados_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_casa_dos_dados_settings.cache_clear()


class TestBaseSettings:
    """Testes para BaseSettings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for var in ("PORT", "ENVIRONMENT", "HOST", "LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)

        settings = get_base_settings()

        assert settings.port == DEFAULT_PORT == 3000
        assert settings.host == "0.0.0.0"
        assert settings.is_development is True
        assert settings.validate() == []

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("ENVIRONMENT", "prod")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = get_base_settings()

        assert settings.port == 8080
        assert settings.is_production is True
        assert settings.log_level == "DEBUG"

    def test_invalid_port_is_reported(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "abc")

        errors = get_base_settings().validate()

        assert any("PORT" in error for error in errors)

    def test_invalid_log_level_is_reported(self) -> None:
        errors = BaseSettings(log_level="VERBOSE").validate()
        assert errors == ["LOG_LEVEL inválido: VERBOSE"]


class TestCasaDosDadosSettings:
    """Testes para CasaDosDadosSettings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CASA_DOS_DADOS_API_URL", raising=False)
        monkeypatch.delenv("CASA_DOS_DADOS_TIMEOUT_SECONDS", raising=False)

        settings = get_casa_dos_dados_settings()

        assert settings.api_url == CASA_DOS_DADOS_API_URL
        assert settings.api_url == "https://api.casadosdados.com.br/v5/cnpj/pesquisa"
        assert settings.request_timeout_seconds == 60.0
        assert settings.validate() == []

    @pytest.mark.parametrize("timeout", ["10", "61", "abc"])
    def test_timeout_outside_range_is_reported(
        self, monkeypatch: pytest.MonkeyPatch, timeout: str
    ) -> None:
        monkeypatch.setenv("CASA_DOS_DADOS_TIMEOUT_SECONDS", timeout)

        errors = get_casa_dos_dados_settings().validate()

        assert len(errors) == 1
        assert "CASA_DOS_DADOS_TIMEOUT_SECONDS" in errors[0]

    def test_invalid_url_is_reported(self) -> None:
        errors = CasaDosDadosSettings(api_url="ftp://example").validate()
        assert errors == ["CASA_DOS_DADOS_API_URL deve ser uma URL http(s)"]
