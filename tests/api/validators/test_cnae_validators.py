"""Testes para api/validators/cnae.

Cobre: validar_api_key, validar_cnae, validar_cnaes, validar_limite,
normalizar_tipo_resultado e constantes de limites.
"""

from __future__ import annotations

import pytest

from api.validators.cnae import (
    CNAE_DIGITS,
    DEFAULT_LIMIT_PER_CNAE,
    MAX_LIMIT_PER_CNAE,
    ValidationError,
    normalizar_cnae,
    normalizar_tipo_resultado,
    validar_api_key,
    validar_cnae,
    validar_cnaes,
    validar_limite,
)


class TestValidarApiKey:
    """Testes para validar_api_key."""

    def test_accepts_non_empty_string(self) -> None:
        assert validar_api_key("abc123") is True
        assert validar_api_key("  chave  ") is True

    @pytest.mark.parametrize("api_key", ["", "   ", "\t\n", None, 123, ["key"], True])
    def test_rejects_blank_or_non_string(self, api_key: object) -> None:
        assert validar_api_key(api_key) is False


class TestValidarCnae:
    """Testes para validar_cnae e normalizar_cnae."""

    @pytest.mark.parametrize("cnae", ["7112000", "7112-0/00", " 6201500 ", "62.01-5-00"])
    def test_seven_digits_after_stripping_is_valid(self, cnae: str) -> None:
        assert validar_cnae(cnae) is True

    @pytest.mark.parametrize("cnae", ["", "abc", "711200", "71120001", "7112-0/0", "a1b2c3d"])
    def test_other_digit_counts_are_invalid(self, cnae: str) -> None:
        assert validar_cnae(cnae) is False

    @pytest.mark.parametrize("length", [0, 1, 6, 8, 14])
    def test_only_length_seven_passes(self, length: int) -> None:
        assert validar_cnae("9" * length) is (length == CNAE_DIGITS)

    def test_integer_is_accepted_and_bool_is_not(self) -> None:
        assert validar_cnae(7112000) is True
        assert validar_cnae(True) is False
        assert validar_cnae(None) is False
        assert validar_cnae({"cnae": "7112000"}) is False

    def test_normalizar_cnae_strips_non_digits(self) -> None:
        assert normalizar_cnae("7112-0/00") == "7112000"
        assert normalizar_cnae(None) == ""


class TestValidarCnaes:
    """Testes para validar_cnaes."""

    def test_partitions_valid_and_invalid_preserving_order(self) -> None:
        result = validar_cnaes(["7112000", "abc", "6201500"])

        assert result.validos == ("7112000", "6201500")
        assert result.invalidos == ("abc",)
        assert result.todos_validos is False
        assert result.total_validos == 2
        assert result.total_invalidos == 1

    def test_single_code_is_wrapped(self) -> None:
        result = validar_cnaes("7112-0/00")

        assert result.validos == ("7112000",)
        assert result.invalidos == ()
        assert result.todos_validos is True

    def test_invalid_codes_keep_original_form(self) -> None:
        result = validar_cnaes(["71-12", 42])

        assert result.invalidos == ("71-12", 42)
        assert result.validos == ()

    def test_never_raises_on_garbage(self) -> None:
        result = validar_cnaes(None)

        assert result.todos_validos is False
        assert result.invalidos == (None,)


class TestValidarLimite:
    """Testes para validar_limite."""

    @pytest.mark.parametrize("limite", [None, ""])
    def test_absent_defaults_to_100(self, limite: object) -> None:
        result = validar_limite(limite)
        assert result.valido is True
        assert result.limite == DEFAULT_LIMIT_PER_CNAE == 100

    @pytest.mark.parametrize("limite", [0, 1, 100, 999, 1000])
    def test_range_is_accepted(self, limite: int) -> None:
        result = validar_limite(limite)
        assert result.valido is True
        assert result.limite == limite

    @pytest.mark.parametrize(("limite", "expected"), [("50", 50), (" 10 ", 10), (20.0, 20)])
    def test_integer_like_values_are_parsed(self, limite: object, expected: int) -> None:
        result = validar_limite(limite)
        assert result.valido is True
        assert result.limite == expected

    @pytest.mark.parametrize("limite", [-1, -100, "-5", 1.5, "abc", "10.5", True, [10]])
    def test_negative_or_non_integer_is_rejected(self, limite: object) -> None:
        result = validar_limite(limite)
        assert result.valido is False
        assert result.limite is None
        assert result.erro == "Limite deve ser um número inteiro maior ou igual a 0"

    @pytest.mark.parametrize("limite", [MAX_LIMIT_PER_CNAE + 1, 5000, "1001"])
    def test_above_maximum_is_rejected(self, limite: object) -> None:
        result = validar_limite(limite)
        assert result.valido is False
        assert result.erro == "Limite máximo é 1000 empresas por CNAE"


class TestNormalizarTipoResultado:
    """Testes para normalizar_tipo_resultado."""

    @pytest.mark.parametrize(
        ("tipo", "expected"),
        [("simples", "simple"), ("simple", "simple"), ("completo", "completo"), (None, "simple")],
    )
    def test_accepted_values_are_normalized(self, tipo: object, expected: str) -> None:
        assert normalizar_tipo_resultado(tipo) == expected

    @pytest.mark.parametrize("tipo", ["detalhado", "SIMPLES", 1, ["simples"]])
    def test_unknown_value_raises_validation_error(self, tipo: object) -> None:
        with pytest.raises(ValidationError) as exc_info:
            normalizar_tipo_resultado(tipo)
        assert exc_info.value.campo == "tipo_resultado"
