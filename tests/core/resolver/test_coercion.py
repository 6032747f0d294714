# tests/core/resolver/test_coercion.py
"""
Testes das regras de coerção permissiva.

Os testes asseguram que:
- valores nativos do tipo alvo passam sem alteração
- strings são interpretadas com sintaxe amigável a shell
- qualquer falha devolve o default, sem exceção
- o limite do float (string sem parte fracionária) é preservado
"""

import pytest

from atlas_appconfig.core.resolver.coercion import to_boolean, to_float, to_integer


@pytest.mark.parametrize("text", ["0", "false", "no", "off", "disabled", "FALSE", "Off"])
def test_boolean_false_words(text):
    assert to_boolean(text, default=True) is False


@pytest.mark.parametrize("text", ["1", "true", "yes", "on", "enabled", "YES", "Enabled"])
def test_boolean_true_words(text):
    assert to_boolean(text, default=False) is True


def test_boolean_native_and_fallbacks():
    assert to_boolean(True) is True
    assert to_boolean(False, default=True) is False
    assert to_boolean("maybe", default=False) is False
    assert to_boolean("maybe") is None
    assert to_boolean(" yes", default=None) is None
    assert to_boolean(1, default="d") == "d"


def test_integer_prefix_parse():
    assert to_integer("42abc") == 42
    assert to_integer("-7") == -7
    assert to_integer("+3") == 3
    assert to_integer("12.9") == 12


def test_integer_native_and_fallbacks():
    assert to_integer(5) == 5
    assert to_integer("abc", default=7) == 7
    assert to_integer(" 42", default=0) == 0
    assert to_integer(True, default=9) == 9
    assert to_integer(4.0, default=1) == 1
    assert to_integer("", default=2) == 2


def test_integer_ignores_non_ascii_digits():
    assert to_integer("٤٢", default=-1) == -1


def test_float_prefix_parse():
    assert to_float("0.5") == 0.5
    assert to_float("-1.25rest") == -1.25
    assert to_float("1.5e3") == 1500.0
    assert to_float("1.5e") == 1.5


def test_float_requires_fractional_part():
    assert to_float("5", default=2.5) == 2.5
    assert to_float("5.", default=2.5) == 2.5
    assert to_float(".5", default=2.5) == 2.5
    assert to_float("1e3", default=2.5) == 2.5


def test_float_native_and_fallbacks():
    assert to_float(0.25) == 0.25
    assert to_float(3, default=1.0) == 1.0
    assert to_float("nan", default=0.0) == 0.0
    assert to_float(None) is None


def test_integer_prefix_beyond_interpreter_digit_limit_returns_default():
    huge = "9" * 5000 + "x"
    assert to_integer(huge, default=7) == 7
