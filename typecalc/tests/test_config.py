"""
Tests for session settings.
"""
import pytest

from typecalc.config import MAX_LEXEME_LENGTH, Settings


def test_defaults():
    settings = Settings.from_env({})
    assert settings.trace is True
    assert settings.max_lexeme_length == MAX_LEXEME_LENGTH == 49
    assert settings.initial_capacity == 8
    assert settings.max_capacity is None


@pytest.mark.parametrize("value", ["0", "false", "OFF", "no"])
def test_trace_can_be_disabled(value):
    assert Settings.from_env({"TYPECALC_TRACE": value}).trace is False


def test_trace_enabled_values():
    assert Settings.from_env({"TYPECALC_TRACE": "1"}).trace is True


def test_numeric_overrides():
    settings = Settings.from_env({"TYPECALC_MAX_LENGTH": "10", "TYPECALC_MAX_SYMBOLS": "4"})
    assert settings.max_lexeme_length == 10
    assert settings.max_capacity == 4


@pytest.mark.parametrize("env", [
    {"TYPECALC_MAX_LENGTH": "0"},
    {"TYPECALC_MAX_LENGTH": "ten"},
    {"TYPECALC_MAX_SYMBOLS": "-1"},
])
def test_invalid_values(env):
    with pytest.raises(ValueError):
        Settings.from_env(env)


def test_with_overrides_skips_none():
    settings = Settings(trace=False).with_overrides(trace=None, max_lexeme_length=5)
    assert settings.trace is False
    assert settings.max_lexeme_length == 5


def test_uses_process_environment(monkeypatch):
    monkeypatch.setenv("TYPECALC_TRACE", "off")
    assert Settings.from_env().trace is False
