"""Tests for environment overrides of the generation limits."""

import importlib

import pytest

from passgen import CharacterClass, GenerationRequest, InvalidRequest, config, generate_password


@pytest.fixture
def reload_config(monkeypatch):
    for name in ("PASSGEN_MAX_LENGTH", "PASSGEN_DEFAULT_LENGTH", "PASSGEN_MAX_ATTEMPTS"):
        monkeypatch.delenv(name, raising=False)
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(reload_config):
    reload_config()
    assert config.MIN_LENGTH == 4
    assert config.MAX_LENGTH == 128
    assert config.DEFAULT_LENGTH == 16
    assert config.MAX_ATTEMPTS == 1000


def test_max_length_override(monkeypatch, reload_config):
    monkeypatch.setenv("PASSGEN_MAX_LENGTH", "12")
    monkeypatch.setenv("PASSGEN_DEFAULT_LENGTH", "10")
    reload_config()
    assert len(generate_password()) == 10
    with pytest.raises(InvalidRequest, match="between 4 and 12"):
        GenerationRequest(13, {CharacterClass.DIGIT})


def test_blank_value_uses_default(monkeypatch, reload_config):
    monkeypatch.setenv("PASSGEN_MAX_ATTEMPTS", "  ")
    reload_config()
    assert config.MAX_ATTEMPTS == 1000


@pytest.mark.parametrize("env, value, message", [
    ("PASSGEN_MAX_LENGTH", "lots", "must be an integer"),
    ("PASSGEN_MAX_LENGTH", "3", "at least 4"),
    ("PASSGEN_DEFAULT_LENGTH", "200", "between 4 and 128"),
    ("PASSGEN_MAX_ATTEMPTS", "0", "at least 1"),
])
def test_invalid_override(monkeypatch, reload_config, env, value, message):
    monkeypatch.setenv(env, value)
    with pytest.raises(ValueError, match=message):
        reload_config()
