"""Tests for engine configuration and environment settings."""

import pytest

from config.engine import EngineConfig
from config.settings import Settings, get_settings


def test_default_engine_config():
    config = EngineConfig()

    assert config.word_bits == 64
    assert config.mask == 2 ** 64 - 1
    assert not config.reserve_zero_id
    assert not config.strict_tree


def test_invalid_word_bits_rejected():
    with pytest.raises(ValueError):
        EngineConfig(word_bits=0)


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("CITYTRAFFIC_WORD_BITS", "16")
    monkeypatch.setenv("CITYTRAFFIC_STRICT_TREE", "true")

    config = Settings().engine_config()

    assert config.word_bits == 16
    assert config.mask == 0xFFFF
    assert config.strict_tree


def test_get_settings_is_cached():
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
