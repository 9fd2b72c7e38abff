"""
Tests for engine configuration
"""
import pytest

from sabajs.config import DEFAULT_MAX_CALL_DEPTH, EngineConfig


def test_defaults():
    config = EngineConfig()
    assert config.max_steps is None
    assert config.max_call_depth == DEFAULT_MAX_CALL_DEPTH
    assert config.debug is False


def test_from_env_empty():
    assert EngineConfig.from_env({}) == EngineConfig()


def test_from_env_reads_values():
    config = EngineConfig.from_env({
        'SABAJS_MAX_STEPS': '1000',
        'SABAJS_MAX_CALL_DEPTH': '16',
        'SABAJS_DEBUG': '1',
    })
    assert config == EngineConfig(max_steps=1000, max_call_depth=16, debug=True)


@pytest.mark.parametrize("raw", ["", "0", "false", "FALSE"])
def test_debug_off_values(raw):
    assert EngineConfig.from_env({'SABAJS_DEBUG': raw}).debug is False


@pytest.mark.parametrize("raw", ["abc", "-3", "0"])
def test_invalid_numbers_raise(raw):
    with pytest.raises(ValueError, match="SABAJS_MAX_STEPS"):
        EngineConfig.from_env({'SABAJS_MAX_STEPS': raw})
