"""Tests for calculator configuration."""

import pytest

from intcalc.config import DEFAULT_MAX_DEPTH, CalculatorConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("INTCALC_MAX_DEPTH", "INTCALC_LOG_LEVEL", "INTCALC_PROMPT"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = CalculatorConfig.from_env()
    assert config.max_depth == DEFAULT_MAX_DEPTH
    assert config.log_level == "WARNING"
    assert config.prompt == "> "


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("INTCALC_MAX_DEPTH", "50")
    monkeypatch.setenv("INTCALC_LOG_LEVEL", "debug")
    monkeypatch.setenv("INTCALC_PROMPT", ">>> ")

    config = CalculatorConfig.from_env()

    assert config.max_depth == 50
    assert config.log_level == "DEBUG"
    assert config.prompt == ">>> "


def test_blank_depth_uses_default(monkeypatch):
    monkeypatch.setenv("INTCALC_MAX_DEPTH", " ")
    assert CalculatorConfig.from_env().max_depth == DEFAULT_MAX_DEPTH


def test_invalid_depth(monkeypatch):
    monkeypatch.setenv("INTCALC_MAX_DEPTH", "lots")
    with pytest.raises(ValueError, match="INTCALC_MAX_DEPTH"):
        CalculatorConfig.from_env()


def test_depth_limit():
    assert CalculatorConfig(max_depth=10).depth_limit == 10
    assert CalculatorConfig(max_depth=0).depth_limit is None
    assert CalculatorConfig(max_depth=-1).depth_limit is None
