"""Tests for the environment-driven configuration."""

import logging

import pytest

from pyoresult._core._config import (
    DEFAULT_REPR_MAX_LENGTH,
    REPR_MAX_LENGTH_ENV,
    Config,
)


def test_default_when_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(REPR_MAX_LENGTH_ENV, raising=False)
    assert Config.from_env().repr_max_length == DEFAULT_REPR_MAX_LENGTH


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(REPR_MAX_LENGTH_ENV, "12")
    config = Config.from_env()
    assert config.repr_max_length == 12
    assert config.payload_repr("x" * 50) == "'xxxxxxxx..."


@pytest.mark.parametrize("raw", ["twelve", "0", "-3"])
def test_invalid_values_fall_back(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture, raw: str
) -> None:
    monkeypatch.setenv(REPR_MAX_LENGTH_ENV, raw)
    with caplog.at_level(logging.WARNING, logger="pyoresult"):
        config = Config.from_env()
    assert config.repr_max_length == DEFAULT_REPR_MAX_LENGTH
    assert REPR_MAX_LENGTH_ENV in caplog.text


def test_short_payloads_are_untouched() -> None:
    assert Config(repr_max_length=10).payload_repr(42) == "42"
