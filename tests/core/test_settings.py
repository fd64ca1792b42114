import logging

from wordharvest.core.config.settings import _int_env


def test_int_env_reads_integer(monkeypatch):
    monkeypatch.setenv("WORDHARVEST_WORKERS", "4")
    assert _int_env("WORDHARVEST_WORKERS", 1) == 4


def test_int_env_uses_default_when_unset(monkeypatch):
    monkeypatch.delenv("WORDHARVEST_WORKERS", raising=False)
    assert _int_env("WORDHARVEST_WORKERS", 1) == 1


def test_int_env_ignores_malformed_value(monkeypatch, caplog):
    """
    A bad environment value must not break importing the package.
    """
    monkeypatch.setenv("WORDHARVEST_MIN_WORD_LENGTH", "three")

    with caplog.at_level(logging.WARNING):
        assert _int_env("WORDHARVEST_MIN_WORD_LENGTH", 1) == 1

    assert "WORDHARVEST_MIN_WORD_LENGTH" in caplog.text


def test_configure_logging_annotations():
    from typing import Optional, get_type_hints
    from wordharvest.core.logging_setup import configure_logging

    assert get_type_hints(configure_logging)["level"] == Optional[str]
