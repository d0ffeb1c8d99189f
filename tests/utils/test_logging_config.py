import logging

import pytest

from pngme.utils import LOG_LEVEL_ENV, configure_logging


@pytest.fixture(autouse=True)
def _restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def test_explicit_level_wins(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "ERROR")
    assert configure_logging("debug") == logging.DEBUG
    assert logging.getLogger().level == logging.DEBUG


def test_environment_level(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "info")
    assert configure_logging() == logging.INFO


def test_default_and_unknown_levels(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    assert configure_logging() == logging.WARNING
    assert configure_logging("chatty") == logging.WARNING
    assert configure_logging("basic_format") == logging.WARNING
