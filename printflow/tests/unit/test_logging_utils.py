import logging

import pytest

from printflow.utils import logging as logging_utils


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("PRINTFLOW_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PRINTFLOW_DEBUG", raising=False)
    root = logging.getLogger()
    previous = root.level
    yield
    root.setLevel(previous)


def test_apply_preferences_without_env():
    assert logging_utils.apply_preferences(True) == logging.DEBUG
    assert logging_utils.apply_preferences(False) == logging.INFO
    assert logging.getLogger().level == logging.INFO


def test_env_level_overrides_preferences(monkeypatch):
    monkeypatch.setenv("PRINTFLOW_LOG_LEVEL", "warning")

    assert logging_utils.apply_preferences(True) == logging.WARNING
    assert logging_utils.env_requests_debug() is False


def test_numeric_env_level(monkeypatch):
    monkeypatch.setenv("PRINTFLOW_LOG_LEVEL", " 30 ")

    assert logging_utils.configure_root() == logging.WARNING


@pytest.mark.parametrize("raw", ["²", "loud", "Level 5"])
def test_unparseable_env_level_falls_back_to_info(monkeypatch, raw):
    monkeypatch.setenv("PRINTFLOW_LOG_LEVEL", raw)

    assert logging_utils.configure_root(logging.ERROR) == logging.INFO
    assert logging.getLogger().level == logging.INFO


def test_debug_flag_requests_debug(monkeypatch):
    monkeypatch.setenv("PRINTFLOW_DEBUG", "on")

    assert logging_utils.env_requests_debug() is True
    assert logging_utils.configure_root(logging.ERROR) == logging.DEBUG


def test_no_env_uses_default_level():
    assert logging_utils.env_level() is None
    assert logging_utils.configure_root(logging.WARNING) == logging.WARNING
