from __future__ import annotations

import logging

import pytest

from sellerdesk.utils import logging as logging_utils


@pytest.fixture(autouse=True)
def _restore_root_level(monkeypatch):
    monkeypatch.delenv(logging_utils.LEVEL_ENV, raising=False)
    monkeypatch.delenv(logging_utils.DEBUG_ENV, raising=False)
    root = logging.getLogger()
    previous = root.level
    yield
    root.setLevel(previous)


def test_debug_preference_toggles_root_level() -> None:
    assert logging_utils.apply_preferences(True) == logging.DEBUG
    assert logging.getLogger().level == logging.DEBUG

    assert logging_utils.apply_preferences(False) == logging.INFO
    assert logging.getLogger().level == logging.INFO


def test_explicit_env_level_wins_over_preference(monkeypatch) -> None:
    monkeypatch.setenv(logging_utils.LEVEL_ENV, "warning")

    assert logging_utils.apply_preferences(True) == logging.WARNING


def test_debug_env_flag_wins_over_preference(monkeypatch) -> None:
    monkeypatch.setenv(logging_utils.DEBUG_ENV, "yes")

    assert logging_utils.apply_preferences(False) == logging.DEBUG


@pytest.mark.parametrize(
    "value, expected",
    [("debug", logging.DEBUG), ("30", 30), (" ", logging.INFO), ("nonsense", logging.INFO), (15, 15)],
)
def test_parse_level(value, expected) -> None:
    assert logging_utils.parse_level(value) == expected


def test_configure_root_uses_env_over_default(monkeypatch) -> None:
    monkeypatch.setenv(logging_utils.LEVEL_ENV, "ERROR")

    assert logging_utils.configure_root(logging.DEBUG) == logging.ERROR
    assert logging_utils.level_name(logging.ERROR) == "ERROR"
