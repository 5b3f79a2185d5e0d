from __future__ import annotations

import logging

import pytest

from qrng_cli import logging_


def test_resolve_level_verbose_wins(monkeypatch) -> None:
    monkeypatch.setenv(logging_.ENV_LOG_LEVEL, "ERROR")
    assert logging_.resolve_level(True) == logging.DEBUG


@pytest.mark.parametrize(
    ("value", "expected"),
    [("info", logging.INFO), (" error ", logging.ERROR), ("bogus", logging.WARNING), ("", logging.WARNING)],
)
def test_resolve_level_from_env(monkeypatch, value: str, expected: int) -> None:
    monkeypatch.setenv(logging_.ENV_LOG_LEVEL, value)
    assert logging_.resolve_level(False) == expected


def test_setup_logging_tunes_library_and_httpx_loggers(monkeypatch) -> None:
    monkeypatch.setenv(logging_.ENV_LOG_LEVEL, "info")
    logging_.setup_logging(False)
    assert logging.getLogger("qrng_client").level == logging.INFO
    assert logging.getLogger("httpx").level == logging.WARNING

    logging_.setup_logging(True)
    assert logging.getLogger("qrng_client").level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.DEBUG
