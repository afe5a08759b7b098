"""Тесты для настроек и логирования."""
from __future__ import annotations

import json
import logging

import pytest

from ledger.config import LedgerConfig
from ledger.logging import JsonFormatter, get_logger, setup_logging


def test_config_defaults():
    cfg = LedgerConfig()
    assert cfg.max_withdrawals == 3
    assert cfg.currency_symbol == "$"
    assert cfg.log_format == "standard"


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("LEDGER_MAX_WITHDRAWALS", "5")
    monkeypatch.setenv("LEDGER_CURRENCY_SYMBOL", "₦")
    monkeypatch.setenv("LEDGER_LOG_LEVEL", "DEBUG")
    cfg = LedgerConfig.from_env()
    assert cfg.max_withdrawals == 5
    assert cfg.currency_symbol == "₦"
    assert cfg.log_level == "DEBUG"
    assert cfg.id_prefix == "ACC"


def test_config_rejects_zero_limit():
    with pytest.raises(ValueError):
        LedgerConfig(max_withdrawals=0)


def test_setup_logging_sets_level_and_single_handler():
    setup_logging("debug")
    setup_logging("warning")
    logger = logging.getLogger("ledger")
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
    # Вернём как было, чтобы не мешать другим тестам
    logger.setLevel(logging.NOTSET)
    logger.handlers.clear()


def test_config_configures_logging():
    LedgerConfig(log_level="ERROR", log_format="json").configure_logging()
    logger = logging.getLogger("ledger")
    assert logger.level == logging.ERROR
    assert isinstance(logger.handlers[0].formatter, JsonFormatter)
    logger.setLevel(logging.NOTSET)
    logger.handlers.clear()


def test_json_formatter():
    record = logging.LogRecord("ledger.test", logging.INFO, __file__, 1, "баланс %s", (10,), None)
    data = json.loads(JsonFormatter().format(record))
    assert data["level"] == "INFO"
    assert data["logger"] == "ledger.test"
    assert data["message"] == "баланс 10"


def test_get_logger():
    assert get_logger("ledger.x").name == "ledger.x"
