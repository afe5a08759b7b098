"""Настройки ledger."""
from __future__ import annotations

import os
from dataclasses import dataclass

from ledger.logging import setup_logging


@dataclass
class LedgerConfig:
    """Основные настройки: лимит снятий, символ валюты, префикс номеров, логирование."""

    max_withdrawals: int = 3
    currency_symbol: str = "$"
    id_prefix: str = "ACC"
    log_level: str = "INFO"
    log_format: str = "standard"

    def __post_init__(self) -> None:
        if int(self.max_withdrawals) < 1:
            raise ValueError("max_withdrawals должен быть не меньше 1.")
        self.max_withdrawals = int(self.max_withdrawals)

    def configure_logging(self) -> None:
        """Настроить логирование пакета по log_level и log_format."""
        setup_logging(self.log_level, self.log_format)

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Создать настройки из переменных окружения LEDGER_*."""
        return cls(
            max_withdrawals=int(os.getenv("LEDGER_MAX_WITHDRAWALS", "3")),
            currency_symbol=os.getenv("LEDGER_CURRENCY_SYMBOL", "$"),
            id_prefix=os.getenv("LEDGER_ID_PREFIX", "ACC"),
            log_level=os.getenv("LEDGER_LOG_LEVEL", "INFO"),
            log_format=os.getenv("LEDGER_LOG_FORMAT", "standard"),
        )
