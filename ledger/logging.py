"""Настройка логирования для ledger."""
from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict


def setup_logging(level: str = "INFO", format_type: str = "standard") -> None:
    """Настроить логгер пакета ledger.

    level — DEBUG, INFO, WARNING, ERROR, CRITICAL.
    format_type — "standard" или "json".
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    package_logger = logging.getLogger("ledger")
    package_logger.setLevel(log_level)

    # Убираем старые обработчики, чтобы не дублировать вывод
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    # Шум от matplotlib не нужен
    logging.getLogger("matplotlib").setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """Вывод записей лога в JSON, одна запись — одна строка."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, ensure_ascii=False)


def get_logger(name: str) -> logging.Logger:
    """Логгер по имени (обычно __name__)."""
    return logging.getLogger(name)
