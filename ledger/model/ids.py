"""
Генерация номеров счетов.
Генератор — любая функция без аргументов, возвращающая новую уникальную строку.
"""
from __future__ import annotations

import itertools
import threading
import uuid
from typing import Callable

IdGenerator = Callable[[], str]


def uuid_account_number() -> str:
    """Номер счёта по умолчанию — полный UUID4."""
    return str(uuid.uuid4())


class SequentialIdGenerator:
    """Монотонный счётчик: ACC001, ACC002, ... Удобен в тестах."""

    def __init__(self, prefix: str = "ACC", width: int = 3, start: int = 1) -> None:
        self.prefix = prefix
        self.width = width
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            n = next(self._counter)
        return f"{self.prefix}{n:0{self.width}d}"
