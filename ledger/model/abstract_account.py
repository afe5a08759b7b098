"""
Абстрактная модель счёта: номер, баланс, пополнение, снятие и выписка.
"""
from __future__ import annotations

import math
import sys
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional, TextIO

from ledger.exceptions.exceptions import InvalidOperationError, LedgerError
from ledger.logging import get_logger
from ledger.model.ids import IdGenerator, uuid_account_number
from ledger.model.statement import MonthlyStatement

logger = get_logger(__name__)


@dataclass(frozen=True)
class WithdrawalResult:
    """Результат снятия без исключений: ok + баланс, либо ошибка."""
    ok: bool
    balance: float
    error: Optional[LedgerError] = None


class AbstractAccount(ABC):
    """
    Абстрактный счёт.
    Номер неизменяем, баланс меняется только успешным deposit/withdraw.
    """

    # Название типа счёта для выписки и отчётов
    ACCOUNT_TYPE = "Account"
    # Строка после выписки, если закрытие периода что-то сбросило
    ROLLOVER_NOTICE: Optional[str] = None

    def __init__(
        self,
        account_number: str | None = None,
        balance: float = 0.0,
        *,
        id_generator: IdGenerator | None = None,
        currency_symbol: str = "$",
    ) -> None:
        # Номер не передали — берём из генератора (по умолчанию UUID)
        if not account_number:
            account_number = (id_generator or uuid_account_number)()
        self._account_number: str = str(account_number)
        # Начальный баланс >= 0
        self._balance: float = self._to_amount(balance) if balance is not None else 0.0
        if self._balance < 0:
            self._balance = 0.0
        self.currency_symbol = currency_symbol
        # Номер текущего периода (между двумя выписками)
        self._period: int = 1
        # Операции над одним счётом выполняются последовательно
        self._lock = threading.RLock()

    # --- Доступ к полям ---
    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def balance(self) -> float:
        return self._balance

    @property
    def period(self) -> int:
        return self._period

    def get_account_number(self) -> str:
        return self._account_number

    def get_balance(self) -> float:
        return self._balance

    # Проверка, что сумма — конечное число (строки вида "100" тоже принимаем)
    @staticmethod
    def _to_amount(amount: Any) -> float:
        if isinstance(amount, bool):
            raise InvalidOperationError("Сумма должна быть числом.")
        try:
            value = float(amount)
        except (TypeError, ValueError):
            raise InvalidOperationError("Сумма должна быть числом.")
        if not math.isfinite(value):
            raise InvalidOperationError("Сумма должна быть конечным числом.")
        return value

    # Сумма снятия — положительное число
    @classmethod
    def _withdrawal_amount(cls, amount: Any) -> float:
        value = cls._to_amount(amount)
        if value <= 0:
            raise InvalidOperationError("Сумма снятия должна быть положительной.")
        return value

    # --- Операции ---
    def deposit(self, amount: float) -> bool:
        """Пополнение. Неположительная сумма — не ошибка, просто отказ (False)."""
        value = self._to_amount(amount)
        if value <= 0:
            logger.warning("Счёт %s: сумма пополнения должна быть положительной (%s).",
                           self._account_number, value)
            return False
        with self._lock:
            self._balance += value
            logger.info("Счёт %s: пополнение %.2f, баланс %.2f.",
                        self._account_number, value, self._balance)
        return True

    @abstractmethod
    def withdraw(self, amount: float) -> float:
        """Снятие. Возвращает новый баланс, при ошибке бросает LedgerError."""

    def try_withdraw(self, amount: float) -> WithdrawalResult:
        """Снятие без исключений: ошибку возвращаем в результате."""
        try:
            balance = self.withdraw(amount)
        except LedgerError as exc:
            return WithdrawalResult(ok=False, balance=self._balance, error=exc)
        return WithdrawalResult(ok=True, balance=balance)

    def _reject(self, exc: LedgerError) -> LedgerError:
        logger.warning("Счёт %s: снятие отклонено: %s", self._account_number, exc)
        return exc

    # --- Выписка ---
    def statement(self) -> MonthlyStatement:
        """Снимок текущего периода. Состояние не меняет."""
        return MonthlyStatement(
            account_number=self._account_number,
            account_type=self.ACCOUNT_TYPE,
            ending_balance=self._balance,
            period=self._period,
        )

    def roll_period(self) -> None:
        """Переход к следующему периоду. В базовом счёте сбрасывать нечего."""

    def close_period(self) -> MonthlyStatement:
        """Закрыть период без печати: снимок, затем сброс. Возвращает снимок."""
        with self._lock:
            snapshot = self.statement()
            self.roll_period()
            self._period += 1
        return snapshot

    def print_monthly_statement(self, out: Optional[TextIO] = None) -> MonthlyStatement:
        """Печатает выписку и закрывает период.
        Для накопительного счёта это ещё и сброс счётчика снятий.
        """
        stream = out or sys.stdout
        with self._lock:
            snapshot = self.close_period()
            print(snapshot.render(self.currency_symbol), file=stream)
            if self.ROLLOVER_NOTICE:
                print(self.ROLLOVER_NOTICE, file=stream)
        return snapshot

    def get_account_info(self) -> Dict[str, Any]:
        """Словарь с информацией о счёте."""
        return {
            "account_number": self._account_number,
            "type": self.ACCOUNT_TYPE,
            "balance": self._balance,
            "period": self._period,
        }

    def __str__(self) -> str:
        last4 = self._account_number[-4:]
        return f"{self.ACCOUNT_TYPE} | ****{last4} | {self.currency_symbol}{self._balance:.2f}"
