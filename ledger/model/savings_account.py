"""
SavingsAccount — накопительный счёт с лимитом снятий за период.
"""
from __future__ import annotations

from typing import Any, Dict

from ledger.exceptions.exceptions import InsufficientFundsError, WithdrawalLimitExceededError
from ledger.logging import get_logger
from ledger.model.abstract_account import AbstractAccount
from ledger.model.ids import IdGenerator
from ledger.model.statement import MonthlyStatement

logger = get_logger(__name__)


class SavingsAccount(AbstractAccount):
    """Накопительный счёт.
    - не больше max_withdrawals снятий за период
    - выписка закрывает период и сбрасывает withdrawal_count
    """

    ACCOUNT_TYPE = "SavingsAccount"
    ROLLOVER_NOTICE = "-> Счётчик снятий сброшен на новый период."
    MAX_WITHDRAWALS = 3

    def __init__(
        self,
        account_number: str | None = None,
        balance: float = 0.0,
        *,
        id_generator: IdGenerator | None = None,
        currency_symbol: str = "$",
        max_withdrawals: int | None = None,
    ) -> None:
        super().__init__(account_number, balance, id_generator=id_generator, currency_symbol=currency_symbol)
        self.max_withdrawals = self.MAX_WITHDRAWALS if max_withdrawals is None else int(max_withdrawals)
        if self.max_withdrawals < 1:
            raise ValueError("max_withdrawals должен быть не меньше 1.")
        self._withdrawal_count = 0

    @property
    def withdrawal_count(self) -> int:
        return self._withdrawal_count

    @property
    def withdrawals_left(self) -> int:
        return self.max_withdrawals - self._withdrawal_count

    def withdraw(self, amount: float) -> float:
        """Снятие. Сначала лимит, потом остаток — порядок важен."""
        value = self._withdrawal_amount(amount)
        with self._lock:
            if self._withdrawal_count >= self.max_withdrawals:
                raise self._reject(WithdrawalLimitExceededError(
                    f"Исчерпан лимит снятий: {self.max_withdrawals} за период."
                ))
            if value > self._balance:
                raise self._reject(InsufficientFundsError(
                    f"Недостаточно средств. Текущий баланс: {self.currency_symbol}{self._balance:.2f}"
                ))
            self._balance -= value
            self._withdrawal_count += 1
            logger.info("Счёт %s: снято %.2f, баланс %.2f (%d/%d снятий за период).",
                        self._account_number, value, self._balance,
                        self._withdrawal_count, self.max_withdrawals)
            return self._balance

    def statement(self) -> MonthlyStatement:
        return MonthlyStatement(
            account_number=self._account_number,
            account_type=self.ACCOUNT_TYPE,
            ending_balance=self._balance,
            period=self._period,
            withdrawal_count=self._withdrawal_count,
            max_withdrawals=self.max_withdrawals,
        )

    def roll_period(self) -> None:
        """Сброс счётчика снятий на новый период."""
        self._withdrawal_count = 0
        logger.info("Счёт %s: счётчик снятий сброшен на новый период.", self._account_number)

    def get_account_info(self) -> Dict[str, Any]:
        info = super().get_account_info()
        info.update({
            "withdrawal_count": self._withdrawal_count,
            "max_withdrawals": self.max_withdrawals,
        })
        return info

    def __str__(self) -> str:
        base = super().__str__()
        return f"{base} | снятий {self._withdrawal_count}/{self.max_withdrawals}"
