"""
CurrentAccount — текущий счёт без лимита на количество снятий.
"""
from __future__ import annotations

from ledger.exceptions.exceptions import InsufficientFundsError
from ledger.logging import get_logger
from ledger.model.abstract_account import AbstractAccount

logger = get_logger(__name__)


class CurrentAccount(AbstractAccount):
    """Текущий счёт. Снимать можно сколько угодно раз, но не больше остатка."""

    ACCOUNT_TYPE = "CurrentAccount"

    def withdraw(self, amount: float) -> float:
        value = self._withdrawal_amount(amount)
        with self._lock:
            if value > self._balance:
                raise self._reject(InsufficientFundsError(
                    f"Недостаточно средств. Текущий баланс: {self.currency_symbol}{self._balance:.2f}"
                ))
            self._balance -= value
            logger.info("Счёт %s: снято %.2f, баланс %.2f.", self._account_number, value, self._balance)
            return self._balance
