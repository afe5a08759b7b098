from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, TextIO

from ledger.config import LedgerConfig
from ledger.exceptions.exceptions import AccountNotFoundError
from ledger.logging import get_logger
from ledger.model.abstract_account import AbstractAccount, WithdrawalResult
from ledger.model.current_account import CurrentAccount
from ledger.model.ids import IdGenerator, SequentialIdGenerator
from ledger.model.savings_account import SavingsAccount
from ledger.model.statement import MonthlyStatement

logger = get_logger(__name__)


# Допустимые типы счетов и соответствующие классы
ACCOUNT_TYPES = {
    "savings": SavingsAccount,
    "current": CurrentAccount,
}


@dataclass
class Bank:
    """
    - accounts: словарь счетов по номеру (в порядке открытия)
    - id_generator: откуда брать номера новых счетов (по умолчанию счётчик с префиксом config.id_prefix)
    - config: лимит снятий и символ валюты для новых счетов
    """
    name: str = "MyBank"
    accounts: Dict[str, AbstractAccount] = field(default_factory=dict)
    id_generator: Optional[IdGenerator] = None
    config: LedgerConfig = field(default_factory=LedgerConfig)

    def __post_init__(self) -> None:
        if self.id_generator is None:
            self.id_generator = SequentialIdGenerator(prefix=self.config.id_prefix)

    # --- Счета ---
    def open_account(
        self,
        account_type: str = "current",
        initial_balance: float = 0.0,
        account_number: Optional[str] = None,
    ) -> str:
        """Открыть счёт указанного типа. Возвращает номер счёта.
        account_type: savings|current
        """
        cls = ACCOUNT_TYPES.get(account_type.lower())
        if not cls:
            raise ValueError("Неизвестный тип счёта")
        if cls is SavingsAccount:
            account: AbstractAccount = SavingsAccount(
                account_number,
                initial_balance,
                id_generator=self.id_generator,
                currency_symbol=self.config.currency_symbol,
                max_withdrawals=self.config.max_withdrawals,
            )
        else:
            account = CurrentAccount(
                account_number,
                initial_balance,
                id_generator=self.id_generator,
                currency_symbol=self.config.currency_symbol,
            )

        # Номер мог прийти и из генератора — проверяем уже готовый
        if account.account_number in self.accounts:
            raise ValueError(f"Счёт {account.account_number} уже есть")
        self.accounts[account.account_number] = account
        logger.info("%s: открыт %s %s, баланс %.2f.",
                    self.name, account.ACCOUNT_TYPE, account.account_number, account.balance)
        return account.account_number

    def get_account(self, account_number: str) -> AbstractAccount:
        acc = self.accounts.get(account_number)
        if acc is None:
            raise AccountNotFoundError(f"Счёт {account_number} не найден")
        return acc

    # --- Операции ---
    def deposit(self, account_number: str, amount: float) -> bool:
        return self.get_account(account_number).deposit(amount)

    def withdraw(self, account_number: str, amount: float) -> float:
        return self.get_account(account_number).withdraw(amount)

    def try_withdraw(self, account_number: str, amount: float) -> WithdrawalResult:
        return self.get_account(account_number).try_withdraw(amount)

    def run_month_end(self, out: Optional[TextIO] = None) -> List[MonthlyStatement]:
        """Выписки по всем счетам. Для накопительных это ещё и начало нового периода."""
        statements: List[MonthlyStatement] = []
        for acc in self.accounts.values():
            statements.append(acc.print_monthly_statement(out))
        return statements

    def close_month(self) -> List[MonthlyStatement]:
        """Закрыть период по всем счетам без печати."""
        return [acc.close_period() for acc in self.accounts.values()]

    # --- Аналитика ---
    def get_total_balance(self) -> float:
        """Общий баланс по всем счетам банка."""
        return sum(acc.balance for acc in self.accounts.values())
