"""
Пользовательские исключения для счетов.
"""


class LedgerError(Exception):
    """Базовое исключение: бизнес-ошибка операции со счётом."""


class InsufficientFundsError(LedgerError):
    """Исключение: недостаточно средств для снятия."""


class WithdrawalLimitExceededError(LedgerError):
    """Исключение: исчерпан лимит снятий за период (только накопительный счёт)."""


class InvalidOperationError(LedgerError):
    """Исключение: некорректная операция (сумма не число или снятие неположительной суммы)."""


class AccountNotFoundError(LedgerError, KeyError):
    """Исключение: счёт с таким номером не найден."""

    def __str__(self) -> str:
        # KeyError по умолчанию оборачивает сообщение в кавычки
        return str(self.args[0]) if self.args else ""
