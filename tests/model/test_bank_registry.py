"""Тесты для реестра счетов Bank."""
from __future__ import annotations

import io

import pytest

from ledger.config import LedgerConfig
from ledger.model.bank import Bank
from ledger.model.current_account import CurrentAccount
from ledger.model.ids import SequentialIdGenerator
from ledger.model.savings_account import SavingsAccount
from ledger.exceptions.exceptions import AccountNotFoundError, WithdrawalLimitExceededError


@pytest.fixture()
def bank() -> Bank:
    return Bank(name="TestBank", id_generator=SequentialIdGenerator())


def test_open_accounts_of_both_types(bank: Bank):
    s = bank.open_account("savings", initial_balance=5000)
    c = bank.open_account("Current", initial_balance=10000)
    assert (s, c) == ("ACC001", "ACC002")
    assert isinstance(bank.get_account(s), SavingsAccount)
    assert isinstance(bank.get_account(c), CurrentAccount)
    assert bank.get_total_balance() == 15000


def test_open_account_with_explicit_number(bank: Bank):
    number = bank.open_account("savings", account_number="SAV001")
    assert number == "SAV001"
    with pytest.raises(ValueError):
        bank.open_account("current", account_number="SAV001")


def test_unknown_account_type(bank: Bank):
    with pytest.raises(ValueError):
        bank.open_account("premium")


def test_missing_account(bank: Bank):
    with pytest.raises(AccountNotFoundError):
        bank.get_account("nope")
    # Это ещё и KeyError — как у обычного словаря
    with pytest.raises(KeyError):
        bank.withdraw("nope", 1)


def test_config_is_applied_to_new_accounts():
    bank = Bank(id_generator=SequentialIdGenerator(), config=LedgerConfig(max_withdrawals=2, currency_symbol="₦"))
    number = bank.open_account("savings", initial_balance=100)
    bank.withdraw(number, 1)
    bank.withdraw(number, 1)
    with pytest.raises(WithdrawalLimitExceededError):
        bank.withdraw(number, 1)
    assert "₦98.00" in str(bank.get_account(number))


def test_delegated_operations(bank: Bank):
    number = bank.open_account("current", initial_balance=10)
    assert bank.deposit(number, 5) is True
    assert bank.deposit(number, 0) is False
    assert bank.withdraw(number, 3) == 12
    assert bank.try_withdraw(number, 100).ok is False


def test_run_month_end_prints_all_and_rolls_savings(bank: Bank):
    s = bank.open_account("savings", initial_balance=100)
    c = bank.open_account("current", initial_balance=100)
    for _ in range(3):
        bank.withdraw(s, 1)
    out = io.StringIO()
    statements = bank.run_month_end(out)
    assert [st.account_number for st in statements] == [s, c]
    text = out.getvalue()
    # Выписки в порядке открытия счетов
    assert text.index(s) < text.index(c)
    assert bank.get_account(s).withdrawal_count == 0
    assert bank.withdraw(s, 1) == 96


def test_generated_number_never_replaces_existing_account(bank: Bank):
    bank.open_account("savings", initial_balance=500, account_number="ACC001")
    # Генератор выдаёт ACC001 — такой счёт уже есть
    with pytest.raises(ValueError):
        bank.open_account("current", initial_balance=1)
    assert len(bank.accounts) == 1
    assert bank.get_account("ACC001").get_balance() == 500
    # Следующий номер из генератора свободен
    assert bank.open_account("current", initial_balance=1) == "ACC002"
    assert bank.get_total_balance() == 501


def test_default_generator_uses_config_prefix():
    bank = Bank(config=LedgerConfig(id_prefix="SAV"))
    assert bank.open_account("savings") == "SAV001"
    assert bank.open_account("current") == "SAV002"


def test_close_month_is_silent(bank: Bank, capsys):
    s = bank.open_account("savings", initial_balance=100)
    bank.withdraw(s, 1)
    statements = bank.close_month()
    assert capsys.readouterr().out == ""
    assert statements[0].withdrawal_count == 1
    assert bank.get_account(s).withdrawal_count == 0
