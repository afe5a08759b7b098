"""
Отчёты по выпискам.

StatementReport собирает выписки по периодам, строит сводки,
выгружает их в JSON/CSV и рисует график движения баланса.
"""
from __future__ import annotations

import csv
import json
import os
from typing import Any, Dict, Iterable, List, Optional

from matplotlib.figure import Figure

from ledger.model.bank import Bank
from ledger.model.savings_account import SavingsAccount
from ledger.model.statement import MonthlyStatement

# Колонки CSV совпадают с ключами MonthlyStatement.to_dict()
STATEMENT_COLUMNS = [
    "account_number",
    "account_type",
    "period",
    "ending_balance",
    "withdrawal_count",
    "max_withdrawals",
    "issued_at",
]


class StatementReport:
    """Построитель отчётов по выпискам банка."""

    def __init__(self, bank: Bank) -> None:
        self.bank = bank
        self._history: List[MonthlyStatement] = []

    # --- История выписок ---
    def record(self, statements: Iterable[MonthlyStatement]) -> None:
        """Добавить выписки (например, результат Bank.run_month_end)."""
        self._history.extend(statements)

    def close_month(self) -> List[MonthlyStatement]:
        """Провести конец месяца по банку, без печати, и сохранить выписки."""
        statements = self.bank.close_month()
        self.record(statements)
        return statements

    def history(self, account_number: Optional[str] = None) -> List[MonthlyStatement]:
        if account_number is None:
            return list(self._history)
        return [s for s in self._history if s.account_number == account_number]

    # --- Генерация отчётов (как структуру dict) ---
    def build_account_report(self, account_number: str) -> Dict[str, Any]:
        """Отчёт по счёту: текущее состояние и все выписки."""
        acc = self.bank.get_account(account_number)
        return {
            "account_number": acc.account_number,
            "type": acc.ACCOUNT_TYPE,
            "balance": acc.balance,
            "statements": [s.to_dict() for s in self.history(account_number)],
        }

    def build_summary(self) -> Dict[str, Any]:
        """Сводка по банку: число счетов по типам, общий баланс, кто упёрся в лимит."""
        by_type: Dict[str, int] = {}
        for acc in self.bank.accounts.values():
            by_type[acc.ACCOUNT_TYPE] = by_type.get(acc.ACCOUNT_TYPE, 0) + 1

        # Последняя выписка по каждому счёту
        last: Dict[str, MonthlyStatement] = {}
        for s in self._history:
            last[s.account_number] = s
        limit_reached = [
            number for number, s in last.items()
            if isinstance(self.bank.accounts.get(number), SavingsAccount) and s.limit_reached
        ]
        return {
            "bank_name": self.bank.name,
            "total_accounts": len(self.bank.accounts),
            "accounts_by_type": by_type,
            "total_balance": self.bank.get_total_balance(),
            "statements_recorded": len(self._history),
            "limit_reached": limit_reached,
        }

    @staticmethod
    def _ensure_dir(path: str) -> None:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)

    def export_account_json(self, account_number: str, path: str) -> Dict[str, Any]:
        """Отчёт по счёту в JSON (UTF-8). Возвращает выгруженный словарь."""
        data = self.build_account_report(account_number)
        self._ensure_dir(path)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        return data

    def export_history_csv(self, path: str, account_number: Optional[str] = None) -> int:
        """История выписок в CSV, одна строка на выписку. Возвращает число строк.
        Колонки фиксированы, у текущего счёта поля снятий пустые.
        """
        rows = [s.to_dict() for s in self.history(account_number)]
        self._ensure_dir(path)
        with open(path, "w", encoding="utf-8", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=STATEMENT_COLUMNS)
            writer.writeheader()
            writer.writerows(rows)
        return len(rows)

    def save_balance_chart(self, account_number: str, output_dir: str) -> str:
        """Линейный график баланса на конец каждого периода. Возвращает путь к PNG."""
        acc = self.bank.get_account(account_number)
        statements = self.history(account_number)
        os.makedirs(output_dir, exist_ok=True)

        x = [f"P{s.period}" for s in statements] or ["n/a"]
        y = [s.ending_balance for s in statements] or [acc.balance]
        fig = Figure(figsize=(5, 3))
        ax = fig.subplots()
        ax.plot(x, y, marker="o")
        ax.set_title(f"Баланс {acc.ACCOUNT_TYPE} ****{acc.account_number[-4:]}")
        ax.set_xlabel("Период")
        ax.set_ylabel("Баланс")
        fig.tight_layout()
        path = os.path.join(output_dir, f"balance_{acc.account_number}.png")
        fig.savefig(path)
        return path
