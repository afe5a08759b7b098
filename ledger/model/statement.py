"""
Ежемесячная выписка по счёту.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

STATEMENT_LINE = "-" * 39


@dataclass(frozen=True)
class MonthlyStatement:
    """Снимок состояния счёта на конец периода (до сброса счётчика)."""
    account_number: str
    account_type: str
    ending_balance: float
    period: int = 1
    withdrawal_count: Optional[int] = None
    max_withdrawals: Optional[int] = None
    issued_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def limit_reached(self) -> bool:
        """Лимит снятий исчерпан (для счетов без лимита всегда False)."""
        if self.withdrawal_count is None or self.max_withdrawals is None:
            return False
        return self.withdrawal_count >= self.max_withdrawals

    def render(self, currency_symbol: str = "$") -> str:
        """Текст выписки. Порядок полей: номер счёта, баланс, затем снятия."""
        lines: List[str] = [
            f"--- {self.account_type}: выписка за период {self.period} ---",
            f"Номер счёта: {self.account_number}",
            f"Баланс на конец периода: {currency_symbol}{self.ending_balance:.2f}",
        ]
        if self.withdrawal_count is not None:
            lines.append(f"Снятий за период: {self.withdrawal_count}/{self.max_withdrawals}")
        else:
            lines.append("Лимита на снятия нет.")
        lines.append(STATEMENT_LINE)
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "account_number": self.account_number,
            "account_type": self.account_type,
            "period": self.period,
            "ending_balance": self.ending_balance,
            "withdrawal_count": self.withdrawal_count,
            "max_withdrawals": self.max_withdrawals,
            "issued_at": self.issued_at.isoformat(),
        }
