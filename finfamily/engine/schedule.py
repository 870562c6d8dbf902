# engine/schedule.py
"""Month-indexed policy tables used by the cash-flow projection (0 = Jan)."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ..data_model import LUMP_SUM_EXPENSE_FIELDS, ConsultancyConfig, ExpenseConfig

VESTING_WEIGHTS: tuple[int, ...] = (15, 15, 30, 20, 21, 42, 20, 20, 31, 20, 20, 42)
TOTAL_VESTING_WEIGHT = sum(VESTING_WEIGHTS)

SALARY_INSTALLMENTS = 14
# 13th and 14th month payments.
EXTRA_SALARY_MONTHS = frozenset({5, 11})
VARIABLE_BONUS_MONTH = 2
SPOT_BONUS_MONTH = 11
CONSULTANCY_BREAK_MONTH = 7

# lump-sum expense field -> {month: share of the annual amount}
SEASONAL_EXPENSES: Mapping[str, Mapping[int, float]] = MappingProxyType(
    {
        "vacation_easter": {3: 1.0},
        "vacation_summer": {6: 0.5, 7: 0.5},
        "vacation_xmas": {11: 1.0},
    }
)

EXPENSE_GROUPS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "Housing & Utilities": ("mortgage", "utilities", "house_maintenance"),
        "Daily Living": ("groceries", "transport", "house_help", "healthcare", "various"),
        "Lifestyle & Sport": ("dining", "shopping", "sport"),
        "Education": ("education", "activities"),
        "Travel": LUMP_SUM_EXPENSE_FIELDS,
    }
)


def vesting_share(month: int) -> float:
    return VESTING_WEIGHTS[month] / TOTAL_VESTING_WEIGHT


def salary_installments(month: int) -> int:
    return 2 if month in EXTRA_SALARY_MONTHS else 1


def seasonal_expense(expenses: ExpenseConfig, month: int) -> float:
    return sum(
        getattr(expenses, name) * shares[month]
        for name, shares in SEASONAL_EXPENSES.items()
        if month in shares
    )


def is_working_month(consultancy: ConsultancyConfig, month: int) -> bool:
    return not (consultancy.skip_august and month == CONSULTANCY_BREAK_MONTH)


def annual_expense_breakdown(expenses: ExpenseConfig) -> dict[str, float]:
    """Annual spend per group: recurring fields x12, holiday lump sums as entered."""
    breakdown: dict[str, float] = {}
    for group, fields in EXPENSE_GROUPS.items():
        total = 0.0
        for name in fields:
            amount = getattr(expenses, name)
            total += amount if name in LUMP_SUM_EXPENSE_FIELDS else amount * 12
        breakdown[group] = total
    return breakdown
