# data_model/config.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class IncomeConfig:
    base_salary_gross: float = 0.0
    variable_bonus_gross: float = 0.0
    spot_bonus_net: float = 0.0
    salary_increase_pct: float = 0.0

    def adjusted_base_gross(self) -> float:
        return self.base_salary_gross * (1 + self.salary_increase_pct / 100.0)


@dataclass(frozen=True)
class ConsultancyConfig:
    is_active: bool = True
    gross_monthly: float = 0.0
    skip_august: bool = True


@dataclass(frozen=True)
class EquityConfig:
    stock_price_usd: float = 0.0
    annual_units: float = 0.0
    eur_usd_rate: float = 1.08
    sell_on_vest: bool = False
    include_in_savings_rate: bool = False


RECURRING_EXPENSE_FIELDS: tuple[str, ...] = (
    "mortgage",
    "house_maintenance",
    "utilities",
    "groceries",
    "transport",
    "house_help",
    "healthcare",
    "various",
    "dining",
    "education",
    "shopping",
    "sport",
    "activities",
)

# Annual lump sums, booked only in their seasonal months.
LUMP_SUM_EXPENSE_FIELDS: tuple[str, ...] = (
    "vacation_easter",
    "vacation_summer",
    "vacation_xmas",
)


@dataclass(frozen=True)
class ExpenseConfig:
    # Fixed
    mortgage: float = 0.0
    house_maintenance: float = 0.0
    utilities: float = 0.0
    groceries: float = 0.0
    transport: float = 0.0
    house_help: float = 0.0
    healthcare: float = 0.0
    various: float = 0.0

    # Lifestyle & kids
    dining: float = 0.0
    education: float = 0.0
    shopping: float = 0.0
    sport: float = 0.0
    activities: float = 0.0

    # Travel (annual)
    vacation_easter: float = 0.0
    vacation_summer: float = 0.0
    vacation_xmas: float = 0.0

    def recurring_monthly(self) -> float:
        return sum(getattr(self, name) for name in RECURRING_EXPENSE_FIELDS)


@dataclass(frozen=True)
class PolicyConfig:
    """Rates applied by the cash-flow engine that are not user input."""

    consultancy_net_rate: float = 0.65
    consultancy_tax_accrual_rate: float = 0.15


DEFAULT_POLICY = PolicyConfig()
