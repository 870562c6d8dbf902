"""Golden figures for the reference household, worked out by hand.

Salary: net_annual(160000) = 88567.269925 (taxable 149004.165, top bracket).
Variable bonus: 57000 * (1 - 0.43 - 0.025) = 31065 on top of the base.
Consultancy: 3161 * 0.65 = 2054.65 for 11 months; accrual 3161 * 0.15 = 474.15.
Equity: 296 units * 180 USD / 1.08 = 49333.33 held, never cash.
Expenses: 6050 a month plus 10500 of holidays = 83100.
"""

import pytest

from finfamily.engine import build_dashboard, project, summarize

BASE_NET = 88567.269925
MONTHLY_BASE = BASE_NET / 14
BONUS_NET = 31065.0
CONSULTANCY_NET = 2054.65
ANNUAL_INCOME = BASE_NET + BONUS_NET + 3000.0 + 11 * CONSULTANCY_NET
ANNUAL_EXPENSES = 83100.0
EQUITY_VALUE = 296 * 180 / 1.08


def test_reference_household_annual_figures(reference_state):
    summary = summarize(reference_state, project(reference_state))

    assert summary.total_cash_income == pytest.approx(145233.419925, abs=1e-6)
    assert summary.total_cash_income == pytest.approx(ANNUAL_INCOME, abs=1e-6)
    assert summary.total_expenses == pytest.approx(ANNUAL_EXPENSES, abs=1e-6)
    assert summary.net_liquidity == pytest.approx(62133.419925, abs=1e-6)
    assert summary.tax_liability == pytest.approx(5215.65, abs=1e-6)
    assert summary.total_equity_value == pytest.approx(EQUITY_VALUE)
    assert summary.savings_rate == pytest.approx(62133.419925 / 145233.419925 * 100)


@pytest.mark.parametrize(
    "month, income, expenses",
    [
        (0, MONTHLY_BASE + CONSULTANCY_NET, 6050.0),
        (2, MONTHLY_BASE + BONUS_NET + CONSULTANCY_NET, 6050.0),
        (3, MONTHLY_BASE + CONSULTANCY_NET, 8050.0),
        (5, 2 * MONTHLY_BASE + CONSULTANCY_NET, 6050.0),
        (6, MONTHLY_BASE + CONSULTANCY_NET, 9050.0),
        (7, MONTHLY_BASE, 9050.0),
        (11, 2 * MONTHLY_BASE + 3000.0 + CONSULTANCY_NET, 8550.0),
    ],
)
def test_reference_household_monthly_figures(reference_state, month, income, expenses):
    m = project(reference_state).months[month]

    assert m.income == pytest.approx(income, abs=1e-6)
    assert m.expenses == pytest.approx(expenses, abs=1e-6)


def test_reference_household_net_worth_includes_cash_savings(reference_state):
    dashboard = build_dashboard(reference_state)

    # placeholder assets are worth nothing, so the year ends on the cash saved
    assert dashboard.networth.total_start == 0
    assert dashboard.networth.total_end == pytest.approx(62133.419925, abs=1e-6)
    assert dashboard.cashflow.months[-1].cumulative_wealth == pytest.approx(62133.419925 + EQUITY_VALUE, abs=1e-6)
