# engine/cashflow.py
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields
from itertools import accumulate
from typing import Dict, Tuple

import pandas as pd

from ..data_model import DEFAULT_POLICY, MONTHS, AppState, EquityConfig, PolicyConfig
from ..errors import InvalidConfiguration
from .overrides import is_actual, reconcile
from .schedule import (
    SALARY_INSTALLMENTS,
    SPOT_BONUS_MONTH,
    VARIABLE_BONUS_MONTH,
    annual_expense_breakdown,
    is_working_month,
    salary_installments,
    seasonal_expense,
    vesting_share,
)
from .tax import marginal_net, net_annual

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonthFlow:
    month_index: int
    month: str
    salary: float
    consultancy: float
    equity_cash: float
    vested_value: float
    unrealized_growth: float
    tax_accrual: float
    forecast_income: float
    actual_income: float
    income: float
    income_overridden: bool
    forecast_expenses: float
    actual_expenses: float
    expenses: float
    expenses_overridden: bool
    net_flow: float


@dataclass(frozen=True)
class RunningTotals:
    cash: float = 0.0
    unrealized: float = 0.0
    wealth: float = 0.0
    tax: float = 0.0


@dataclass(frozen=True)
class MonthProjection(MonthFlow):
    cumulative_cash: float
    cumulative_unrealized: float
    cumulative_wealth: float
    cumulative_tax: float

    @classmethod
    def from_parts(cls, flow: MonthFlow, totals: RunningTotals) -> "MonthProjection":
        values = {f.name: getattr(flow, f.name) for f in fields(MonthFlow)}
        return cls(
            **values,
            cumulative_cash=totals.cash,
            cumulative_unrealized=totals.unrealized,
            cumulative_wealth=totals.wealth,
            cumulative_tax=totals.tax,
        )


@dataclass(frozen=True)
class CashFlowProjection:
    months: Tuple[MonthProjection, ...]
    total_equity_value: float


@dataclass(frozen=True)
class CashFlowSummary:
    total_cash_income: float
    total_expenses: float
    net_liquidity: float
    tax_liability: float
    avg_monthly_income: float
    avg_monthly_expenses: float
    total_equity_value: float
    effective_income: float
    savings_rate: float
    expense_breakdown: Dict[str, float]


@dataclass(frozen=True)
class _SalaryPlan:
    monthly_base_net: float
    variable_bonus_net: float
    spot_bonus_net: float


def monthly_units(equity: EquityConfig, month: int) -> float:
    return equity.annual_units * vesting_share(month)


def vested_value(equity: EquityConfig, month: int) -> float:
    """Value of the month's vesting tranche, converted from USD."""
    if equity.annual_units == 0 or equity.stock_price_usd == 0:
        return 0.0
    if equity.eur_usd_rate <= 0:
        raise InvalidConfiguration(f"equity.eur_usd_rate must be positive, got {equity.eur_usd_rate}")
    return (monthly_units(equity, month) * equity.stock_price_usd) / equity.eur_usd_rate


def _salary_plan(state: AppState) -> _SalaryPlan:
    adjusted_base = state.income.adjusted_base_gross()
    return _SalaryPlan(
        monthly_base_net=net_annual(adjusted_base) / SALARY_INSTALLMENTS,
        variable_bonus_net=marginal_net(adjusted_base, state.income.variable_bonus_gross),
        spot_bonus_net=state.income.spot_bonus_net,
    )


def _month_flow(state: AppState, policy: PolicyConfig, plan: _SalaryPlan, month: int) -> MonthFlow:
    salary = plan.monthly_base_net * salary_installments(month)
    if month == VARIABLE_BONUS_MONTH:
        salary += plan.variable_bonus_net
    if month == SPOT_BONUS_MONTH:
        salary += plan.spot_bonus_net

    consultancy_net = 0.0
    tax_accrual = 0.0
    if state.consultancy.is_active and is_working_month(state.consultancy, month):
        consultancy_net = state.consultancy.gross_monthly * policy.consultancy_net_rate
        tax_accrual = state.consultancy.gross_monthly * policy.consultancy_tax_accrual_rate

    vested = vested_value(state.equity, month)
    equity_cash = vested if state.equity.sell_on_vest else 0.0
    unrealized = 0.0 if state.equity.sell_on_vest else vested

    forecast_income = salary + consultancy_net + equity_cash
    forecast_expenses = state.expenses.recurring_monthly() + seasonal_expense(state.expenses, month)

    actual_income = state.adjustments.actual("income", month)
    actual_expenses = state.adjustments.actual("expenses", month)
    income = reconcile(forecast_income, actual_income)
    expenses = reconcile(forecast_expenses, actual_expenses)

    return MonthFlow(
        month_index=month,
        month=MONTHS[month],
        salary=salary,
        consultancy=consultancy_net,
        equity_cash=equity_cash,
        vested_value=vested,
        unrealized_growth=unrealized,
        tax_accrual=tax_accrual,
        forecast_income=forecast_income,
        actual_income=actual_income,
        income=income.value,
        income_overridden=is_actual(income),
        forecast_expenses=forecast_expenses,
        actual_expenses=actual_expenses,
        expenses=expenses.value,
        expenses_overridden=is_actual(expenses),
        net_flow=income.value - expenses.value,
    )


def _carry(totals: RunningTotals, flow: MonthFlow) -> RunningTotals:
    return RunningTotals(
        cash=totals.cash + flow.net_flow,
        unrealized=totals.unrealized + flow.unrealized_growth,
        wealth=totals.wealth + (flow.net_flow + flow.unrealized_growth),
        tax=totals.tax + flow.tax_accrual,
    )


def project(state: AppState, policy: PolicyConfig = DEFAULT_POLICY) -> CashFlowProjection:
    """Build the twelve-month income/expense/equity projection for ``state``."""
    plan = _salary_plan(state)
    flows = [_month_flow(state, policy, plan, month) for month in range(len(MONTHS))]
    history = list(accumulate(flows, _carry, initial=RunningTotals()))[1:]
    months = tuple(MonthProjection.from_parts(flow, totals) for flow, totals in zip(flows, history))
    total_equity_value = sum(flow.vested_value for flow in flows)

    logger.debug(
        "projected year: cash %.2f, unrealized %.2f, tax accrual %.2f",
        history[-1].cash,
        history[-1].unrealized,
        history[-1].tax,
    )
    return CashFlowProjection(months=months, total_equity_value=total_equity_value)


def summarize(state: AppState, projection: CashFlowProjection) -> CashFlowSummary:
    months = projection.months
    total_cash_income = sum(m.income for m in months)
    total_expenses = sum(m.expenses for m in months)

    base_cash_income = sum(m.salary + m.consultancy for m in months)
    equity_income = projection.total_equity_value if state.equity.include_in_savings_rate else 0.0
    effective_income = base_cash_income + equity_income
    savings_rate = (effective_income - total_expenses) / effective_income * 100 if effective_income > 0 else 0.0

    return CashFlowSummary(
        total_cash_income=total_cash_income,
        total_expenses=total_expenses,
        net_liquidity=months[-1].cumulative_cash,
        tax_liability=months[-1].cumulative_tax,
        avg_monthly_income=total_cash_income / len(months),
        avg_monthly_expenses=total_expenses / len(months),
        total_equity_value=projection.total_equity_value,
        effective_income=effective_income,
        savings_rate=savings_rate,
        expense_breakdown=annual_expense_breakdown(state.expenses),
    )


def projection_frame(projection: CashFlowProjection) -> pd.DataFrame:
    return pd.DataFrame([asdict(m) for m in projection.months])
