from __future__ import annotations

from dataclasses import dataclass

from ..data_model import DEFAULT_POLICY, AppState, PolicyConfig
from .cashflow import CashFlowProjection, CashFlowSummary, project, summarize
from .networth import NetWorthBridge, bridge
from .portfolio import PortfolioEvaluation, evaluate


@dataclass(frozen=True)
class Dashboard:
    cashflow: CashFlowProjection
    summary: CashFlowSummary
    networth: NetWorthBridge
    portfolio: PortfolioEvaluation


def build_dashboard(state: AppState, policy: PolicyConfig = DEFAULT_POLICY) -> Dashboard:
    cashflow = project(state, policy)
    summary = summarize(state, cashflow)
    return Dashboard(
        cashflow=cashflow,
        summary=summary,
        networth=bridge(state.assets, summary.net_liquidity),
        portfolio=evaluate(state.portfolio),
    )
