from .aggregate import AllocationSlice, aggregate_period
from .cashflow import (
    CashFlowProjection,
    CashFlowSummary,
    MonthProjection,
    project,
    projection_frame,
    summarize,
)
from .dashboard import Dashboard, build_dashboard
from .networth import AssetProjection, BridgeStep, NetWorthBridge, bridge
from .portfolio import HoldingPerformance, PortfolioEvaluation, PortfolioTotals, evaluate
from .tax import TaxBreakdown, marginal_net, net_annual, tax_breakdown

__all__ = [
    "AllocationSlice",
    "AssetProjection",
    "BridgeStep",
    "CashFlowProjection",
    "CashFlowSummary",
    "Dashboard",
    "HoldingPerformance",
    "MonthProjection",
    "NetWorthBridge",
    "PortfolioEvaluation",
    "PortfolioTotals",
    "TaxBreakdown",
    "aggregate_period",
    "bridge",
    "build_dashboard",
    "evaluate",
    "marginal_net",
    "net_annual",
    "project",
    "projection_frame",
    "summarize",
    "tax_breakdown",
]
