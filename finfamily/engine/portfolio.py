from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import pandas as pd

from ..data_model import PortfolioItem
from .aggregate import AllocationSlice, group_totals


@dataclass(frozen=True)
class HoldingPerformance:
    item: PortfolioItem
    invested: float
    value_soy: float
    value_eoy: float
    pl_total: float
    pl_total_pct: float
    pl_ytd: float
    pl_ytd_pct: float


@dataclass(frozen=True)
class PortfolioTotals:
    invested: float
    value_soy: float
    value_eoy: float

    @property
    def unrealized_pl(self) -> float:
        return self.value_eoy - self.invested

    @property
    def ytd_growth(self) -> float:
        return self.value_eoy - self.value_soy


@dataclass(frozen=True)
class PerformanceStep:
    name: str
    value: float


@dataclass(frozen=True)
class PortfolioEvaluation:
    holdings: Tuple[HoldingPerformance, ...]
    totals: PortfolioTotals
    allocation: Tuple[AllocationSlice, ...]
    performance_steps: Tuple[PerformanceStep, ...]


def _pct(change: float, base: float) -> float:
    # No cost basis (or no opening value) reports 0% instead of inf/nan.
    return change / base * 100 if base > 0 else 0.0


def evaluate_item(item: PortfolioItem) -> HoldingPerformance:
    invested = item.quantity * item.avg_price
    value_soy = item.quantity * item.price_soy
    value_eoy = item.quantity * item.price_eoy
    return HoldingPerformance(
        item=item,
        invested=invested,
        value_soy=value_soy,
        value_eoy=value_eoy,
        pl_total=value_eoy - invested,
        pl_total_pct=_pct(value_eoy - invested, invested),
        pl_ytd=value_eoy - value_soy,
        pl_ytd_pct=_pct(value_eoy - value_soy, value_soy),
    )


def evaluate(items: Sequence[PortfolioItem]) -> PortfolioEvaluation:
    holdings = tuple(evaluate_item(item) for item in items)
    totals = PortfolioTotals(
        invested=sum(h.invested for h in holdings),
        value_soy=sum(h.value_soy for h in holdings),
        value_eoy=sum(h.value_eoy for h in holdings),
    )
    frame = pd.DataFrame(
        {"type": [h.item.type for h in holdings], "value_eoy": [h.value_eoy for h in holdings]}
    )
    steps = (
        PerformanceStep("Invested", totals.invested),
        PerformanceStep("Jan 1 Value", totals.value_soy),
        PerformanceStep("Dec 31 Value", totals.value_eoy),
    )
    return PortfolioEvaluation(
        holdings=holdings,
        totals=totals,
        allocation=tuple(group_totals(frame, "type", "value_eoy")),
        performance_steps=steps,
    )
