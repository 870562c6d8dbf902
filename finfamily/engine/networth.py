from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import pandas as pd

from ..data_model import CASH_CATEGORY, Asset
from .aggregate import AllocationSlice, group_totals


@dataclass(frozen=True)
class AssetProjection:
    asset: Asset
    growth: float
    value_eoy: float


@dataclass(frozen=True)
class BridgeStep:
    """One bar of the start-to-end waterfall; ``start`` is where the bar floats."""

    name: str
    start: float
    change: float
    total: float


@dataclass(frozen=True)
class NetWorthBridge:
    assets: Tuple[AssetProjection, ...]
    total_start: float
    total_growth: float
    cash_savings: float
    total_end: float
    bridge_steps: Tuple[BridgeStep, ...]
    allocation: Tuple[AllocationSlice, ...]


def _allocation(assets: Sequence[Asset], cash_savings: float) -> Tuple[AllocationSlice, ...]:
    frame = pd.DataFrame(
        {"category": [a.category for a in assets], "value_soy": [a.value_soy for a in assets]}
    )
    slices = group_totals(frame, "category", "value_soy")
    if cash_savings > 0:
        if any(s.name == CASH_CATEGORY for s in slices):
            slices = [
                AllocationSlice(s.name, s.value + cash_savings) if s.name == CASH_CATEGORY else s
                for s in slices
            ]
        else:
            slices.append(AllocationSlice(CASH_CATEGORY, cash_savings))
    return tuple(slices)


def bridge(assets: Sequence[Asset], cash_savings: float) -> NetWorthBridge:
    """Start-of-year to end-of-year wealth, with the year's cash savings injected."""
    projected = tuple(
        AssetProjection(asset=a, growth=a.growth_amount(), value_eoy=a.value_soy + a.growth_amount())
        for a in assets
    )
    total_start = sum(a.value_soy for a in assets)
    total_growth = sum(p.growth for p in projected)
    total_end = total_start + total_growth + cash_savings

    steps = (
        BridgeStep("Jan 1 (SoY)", 0.0, total_start, total_start),
        BridgeStep("Market Growth", total_start, total_growth, total_start + total_growth),
        BridgeStep("Cash Savings", total_start + total_growth, cash_savings, total_end),
        BridgeStep("Dec 31 (EoY)", 0.0, total_end, total_end),
    )
    return NetWorthBridge(
        assets=projected,
        total_start=total_start,
        total_growth=total_growth,
        cash_savings=cash_savings,
        total_end=total_end,
        bridge_steps=steps,
        allocation=_allocation(assets, cash_savings),
    )
