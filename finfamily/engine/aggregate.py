from __future__ import annotations

from dataclasses import dataclass
from typing import List

import pandas as pd

REQUIRED_COLUMNS = {"month_index", "month"}

FLOW_COLUMNS = (
    "salary",
    "consultancy",
    "equity_cash",
    "vested_value",
    "unrealized_growth",
    "tax_accrual",
    "forecast_income",
    "income",
    "forecast_expenses",
    "expenses",
    "net_flow",
)
CUMULATIVE_COLUMNS = (
    "cumulative_cash",
    "cumulative_unrealized",
    "cumulative_wealth",
    "cumulative_tax",
)
PERIOD_LENGTHS = {"M": 1, "Q": 3, "Y": 12}


@dataclass(frozen=True)
class AllocationSlice:
    name: str
    value: float


def group_totals(frame: pd.DataFrame, key: str, value: str) -> List[AllocationSlice]:
    """Sum ``value`` per ``key``, keeping groups in first-appearance order."""
    if frame.empty:
        return []
    grouped = frame.groupby(key, sort=False)[value].sum()
    return [AllocationSlice(name=str(name), value=float(total)) for name, total in grouped.items()]


def _prepare(df: pd.DataFrame) -> pd.DataFrame:
    missing = REQUIRED_COLUMNS.difference(df.columns)
    if missing:
        raise KeyError(f"Missing required columns: {', '.join(sorted(missing))}")
    return df.sort_values("month_index").copy()


def _period_label(freq: str, period_index: int) -> str:
    if freq == "Q":
        return f"Q{period_index + 1}"
    return "Year"


def aggregate_period(df: pd.DataFrame, freq: str = "M") -> pd.DataFrame:
    """Roll the monthly projection up to monthly/quarterly/yearly rows.

    Flows are summed over the period; running totals keep their value at the
    period's last month.
    """
    if df.empty:
        return df

    freq = (freq or "M").upper()
    if freq not in PERIOD_LENGTHS:
        raise ValueError(f"Unsupported frequency {freq!r}; expected one of {', '.join(PERIOD_LENGTHS)}")
    df = _prepare(df)

    if freq == "M":
        df["period_index"] = df["month_index"]
        df["period"] = df["month"]
        return df

    df["period_index"] = df["month_index"] // PERIOD_LENGTHS[freq]
    agg_map = {col: "sum" for col in FLOW_COLUMNS if col in df.columns}
    agg_map.update({col: "last" for col in CUMULATIVE_COLUMNS if col in df.columns})
    grouped = df.groupby("period_index", as_index=False).agg(agg_map)
    grouped["period"] = [_period_label(freq, int(idx)) for idx in grouped["period_index"]]
    return grouped
