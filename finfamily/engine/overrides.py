"""Actuals-over-forecast reconciliation for one side of a month's ledger."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Forecast:
    value: float


@dataclass(frozen=True)
class Actual:
    value: float


LedgerEntry = Union[Forecast, Actual]


def reconcile(forecast: float, actual: float | None) -> LedgerEntry:
    """A positive actual replaces the whole forecast; zero or unset keeps it."""
    if actual is not None and actual > 0:
        return Actual(actual)
    return Forecast(forecast)


def is_actual(entry: LedgerEntry) -> bool:
    return isinstance(entry, Actual)
