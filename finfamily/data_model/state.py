# data_model/state.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Tuple

from ..errors import InvalidConfiguration
from .config import ConsultancyConfig, EquityConfig, ExpenseConfig, IncomeConfig
from .holdings import Asset, PortfolioItem

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
N_MONTHS = len(MONTHS)
ADJUSTMENT_SIDES = ("income", "expenses")


def _twelve(values: Iterable[float] | None) -> Tuple[float, ...]:
    padded = list(values or [])[:N_MONTHS]
    padded += [0.0] * (N_MONTHS - len(padded))
    return tuple(float(v) for v in padded)


@dataclass(frozen=True)
class Adjustments:
    """User-entered monthly actuals; a positive slot replaces that month's forecast."""

    income: Tuple[float, ...] = field(default_factory=lambda: (0.0,) * N_MONTHS)
    expenses: Tuple[float, ...] = field(default_factory=lambda: (0.0,) * N_MONTHS)

    @classmethod
    def from_lists(cls, income: Iterable[float] | None = None, expenses: Iterable[float] | None = None) -> "Adjustments":
        return cls(income=_twelve(income), expenses=_twelve(expenses))

    def actual(self, side: str, month: int) -> float:
        values = getattr(self, side)
        return values[month] if month < len(values) else 0.0

    def with_value(self, side: str, month: int, value: float) -> "Adjustments":
        if side not in ADJUSTMENT_SIDES:
            raise InvalidConfiguration(f"adjustments: unknown side {side!r}")
        if not 0 <= month < N_MONTHS:
            raise InvalidConfiguration(f"adjustments.{side}: month {month} outside 0-{N_MONTHS - 1}")
        values = list(_twelve(getattr(self, side)))
        values[month] = float(value)
        return replace(self, **{side: tuple(values)})


@dataclass(frozen=True)
class AppState:
    income: IncomeConfig = field(default_factory=IncomeConfig)
    consultancy: ConsultancyConfig = field(default_factory=ConsultancyConfig)
    equity: EquityConfig = field(default_factory=EquityConfig)
    expenses: ExpenseConfig = field(default_factory=ExpenseConfig)
    assets: Tuple[Asset, ...] = ()
    portfolio: Tuple[PortfolioItem, ...] = ()
    adjustments: Adjustments = field(default_factory=Adjustments)

    def with_asset(self, asset: Asset) -> "AppState":
        """Replace the asset sharing ``asset.id`` or append it."""
        if any(a.id == asset.id for a in self.assets):
            assets = tuple(asset if a.id == asset.id else a for a in self.assets)
        else:
            assets = self.assets + (asset,)
        return replace(self, assets=assets)

    def without_asset(self, asset_id: str) -> "AppState":
        return replace(self, assets=tuple(a for a in self.assets if a.id != asset_id))

    def with_portfolio_item(self, item: PortfolioItem) -> "AppState":
        if any(p.id == item.id for p in self.portfolio):
            portfolio = tuple(item if p.id == item.id else p for p in self.portfolio)
        else:
            portfolio = self.portfolio + (item,)
        return replace(self, portfolio=portfolio)

    def without_portfolio_item(self, item_id: str) -> "AppState":
        return replace(self, portfolio=tuple(p for p in self.portfolio if p.id != item_id))

    def with_adjustment(self, side: str, month: int, value: float) -> "AppState":
        return replace(self, adjustments=self.adjustments.with_value(side, month, value))

    def find_asset(self, asset_id: str) -> Asset | None:
        return next((a for a in self.assets if a.id == asset_id), None)

    def find_portfolio_item(self, item_id: str) -> PortfolioItem | None:
        return next((p for p in self.portfolio if p.id == item_id), None)
