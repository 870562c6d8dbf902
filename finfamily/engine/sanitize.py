"""Conversion between raw JSON payloads and ``AppState`` snapshots.

Payloads coming from the form layer or from an older saved document may miss
fields, carry locale-formatted numbers or hold junk. Everything missing falls
back to the default state field by field; unparsable numbers become zero.
Only configuration the engines cannot project is rejected, by
``validate_state``.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import asdict, fields
from typing import Any, Dict, Iterable, Type, TypeVar

from ..data_model import (
    ASSET_CATEGORIES,
    PORTFOLIO_TYPES,
    Adjustments,
    AppState,
    Asset,
    ConsultancyConfig,
    EquityConfig,
    ExpenseConfig,
    IncomeConfig,
    PortfolioItem,
    default_state,
    new_item_id,
)
from ..errors import InvalidConfiguration
from ..parsing import parse_amount, parse_flag

T = TypeVar("T")


def _expect_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _expect_list(value: Any) -> list:
    return list(value) if isinstance(value, (list, tuple)) else []


def _merge_section(cls: Type[T], raw: Any, default: T) -> T:
    data = _expect_dict(raw)
    values = {}
    for f in fields(cls):
        fallback = getattr(default, f.name)
        if f.name not in data:
            values[f.name] = fallback
        elif isinstance(fallback, bool):
            values[f.name] = parse_flag(data[f.name], fallback)
        else:
            values[f.name] = parse_amount(data[f.name])
    return cls(**values)


def asset_from_dict(raw: Dict[str, Any]) -> Asset:
    return Asset(
        id=str(raw.get("id") or new_item_id()),
        name=str(raw.get("name") or ""),
        category=str(raw.get("category") or "ETF/Stocks"),
        value_soy=parse_amount(raw.get("value_soy")),
        expected_growth_pct=parse_amount(raw.get("expected_growth_pct")),
    )


def portfolio_item_from_dict(raw: Dict[str, Any]) -> PortfolioItem:
    return PortfolioItem(
        id=str(raw.get("id") or new_item_id()),
        ticker=str(raw.get("ticker") or ""),
        type=str(raw.get("type") or "Stock"),
        quantity=parse_amount(raw.get("quantity")),
        avg_price=parse_amount(raw.get("avg_price")),
        price_soy=parse_amount(raw.get("price_soy")),
        price_eoy=parse_amount(raw.get("price_eoy")),
    )


def _amounts(values: Any) -> list[float]:
    return [parse_amount(v) for v in _expect_list(values)]


def state_from_dict(payload: Any) -> AppState:
    data = _expect_dict(payload)
    defaults = default_state()

    assets = defaults.assets
    if "assets" in data:
        assets = tuple(asset_from_dict(_expect_dict(row)) for row in _expect_list(data["assets"]))
    portfolio = defaults.portfolio
    if "portfolio" in data:
        portfolio = tuple(portfolio_item_from_dict(_expect_dict(row)) for row in _expect_list(data["portfolio"]))

    adjustments = _expect_dict(data.get("adjustments"))
    return AppState(
        income=_merge_section(IncomeConfig, data.get("income"), defaults.income),
        consultancy=_merge_section(ConsultancyConfig, data.get("consultancy"), defaults.consultancy),
        equity=_merge_section(EquityConfig, data.get("equity"), defaults.equity),
        expenses=_merge_section(ExpenseConfig, data.get("expenses"), defaults.expenses),
        assets=assets,
        portfolio=portfolio,
        adjustments=Adjustments.from_lists(
            _amounts(adjustments.get("income")),
            _amounts(adjustments.get("expenses")),
        ),
    )


def state_to_dict(state: AppState) -> Dict[str, Any]:
    return asdict(state)


def _duplicates(ids: Iterable[str]) -> list[str]:
    return sorted(key for key, count in Counter(ids).items() if count > 1)


def validate_state(state: AppState) -> AppState:
    """Reject configuration the engines cannot project; returns ``state`` unchanged."""
    if state.equity.eur_usd_rate <= 0:
        raise InvalidConfiguration(f"equity.eur_usd_rate: must be positive, got {state.equity.eur_usd_rate}")
    for asset in state.assets:
        if asset.category not in ASSET_CATEGORIES:
            raise InvalidConfiguration(f"assets[{asset.id}].category: unknown category {asset.category!r}")
    for item in state.portfolio:
        if item.type not in PORTFOLIO_TYPES:
            raise InvalidConfiguration(f"portfolio[{item.id}].type: unknown type {item.type!r}")
    duplicate_assets = _duplicates(a.id for a in state.assets)
    if duplicate_assets:
        raise InvalidConfiguration(f"assets: duplicate ids {', '.join(duplicate_assets)}")
    duplicate_items = _duplicates(p.id for p in state.portfolio)
    if duplicate_items:
        raise InvalidConfiguration(f"portfolio: duplicate ids {', '.join(duplicate_items)}")
    return state
