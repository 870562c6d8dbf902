from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import List

import pandas as pd

from ..parsing import parse_amount
from .base import ColumnDefinition, TableModel

ASSET_CATEGORIES = [
    "Real Estate",
    "ETF/Stocks",
    "Crypto",
    "Private Equity",
    "Cash/Liquidity",
    "Pension",
]
CASH_CATEGORY = "Cash/Liquidity"

PORTFOLIO_TYPES = ["Stock", "ETF", "Crypto", "Fund", "Bond"]


def new_item_id() -> str:
    return uuid.uuid4().hex[:9]


@dataclass(frozen=True)
class Asset:
    id: str
    name: str
    category: str
    value_soy: float = 0.0
    expected_growth_pct: float = 0.0

    def growth_amount(self) -> float:
        return self.value_soy * (self.expected_growth_pct / 100.0)


@dataclass(frozen=True)
class PortfolioItem:
    id: str
    ticker: str
    type: str
    quantity: float = 0.0
    avg_price: float = 0.0
    price_soy: float = 0.0
    price_eoy: float = 0.0


class AssetTableModel(TableModel):
    """Schema + defaults for the net-worth asset editor."""

    def __init__(self, default_rows: List[dict] | None = None) -> None:
        columns = [
            ColumnDefinition("Id", "Id"),
            ColumnDefinition("Name", "Asset Name"),
            ColumnDefinition(
                "Category",
                "Category",
                kind="select",
                default="ETF/Stocks",
                options=ASSET_CATEGORIES,
            ),
            ColumnDefinition(
                "Value (Jan 1)",
                "Value (Jan 1)",
                kind="number",
                default=0.0,
                step=1000.0,
                format="%.2f",
            ),
            ColumnDefinition("Growth (%)", "Growth %", kind="number", default=5.0, step=0.5, help="Expected yearly growth, may be negative"),
        ]
        super().__init__("assets", columns, default_rows or [])


class PortfolioTableModel(TableModel):
    """Schema + defaults for the holdings editor."""

    def __init__(self, default_rows: List[dict] | None = None) -> None:
        columns = [
            ColumnDefinition("Id", "Id"),
            ColumnDefinition("Ticker", "Ticker"),
            ColumnDefinition("Type", "Type", kind="select", default="Stock", options=PORTFOLIO_TYPES),
            ColumnDefinition("Quantity", "Qty", kind="number", default=0.0, min_value=0.0, step=1.0),
            ColumnDefinition("Avg Price", "Avg Price", kind="number", default=0.0, min_value=0.0, format="%.2f", help="Cost basis per unit"),
            ColumnDefinition("Price (Jan 1)", "Price Jan 1", kind="number", default=0.0, min_value=0.0, format="%.2f"),
            ColumnDefinition("Price (Dec 31)", "Price Dec 31", kind="number", default=0.0, min_value=0.0, format="%.2f"),
        ]
        super().__init__("portfolio", columns, default_rows or [])


def asset_to_row(asset: Asset) -> dict:
    return {
        "Id": asset.id,
        "Name": asset.name,
        "Category": asset.category,
        "Value (Jan 1)": asset.value_soy,
        "Growth (%)": asset.expected_growth_pct,
    }


def portfolio_item_to_row(item: PortfolioItem) -> dict:
    return {
        "Id": item.id,
        "Ticker": item.ticker,
        "Type": item.type,
        "Quantity": item.quantity,
        "Avg Price": item.avg_price,
        "Price (Jan 1)": item.price_soy,
        "Price (Dec 31)": item.price_eoy,
    }


def _text(row: dict, key: str) -> str:
    raw = row.get(key)
    if raw is None or (pd.api.types.is_scalar(raw) and pd.isna(raw)):
        return ""
    return str(raw).strip()


def _row_id(row: dict) -> str:
    return _text(row, "Id") or new_item_id()


def dataframe_to_assets(df: pd.DataFrame) -> List[Asset]:
    items: List[Asset] = []
    for row in df.to_dict("records"):
        name = _text(row, "Name")
        if not name:
            continue
        items.append(
            Asset(
                id=_row_id(row),
                name=name,
                category=_text(row, "Category") or "ETF/Stocks",
                value_soy=parse_amount(row.get("Value (Jan 1)")),
                expected_growth_pct=parse_amount(row.get("Growth (%)")),
            )
        )
    return items


def dataframe_to_portfolio(df: pd.DataFrame) -> List[PortfolioItem]:
    items: List[PortfolioItem] = []
    for row in df.to_dict("records"):
        ticker = _text(row, "Ticker")
        if not ticker:
            continue
        items.append(
            PortfolioItem(
                id=_row_id(row),
                ticker=ticker.upper(),
                type=_text(row, "Type") or "Stock",
                quantity=parse_amount(row.get("Quantity")),
                avg_price=parse_amount(row.get("Avg Price")),
                price_soy=parse_amount(row.get("Price (Jan 1)")),
                price_eoy=parse_amount(row.get("Price (Dec 31)")),
            )
        )
    return items
