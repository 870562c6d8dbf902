from .config import (
    DEFAULT_POLICY,
    LUMP_SUM_EXPENSE_FIELDS,
    RECURRING_EXPENSE_FIELDS,
    ConsultancyConfig,
    EquityConfig,
    ExpenseConfig,
    IncomeConfig,
    PolicyConfig,
)
from .defaults import default_state, new_asset, new_portfolio_item, reference_expenses
from .holdings import (
    ASSET_CATEGORIES,
    CASH_CATEGORY,
    PORTFOLIO_TYPES,
    Asset,
    AssetTableModel,
    PortfolioItem,
    PortfolioTableModel,
    asset_to_row,
    dataframe_to_assets,
    dataframe_to_portfolio,
    new_item_id,
    portfolio_item_to_row,
)
from .state import ADJUSTMENT_SIDES, MONTHS, N_MONTHS, Adjustments, AppState

__all__ = [
    "ADJUSTMENT_SIDES",
    "ASSET_CATEGORIES",
    "CASH_CATEGORY",
    "DEFAULT_POLICY",
    "LUMP_SUM_EXPENSE_FIELDS",
    "MONTHS",
    "N_MONTHS",
    "PORTFOLIO_TYPES",
    "RECURRING_EXPENSE_FIELDS",
    "Adjustments",
    "AppState",
    "Asset",
    "AssetTableModel",
    "ConsultancyConfig",
    "EquityConfig",
    "ExpenseConfig",
    "IncomeConfig",
    "PolicyConfig",
    "PortfolioItem",
    "PortfolioTableModel",
    "asset_to_row",
    "dataframe_to_assets",
    "dataframe_to_portfolio",
    "default_state",
    "new_asset",
    "new_item_id",
    "new_portfolio_item",
    "portfolio_item_to_row",
    "reference_expenses",
]
