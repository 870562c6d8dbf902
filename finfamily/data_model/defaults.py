from __future__ import annotations

from .config import ConsultancyConfig, EquityConfig, ExpenseConfig, IncomeConfig
from .holdings import Asset, PortfolioItem, new_item_id
from .state import Adjustments, AppState


def default_assets() -> tuple[Asset, ...]:
    return (
        Asset(id="1", name="Main House", category="Real Estate", value_soy=0.0, expected_growth_pct=2.0),
        Asset(id="2", name="Angel Investments", category="Private Equity", value_soy=0.0, expected_growth_pct=0.0),
    )


def default_portfolio() -> tuple[PortfolioItem, ...]:
    return (
        PortfolioItem(id="1", ticker="VWCE", type="ETF"),
        PortfolioItem(id="2", ticker="BTC", type="Crypto"),
    )


def default_state() -> AppState:
    """Blank household: every amount zero, consultancy on with August off."""
    return AppState(
        income=IncomeConfig(),
        consultancy=ConsultancyConfig(is_active=True, gross_monthly=0.0, skip_august=True),
        equity=EquityConfig(eur_usd_rate=1.08),
        expenses=ExpenseConfig(),
        assets=default_assets(),
        portfolio=default_portfolio(),
        adjustments=Adjustments(),
    )


def reference_expenses() -> ExpenseConfig:
    """Documented expense set of the reference household.

    Recurring items total 6,050 a month; the three holidays add 10,500 a year,
    for 83,100 of annual spending.
    """
    return ExpenseConfig(
        mortgage=1500.0,
        house_maintenance=150.0,
        utilities=300.0,
        groceries=900.0,
        transport=400.0,
        house_help=600.0,
        healthcare=150.0,
        various=300.0,
        dining=400.0,
        education=700.0,
        shopping=300.0,
        sport=150.0,
        activities=200.0,
        vacation_easter=2000.0,
        vacation_summer=6000.0,
        vacation_xmas=2500.0,
    )


def new_asset() -> Asset:
    return Asset(id=new_item_id(), name="New Asset", category="ETF/Stocks", value_soy=0.0, expected_growth_pct=5.0)


def new_portfolio_item() -> PortfolioItem:
    return PortfolioItem(id=new_item_id(), ticker="NEW", type="Stock")
