import pytest

from finfamily.data_model import (
    AppState,
    ConsultancyConfig,
    EquityConfig,
    IncomeConfig,
    default_state,
    reference_expenses,
)


@pytest.fixture
def reference_state() -> AppState:
    """The documented reference household used by the golden scenario."""
    base = default_state()
    return AppState(
        income=IncomeConfig(
            base_salary_gross=160000.0,
            variable_bonus_gross=57000.0,
            spot_bonus_net=3000.0,
            salary_increase_pct=0.0,
        ),
        consultancy=ConsultancyConfig(is_active=True, gross_monthly=3161.0, skip_august=True),
        equity=EquityConfig(stock_price_usd=180.0, annual_units=296.0, eur_usd_rate=1.08, sell_on_vest=False),
        expenses=reference_expenses(),
        assets=base.assets,
        portfolio=base.portfolio,
        adjustments=base.adjustments,
    )
