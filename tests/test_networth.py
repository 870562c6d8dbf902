import pytest

from finfamily.data_model import Asset
from finfamily.engine.networth import bridge


def _assets():
    return [
        Asset(id="a", name="Home", category="Real Estate", value_soy=400000.0, expected_growth_pct=2.0),
        Asset(id="b", name="World ETF", category="ETF/Stocks", value_soy=50000.0, expected_growth_pct=7.0),
        Asset(id="c", name="Pension fund", category="Pension", value_soy=30000.0, expected_growth_pct=-1.5),
        Asset(id="d", name="Second ETF", category="ETF/Stocks", value_soy=10000.0, expected_growth_pct=5.0),
    ]


def test_each_asset_grows_independently():
    result = bridge(_assets(), 0.0)

    home, etf, pension, _ = result.assets
    assert home.growth == pytest.approx(8000.0)
    assert home.value_eoy == pytest.approx(408000.0)
    assert etf.growth == pytest.approx(3500.0)
    assert pension.value_eoy == pytest.approx(29550.0)


@pytest.mark.parametrize("cash_savings", [0.0, 25000.0, -12000.0])
def test_end_value_identity(cash_savings):
    result = bridge(_assets(), cash_savings)

    assert result.total_start == pytest.approx(490000.0)
    assert result.total_growth == pytest.approx(8000.0 + 3500.0 - 450.0 + 500.0)
    assert result.total_end == pytest.approx(result.total_start + result.total_growth + cash_savings)


def test_empty_asset_list():
    result = bridge([], 1500.0)

    assert result.total_start == 0
    assert result.total_growth == 0
    assert result.total_end == 1500.0
    assert [(s.name, s.value) for s in result.allocation] == [("Cash/Liquidity", 1500.0)]


def test_bridge_steps_form_a_waterfall():
    result = bridge(_assets(), 20000.0)

    names = [s.name for s in result.bridge_steps]
    assert names == ["Jan 1 (SoY)", "Market Growth", "Cash Savings", "Dec 31 (EoY)"]

    start, growth, cash, end = result.bridge_steps
    assert start.total == pytest.approx(result.total_start)
    assert growth.start == pytest.approx(start.total)
    assert cash.start == pytest.approx(growth.total)
    assert cash.total == pytest.approx(result.total_end)
    assert end.start == 0
    assert end.total == pytest.approx(result.total_end)


def test_allocation_groups_by_category_in_order():
    result = bridge(_assets(), 0.0)

    assert [(s.name, s.value) for s in result.allocation] == [
        ("Real Estate", 400000.0),
        ("ETF/Stocks", 60000.0),
        ("Pension", 30000.0),
    ]


def test_positive_savings_fold_into_existing_cash_bucket():
    assets = _assets() + [Asset(id="e", name="Current account", category="Cash/Liquidity", value_soy=5000.0)]

    result = bridge(assets, 7000.0)

    cash = [s for s in result.allocation if s.name == "Cash/Liquidity"]
    assert len(cash) == 1
    assert cash[0].value == pytest.approx(12000.0)


def test_negative_savings_leave_allocation_untouched():
    result = bridge(_assets(), -5000.0)

    assert "Cash/Liquidity" not in [s.name for s in result.allocation]
    assert result.total_end == pytest.approx(result.total_start + result.total_growth - 5000.0)
