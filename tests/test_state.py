from dataclasses import replace

import pytest

from finfamily.data_model import Asset, PortfolioItem, default_state, new_asset, new_portfolio_item
from finfamily.engine.state import DashboardState
from finfamily.engine.storage import save_state_payload
from finfamily.errors import InvalidConfiguration


def test_with_asset_appends_then_replaces_by_id():
    state = default_state()
    asset = Asset(id="x", name="Flat", category="Real Estate", value_soy=200000.0, expected_growth_pct=1.0)

    added = state.with_asset(asset)
    updated = added.with_asset(replace(asset, value_soy=210000.0))

    assert len(added.assets) == len(state.assets) + 1
    assert len(updated.assets) == len(added.assets)
    assert updated.find_asset("x").value_soy == 210000.0
    assert state.find_asset("x") is None


def test_without_asset_and_portfolio_item():
    state = default_state()

    trimmed = state.without_asset("1").without_portfolio_item("2")

    assert [a.id for a in trimmed.assets] == ["2"]
    assert [p.id for p in trimmed.portfolio] == ["1"]


def test_with_portfolio_item_replaces_by_id():
    state = default_state()
    item = PortfolioItem(id="1", ticker="VWCE", type="ETF", quantity=10, avg_price=100, price_soy=100, price_eoy=120)

    updated = state.with_portfolio_item(item)

    assert updated.find_portfolio_item("1").quantity == 10
    assert len(updated.portfolio) == len(state.portfolio)


def test_with_adjustment_rejects_bad_slots():
    state = default_state()

    with pytest.raises(InvalidConfiguration):
        state.with_adjustment("income", 12, 100.0)
    with pytest.raises(InvalidConfiguration):
        state.with_adjustment("savings", 0, 100.0)


def test_new_item_templates_get_fresh_ids():
    assert new_asset().id != new_asset().id
    assert new_asset().category == "ETF/Stocks"
    assert new_portfolio_item().ticker == "NEW"


def test_dashboard_state_starts_from_defaults(tmp_path):
    store = DashboardState(str(tmp_path / "state.json"))

    assert store.get() == default_state()


def test_dashboard_state_persists_every_change(tmp_path):
    path = str(tmp_path / "state.json")
    store = DashboardState(path)

    store.upsert_asset(Asset(id="z", name="Gold", category="ETF/Stocks", value_soy=1000.0))
    store.set_adjustment("expenses", 2, 4500.0)
    store.remove_portfolio_item("1")

    reloaded = DashboardState(path).get()
    assert reloaded.find_asset("z").value_soy == 1000.0
    assert reloaded.adjustments.expenses[2] == 4500.0
    assert [p.id for p in reloaded.portfolio] == ["2"]


def test_dashboard_state_merges_older_saved_shape(tmp_path):
    path = str(tmp_path / "state.json")
    save_state_payload(path, {"income": {"base_salary_gross": 70000}})

    state = DashboardState(path).get()

    assert state.income.base_salary_gross == 70000.0
    assert state.equity.eur_usd_rate == 1.08
    assert len(state.adjustments.income) == 12


def test_dashboard_state_rejects_invalid_replacement(tmp_path):
    store = DashboardState(str(tmp_path / "state.json"))
    bad = replace(store.get(), equity=replace(store.get().equity, eur_usd_rate=-1.0))

    with pytest.raises(InvalidConfiguration):
        store.replace(bad)
    assert store.get().equity.eur_usd_rate == 1.08


def test_reset_restores_defaults(tmp_path):
    store = DashboardState(str(tmp_path / "state.json"))
    store.remove_asset("1")

    store.reset()

    assert store.get() == default_state()
