"""REST backend for the household dashboard."""

from __future__ import annotations

import logging
import os
from dataclasses import asdict, replace
from typing import Any, Dict

import pandas as pd
from flask import Flask, jsonify, request

from .data_model import (
    ADJUSTMENT_SIDES,
    ASSET_CATEGORIES,
    MONTHS,
    PORTFOLIO_TYPES,
    AssetTableModel,
    PortfolioTableModel,
    asset_to_row,
    dataframe_to_assets,
    dataframe_to_portfolio,
    default_state,
    new_asset,
    new_portfolio_item,
    portfolio_item_to_row,
)
from .engine import Dashboard, aggregate_period, build_dashboard, projection_frame, project
from .engine.sanitize import _expect_list, asset_from_dict, portfolio_item_from_dict, state_from_dict, state_to_dict
from .engine.state import DashboardState
from .engine.storage import STORAGE_KEY, _sanitize_json_compat
from .errors import InvalidConfiguration
from .parsing import parse_amount

logger = logging.getLogger(__name__)

app = Flask(__name__)

store = DashboardState(os.environ.get("FINFAMILY_DATA_PATH", "user_data/state.json"))


def _dashboard_payload(dashboard: Dashboard) -> Dict[str, Any]:
    payload = asdict(dashboard)
    totals = dashboard.portfolio.totals
    payload["portfolio"]["totals"]["unrealized_pl"] = totals.unrealized_pl
    payload["portfolio"]["totals"]["ytd_growth"] = totals.ytd_growth
    return _sanitize_json_compat(payload)


def _state_payload() -> Dict[str, Any]:
    state = store.get()
    return {
        "state": _sanitize_json_compat(state_to_dict(state)),
        "dashboard": _dashboard_payload(build_dashboard(state)),
    }


def _json_body() -> Dict[str, Any]:
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def _table_frame() -> pd.DataFrame:
    rows = [row for row in _expect_list(_json_body().get("rows")) if isinstance(row, dict)]
    return pd.DataFrame(rows)


@app.errorhandler(InvalidConfiguration)
def invalid_configuration(exc: InvalidConfiguration):
    logger.info("Rejected configuration: %s", exc)
    return jsonify({"error": str(exc)}), 400


@app.after_request
def apply_cors_headers(response):
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = "GET,POST,PUT,DELETE,OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    return response


@app.get("/api/health")
def healthcheck():
    return jsonify({"status": "ok"})


@app.get("/api/schema")
def get_schema():
    defaults = default_state()
    assets_model = AssetTableModel([asset_to_row(a) for a in defaults.assets])
    portfolio_model = PortfolioTableModel([portfolio_item_to_row(p) for p in defaults.portfolio])
    return jsonify(
        {
            "storageKey": STORAGE_KEY,
            "months": list(MONTHS),
            "assetCategories": ASSET_CATEGORIES,
            "portfolioTypes": PORTFOLIO_TYPES,
            "assets": _sanitize_json_compat(assets_model.to_payload()),
            "portfolio": _sanitize_json_compat(portfolio_model.to_payload()),
        }
    )


@app.get("/api/state")
def get_state():
    return jsonify(_state_payload())


@app.put("/api/state")
def replace_state():
    store.replace(state_from_dict(_json_body()))
    return jsonify(_state_payload())


@app.delete("/api/state")
def reset_state():
    store.reset()
    return jsonify(_state_payload())


@app.get("/api/dashboard")
def get_dashboard():
    return jsonify(_dashboard_payload(build_dashboard(store.get())))


@app.get("/api/projection")
def get_projection():
    freq = request.args.get("freq", "M")
    try:
        frame = aggregate_period(projection_frame(project(store.get())), freq=freq)
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400
    records = [_sanitize_json_compat(row) for row in frame.to_dict(orient="records")]
    return jsonify({"freq": freq.upper(), "data": records})


@app.post("/api/assets")
def add_asset():
    asset = asset_from_dict({**asdict(new_asset()), **_json_body()})
    store.upsert_asset(asset)
    return jsonify({"asset": asdict(asset), **_state_payload()}), 201


@app.put("/api/assets")
def replace_assets_from_table():
    assets = dataframe_to_assets(_table_frame())
    store.replace(replace(store.get(), assets=tuple(assets)))
    return jsonify(_state_payload())


@app.put("/api/assets/<asset_id>")
def update_asset(asset_id: str):
    existing = store.get().find_asset(asset_id)
    if existing is None:
        return jsonify({"error": "Asset not found."}), 404
    store.upsert_asset(asset_from_dict({**asdict(existing), **_json_body(), "id": asset_id}))
    return jsonify(_state_payload())


@app.delete("/api/assets/<asset_id>")
def delete_asset(asset_id: str):
    store.remove_asset(asset_id)
    return jsonify(_state_payload())


@app.post("/api/portfolio")
def add_portfolio_item():
    item = portfolio_item_from_dict({**asdict(new_portfolio_item()), **_json_body()})
    store.upsert_portfolio_item(item)
    return jsonify({"item": asdict(item), **_state_payload()}), 201


@app.put("/api/portfolio")
def replace_portfolio_from_table():
    items = dataframe_to_portfolio(_table_frame())
    store.replace(replace(store.get(), portfolio=tuple(items)))
    return jsonify(_state_payload())


@app.put("/api/portfolio/<item_id>")
def update_portfolio_item(item_id: str):
    existing = store.get().find_portfolio_item(item_id)
    if existing is None:
        return jsonify({"error": "Holding not found."}), 404
    store.upsert_portfolio_item(portfolio_item_from_dict({**asdict(existing), **_json_body(), "id": item_id}))
    return jsonify(_state_payload())


@app.delete("/api/portfolio/<item_id>")
def delete_portfolio_item(item_id: str):
    store.remove_portfolio_item(item_id)
    return jsonify(_state_payload())


@app.put("/api/adjustments/<side>/<int:month>")
def set_adjustment(side: str, month: int):
    if side not in ADJUSTMENT_SIDES:
        return jsonify({"error": f"Unknown side {side!r}."}), 404
    store.set_adjustment(side, month, parse_amount(_json_body().get("value")))
    return jsonify(_state_payload())


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run(debug=False, port=int(os.environ.get("FINFAMILY_PORT", 8000)))
