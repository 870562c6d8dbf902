# engine/state.py
from __future__ import annotations

from ..data_model import AppState, Asset, PortfolioItem, default_state
from .sanitize import state_from_dict, state_to_dict, validate_state
from .storage import STORAGE_KEY, load_state_payload, save_state_payload


class DashboardState:
    """Current ``AppState`` backed by a JSON file; every change is saved."""

    def __init__(self, storage_path: str = "user_data/state.json", key: str = STORAGE_KEY):
        self.storage_path = storage_path
        self.key = key
        payload = load_state_payload(storage_path, key)
        self.state: AppState = default_state() if payload is None else state_from_dict(payload)

    def get(self) -> AppState:
        return self.state

    def replace(self, state: AppState) -> AppState:
        self.state = validate_state(state)
        self._save()
        return self.state

    def reset(self) -> AppState:
        return self.replace(default_state())

    def upsert_asset(self, asset: Asset) -> AppState:
        return self.replace(self.state.with_asset(asset))

    def remove_asset(self, asset_id: str) -> AppState:
        return self.replace(self.state.without_asset(asset_id))

    def upsert_portfolio_item(self, item: PortfolioItem) -> AppState:
        return self.replace(self.state.with_portfolio_item(item))

    def remove_portfolio_item(self, item_id: str) -> AppState:
        return self.replace(self.state.without_portfolio_item(item_id))

    def set_adjustment(self, side: str, month: int, value: float) -> AppState:
        return self.replace(self.state.with_adjustment(side, month, value))

    def _save(self) -> None:
        save_state_payload(self.storage_path, state_to_dict(self.state), self.key)
