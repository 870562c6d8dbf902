import json
import math

from finfamily.backend import _dashboard_payload
from finfamily.engine import build_dashboard
from finfamily.engine.storage import STORAGE_KEY, _sanitize_json_compat, load_state_payload, save_state_payload


def test_sanitize_json_compat_replaces_special_numbers():
    payload = {
        "float": math.nan,
        "list": [1, float("inf"), -float("inf")],
        "tuple": (2.5, math.nan),
        "nested": {"value": math.nan},
    }

    clean = _sanitize_json_compat(payload)

    assert clean == {
        "float": None,
        "list": [1, None, None],
        "tuple": [2.5, None],
        "nested": {"value": None},
    }


def test_save_state_persists_sanitized_values(tmp_path):
    path = tmp_path / "state.json"

    save_state_payload(str(path), {"income": {"base_salary_gross": math.nan}, "items": [1, float("inf")]})

    with path.open("r", encoding="utf-8") as handle:
        stored = json.load(handle)

    assert stored == {STORAGE_KEY: {"income": {"base_salary_gross": None}, "items": [1, None]}}
    assert not (tmp_path / "state.json.tmp").exists()


def test_save_creates_missing_directories(tmp_path):
    path = tmp_path / "user_data" / "nested" / "state.json"

    save_state_payload(str(path), {"income": {}})

    assert load_state_payload(str(path)) == {"income": {}}


def test_documents_under_other_keys_survive_a_save(tmp_path):
    path = tmp_path / "state.json"
    path.write_text(json.dumps({"finance_dashboard_2026_v21": {"old": True}}), encoding="utf-8")

    save_state_payload(str(path), {"new": True})

    stored = json.loads(path.read_text(encoding="utf-8"))
    assert stored["finance_dashboard_2026_v21"] == {"old": True}
    assert load_state_payload(str(path)) == {"new": True}
    assert load_state_payload(str(path), key="finance_dashboard_2026_v21") == {"old": True}


def test_load_returns_none_for_missing_empty_or_corrupt_files(tmp_path):
    missing = tmp_path / "missing.json"
    empty = tmp_path / "empty.json"
    corrupt = tmp_path / "corrupt.json"
    empty.write_text("   ", encoding="utf-8")
    corrupt.write_text("{not json", encoding="utf-8")

    assert load_state_payload(str(missing)) is None
    assert load_state_payload(str(empty)) is None
    assert load_state_payload(str(corrupt)) is None


def test_dashboard_payload_is_json_safe(reference_state):
    payload = _dashboard_payload(build_dashboard(reference_state))

    encoded = json.dumps(payload, allow_nan=False)

    assert "unrealized_pl" in payload["portfolio"]["totals"]
    assert len(payload["cashflow"]["months"]) == 12
    assert encoded
