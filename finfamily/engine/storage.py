# engine/storage.py
import json
import logging
import math
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# Bump the suffix when the saved shape changes; older documents are ignored.
STORAGE_KEY = "finance_dashboard_2026_v22"


def ensure_user_data_dir(path: str) -> None:
    folder = os.path.dirname(path)
    if folder and not os.path.exists(folder):
        os.makedirs(folder, exist_ok=True)


def _sanitize_json_compat(value: Any):
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return value
    if isinstance(value, dict):
        return {key: _sanitize_json_compat(val) for key, val in value.items()}
    if isinstance(value, (list, tuple)):
        return [_sanitize_json_compat(item) for item in value]
    return value


def _read_document(path: str) -> Dict[str, Any]:
    if not os.path.exists(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw_text = f.read().strip()
            if not raw_text:
                return {}
            data = json.loads(raw_text)
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable state file %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_state_payload(path: str, key: str = STORAGE_KEY) -> Optional[Dict[str, Any]]:
    """Return the saved state dict under ``key``, or None when nothing usable is stored."""
    payload = _read_document(path).get(key)
    if not isinstance(payload, dict):
        return None
    return _sanitize_json_compat(payload)


def _write_document(path: str, document: Dict[str, Any]) -> None:
    ensure_user_data_dir(path)
    tmp_path = f"{path}.tmp"
    clean = _sanitize_json_compat(document)
    with open(tmp_path, "w", encoding="utf-8") as f:
        json.dump(clean, f, allow_nan=False)
    os.replace(tmp_path, path)


def save_state_payload(path: str, payload: Dict[str, Any], key: str = STORAGE_KEY) -> None:
    """Store ``payload`` under ``key``, keeping documents saved under other keys."""
    document = _read_document(path)
    document[key] = payload
    _write_document(path, document)
    logger.debug("Saved state to %s under %s", path, key)
