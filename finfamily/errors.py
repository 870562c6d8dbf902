from __future__ import annotations


class InvalidConfiguration(ValueError):
    """Raised when an input snapshot cannot be projected (e.g. a non-positive FX rate)."""
