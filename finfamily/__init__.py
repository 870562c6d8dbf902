"""Household cash-flow, net-worth and portfolio projections for a single year."""

from .errors import InvalidConfiguration

__all__ = ["InvalidConfiguration"]
