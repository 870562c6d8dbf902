"""Progressive withholding model for employment income.

Three tiers are applied in order: a capped social-security contribution,
bracketed income tax on what remains, and a flat local surtax on the same
taxable base.
"""

from __future__ import annotations

from dataclasses import dataclass

SOCIAL_SECURITY_CAP = 119650.0
SOCIAL_SECURITY_RATE = 0.0919
LOCAL_SURTAX_RATE = 0.025

# (upper bound of taxable income, marginal rate); the last bracket is open-ended.
INCOME_TAX_BRACKETS: tuple[tuple[float, float], ...] = (
    (28000.0, 0.23),
    (50000.0, 0.35),
    (float("inf"), 0.43),
)


@dataclass(frozen=True)
class TaxBreakdown:
    gross: float
    contribution: float
    taxable: float
    income_tax: float
    local_tax: float
    net: float


def income_tax(taxable: float) -> float:
    tax = 0.0
    lower = 0.0
    for upper, rate in INCOME_TAX_BRACKETS:
        if taxable <= upper:
            return tax + (taxable - lower) * rate
        tax += (upper - lower) * rate
        lower = upper
    return tax


def tax_breakdown(gross_annual: float) -> TaxBreakdown:
    contribution = min(gross_annual, SOCIAL_SECURITY_CAP) * SOCIAL_SECURITY_RATE
    taxable = gross_annual - contribution
    bracket_tax = income_tax(taxable)
    local_tax = taxable * LOCAL_SURTAX_RATE
    return TaxBreakdown(
        gross=gross_annual,
        contribution=contribution,
        taxable=taxable,
        income_tax=bracket_tax,
        local_tax=local_tax,
        net=gross_annual - contribution - bracket_tax - local_tax,
    )


def net_annual(gross_annual: float) -> float:
    return tax_breakdown(gross_annual).net


def marginal_net(base_gross: float, extra_gross: float) -> float:
    """Net value of ``extra_gross`` when stacked on top of ``base_gross``.

    The extra amount is taxed at the household's marginal rate, so this is the
    difference between two full computations, never ``net_annual(extra_gross)``.
    """
    return net_annual(base_gross + extra_gross) - net_annual(base_gross)
