"""Banded income tax calculation."""

from __future__ import annotations

from decimal import Decimal

from salary_slip.calculators.constants import DEFAULT_RULES, RuleConstants
from salary_slip.calculators.types import TaxBand


def bands_from_rules(rules: RuleConstants) -> list[TaxBand]:
    """Build the tax band table described by a rule constants table."""
    return [
        TaxBand(min_amount=Decimal("0"), rate=rules.low_salary_tax_factor),
        TaxBand(min_amount=rules.low_salary_threshold, rate=rules.medium_salary_tax_factor),
        TaxBand(min_amount=rules.medium_salary_threshold, rate=rules.high_salary_tax_factor),
    ]


class TaxCalculator:
    """Calculates tax on a basic salary using flat-rate bands.

    Bands are evaluated from the highest lower bound down; the first band
    whose lower bound is <= the salary applies its rate to the whole
    salary. A salary below every band is taxed at the lowest band's rate.

    Example with the default rules:
        22000 -> 22000 * 0.04 = 880
        17600 -> 17600 * 0.02 = 352
         9900 ->  9900 * 0.00 = 0
    """

    def __init__(self, bands: list[TaxBand] | None = None):
        if bands is None:
            bands = bands_from_rules(DEFAULT_RULES)
        if not bands:
            raise ValueError("TaxCalculator requires at least one band")
        self.bands = sorted(bands, key=lambda b: b.min_amount, reverse=True)

    @classmethod
    def from_rules(cls, rules: RuleConstants) -> TaxCalculator:
        return cls(bands_from_rules(rules))

    def band_for(self, basic_salary: Decimal) -> TaxBand:
        """Return the band that applies to a basic salary."""
        for band in self.bands:
            if basic_salary >= band.min_amount:
                return band
        return self.bands[-1]

    def calculate(self, basic_salary: Decimal) -> Decimal:
        """Calculate tax for a basic salary (unrounded)."""
        return basic_salary * self.band_for(basic_salary).rate
