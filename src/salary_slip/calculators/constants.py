"""Rule constants consulted by every salary rule.

Pattern:
    processor = SalarySlipProcessor(
        zone_service=zone_service,
        rules=RuleConstants(spouse_allowance_amount=Decimal("700")),
    )

Rules:
    1. Immutable after creation (frozen dataclass).
    2. Production behavior uses DEFAULT_RULES; a different table is only
       ever injected explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class RuleConstants:
    """Allowance amounts, thresholds and rate factors."""

    # Allowances
    spouse_allowance_amount: Decimal = Decimal("620")
    dependency_allowance_per_child_amount: Decimal = Decimal("400")
    max_dependents_factor: int = 5
    max_dependency_allowance_amount: Decimal = Decimal("2000")
    transportation_allowance_amount: Decimal = Decimal("300")

    danger_pay_amount: Decimal = Decimal("2000")

    # Deductions
    pension_rate: Decimal = Decimal("0.02")
    basic_health_care_amount: Decimal = Decimal("500")
    fair_health_care_amount: Decimal = Decimal("750")
    premium_health_care_amount: Decimal = Decimal("1000")

    # Tax bands (lower bound inclusive)
    low_salary_threshold: Decimal = Decimal("10000")
    medium_salary_threshold: Decimal = Decimal("20000")
    low_salary_tax_factor: Decimal = Decimal("0.00")
    medium_salary_tax_factor: Decimal = Decimal("0.02")
    high_salary_tax_factor: Decimal = Decimal("0.04")


DEFAULT_RULES = RuleConstants()
