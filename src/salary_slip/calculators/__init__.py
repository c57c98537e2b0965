"""Salary calculation engine."""

from salary_slip.calculators.constants import DEFAULT_RULES, RuleConstants
from salary_slip.calculators.line_builder import LineItemBuilder
from salary_slip.calculators.processor import SalarySlipProcessor, render_slip
from salary_slip.calculators.tax_calculator import TaxCalculator
from salary_slip.calculators.types import (
    Employee,
    HealthInsurancePackage,
    LineType,
    SalarySlip,
    SlipLine,
    TaxBand,
    WorkPlatform,
)

__all__ = [
    "DEFAULT_RULES",
    "RuleConstants",
    "LineItemBuilder",
    "SalarySlipProcessor",
    "render_slip",
    "TaxCalculator",
    "Employee",
    "HealthInsurancePackage",
    "LineType",
    "SalarySlip",
    "SlipLine",
    "TaxBand",
    "WorkPlatform",
]
