"""Salary slip engine.

Computes an employee's net salary from wage, allowance, deduction and
tax rules, and renders the resulting salary slip.
"""

from salary_slip.calculators import (
    DEFAULT_RULES,
    Employee,
    HealthInsurancePackage,
    RuleConstants,
    SalarySlip,
    SalarySlipProcessor,
    WorkPlatform,
)
from salary_slip.exceptions import (
    InvalidInputError,
    MissingCollaboratorError,
    OutOfRangeError,
    SalarySlipError,
)
from salary_slip.zones import StaticZoneService, ZoneService

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_RULES",
    "Employee",
    "HealthInsurancePackage",
    "RuleConstants",
    "SalarySlip",
    "SalarySlipProcessor",
    "WorkPlatform",
    "InvalidInputError",
    "MissingCollaboratorError",
    "OutOfRangeError",
    "SalarySlipError",
    "StaticZoneService",
    "ZoneService",
]
