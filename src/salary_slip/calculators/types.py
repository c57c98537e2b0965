"""Type definitions for the salary calculation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum

from salary_slip.exceptions import InvalidInputError


class HealthInsurancePackage(str, Enum):
    """Health insurance packages an employee can enroll in."""

    BASIC = "Basic"
    FAIR = "Fair"
    PREMIUM = "Premium"


class WorkPlatform(str, Enum):
    """Where the employee performs their work."""

    OFFICE = "Office"
    REMOTE = "Remote"
    HYBRID = "Hybrid"


class LineType(str, Enum):
    """Salary slip line item types."""

    BENEFIT = "BENEFIT"
    DEDUCTION = "DEDUCTION"


@dataclass(frozen=True)
class Employee:
    """Employee record consumed by a single salary calculation.

    Raises:
        InvalidInputError: If wage is not a finite number or working days
            is not an integer
    """

    id: int
    name: str
    duty_station: str = ""
    wage: Decimal = Decimal("0")  # Per-day rate
    working_days: int = 0
    is_married: bool = False
    total_dependents: int = 0
    is_danger: bool = False
    has_pension_plan: bool = False
    health_insurance_package: HealthInsurancePackage | None = None
    work_platform: WorkPlatform = WorkPlatform.OFFICE

    def __post_init__(self) -> None:
        object.__setattr__(self, "wage", _to_wage(self.wage))
        if isinstance(self.working_days, bool) or not isinstance(self.working_days, int):
            raise InvalidInputError("employee.working_days", "must be an integer")


def _to_wage(value: object) -> Decimal:
    if value is None or isinstance(value, bool):
        raise InvalidInputError("employee.wage", "must be a number")
    if isinstance(value, Decimal):
        wage = value
    else:
        # Floats go through str so 0.1 stays 0.1
        try:
            wage = Decimal(str(value))
        except InvalidOperation:
            raise InvalidInputError("employee.wage", "must be a number") from None
    if not wage.is_finite():
        raise InvalidInputError("employee.wage", "must be a finite number")
    return wage


@dataclass(frozen=True)
class SlipLine:
    """A single benefit or deduction on a salary slip.

    Amounts are always non-negative; the line type decides the sign
    applied when computing net salary.
    """

    code: str
    label: str
    line_type: LineType
    amount: Decimal


@dataclass
class SalarySlip:
    """Result of calculating one employee's salary.

    Totals are filled in by the processor from LineItemBuilder.
    """

    employee: Employee
    basic_salary: Decimal
    lines: list[SlipLine] = field(default_factory=list)
    total_benefits: Decimal = Decimal("0")  # Basic salary plus every benefit line
    total_deductions: Decimal = Decimal("0")
    net_salary: Decimal = Decimal("0")

    @property
    def benefits(self) -> list[SlipLine]:
        return [line for line in self.lines if line.line_type == LineType.BENEFIT]

    @property
    def deductions(self) -> list[SlipLine]:
        return [line for line in self.lines if line.line_type == LineType.DEDUCTION]

    def amount_of(self, code: str) -> Decimal:
        """Return the amount of the line with the given code."""
        for line in self.lines:
            if line.code == code:
                return line.amount
        raise KeyError(code)


@dataclass(frozen=True)
class TaxBand:
    """Tax band for banded taxation.

    The whole basic salary is taxed at the rate of the highest band whose
    lower bound it reaches.
    """

    min_amount: Decimal  # Inclusive lower bound
    rate: Decimal  # As decimal, e.g., 0.04 for 4%
