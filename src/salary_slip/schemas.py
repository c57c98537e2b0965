"""Pydantic schemas for employee records read from JSON."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from salary_slip.calculators.types import Employee, HealthInsurancePackage, WorkPlatform


class EmployeeRecord(BaseModel):
    """Schema for an employee record submitted for calculation.

    Dependents are not range-checked here; the dependency allowance rule
    reports a negative count itself.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: int
    name: str
    duty_station: str = ""
    wage: Decimal = Field(default=Decimal("0"), ge=0)
    working_days: int = Field(default=0, ge=0)
    is_married: bool = False
    total_dependents: int = 0
    is_danger: bool = False
    has_pension_plan: bool = False
    health_insurance_package: HealthInsurancePackage | None = None
    work_platform: WorkPlatform = WorkPlatform.OFFICE

    def to_employee(self) -> Employee:
        """Convert to the calculation input record."""
        return Employee(**self.model_dump())
