"""Salary slip processor - computes every salary component for an employee."""

from __future__ import annotations

import logging
from decimal import Decimal

from salary_slip.calculators.constants import DEFAULT_RULES, RuleConstants
from salary_slip.calculators.line_builder import LineItemBuilder
from salary_slip.calculators.tax_calculator import TaxCalculator
from salary_slip.calculators.types import (
    Employee,
    HealthInsurancePackage,
    LineType,
    SalarySlip,
    WorkPlatform,
)
from salary_slip.exceptions import (
    InvalidInputError,
    MissingCollaboratorError,
    OutOfRangeError,
)
from salary_slip.zones.base import ZoneService

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def _require_employee(employee: Employee | None) -> Employee:
    if employee is None:
        raise InvalidInputError("employee")
    return employee


class SalarySlipProcessor:
    """Computes salary components, net salary and the printed salary slip.

    Every component is derived independently from the employee record:

        NET = (basic + transportation + spouse + dependency + danger pay)
              - (pension + health insurance + tax)

    The processor holds no state besides its rule table and zone service,
    so one instance can serve any number of employees.
    """

    def __init__(
        self,
        zone_service: ZoneService | None = None,
        rules: RuleConstants = DEFAULT_RULES,
    ):
        self.zone_service = zone_service
        self.rules = rules
        self.tax_calculator = TaxCalculator.from_rules(rules)

    # ------------------------------------------------------------------
    # Components
    # ------------------------------------------------------------------

    def calculate_basic_salary(self, employee: Employee | None) -> Decimal:
        """Calculate basic salary as wage * working days.

        Raises:
            InvalidInputError: If employee is missing or wage/days are negative
        """
        employee = _require_employee(employee)
        if employee.wage < 0:
            raise InvalidInputError("employee.wage", "must be non-negative")
        if employee.working_days < 0:
            raise InvalidInputError("employee.working_days", "must be non-negative")

        return employee.wage * employee.working_days

    def calculate_spouse_allowance(self, employee: Employee | None) -> Decimal:
        employee = _require_employee(employee)
        return self.rules.spouse_allowance_amount if employee.is_married else ZERO

    def calculate_dependency_allowance(self, employee: Employee | None) -> Decimal:
        """Calculate the allowance for dependents.

        Each dependent earns the per-child amount. Only a count strictly
        above the max dependents factor switches to the capped amount.

        Raises:
            InvalidInputError: If employee is missing
            OutOfRangeError: If total dependents is negative
        """
        employee = _require_employee(employee)
        dependents = employee.total_dependents
        if dependents < 0:
            raise OutOfRangeError("total_dependents", dependents)

        if dependents > self.rules.max_dependents_factor:
            return self.rules.max_dependency_allowance_amount
        if dependents == 0:
            return ZERO
        return dependents * self.rules.dependency_allowance_per_child_amount

    def calculate_pension(self, employee: Employee | None) -> Decimal:
        employee = _require_employee(employee)
        if not employee.has_pension_plan:
            return ZERO
        return self.rules.pension_rate * self.calculate_basic_salary(employee)

    def calculate_health_insurance(self, employee: Employee | None) -> Decimal:
        employee = _require_employee(employee)
        package = employee.health_insurance_package
        if package is None:
            return ZERO

        amounts = {
            HealthInsurancePackage.BASIC: self.rules.basic_health_care_amount,
            HealthInsurancePackage.FAIR: self.rules.fair_health_care_amount,
            HealthInsurancePackage.PREMIUM: self.rules.premium_health_care_amount,
        }
        return amounts.get(package, ZERO)

    def calculate_transportation_allowance(self, employee: Employee | None) -> Decimal:
        """Calculate transportation allowance from the work platform.

        Office gets the full amount, Remote nothing. Every other platform,
        Hybrid included, falls through to half the amount.
        """
        employee = _require_employee(employee)
        if employee.work_platform == WorkPlatform.OFFICE:
            return self.rules.transportation_allowance_amount
        if employee.work_platform == WorkPlatform.REMOTE:
            return ZERO
        return self.rules.transportation_allowance_amount / 2

    def calculate_danger_pay(self, employee: Employee | None) -> Decimal:
        """Calculate danger pay.

        The zone service is consulted only when the employee is not
        flagged as in danger. Its errors propagate to the caller.

        Raises:
            InvalidInputError: If employee is missing
            MissingCollaboratorError: If a zone lookup is needed and no
                zone service was configured
        """
        employee = _require_employee(employee)
        if employee.is_danger:
            return self.rules.danger_pay_amount

        if self.zone_service is None:
            raise MissingCollaboratorError("zone service", "danger pay calculation")

        is_danger_zone = self.zone_service.is_danger_zone(employee.duty_station)
        logger.debug(
            "Zone lookup for employee %s at %r: danger=%s",
            employee.id,
            employee.duty_station,
            is_danger_zone,
        )
        if is_danger_zone:
            return self.rules.danger_pay_amount
        return ZERO

    def calculate_tax(self, employee: Employee | None) -> Decimal:
        basic_salary = self.calculate_basic_salary(employee)
        return self.tax_calculator.calculate(basic_salary)

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------

    def calculate_net_salary(self, employee: Employee | None) -> Decimal:
        """Calculate net salary: benefits minus deductions (unrounded)."""
        employee = _require_employee(employee)

        danger_pay = self.calculate_danger_pay(employee)
        transportation_allowance = self.calculate_transportation_allowance(employee)
        dependency_allowance = self.calculate_dependency_allowance(employee)
        spouse_allowance = self.calculate_spouse_allowance(employee)
        basic_salary = self.calculate_basic_salary(employee)

        health_insurance = self.calculate_health_insurance(employee)
        pension = self.calculate_pension(employee)
        tax = self.calculate_tax(employee)

        net_salary = (
            basic_salary + transportation_allowance + spouse_allowance + dependency_allowance + danger_pay
        ) - (pension + health_insurance + tax)

        logger.debug("Net salary for employee %s: %s", employee.id, net_salary)
        return net_salary

    def calculate_slip(self, employee: Employee | None) -> SalarySlip:
        """Calculate every component and return them as a salary slip.

        Benefit lines come first, in report order, then deduction lines.
        """
        employee = _require_employee(employee)

        lines = [
            LineItemBuilder.create_benefit_line(
                "dependency_allowance",
                "Dependents Allowance",
                self.calculate_dependency_allowance(employee),
            ),
            LineItemBuilder.create_benefit_line(
                "spouse_allowance",
                "Spouse Allowance",
                self.calculate_spouse_allowance(employee),
            ),
            LineItemBuilder.create_benefit_line(
                "danger_pay",
                "Danger Pay",
                self.calculate_danger_pay(employee),
            ),
            LineItemBuilder.create_benefit_line(
                "transportation_allowance",
                "Transportation Allowance",
                self.calculate_transportation_allowance(employee),
            ),
            LineItemBuilder.create_deduction_line(
                "health_insurance",
                "Health Insurance Deductions",
                self.calculate_health_insurance(employee),
            ),
            LineItemBuilder.create_deduction_line(
                "pension",
                "Pension Deductions",
                self.calculate_pension(employee),
            ),
            LineItemBuilder.create_deduction_line(
                "tax",
                "Tax",
                self.calculate_tax(employee),
            ),
        ]

        basic_salary = self.calculate_basic_salary(employee)
        totals = LineItemBuilder.sum_by_type(lines)

        return SalarySlip(
            employee=employee,
            basic_salary=basic_salary,
            lines=lines,
            total_benefits=basic_salary + totals[LineType.BENEFIT],
            total_deductions=totals[LineType.DEDUCTION],
            net_salary=LineItemBuilder.calculate_net_from_lines(basic_salary, lines),
        )

    def process(self, employee: Employee | None) -> str:
        """Render the salary slip of an employee as text."""
        slip = self.calculate_slip(employee)
        return render_slip(slip)


def render_slip(slip: SalarySlip) -> str:
    """Render a salary slip as a fixed-section text block."""
    fmt = LineItemBuilder.format_amount
    employee = slip.employee

    out = [
        "",
        " --- Employee Information ---",
        "",
        f"   Name: {employee.name}",
        f"   DutyStation: {employee.duty_station}",
        f"   Wage: {fmt(employee.wage)}",
        f"   Days: {employee.working_days} days",
        f"   Basic Salary: {fmt(slip.basic_salary)}",
        "",
        " --- Benefits ---",
        "",
    ]
    out.extend(f"   {line.label}: {fmt(line.amount)}" for line in slip.benefits)
    out.extend(["", " --- Deductions ---", ""])
    out.extend(f"   {line.label}: {fmt(line.amount)}" for line in slip.deductions)
    out.extend(
        [
            "",
            " --- Net Salary ---",
            "",
            f"   {fmt(slip.net_salary)}",
        ]
    )
    return "\n".join(out)
