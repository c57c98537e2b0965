"""Salary slip line item builder."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from salary_slip.calculators.types import LineType, SlipLine


class LineItemBuilder:
    """Builds salary slip lines and display amounts.

    Sign conventions:
    - Line amounts are stored non-negative
    - BENEFIT lines add to net salary
    - DEDUCTION lines subtract from net salary

    Rounding:
    - Internal compute is exact Decimal, never rounded
    - Display rounds to whole units, half-up, thousands grouped
    """

    DISPLAY_PRECISION = Decimal("1")

    @staticmethod
    def round_for_display(amount: Decimal) -> Decimal:
        """Round amount to whole units (half-up)."""
        return amount.quantize(LineItemBuilder.DISPLAY_PRECISION, rounding=ROUND_HALF_UP)

    @staticmethod
    def format_amount(amount: Decimal, symbol: str = "$") -> str:
        """Format an amount for display, e.g. Decimal("12345.5") -> "$12,346"."""
        rounded = LineItemBuilder.round_for_display(amount)
        sign = "-" if rounded < 0 else ""
        return f"{sign}{symbol}{abs(rounded):,}"

    @staticmethod
    def create_benefit_line(code: str, label: str, amount: Decimal) -> SlipLine:
        """Create a benefit line item."""
        return SlipLine(code=code, label=label, line_type=LineType.BENEFIT, amount=amount)

    @staticmethod
    def create_deduction_line(code: str, label: str, amount: Decimal) -> SlipLine:
        """Create a deduction line item."""
        return SlipLine(code=code, label=label, line_type=LineType.DEDUCTION, amount=amount)

    @staticmethod
    def calculate_net_from_lines(basic_salary: Decimal, lines: list[SlipLine]) -> Decimal:
        """Calculate net salary from line items.

        NET = BASIC + Σ(BENEFIT) - Σ(DEDUCTION)
        """
        net = basic_salary
        for line in lines:
            if line.line_type == LineType.BENEFIT:
                net += line.amount
            else:
                net -= line.amount
        return net

    @staticmethod
    def sum_by_type(lines: list[SlipLine]) -> dict[LineType, Decimal]:
        """Sum line amounts by type."""
        totals: dict[LineType, Decimal] = {lt: Decimal("0") for lt in LineType}
        for line in lines:
            totals[line.line_type] += line.amount
        return totals
