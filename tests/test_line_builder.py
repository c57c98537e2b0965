"""Tests for line item builder."""

from decimal import Decimal

import pytest

from salary_slip.calculators.line_builder import LineItemBuilder
from salary_slip.calculators.types import LineType, SlipLine


class TestLineItemBuilder:
    """Test line item builder functionality."""

    def test_round_for_display(self):
        """Test rounding to whole units."""
        assert LineItemBuilder.round_for_display(Decimal("10.4")) == Decimal("10")
        assert LineItemBuilder.round_for_display(Decimal("10.6")) == Decimal("11")

        # Half-up rounding
        assert LineItemBuilder.round_for_display(Decimal("10.5")) == Decimal("11")
        assert LineItemBuilder.round_for_display(Decimal("11.5")) == Decimal("12")

    @pytest.mark.parametrize(
        "amount,expected",
        [
            (Decimal("0"), "$0"),
            (Decimal("150"), "$150"),
            (Decimal("10000"), "$10,000"),
            (Decimal("1234.5"), "$1,235"),
            (Decimal("1234567.49"), "$1,234,567"),
            (Decimal("40.00"), "$40"),
            (Decimal("-2500"), "-$2,500"),
        ],
    )
    def test_format_amount(self, amount, expected):
        assert LineItemBuilder.format_amount(amount) == expected

    def test_create_benefit_line(self):
        line = LineItemBuilder.create_benefit_line("danger_pay", "Danger Pay", Decimal("2000"))

        assert line.line_type == LineType.BENEFIT
        assert line.amount == Decimal("2000")
        assert line.code == "danger_pay"
        assert line.label == "Danger Pay"

    def test_create_deduction_line(self):
        """Deduction lines keep a positive amount; the type carries the sign."""
        line = LineItemBuilder.create_deduction_line("tax", "Tax", Decimal("352"))

        assert line.line_type == LineType.DEDUCTION
        assert line.amount == Decimal("352")

    def test_calculate_net_from_lines(self):
        lines = [
            SlipLine("spouse_allowance", "Spouse Allowance", LineType.BENEFIT, Decimal("620")),
            SlipLine("pension", "Pension Deductions", LineType.DEDUCTION, Decimal("200")),
            SlipLine("tax", "Tax", LineType.DEDUCTION, Decimal("200")),
        ]

        net = LineItemBuilder.calculate_net_from_lines(Decimal("10000"), lines)

        # 10000 + 620 - 200 - 200
        assert net == Decimal("10220")

    def test_sum_by_type(self):
        lines = [
            SlipLine("a", "A", LineType.BENEFIT, Decimal("100")),
            SlipLine("b", "B", LineType.BENEFIT, Decimal("50")),
            SlipLine("c", "C", LineType.DEDUCTION, Decimal("30")),
        ]

        totals = LineItemBuilder.sum_by_type(lines)

        assert totals[LineType.BENEFIT] == Decimal("150")
        assert totals[LineType.DEDUCTION] == Decimal("30")
