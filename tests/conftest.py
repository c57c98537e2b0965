"""Pytest fixtures for salary slip engine tests."""

from __future__ import annotations

from decimal import Decimal

import pytest

from salary_slip.calculators.processor import SalarySlipProcessor
from salary_slip.calculators.types import Employee

from tests.fakes import RecordingZoneService


@pytest.fixture
def safe_zones() -> RecordingZoneService:
    return RecordingZoneService(is_danger=False)


@pytest.fixture
def danger_zones() -> RecordingZoneService:
    return RecordingZoneService(is_danger=True)


@pytest.fixture
def processor(safe_zones) -> SalarySlipProcessor:
    """Processor with a zone service that reports every station as safe."""
    return SalarySlipProcessor(zone_service=safe_zones)


@pytest.fixture
def bare_processor() -> SalarySlipProcessor:
    """Processor with no zone service configured."""
    return SalarySlipProcessor()


@pytest.fixture
def make_employee():
    """Factory for employee records with sensible defaults."""

    def _make(**overrides) -> Employee:
        fields = {
            "id": 1,
            "name": "Test Employee",
            "duty_station": "Amman",
            "wage": Decimal("500"),
            "working_days": 20,
        }
        fields.update(overrides)
        return Employee(**fields)

    return _make
