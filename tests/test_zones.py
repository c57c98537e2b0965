"""Tests for zone services."""

import pytest

from salary_slip.zones.static import StaticZoneService


class TestStaticZoneService:
    """Test in-memory zone classification."""

    def test_listed_station_is_danger_zone(self):
        service = StaticZoneService(["Kabul", "Mogadishu"])
        assert service.is_danger_zone("Kabul") is True

    def test_unlisted_station_is_safe(self):
        service = StaticZoneService(["Kabul"])
        assert service.is_danger_zone("Amman") is False

    @pytest.mark.parametrize("station", ["kabul", "KABUL", "  Kabul  "])
    def test_match_ignores_case_and_whitespace(self, station):
        service = StaticZoneService(["Kabul"])
        assert service.is_danger_zone(station) is True

    def test_empty_station_is_safe(self):
        service = StaticZoneService(["Kabul"])
        assert service.is_danger_zone("") is False

    def test_blank_entries_ignored(self):
        service = StaticZoneService(["", "   ", "Juba"])
        assert service.danger_zones == frozenset({"juba"})

    def test_no_zones_configured(self):
        service = StaticZoneService()
        assert service.is_danger_zone("Kabul") is False
