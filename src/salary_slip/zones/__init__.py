"""Duty station risk lookups."""

from salary_slip.zones.base import ZoneService
from salary_slip.zones.static import StaticZoneService

__all__ = [
    "ZoneService",
    "StaticZoneService",
]
