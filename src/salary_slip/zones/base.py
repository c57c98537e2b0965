"""Base protocol for duty station risk lookups.

The salary processor asks a ZoneService whether a duty station is a
danger zone; it never knows where that classification comes from.
"""

from __future__ import annotations

from typing import Protocol


class ZoneService(Protocol):
    """Protocol for zone risk lookups."""

    def is_danger_zone(self, duty_station: str) -> bool:
        """Return True if the duty station is classified as hazardous.

        Args:
            duty_station: Duty station name as recorded on the employee.

        Returns:
            Whether the station qualifies for danger pay.
        """
        ...
