"""In-memory zone service backed by a fixed set of duty stations.

Replace with an adapter over the security office's zone registry for
production classifications.
"""

from __future__ import annotations

from collections.abc import Iterable


class StaticZoneService:
    """Zone service that classifies a fixed list of duty stations.

    Matching ignores case and surrounding whitespace.
    """

    def __init__(self, danger_zones: Iterable[str] = ()):
        self._danger_zones = frozenset(self._normalize(z) for z in danger_zones if z.strip())

    @staticmethod
    def _normalize(duty_station: str) -> str:
        return duty_station.strip().casefold()

    @property
    def danger_zones(self) -> frozenset[str]:
        return self._danger_zones

    def is_danger_zone(self, duty_station: str) -> bool:
        """Return True if the duty station is in the configured set."""
        if not duty_station:
            return False
        return self._normalize(duty_station) in self._danger_zones
