"""Place lookup interface."""

from typing import Protocol

from weekendly.core.places import PlaceRecord


class PlaceLookup(Protocol):
    """Interface for finding places near a coordinate."""

    def search(
        self,
        lat: float,
        lng: float,
        radius_meters: int = 5000,
        categories: list[str] | None = None,
    ) -> list[PlaceRecord]:
        """Places within the radius, nearest first."""
        ...

    def reverse_geocode(self, lat: float, lng: float) -> str:
        """Human-readable address for a coordinate."""
        ...
