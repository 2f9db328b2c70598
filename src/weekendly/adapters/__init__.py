"""Adapters - I/O implementations of ports."""

from .file_plans import FilePlanRepository
from .geoapify import GeoapifyPlacesAdapter, PlaceLookupError

__all__ = [
    "FilePlanRepository",
    "GeoapifyPlacesAdapter",
    "PlaceLookupError",
]
