"""Ports - interfaces/protocols for external dependencies."""

from .place_lookup import PlaceLookup
from .plan_repository import PlanRepository

__all__ = [
    "PlaceLookup",
    "PlanRepository",
]
