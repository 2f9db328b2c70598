"""Plan persistence interface."""

from typing import Protocol

from weekendly.core.schedule import WeekendPlan


class PlanRepository(Protocol):
    """Interface for saving and restoring plan snapshots."""

    def save(self, plan: WeekendPlan | None) -> None:
        """Store the current plan. None clears it."""
        ...

    def load(self) -> WeekendPlan | None:
        """Restore the current plan. Returns None if there is none."""
        ...

    def save_all(self, plans: list[WeekendPlan]) -> None:
        """Store the list of saved plans."""
        ...

    def load_all(self) -> list[WeekendPlan]:
        """Restore the list of saved plans."""
        ...
