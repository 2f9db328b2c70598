"""File-based plan storage adapter."""

import json
import logging
from pathlib import Path

from weekendly.core.schedule import WeekendPlan

logger = logging.getLogger(__name__)


class FilePlanRepository:
    """
    JSON file plan storage.

    Implements PlanRepository protocol. The current plan and the saved plans
    each get their own file in the data directory.
    """

    def __init__(self, data_dir: Path | str):
        self.data_dir = Path(data_dir).expanduser()
        self.data_dir.mkdir(parents=True, exist_ok=True)

    @property
    def current_path(self) -> Path:
        return self.data_dir / "current_plan.json"

    @property
    def saved_path(self) -> Path:
        return self.data_dir / "saved_plans.json"

    def _read_json(self, path: Path):
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text())
        except json.JSONDecodeError as e:
            logger.warning(f"Ignoring unreadable {path.name}: {e}")
            return None

    def save(self, plan: WeekendPlan | None) -> None:
        """Store the current plan. None clears it."""
        if plan is None:
            self.current_path.unlink(missing_ok=True)
            return
        self.current_path.write_text(json.dumps(plan.to_dict(), indent=2, ensure_ascii=False))

    def load(self) -> WeekendPlan | None:
        """Restore the current plan. Returns None if missing or unreadable."""
        data = self._read_json(self.current_path)
        if not data:
            return None
        try:
            return WeekendPlan.from_dict(data)
        except (KeyError, ValueError) as e:
            logger.warning(f"Ignoring malformed current plan: {e}")
            return None

    def save_all(self, plans: list[WeekendPlan]) -> None:
        self.saved_path.write_text(
            json.dumps([p.to_dict() for p in plans], indent=2, ensure_ascii=False)
        )

    def load_all(self) -> list[WeekendPlan]:
        data = self._read_json(self.saved_path) or []
        plans = []
        for item in data:
            try:
                plans.append(WeekendPlan.from_dict(item))
            except (KeyError, ValueError) as e:
                logger.warning(f"Skipping malformed saved plan: {e}")
        return plans
