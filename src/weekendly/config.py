"""Configuration management for Weekendly."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .core.schedule import Day, DayTimeBounds

logger = logging.getLogger(__name__)

WEEKENDLY_HOME = Path(os.environ.get("WEEKENDLY_HOME", Path.home() / "weekendly"))
CONFIG_FILE = WEEKENDLY_HOME / "config" / "weekendly.conf"
DATA_DIR = WEEKENDLY_HOME / "data"


@dataclass
class Config:
    """Weekendly configuration."""

    geoapify_api_key: str = ""
    default_location: str = ""
    search_radius: int = 5000
    saturday_hours: str = "09:00-22:00"
    sunday_hours: str = "09:00-22:00"
    plan_name: str = "My Weekend Plan"
    data_dir: str = ""

    def time_bounds(self, day: Day) -> DayTimeBounds:
        """Configured hours for a day, falling back to the defaults if unparseable."""
        value = self.saturday_hours if day is Day.SATURDAY else self.sunday_hours
        try:
            return DayTimeBounds.parse(value)
        except ValueError as e:
            logger.warning(f"Bad {day.value}_hours {value!r}: {e}")
            return DayTimeBounds()

    def location(self) -> tuple[float, float] | None:
        """Parse default_location "lat,lng", or None if unset or invalid."""
        if not self.default_location:
            return None
        try:
            lat, lng = (float(part) for part in self.default_location.split(","))
        except ValueError:
            logger.warning(f"Bad DEFAULT_LOCATION {self.default_location!r}, expected lat,lng")
            return None
        return lat, lng

    def resolved_data_dir(self) -> Path:
        if self.data_dir:
            return Path(self.data_dir).expanduser()
        return DATA_DIR


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from weekendly.conf, then apply environment overrides."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if config_file.exists():
        for line in config_file.read_text().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if "=" not in line:
                continue

            key, _, value = line.partition("=")
            key = key.strip().lower()
            value = _unquote(value.strip())

            match key:
                case "geoapify_api_key":
                    config.geoapify_api_key = value
                case "default_location":
                    config.default_location = value
                case "search_radius":
                    try:
                        config.search_radius = int(value)
                    except ValueError:
                        logger.warning(f"Ignoring non-numeric SEARCH_RADIUS {value!r}")
                case "saturday_hours":
                    config.saturday_hours = value
                case "sunday_hours":
                    config.sunday_hours = value
                case "plan_name":
                    config.plan_name = value
                case "data_dir":
                    config.data_dir = value
                case _:
                    logger.debug(f"Unknown config key {key!r}")

    if os.environ.get("GEOAPIFY_API_KEY"):
        config.geoapify_api_key = os.environ["GEOAPIFY_API_KEY"]

    return config
