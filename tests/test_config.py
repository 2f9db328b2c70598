"""Tests for configuration loading."""

import pytest

from weekendly.config import Config, load_config
from weekendly.core.schedule import Day, DayTimeBounds


@pytest.fixture(autouse=True)
def no_env_key(monkeypatch):
    monkeypatch.delenv("GEOAPIFY_API_KEY", raising=False)


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "nope.conf")
        assert config == Config()

    def test_parses_values(self, tmp_path):
        conf = tmp_path / "weekendly.conf"
        conf.write_text(
            "# Weekendly settings\n"
            "GEOAPIFY_API_KEY=abc123\n"
            'PLAN_NAME="Summer Weekend"\n'
            "SEARCH_RADIUS=2500  # meters\n"
            "SATURDAY_HOURS=08:00-20:00\n"
            "DEFAULT_LOCATION=40.7128,-74.0060\n"
            "not a setting\n"
            "UNKNOWN=1\n"
        )

        config = load_config(conf)

        assert config.geoapify_api_key == "abc123"
        assert config.plan_name == "Summer Weekend"
        assert config.search_radius == 2500
        assert config.time_bounds(Day.SATURDAY) == DayTimeBounds(8, 20)
        assert config.time_bounds(Day.SUNDAY) == DayTimeBounds(9, 22)
        assert config.location() == (40.7128, -74.0060)

    def test_bad_radius_ignored(self, tmp_path):
        conf = tmp_path / "weekendly.conf"
        conf.write_text("SEARCH_RADIUS=far\n")
        assert load_config(conf).search_radius == 5000

    def test_env_overrides_key(self, tmp_path, monkeypatch):
        conf = tmp_path / "weekendly.conf"
        conf.write_text("GEOAPIFY_API_KEY=from-file\n")
        monkeypatch.setenv("GEOAPIFY_API_KEY", "from-env")
        assert load_config(conf).geoapify_api_key == "from-env"


class TestConfig:
    def test_bad_hours_fall_back(self):
        assert Config(sunday_hours="late").time_bounds(Day.SUNDAY) == DayTimeBounds()

    def test_bad_location(self):
        assert Config(default_location="somewhere").location() is None
        assert Config().location() is None

    def test_data_dir_override(self, tmp_path):
        assert Config(data_dir=str(tmp_path)).resolved_data_dir() == tmp_path
