"""Tests for YAML config loader."""

import pytest

from datekit.core.config import get_setting, load_config, load_default_config


class TestConfig:
    def test_load_config_from_file(self, config_file):
        config = load_config(config_file({"key": "value", "nested": {"a": 1}}))
        assert config["key"] == "value"
        assert config["nested"]["a"] == 1

    def test_load_config_missing_file_raises(self):
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/path.yaml")

    def test_load_empty_config_returns_empty_dict(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)) == {}

    def test_get_setting_dot_notation(self, config_file):
        config = load_config(
            config_file(
                {
                    "search": {"friday_13th_max_months": 15},
                    "formats": {"schedule_date": "%d-%m-%Y"},
                }
            )
        )
        assert get_setting(config, "search.friday_13th_max_months") == 15
        assert get_setting(config, "formats.schedule_date") == "%d-%m-%Y"

    def test_get_setting_default_value(self, config_file):
        config = load_config(config_file({"a": 1}))
        assert get_setting(config, "nonexistent.key", default=42) == 42

    def test_get_setting_missing_no_default_raises(self, config_file):
        config = load_config(config_file({"a": 1}))
        with pytest.raises(KeyError):
            get_setting(config, "nonexistent.key")


class TestDefaultConfig:
    def test_default_schedule_format(self):
        config = load_default_config()
        assert get_setting(config, "formats.schedule_date", "%d-%m-%Y") == "%d-%m-%Y"

    def test_default_search_guard_covers_longest_gap(self):
        # consecutive Friday-the-13ths can be 14 months apart
        config = load_default_config()
        assert get_setting(config, "search.friday_13th_max_months", 15) >= 15

    def test_default_config_is_loaded_once(self):
        assert load_default_config() is load_default_config()
