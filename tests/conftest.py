"""Shared test fixtures for datekit tests."""

from datetime import date

import pytest
import yaml

from datekit.schedule.work_schedule import DateRange


@pytest.fixture
def january_2024() -> DateRange:
    """First half of January 2024 (Mon 2024-01-01 .. Mon 2024-01-15)."""
    return DateRange(start=date(2024, 1, 1), end=date(2024, 1, 15))


@pytest.fixture
def quarter_range() -> DateRange:
    """A few months spanning a leap day and a year boundary."""
    return DateRange(start=date(2023, 11, 20), end=date(2024, 3, 10))


@pytest.fixture
def config_file(tmp_path):
    """Write a YAML config and return its path."""

    def _write(data: dict) -> str:
        path = tmp_path / "test.yaml"
        path.write_text(yaml.dump(data))
        return str(path)

    return _write
