"""
Settings Tests

Tests for validation of environment-driven collection settings.
"""

import pytest
from pydantic import ValidationError

from api.config import Settings
from goblet_contracts.types import YEAR_SECONDS


def make_settings(**overrides) -> Settings:
    values = {"api_key": "test_api_key", "admin_address": "addr_test1_admin"}
    values.update(overrides)
    return Settings(**values)


def test_default_year_window():
    assert make_settings().year_window_seconds == YEAR_SECONDS


@pytest.mark.parametrize("window_seconds", [0, -1])
def test_non_positive_year_window_is_rejected(window_seconds):
    with pytest.raises(ValidationError):
        make_settings(year_window_seconds=window_seconds)
