"""
Tests for settings validation.
"""

import pytest

from whisky_api.config import Settings


def test_defaults_are_valid():
    settings = Settings(whisky_store="memory", api_prefix="/rest/whiskys", max_body_size=-1)
    assert settings.uses_redis is False


@pytest.mark.parametrize(
    "overrides",
    [
        {"whisky_store": "mongo"},
        {"api_prefix": "rest/whiskys"},
        {"api_prefix": "/rest/whiskys/"},
        {"max_body_size": -2},
    ],
)
def test_invalid_settings(overrides):
    with pytest.raises(ValueError):
        Settings(**overrides)
