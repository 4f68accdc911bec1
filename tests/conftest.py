"""Pytest configuration and shared fixtures."""

import pytest

from passpolicy.common.settings import get_settings
from passpolicy.policy.options import CharRequirement, PolicyConfig


@pytest.fixture
def default_policy():
    """Policy with every default threshold."""
    return PolicyConfig()


@pytest.fixture
def lenient_policy():
    """Policy with only the length and unique-character rules left on."""
    return PolicyConfig(
        min_length=4,
        require_uppercase=False,
        require_lowercase=False,
        special_chars=CharRequirement.none(),
        digits=CharRequirement.none(),
        no_consecutive_repeated_chars=False,
        no_sequential_chars=False,
        no_dictionary_words=False,
        minimum_unique_chars=0,
        minimum_entropy=0.0,
    )


@pytest.fixture
def sample_config():
    """Sample configuration dictionary."""
    return {
        "policy": {
            "min_length": 14,
            "max_length": 64,
            "require_special_char": True,
            "minimum_special_chars": 2,
            "require_digit": False,
            "excluded_chars": "<>",
            "minimum_unique_chars": 10,
            "minimum_entropy": 60.0,
            "error_separator": "; ",
        },
        "logging": {
            "level": "INFO",
        },
    }


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; reset around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
