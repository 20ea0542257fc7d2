"""Shared fixtures for password generation tests."""

import random

import pytest

from core.config import GenerationLimits, Settings
from core.models import GenerationOptions, GenerationRequest


# ----------------------------------------------------------------
# Canonical request payloads (JSON wire format)
# ----------------------------------------------------------------

ALL_CLASSES_PAYLOAD = {
    "count": 3,
    "length": 16,
    "costFactor": 10,
    "options": {
        "uppercase": True,
        "lowercase": True,
        "numbers": True,
        "special": True,
        "easyToRead": False,
    },
}

NO_CLASSES_PAYLOAD = {
    "count": 3,
    "length": 8,
    "costFactor": 10,
    "options": {
        "uppercase": False,
        "lowercase": False,
        "numbers": False,
        "special": False,
        "easyToRead": False,
    },
}


# ----------------------------------------------------------------
# Fixtures
# ----------------------------------------------------------------

@pytest.fixture
def seeded_rng():
    """Deterministic random source for reproducible generation."""
    return random.Random(20240611)


@pytest.fixture
def limits():
    return GenerationLimits()


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def make_request():
    """Build a GenerationRequest with sensible test defaults."""
    def _make(count=3, length=12, cost_factor=10, **options):
        return GenerationRequest(
            count=count,
            length=length,
            cost_factor=cost_factor,
            options=GenerationOptions(**options),
        )
    return _make
