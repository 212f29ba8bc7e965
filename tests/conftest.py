from __future__ import annotations

import pytest
from django.test import override_settings

from tests.payloads import make_payload
from weatherapp.api.views import get_weather_session


@pytest.fixture
def paris_payload() -> dict:
    return make_payload()


@pytest.fixture(autouse=True)
def fresh_session():
    get_weather_session.cache_clear()
    yield
    get_weather_session.cache_clear()


@pytest.fixture
def settings_override():
    """Apply Django settings overrides and rebuild the shared session."""
    overrides = []

    def apply(**kwargs):
        override = override_settings(**kwargs)
        override.enable()
        overrides.append(override)
        get_weather_session.cache_clear()

    yield apply
    for override in reversed(overrides):
        override.disable()
