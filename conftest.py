from __future__ import annotations

import os

import django
import pytest
import requests_mock as requests_mock_lib


os.environ.setdefault("DJANGO_SECRET_KEY", "test-secret")
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "weatherapp.settings")
os.environ.setdefault("OPENWEATHER_API_KEY", "test-key")
os.environ.setdefault("OPENWEATHER_BASE_URL", "https://openweather.test/data/2.5/weather")
os.environ.setdefault("DEVICE_LATITUDE", "48.8566")
os.environ.setdefault("DEVICE_LONGITUDE", "2.3522")
os.environ.setdefault("TESTING_MODE", "1")

django.setup()


@pytest.fixture()
def requests_mock():
    with requests_mock_lib.Mocker() as mocker:
        yield mocker
