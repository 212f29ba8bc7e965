from __future__ import annotations

import json
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from tests.payloads import BASE_URL, PARIS, make_payload
from weatherapp.api.views import get_weather_session


def test_fetch_by_city_prints_json(requests_mock) -> None:
    requests_mock.get(BASE_URL, json=PARIS)
    out = StringIO()

    call_command("weather_fetch", city="Paris", stdout=out)

    payload = json.loads(out.getvalue())
    assert payload["city"] == "Paris"
    assert payload["theme"] == "clear"
    assert get_weather_session().history == ("Paris",)


def test_fetch_by_coordinates(requests_mock) -> None:
    requests_mock.get(BASE_URL, json=make_payload("Oslo"))
    out = StringIO()

    call_command("weather_fetch", lat=59.91, lon=10.75, stdout=out)

    assert json.loads(out.getvalue())["city"] == "Oslo"
    assert requests_mock.last_request.qs["lon"] == ["10.75"]


def test_fetch_here_uses_device_position(requests_mock) -> None:
    requests_mock.get(BASE_URL, json=make_payload("Paris"))
    out = StringIO()

    call_command("weather_fetch", here=True, stdout=out)

    assert requests_mock.last_request.qs["lat"] == ["48.8566"]


def test_unknown_city_raises_command_error(requests_mock) -> None:
    requests_mock.get(BASE_URL, status_code=404, json={"cod": "404"})

    with pytest.raises(CommandError, match="City not found"):
        call_command("weather_fetch", city="Atlantis", stdout=StringIO())


def test_latitude_without_longitude(requests_mock) -> None:
    with pytest.raises(CommandError):
        call_command("weather_fetch", lat=10.0, stdout=StringIO())

    assert requests_mock.call_count == 0
