from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from tests.payloads import make_payload
from weatherapp.core.entities import Coordinate, WeatherSnapshot
from weatherapp.core.providers.base import DecodeError


def test_snapshot_from_payload_copies_every_field(paris_payload) -> None:
    snapshot = WeatherSnapshot.from_payload(paris_payload)

    assert snapshot == WeatherSnapshot(
        city="Paris",
        temperature_c=18.5,
        feels_like_c=17.9,
        humidity_percent=60,
        wind_speed_ms=3.4,
        pressure_hpa=1012,
        description="clear sky",
        icon_code="01d",
        sunrise=1700000000,
        sunset=1700040000,
    )


def test_integer_temperatures_are_coerced_to_float() -> None:
    payload = make_payload(main={"temp": 20, "feels_like": 19, "humidity": 55, "pressure": 1000}, wind={"speed": 0})

    snapshot = WeatherSnapshot.from_payload(payload)

    assert isinstance(snapshot.temperature_c, float)
    assert isinstance(snapshot.feels_like_c, float)
    assert isinstance(snapshot.wind_speed_ms, float)
    assert snapshot.temperature_c == 20.0


def test_integral_float_humidity_is_accepted() -> None:
    payload = make_payload(main={"temp": 1.0, "feels_like": 0.5, "humidity": 80.0, "pressure": 1001})

    assert WeatherSnapshot.from_payload(payload).humidity_percent == 80


@pytest.mark.parametrize(
    "mutate",
    [
        lambda p: p.pop("weather"),
        lambda p: p.update(weather=[]),
        lambda p: p.pop("name"),
        lambda p: p["main"].pop("feels_like"),
        lambda p: p["sys"].pop("sunset"),
        lambda p: p.update(wind="calm"),
        lambda p: p["main"].update(temp="warm"),
        lambda p: p["main"].update(humidity=True),
        lambda p: p["main"].update(pressure=1012.5),
        lambda p: p["weather"][0].pop("icon"),
        lambda p: p["main"].update(humidity=250),
        lambda p: p["main"].update(humidity=-1),
        lambda p: p.update(wind={"speed": -3.0}),
        lambda p: p["main"].update(pressure=0),
        lambda p: p["main"].update(pressure=-5),
    ],
)
def test_malformed_payload_raises_decode_error(mutate) -> None:
    payload = make_payload()
    mutate(payload)

    with pytest.raises(DecodeError):
        WeatherSnapshot.from_payload(payload)


def test_non_object_body_raises_decode_error() -> None:
    with pytest.raises(DecodeError):
        WeatherSnapshot.from_payload(["Paris"])


def test_snapshot_is_immutable(paris_payload) -> None:
    snapshot = WeatherSnapshot.from_payload(paris_payload)

    with pytest.raises(FrozenInstanceError):
        snapshot.city = "Lyon"  # type: ignore[misc]


def test_sun_times_and_serialization(paris_payload) -> None:
    snapshot = WeatherSnapshot.from_payload(paris_payload)

    assert snapshot.sunrise_at == datetime.fromtimestamp(1700000000, tz=timezone.utc)
    payload = snapshot.as_dict()
    assert payload["city"] == "Paris"
    assert payload["sunrise_at"] == "2023-11-14T22:13:20Z"
    assert payload["sunset_at"].endswith("Z")


@pytest.mark.parametrize("latitude,longitude", [(90.1, 0.0), (-91.0, 0.0), (0.0, 180.5), (0.0, -181.0)])
def test_coordinate_rejects_out_of_range_values(latitude, longitude) -> None:
    with pytest.raises(ValueError):
        Coordinate(latitude, longitude)


def test_coordinate_accepts_bounds() -> None:
    assert Coordinate(-90.0, 180.0).longitude == 180.0


def test_range_bounds_are_inclusive() -> None:
    payload = make_payload(wind={"speed": 0.0})
    payload["main"].update(humidity=100, pressure=1)

    snapshot = WeatherSnapshot.from_payload(payload)

    assert (snapshot.humidity_percent, snapshot.pressure_hpa, snapshot.wind_speed_ms) == (100, 1, 0.0)


def test_decode_error_keeps_generic_message() -> None:
    payload = make_payload()
    del payload["main"]

    with pytest.raises(DecodeError) as excinfo:
        WeatherSnapshot.from_payload(payload)

    assert excinfo.value.message == "Weather data could not be read"
    assert excinfo.value.detail == "missing field 'main'"
