from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Mapping

from .providers.base import DecodeError


@dataclass(frozen=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"latitude {self.latitude} is outside [-90, 90]")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"longitude {self.longitude} is outside [-180, 180]")


@dataclass(frozen=True)
class WeatherSnapshot:
    """Current conditions for one resolved location.

    Units follow the provider's metric mode:
    - temperatures in Celsius
    - wind speed in metres per second (m/s)
    - pressure in hectopascal (hPa)
    - sunrise/sunset as UTC epoch seconds
    """

    city: str
    temperature_c: float
    feels_like_c: float
    humidity_percent: int
    wind_speed_ms: float
    pressure_hpa: int
    description: str
    icon_code: str
    sunrise: int
    sunset: int

    @classmethod
    def from_payload(cls, payload: Any) -> "WeatherSnapshot":
        """Build a snapshot from an OpenWeather current-weather body.

        Raises :class:`DecodeError` unless every field is present, well typed
        and within its physical range.
        """
        data = _mapping(payload, "body")
        main = _mapping(_field(data, "main"), "main")
        wind = _mapping(_field(data, "wind"), "wind")
        sys = _mapping(_field(data, "sys"), "sys")
        conditions = _field(data, "weather")
        if not isinstance(conditions, list) or not conditions:
            raise DecodeError(detail="weather must be a non-empty list")
        condition = _mapping(conditions[0], "weather[0]")

        return cls(
            city=_string(data, "name"),
            temperature_c=_float(main, "temp"),
            feels_like_c=_float(main, "feels_like"),
            humidity_percent=_within(_int(main, "humidity"), "humidity", 0, 100),
            wind_speed_ms=_within(_float(wind, "speed"), "speed", 0.0, None),
            pressure_hpa=_within(_int(main, "pressure"), "pressure", 1, None),
            description=_string(condition, "description"),
            icon_code=_string(condition, "icon"),
            sunrise=_int(sys, "sunrise"),
            sunset=_int(sys, "sunset"),
        )

    @property
    def sunrise_at(self) -> datetime:
        return datetime.fromtimestamp(self.sunrise, tz=timezone.utc)

    @property
    def sunset_at(self) -> datetime:
        return datetime.fromtimestamp(self.sunset, tz=timezone.utc)

    def as_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["sunrise_at"] = _isoformat(self.sunrise_at)
        payload["sunset_at"] = _isoformat(self.sunset_at)
        return payload


# helpers ------------------------------------------------------------
def _isoformat(value: datetime) -> str:
    return value.isoformat().replace("+00:00", "Z")


def _mapping(value: Any, name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise DecodeError(detail=f"{name} must be an object")
    return value


def _field(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError as exc:
        raise DecodeError(detail=f"missing field {key!r}") from exc


def _number(data: Mapping[str, Any], key: str) -> float | int:
    value = _field(data, key)
    # bool is an int subclass but never a valid measurement
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(detail=f"{key!r} must be a number")
    return value


def _float(data: Mapping[str, Any], key: str) -> float:
    return float(_number(data, key))


def _int(data: Mapping[str, Any], key: str) -> int:
    value = _number(data, key)
    if isinstance(value, float):
        if not value.is_integer():
            raise DecodeError(detail=f"{key!r} must be an integer")
        return int(value)
    return value


def _within(value: Any, key: str, low: float, high: float | None) -> Any:
    if value < low or (high is not None and value > high):
        raise DecodeError(detail=f"{key!r} is out of range: {value}")
    return value


def _string(data: Mapping[str, Any], key: str) -> str:
    value = _field(data, key)
    if not isinstance(value, str):
        raise DecodeError(detail=f"{key!r} must be a string")
    return value


__all__ = ["Coordinate", "WeatherSnapshot"]
