"""Device position sources used by the current-location search."""
from __future__ import annotations

from enum import Enum
from typing import Optional, Protocol

from .base import LocationPermissionDenied, LocationServiceDisabled
from ..entities import Coordinate


class LocationPermission(str, Enum):
    GRANTED = "granted"
    DENIED = "denied"
    DENIED_FOREVER = "denied_forever"


class Geolocator(Protocol):
    """Something that knows where the device currently is."""

    def current_position(self) -> Coordinate:
        """Return the device position or raise a :class:`LocationError`."""
        ...


class StaticGeolocator:
    """Geolocator backed by a fixed, configured position.

    An unset position behaves like disabled location services.
    """

    def __init__(
        self,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        permission: LocationPermission | str = LocationPermission.GRANTED,
    ) -> None:
        self.latitude = latitude
        self.longitude = longitude
        self.permission = LocationPermission(permission)

    def current_position(self) -> Coordinate:
        if self.latitude is None or self.longitude is None:
            raise LocationServiceDisabled()
        if self.permission is LocationPermission.DENIED:
            raise LocationPermissionDenied()
        if self.permission is LocationPermission.DENIED_FOREVER:
            raise LocationPermissionDenied(
                "Location permission permanently denied, enable it in settings",
                permanent=True,
            )
        return Coordinate(self.latitude, self.longitude)


__all__ = ["Geolocator", "LocationPermission", "StaticGeolocator"]
