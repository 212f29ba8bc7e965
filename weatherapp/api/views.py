"""REST API views for weather lookups and the search history."""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict

from django.conf import settings
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from weatherapp.core.entities import Coordinate, WeatherSnapshot
from weatherapp.core.history import SearchHistory
from weatherapp.core.providers.base import (
    AuthenticationFailed,
    DecodeError,
    InvalidQuery,
    LocationNotFound,
    LocationPermissionDenied,
    LocationServiceDisabled,
    NetworkError,
    ProviderUnavailable,
    QuotaExceeded,
    RequestConfig,
    WeatherError,
)
from weatherapp.core.providers.geolocation import StaticGeolocator
from weatherapp.core.providers.openweather import OpenWeatherClient
from weatherapp.core.services.weather_service import WeatherSession
from weatherapp.core.themes import theme_for


# most specific first, LocationNotFound is the parent of the three before it
ERROR_STATUSES = (
    (AuthenticationFailed, "provider_auth_failed", status.HTTP_502_BAD_GATEWAY),
    (QuotaExceeded, "quota_exceeded", status.HTTP_429_TOO_MANY_REQUESTS),
    (ProviderUnavailable, "provider_unavailable", status.HTTP_503_SERVICE_UNAVAILABLE),
    (LocationNotFound, "location_not_found", status.HTTP_404_NOT_FOUND),
    (DecodeError, "decode_error", status.HTTP_502_BAD_GATEWAY),
    (NetworkError, "network_error", status.HTTP_504_GATEWAY_TIMEOUT),
    (InvalidQuery, "invalid_query", status.HTTP_400_BAD_REQUEST),
    (LocationPermissionDenied, "location_permission_denied", status.HTTP_403_FORBIDDEN),
    (LocationServiceDisabled, "location_service_disabled", status.HTTP_503_SERVICE_UNAVAILABLE),
)


@lru_cache(maxsize=1)
def get_weather_session() -> WeatherSession:
    client = OpenWeatherClient(
        api_key=settings.OPENWEATHER_API_KEY,
        base_url=settings.OPENWEATHER_BASE_URL,
        request_config=RequestConfig(timeout=settings.OPENWEATHER_TIMEOUT),
    )
    geolocator = StaticGeolocator(
        latitude=settings.DEVICE_LATITUDE,
        longitude=settings.DEVICE_LONGITUDE,
        permission=settings.LOCATION_PERMISSION,
    )
    return WeatherSession(
        client,
        history=SearchHistory(capacity=settings.SEARCH_HISTORY_CAPACITY),
        geolocator=geolocator,
        record_location_searches=settings.RECORD_LOCATION_SEARCHES,
    )


def serialize_snapshot(snapshot: WeatherSnapshot) -> Dict[str, Any]:
    payload = snapshot.as_dict()
    payload["theme"] = theme_for(snapshot.description).value
    return payload


def error_response(exc: WeatherError) -> Response:
    for error_type, code, http_status in ERROR_STATUSES:
        if isinstance(exc, error_type):
            return Response({"detail": exc.message, "code": code}, status=http_status)
    return Response({"detail": exc.message, "code": "error"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class WeatherView(APIView):
    """Current weather for ``?city=`` or ``?lat=&lon=``."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return the weather snapshot for the requested location."""
        params = request.query_params
        session = get_weather_session()
        try:
            if "city" in params:
                snapshot = session.search_city(params["city"])
            else:
                try:
                    coord = Coordinate(float(params["lat"]), float(params["lon"]))
                except KeyError:
                    return Response(
                        {"detail": "city or lat and lon query parameters are required"},
                        status=status.HTTP_400_BAD_REQUEST,
                    )
                except ValueError:
                    return Response(
                        {"detail": "lat and lon must be valid coordinates"},
                        status=status.HTTP_400_BAD_REQUEST,
                    )
                snapshot = session.search_coordinates(coord)
        except WeatherError as exc:
            return error_response(exc)
        return Response(serialize_snapshot(snapshot), status=status.HTTP_200_OK)


class CurrentLocationWeatherView(APIView):
    """Current weather at the configured device position."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):
        try:
            snapshot = get_weather_session().search_current_location()
        except WeatherError as exc:
            return error_response(exc)
        return Response(serialize_snapshot(snapshot), status=status.HTTP_200_OK)


class HistoryView(APIView):
    """Read or clear the recent searches."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):
        session = get_weather_session()
        return Response(
            {"history": list(session.history), "capacity": session.history_store.capacity},
            status=status.HTTP_200_OK,
        )

    def delete(self, request, *args, **kwargs):
        get_weather_session().clear_history()
        return Response(status=status.HTTP_204_NO_CONTENT)
