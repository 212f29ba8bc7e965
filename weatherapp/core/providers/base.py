"""Error taxonomy and the shared HTTP plumbing for weather providers."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests
from requests import Response


class WeatherError(RuntimeError):
    """Base error; ``message`` is safe to show to an end user."""

    default_message = "Something went wrong"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidQuery(WeatherError):
    default_message = "Please enter a city name"


class ProviderError(WeatherError):
    """Base provider error."""


class LocationNotFound(ProviderError):
    """Raised for any non-success status returned by the provider."""

    default_message = "City not found"

    def __init__(self, message: Optional[str] = None, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class AuthenticationFailed(LocationNotFound):
    default_message = "Weather provider rejected the API key"


class QuotaExceeded(LocationNotFound):
    """Raised when a provider reports a quota/usage limit issue."""

    default_message = "Weather provider quota exceeded"


class ProviderUnavailable(LocationNotFound):
    default_message = "Weather provider is unavailable"


class DecodeError(ProviderError):
    """The provider answered 200 but the body is not a usable weather payload.

    ``detail`` names the offending field for logs; ``message`` stays generic.
    """

    default_message = "Weather data could not be read"

    def __init__(self, message: Optional[str] = None, *, detail: Optional[str] = None) -> None:
        super().__init__(message)
        self.detail = detail


class NetworkError(ProviderError):
    default_message = "Network error, check your connection"


class LocationError(WeatherError):
    """Geolocation pre-condition failures, raised before any request."""


class LocationServiceDisabled(LocationError):
    default_message = "Location services disabled"


class LocationPermissionDenied(LocationError):
    default_message = "Location permission denied"

    def __init__(self, message: Optional[str] = None, *, permanent: bool = False) -> None:
        super().__init__(message)
        self.permanent = permanent


@dataclass
class RequestConfig:
    timeout: float = 10.0


class WeatherProvider:
    """Base class that adds timeouts and error mapping for HTTP providers."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or self._build_session(self.request_config)
        self._log = logging.getLogger(self.__class__.__name__)

    def _build_session(self, config: RequestConfig) -> requests.Session:
        return requests.Session()

    def _handle_response(self, response: Response) -> Response:
        status = response.status_code
        if status == 200:
            return response
        self._log.error("Provider returned %s: %s", status, response.text[:200])
        if status == 401:
            raise AuthenticationFailed(status_code=status)
        if status == 429:
            raise QuotaExceeded(status_code=status)
        if status >= 500:
            raise ProviderUnavailable(status_code=status)
        raise LocationNotFound(status_code=status)

    def _request(self, method: str, url: str, **kwargs: Any) -> Response:
        try:
            response = self.session.request(
                method,
                url,
                timeout=self.request_config.timeout,
                **kwargs,
            )
        except requests.Timeout as exc:
            self._log.error("Request timed out", exc_info=exc)
            raise NetworkError("Request timed out") from exc
        except requests.RequestException as exc:
            self._log.error("Request failed", exc_info=exc)
            raise NetworkError() from exc
        return self._handle_response(response)

    def _json(self, response: Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            self._log.error("Failed to decode JSON", exc_info=exc)
            raise DecodeError(detail="invalid json") from exc


__all__ = [
    "AuthenticationFailed",
    "DecodeError",
    "InvalidQuery",
    "LocationError",
    "LocationNotFound",
    "LocationPermissionDenied",
    "LocationServiceDisabled",
    "NetworkError",
    "ProviderError",
    "ProviderUnavailable",
    "QuotaExceeded",
    "RequestConfig",
    "WeatherError",
    "WeatherProvider",
]
