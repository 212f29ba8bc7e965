"""OpenWeather current weather client."""
from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from requests import Response

from .base import DecodeError, WeatherProvider
from ..entities import Coordinate, WeatherSnapshot


logger = logging.getLogger(__name__)


class OpenWeatherClient(WeatherProvider):
    """Integration with the OpenWeather ``/data/2.5/weather`` endpoint."""

    name = "openweather"
    base_url = "https://api.openweathermap.org/data/2.5/weather"
    units = "metric"

    def __init__(self, *, api_key: str, base_url: Optional[str] = None, **kwargs: Any) -> None:
        if not api_key:
            raise ValueError("an OpenWeather API key is required")
        super().__init__(**kwargs)
        self.api_key = api_key
        self.base_url = base_url or self.base_url
        self._testing_mode = os.environ.get("TESTING_MODE", "0") == "1"

    # Public API ---------------------------------------------------------
    def fetch_by_city(self, city: str) -> WeatherSnapshot:
        """Return current weather for a free-text city query."""
        return self._fetch({"q": city})

    def fetch_by_coordinates(self, coord: Coordinate) -> WeatherSnapshot:
        """Return current weather for a point; the city name is provider-resolved."""
        return self._fetch({"lat": coord.latitude, "lon": coord.longitude})

    # Helpers ------------------------------------------------------------
    def _fetch(self, query: Dict[str, Any]) -> WeatherSnapshot:
        params = {**query, "appid": self.api_key, "units": self.units}
        response = self._request("GET", self.base_url, params=params)
        self._log_response(query, response)
        try:
            snapshot = WeatherSnapshot.from_payload(self._json(response))
        except DecodeError as exc:
            self._log.error("Unusable payload for %s: %s", query, exc.detail)
            raise
        self._log.debug("Resolved %s to %s", query, snapshot.city)
        return snapshot

    def _log_response(self, query: Dict[str, Any], response: Response) -> None:
        if not self._testing_mode:
            return
        # the api key is part of response.url, log the query only
        logger.info(
            "OpenWeather request",
            extra={"query": query, "status": response.status_code, "body": response.text[:500]},
        )


__all__ = ["OpenWeatherClient"]
