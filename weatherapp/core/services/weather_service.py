"""Session-level orchestration of weather lookups and search history."""
from __future__ import annotations

import logging
from threading import Lock
from typing import Callable, Optional, Protocol, Tuple

from ..entities import Coordinate, WeatherSnapshot
from ..history import SearchHistory
from ..providers.base import InvalidQuery, LocationServiceDisabled, WeatherError
from ..providers.geolocation import Geolocator


class WeatherClient(Protocol):
    """A data source capable of returning current weather."""

    def fetch_by_city(self, city: str) -> WeatherSnapshot:
        ...

    def fetch_by_coordinates(self, coord: Coordinate) -> WeatherSnapshot:
        ...


class WeatherSession:
    """One user's view of the weather: the current snapshot plus search history.

    Successful lookups record the provider-resolved city name in the history.
    A failed lookup clears ``current``, stores the user-facing message in
    ``last_error`` and re-raises; the history is left untouched.
    """

    def __init__(
        self,
        client: WeatherClient,
        *,
        history: Optional[SearchHistory] = None,
        geolocator: Optional[Geolocator] = None,
        record_location_searches: bool = True,
    ) -> None:
        self.client = client
        self.history_store = history if history is not None else SearchHistory()
        self.geolocator = geolocator
        self.record_location_searches = record_location_searches
        self.current: Optional[WeatherSnapshot] = None
        self.last_error: Optional[str] = None
        self._fetch_lock = Lock()
        self._log = logging.getLogger(self.__class__.__name__)

    # Public API ---------------------------------------------------------
    def search_city(self, city: str) -> WeatherSnapshot:
        query = (city or "").strip()
        return self._run(lambda: self._by_city(query), record=True, label=query)

    def search_coordinates(self, coord: Coordinate) -> WeatherSnapshot:
        return self._run(
            lambda: self.client.fetch_by_coordinates(coord),
            record=self.record_location_searches,
            label=f"{coord.latitude:.4f},{coord.longitude:.4f}",
        )

    def search_current_location(self) -> WeatherSnapshot:
        return self._run(
            lambda: self.client.fetch_by_coordinates(self._locate()),
            record=self.record_location_searches,
            label="current location",
        )

    def search_from_history(self, city: str) -> WeatherSnapshot:
        return self.search_city(city)

    def clear_history(self) -> None:
        self.history_store.clear()

    @property
    def history(self) -> Tuple[str, ...]:
        return self.history_store.all()

    # Helpers ------------------------------------------------------------
    def _by_city(self, query: str) -> WeatherSnapshot:
        if not query:
            raise InvalidQuery()
        return self.client.fetch_by_city(query)

    def _locate(self) -> Coordinate:
        if self.geolocator is None:
            raise LocationServiceDisabled()
        return self.geolocator.current_position()

    def _run(self, fetch: Callable[[], WeatherSnapshot], *, record: bool, label: str) -> WeatherSnapshot:
        with self._fetch_lock:
            try:
                snapshot = fetch()
            except WeatherError as exc:
                self._log.warning("Weather lookup for %r failed: %s", label, exc.message)
                self.current = None
                self.last_error = exc.message
                raise
            self.current = snapshot
            self.last_error = None
            # open-sea coordinates resolve to an empty name
            if record and snapshot.city.strip():
                self.history_store.record(snapshot.city)
            return snapshot


__all__ = ["WeatherClient", "WeatherSession"]
