"""Management command to fetch weather using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from weatherapp.api.views import get_weather_session, serialize_snapshot
from weatherapp.core.entities import Coordinate
from weatherapp.core.providers.base import WeatherError


class Command(BaseCommand):
    help = "Fetch current weather for a city, coordinates or the device position"

    def add_arguments(self, parser) -> None:  # noqa: D401
        group = parser.add_mutually_exclusive_group(required=True)
        group.add_argument("--city", type=str, help="City name")
        group.add_argument("--lat", type=float, help="Latitude (requires --lon)")
        group.add_argument("--here", action="store_true", help="Use the configured device position")
        parser.add_argument("--lon", type=float, help="Longitude")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        session = get_weather_session()
        try:
            if options.get("city") is not None:
                snapshot = session.search_city(options["city"])
            elif options.get("here"):
                snapshot = session.search_current_location()
            else:
                snapshot = session.search_coordinates(self._coordinate(options))
        except WeatherError as exc:
            raise CommandError(exc.message) from exc

        self.stdout.write(json.dumps(serialize_snapshot(snapshot)))

    def _coordinate(self, options: dict) -> Coordinate:
        latitude = options.get("lat")
        longitude = options.get("lon")
        if latitude is None or longitude is None:
            raise CommandError("--lat and --lon must be given together")
        try:
            return Coordinate(latitude, longitude)
        except ValueError as exc:
            raise CommandError(str(exc)) from exc
