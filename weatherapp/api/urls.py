"""API URL configuration."""
from __future__ import annotations

from django.urls import path

from weatherapp.api.views import CurrentLocationWeatherView, HistoryView, WeatherView

urlpatterns = [
    path("weather", WeatherView.as_view(), name="weather"),
    path("weather/current-location", CurrentLocationWeatherView.as_view(), name="weather-current-location"),
    path("history", HistoryView.as_view(), name="history"),
]
