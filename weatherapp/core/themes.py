from __future__ import annotations

from enum import Enum


class Theme(str, Enum):
    """Symbolic visual theme for a weather condition."""

    CLEAR = "clear"
    RAIN = "rain"
    CLOUD = "cloud"
    SNOW = "snow"
    STORM = "storm"
    DEFAULT = "default"


# first match wins, "thunderstorm with rain" is RAIN
_KEYWORDS = (
    ("clear", Theme.CLEAR),
    ("rain", Theme.RAIN),
    ("cloud", Theme.CLOUD),
    ("snow", Theme.SNOW),
    ("storm", Theme.STORM),
)


def theme_for(description: str) -> Theme:
    text = (description or "").lower()
    for keyword, theme in _KEYWORDS:
        if keyword in text:
            return theme
    return Theme.DEFAULT


__all__ = ["Theme", "theme_for"]
