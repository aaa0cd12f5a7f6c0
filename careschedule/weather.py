"""
Current weather for the dashboard (Open-Meteo, no API key needed).
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Tuple

import requests


# ---------------------------------------------------------------------------
# URLs & defaults
# ---------------------------------------------------------------------------

FORECAST_URL = "https://api.open-meteo.com/v1/forecast"


@dataclass
class Weather:
    temperature: int
    condition: str
    icon: str


# Shown when the service cannot be reached
FALLBACK_WEATHER = Weather(temperature=68, condition="Clear", icon="sun")


# ---------------------------------------------------------------------------
# Core logic
# ---------------------------------------------------------------------------


def describe_weather_code(code: int) -> Tuple[str, str]:
    """
    Map a WMO weather interpretation code to (condition, icon).

    See https://open-meteo.com/en/docs
    """
    if code == 0:
        return "Clear sky", "sun"
    if 1 <= code <= 3:
        return "Partly cloudy", "cloud-sun"
    if 45 <= code <= 48:
        return "Foggy", "cloud"
    if 51 <= code <= 67:
        return "Rainy", "droplet"
    if 71 <= code <= 77:
        return "Snowy", "cloud-snow"
    if 80 <= code <= 82:
        return "Showers", "droplet"
    if 95 <= code <= 99:
        return "Thunderstorm", "zap"
    return "Clear", "sun"


def fetch_weather(lat: float, lon: float, timeout: float = 10) -> Weather:
    """
    Load the current weather for a location from Open-Meteo.

    Never raises: on any network or data problem a warning is printed
    to stderr and FALLBACK_WEATHER is returned.
    """
    params = {"latitude": lat, "longitude": lon, "current_weather": "true"}

    try:
        resp = requests.get(FORECAST_URL, params=params, timeout=timeout)
        resp.raise_for_status()
        current = resp.json()["current_weather"]
        temperature = round(float(current["temperature"]))
        condition, icon = describe_weather_code(int(current["weathercode"]))
    except (requests.RequestException, ValueError, KeyError, TypeError) as exc:
        print(f"Warning: could not fetch weather ({exc}); using fallback.", file=sys.stderr)
        return Weather(FALLBACK_WEATHER.temperature, FALLBACK_WEATHER.condition, FALLBACK_WEATHER.icon)

    return Weather(temperature=temperature, condition=condition, icon=icon)
