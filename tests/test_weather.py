"""
Tests for the Open-Meteo weather lookup.

No real network access: requests.get is patched.
"""

import unittest
from unittest import mock

import requests

from careschedule.weather import FALLBACK_WEATHER, describe_weather_code, fetch_weather


def _response(payload: object) -> mock.Mock:
    resp = mock.Mock()
    resp.raise_for_status.return_value = None
    resp.json.return_value = payload
    return resp


class TestWeather(unittest.TestCase):
    def test_code_mapping(self) -> None:
        self.assertEqual(describe_weather_code(0), ("Clear sky", "sun"))
        self.assertEqual(describe_weather_code(2), ("Partly cloudy", "cloud-sun"))
        self.assertEqual(describe_weather_code(61), ("Rainy", "droplet"))
        self.assertEqual(describe_weather_code(81), ("Showers", "droplet"))
        self.assertEqual(describe_weather_code(96), ("Thunderstorm", "zap"))
        self.assertEqual(describe_weather_code(200), ("Clear", "sun"))

    @mock.patch("careschedule.weather.requests.get")
    def test_fetch_parses_current_weather(self, get: mock.Mock) -> None:
        get.return_value = _response({"current_weather": {"temperature": 17.6, "weathercode": 45}})
        w = fetch_weather(47.05, 8.31)
        self.assertEqual((w.temperature, w.condition, w.icon), (18, "Foggy", "cloud"))
        _, kwargs = get.call_args
        self.assertEqual(kwargs["params"]["current_weather"], "true")

    @mock.patch("careschedule.weather.requests.get")
    def test_network_error_returns_fallback(self, get: mock.Mock) -> None:
        get.side_effect = requests.ConnectionError("offline")
        with mock.patch("sys.stderr"):
            w = fetch_weather(0, 0)
        self.assertEqual(w, FALLBACK_WEATHER)

    @mock.patch("careschedule.weather.requests.get")
    def test_missing_current_weather_returns_fallback(self, get: mock.Mock) -> None:
        get.return_value = _response({"error": True})
        with mock.patch("sys.stderr"):
            w = fetch_weather(0, 0)
        self.assertEqual(w, FALLBACK_WEATHER)


if __name__ == "__main__":
    unittest.main()
