"""Open-Meteo winds-aloft provider.

Fetches pressure-level wind and temperature for a single point and day,
then reports the level closest to the requested altitude.

CRITICAL: wind speeds are requested in knots via ``wind_speed_unit=kn``.
"""

from __future__ import annotations

import logging
from datetime import date

import httpx

from aeroestimate.contracts.weather import WindAloft

logger = logging.getLogger(__name__)

BASE_URL = "https://api.open-meteo.com"

# Standard-atmosphere altitude of each pressure level, in feet
PRESSURE_LEVELS_FT: dict[int, float] = {
    1000: 360.0,
    925: 2500.0,
    850: 4800.0,
    700: 9900.0,
    600: 13800.0,
    500: 18300.0,
    400: 23600.0,
    300: 30100.0,
}

# Local noon, the default sampling hour when the flight time is unknown
SAMPLE_HOUR = 12


def nearest_level(altitude_ft: float) -> int:
    """Pressure level (hPa) whose standard altitude is closest to *altitude_ft*."""
    return min(PRESSURE_LEVELS_FT, key=lambda hpa: abs(PRESSURE_LEVELS_FT[hpa] - altitude_ft))


class OpenMeteoWindProvider:
    """Async HTTP wind provider backed by the Open-Meteo forecast API."""

    def __init__(self, http_client: httpx.AsyncClient | None = None):
        self._client = http_client or httpx.AsyncClient(timeout=30.0)

    async def get_wind_at_altitude(
        self,
        latitude: float,
        longitude: float,
        altitude_ft: float,
        flight_date: date | None = None,
    ) -> WindAloft | None:
        """Wind at the pressure level nearest *altitude_ft*, or None on failure."""
        level = nearest_level(altitude_ft)
        day = (flight_date or date.today()).isoformat()
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "hourly": ",".join(
                [
                    f"wind_speed_{level}hPa",
                    f"wind_direction_{level}hPa",
                    f"temperature_{level}hPa",
                ]
            ),
            "start_date": day,
            "end_date": day,
            "wind_speed_unit": "kn",
            "timezone": "auto",
        }
        try:
            resp = await self._client.get(f"{BASE_URL}/v1/forecast", params=params)
            resp.raise_for_status()
            return _parse_wind(resp.json(), level)
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Open-Meteo wind request failed: %s", exc)
            return None

    async def aclose(self) -> None:
        await self._client.aclose()


def _parse_wind(data: dict, level: int) -> WindAloft | None:
    """Pick the sample hour (or the first hour) from an hourly response."""
    hourly = data.get("hourly", {})

    def _at(key: str):
        values = hourly.get(key) or []
        if not values:
            return None
        idx = SAMPLE_HOUR if len(values) > SAMPLE_HOUR else 0
        return values[idx]

    speed = _at(f"wind_speed_{level}hPa")
    direction = _at(f"wind_direction_{level}hPa")
    if speed is None or direction is None:
        return None

    return WindAloft(
        wind_speed_kt=speed,
        wind_direction_deg=direction,
        altitude_ft=PRESSURE_LEVELS_FT[level],
        temperature_c=_at(f"temperature_{level}hPa"),
    )
