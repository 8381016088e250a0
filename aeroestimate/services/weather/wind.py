"""Wind provider interface and the default no-wind provider."""

from __future__ import annotations

from datetime import date
from typing import Protocol

from aeroestimate.contracts.weather import WindAloft

ISA_SEA_LEVEL_C = 15.0
ISA_LAPSE_C_PER_1000FT = 2.0
DENSITY_ALT_FT_PER_DEG_C = 120.0


class WindProvider(Protocol):
    async def get_wind_at_altitude(
        self,
        latitude: float,
        longitude: float,
        altitude_ft: float,
        flight_date: date | None = None,
    ) -> WindAloft | None: ...


class NullWindProvider:
    """No wind source wired in: always reports "no data"."""

    async def get_wind_at_altitude(
        self,
        latitude: float,
        longitude: float,
        altitude_ft: float,
        flight_date: date | None = None,
    ) -> WindAloft | None:
        return None


def density_altitude(pressure_altitude_ft: float, temperature_c: float) -> int:
    """Rule-of-thumb density altitude: ``PA + 120 * (OAT - ISA)``."""
    isa_c = ISA_SEA_LEVEL_C - (pressure_altitude_ft / 1000.0) * ISA_LAPSE_C_PER_1000FT
    return round(pressure_altitude_ft + DENSITY_ALT_FT_PER_DEG_C * (temperature_c - isa_c))
