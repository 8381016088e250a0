"""Runtime settings read from ``AEROESTIMATE_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "AEROESTIMATE_"

DEFAULT_SPECS_TTL_DAYS = 90
DEFAULT_TIER_TIMEOUT_S = 10.0
DEFAULT_FUEL_PRICE = 8.5  # per liter
DEFAULT_HOURLY_RATE = 2800.0  # fixed operating cost per block hour


def _env(name: str, default: str | None = None) -> str | None:
    value = os.environ.get(ENV_PREFIX + name)
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass(frozen=True)
class EstimatorSettings:
    specs_ttl_days: int = DEFAULT_SPECS_TTL_DAYS
    tier_timeout_s: float = DEFAULT_TIER_TIMEOUT_S
    default_fuel_price: float = DEFAULT_FUEL_PRICE
    hourly_rate: float = DEFAULT_HOURLY_RATE
    airports_csv_path: Path | None = None
    wind_provider: str = "none"  # "none" | "openmeteo"

    @classmethod
    def from_env(cls) -> "EstimatorSettings":
        """Build settings from the environment, falling back to defaults."""
        csv_path = _env("AIRPORTS_CSV_PATH")
        wind_provider = (_env("WIND_PROVIDER", "none") or "none").lower()
        if wind_provider not in ("none", "openmeteo"):
            raise ValueError(
                f"{ENV_PREFIX}WIND_PROVIDER must be 'none' or 'openmeteo', got {wind_provider!r}"
            )
        return cls(
            specs_ttl_days=int(_env("SPECS_TTL_DAYS", str(DEFAULT_SPECS_TTL_DAYS))),
            tier_timeout_s=float(_env("TIER_TIMEOUT_S", str(DEFAULT_TIER_TIMEOUT_S))),
            default_fuel_price=float(_env("DEFAULT_FUEL_PRICE", str(DEFAULT_FUEL_PRICE))),
            hourly_rate=float(_env("HOURLY_RATE", str(DEFAULT_HOURLY_RATE))),
            airports_csv_path=Path(csv_path) if csv_path else None,
            wind_provider=wind_provider,
        )
