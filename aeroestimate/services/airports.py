"""In-memory airport directory over OurAirports-format data.

Bulk download and refresh of the dataset are owned by the surrounding
application; this directory only parses a local ``airports.csv`` (or
accepts ready-made records) and answers code lookups.
"""

from __future__ import annotations

import asyncio
import csv
import io
import logging
from pathlib import Path
from typing import Iterable

from pydantic import ValidationError

from aeroestimate.contracts.airport import Airport

logger = logging.getLogger(__name__)


def _float_or_none(raw: str | None) -> float | None:
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def parse_airports_csv(text: str) -> list[Airport]:
    """Parse OurAirports ``airports.csv`` content.

    Rows without usable coordinates or an ident are skipped.
    """
    airports: list[Airport] = []
    skipped = 0
    for row in csv.DictReader(io.StringIO(text)):
        lat = _float_or_none(row.get("latitude_deg"))
        lon = _float_or_none(row.get("longitude_deg"))
        ident = (row.get("ident") or "").strip()
        if lat is None or lon is None or not ident:
            skipped += 1
            continue
        try:
            airports.append(
                Airport(
                    ident=ident,
                    name=row.get("name") or "",
                    type=row.get("type") or "small_airport",
                    latitude_deg=lat,
                    longitude_deg=lon,
                    elevation_ft=_float_or_none(row.get("elevation_ft")),
                    iso_country=row.get("iso_country") or "",
                    iso_region=row.get("iso_region") or "",
                    municipality=row.get("municipality") or None,
                    scheduled_service=(row.get("scheduled_service") or "").lower() == "yes",
                    gps_code=row.get("gps_code"),
                    iata_code=row.get("iata_code"),
                    local_code=row.get("local_code"),
                )
            )
        except ValidationError as exc:
            skipped += 1
            logger.debug("Skipping airport row %s: %s", ident, exc)
    if skipped:
        logger.info("Skipped %d airport rows without usable data", skipped)
    return airports


class AirportDirectory:
    """Case-insensitive lookup by ident, GPS, IATA or local code.

    ``load_airports()`` is idempotent: the CSV is parsed at most once per
    instance.
    """

    def __init__(
        self,
        airports: Iterable[Airport] | None = None,
        csv_path: Path | None = None,
    ):
        self._airports: list[Airport] = []
        self._by_code: dict[str, Airport] = {}
        self._csv_path = csv_path
        self._loaded = False
        if airports is not None:
            self._index(list(airports))
            self._loaded = True

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def __len__(self) -> int:
        return len(self._airports)

    async def load_airports(self) -> None:
        if self._loaded:
            return
        if self._csv_path is None:
            logger.warning("No airports CSV configured; directory is empty")
            self._loaded = True
            return
        text = await asyncio.to_thread(self._csv_path.read_text, encoding="utf-8")
        self._index(parse_airports_csv(text))
        self._loaded = True
        logger.info("Loaded %d airports from %s", len(self._airports), self._csv_path)

    def _index(self, airports: list[Airport]) -> None:
        self._airports = airports
        self._by_code = {}
        # First airport claiming a code keeps it, matching a linear scan
        for airport in airports:
            for code in airport.codes():
                self._by_code.setdefault(code.upper(), airport)

    def find_by_code(self, code: str) -> Airport | None:
        if not code:
            return None
        return self._by_code.get(code.strip().upper())

    def update_prices(
        self,
        code: str,
        *,
        fuel_prices: dict[str, float] | None = None,
        landing_fee: float | None = None,
        parking_fee: float | None = None,
    ) -> Airport | None:
        """Attach operator prices to an airport. Returns the updated record."""
        airport = self.find_by_code(code)
        if airport is None:
            return None
        if fuel_prices:
            airport.fuel_prices.update(fuel_prices)
        if landing_fee is not None:
            airport.landing_fee = landing_fee
        if parking_fee is not None:
            airport.parking_fee = parking_fee
        return airport
