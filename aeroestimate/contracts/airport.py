"""Airport reference record, as consumed by the estimate engine.

Mirrors the OurAirports ``airports.csv`` columns, plus the optional
operator-maintained price fields (fuel, landing and parking fees).
"""

from pydantic import Field, field_validator

from aeroestimate.contracts.common import FirestoreModel
from aeroestimate.contracts.enums import FuelType


class Airport(FirestoreModel):
    """A single aerodrome."""

    ident: str = Field(..., min_length=1)
    name: str = ""
    type: str = "small_airport"
    latitude_deg: float = Field(..., ge=-90.0, le=90.0)
    longitude_deg: float = Field(..., ge=-180.0, le=180.0)
    elevation_ft: float | None = None
    iso_country: str = ""
    iso_region: str = ""
    municipality: str | None = None
    scheduled_service: bool = False
    gps_code: str | None = None
    iata_code: str | None = None
    local_code: str | None = None

    # Operator-maintained prices
    fuel_prices: dict[str, float] = Field(
        default_factory=dict, description="{fuel type value: price per liter}"
    )
    landing_fee: float | None = Field(default=None, ge=0)
    parking_fee: float | None = Field(default=None, ge=0)

    @field_validator("gps_code", "iata_code", "local_code", mode="before")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        return v or None

    @property
    def display_code(self) -> str:
        """GPS code when published, ident otherwise."""
        return self.gps_code or self.ident

    def codes(self) -> list[str]:
        return [c for c in (self.ident, self.gps_code, self.iata_code, self.local_code) if c]

    def fuel_price(self, fuel_type: FuelType | str) -> float | None:
        """Published price per liter. Zero or negative prices count as unpublished."""
        price = self.fuel_prices.get(FuelType(fuel_type).value)
        if price is None or price <= 0:
            return None
        return price
