"""Wind aloft record returned by wind providers. Never persisted."""

from datetime import datetime

from pydantic import Field

from aeroestimate.contracts.common import FirestoreModel, utc_now


class WindAloft(FirestoreModel):
    """Wind and temperature at a single altitude."""

    wind_speed_kt: float = Field(..., ge=0)
    wind_direction_deg: float = Field(..., ge=0, le=360, description="Direction wind blows FROM")
    altitude_ft: float = Field(..., ge=0)
    temperature_c: float | None = None
    fetched_at: datetime = Field(default_factory=utc_now)
