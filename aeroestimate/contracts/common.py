"""Shared base model and clock for AeroEstimate contracts.

Field suffixes carry the unit:

``_nm`` nautical miles, ``_kt`` knots, ``_ft`` feet AMSL, ``_fpm`` feet per
minute, ``_liters`` liters, ``_lph`` liters per hour, ``_min`` / ``_h``
minutes / hours, ``_deg`` degrees. Coordinates are WGS84 decimal degrees
and datetimes are UTC.

Money has no suffix and is in the operator's currency (the defaults are
BRL per liter and per block hour).
"""

from datetime import datetime, timezone
from typing import Any, Self

from pydantic import BaseModel, ConfigDict


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


class FirestoreModel(BaseModel):
    """Contract that can be written to and read back from a Firestore document.

    Enum fields hold their string values so that documents stay plain
    JSON; ``None`` fields are left out of stored documents and come back
    as their defaults.
    """

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    def to_firestore(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_firestore(cls, data: dict[str, Any]) -> Self:
        return cls.model_validate(data)
