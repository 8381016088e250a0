"""Aircraft performance specs endpoints."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, ValidationError

from aeroestimate.api.deps import get_resolver
from aeroestimate.contracts.result import ServiceResult
from aeroestimate.contracts.specs import AircraftKey
from aeroestimate.errors import SpecsUnavailableError
from aeroestimate.services.specs.resolver import SpecsResolver

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/aircraft-specs", tags=["aircraft-specs"])


class SpecsOverrideRequest(BaseModel):
    key: AircraftKey
    overrides: dict[str, Any]


@router.get("")
async def get_specs(
    manufacturer: str = Query(..., min_length=1),
    model: str = Query(..., min_length=1),
    variant: str | None = None,
    year: int | None = Query(default=None, ge=1900, le=2100),
    resolver: SpecsResolver = Depends(get_resolver),
) -> dict:
    key = AircraftKey(manufacturer=manufacturer, model=model, variant=variant, year=year)
    try:
        specs = await resolver.resolve(key)
    except SpecsUnavailableError as exc:
        logger.exception("Specs unavailable for %s", key)
        raise HTTPException(status_code=500, detail=str(exc))
    return ServiceResult.ok(specs).model_dump(mode="json")


@router.put("/override")
async def put_specs_override(
    body: SpecsOverrideRequest,
    resolver: SpecsResolver = Depends(get_resolver),
) -> dict:
    """Store POH figures for an aircraft; the entry never goes stale."""
    try:
        entry = await resolver.set_manual_override(body.key, body.overrides)
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=exc.errors(include_url=False, include_context=False),
        )
    return ServiceResult.ok(entry).model_dump(mode="json")
