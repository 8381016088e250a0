"""Flight estimate endpoints."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from aeroestimate.api.deps import get_auto_estimator, get_engine
from aeroestimate.contracts.estimate import (
    AircraftSuggestion,
    FlightEstimateRequest,
    FlightEstimateResult,
)
from aeroestimate.contracts.result import ServiceResult
from aeroestimate.errors import AirportNotFoundError, SpecsUnavailableError
from aeroestimate.services.estimate.auto_params import (
    AutoParameterEstimator,
    suggest_aircraft,
)
from aeroestimate.services.estimate.engine import FlightEstimateEngine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/estimates", tags=["estimates"])


class AutoEstimateRequest(BaseModel):
    """Route and aircraft only; everything else is inferred."""

    origin: str = Field(..., min_length=2, max_length=8)
    destination: str = Field(..., min_length=2, max_length=8)
    passengers: int = Field(..., ge=0)
    manufacturer: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    variant: str | None = None
    year: int | None = Field(default=None, ge=1900, le=2100)
    initial_fuel: float | None = Field(default=None, ge=0)
    fuel_price: float | None = Field(default=None, gt=0)


def airport_not_found(exc: AirportNotFoundError) -> JSONResponse:
    body = ServiceResult[FlightEstimateResult].fail(
        "airport_not_found", str(exc), airport=exc.code
    )
    return JSONResponse(status_code=404, content=body.model_dump(mode="json"))


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000


@router.post("")
async def create_estimate(
    request: FlightEstimateRequest,
    engine: FlightEstimateEngine = Depends(get_engine),
):
    started = time.perf_counter()
    try:
        result = await engine.estimate(request)
    except AirportNotFoundError as exc:
        return airport_not_found(exc)
    except SpecsUnavailableError as exc:
        logger.exception("Specs unavailable for %s", exc.key)
        raise HTTPException(status_code=500, detail=str(exc))
    return ServiceResult.ok(result, duration_ms=_elapsed_ms(started)).model_dump(mode="json")


@router.post("/auto")
async def create_auto_estimate(
    request: AutoEstimateRequest,
    estimator: AutoParameterEstimator = Depends(get_auto_estimator),
):
    """Estimate with altitude, profile, baggage and fuel price inferred from the route."""
    started = time.perf_counter()
    try:
        result = await estimator.estimate(
            request.origin,
            request.destination,
            request.passengers,
            request.manufacturer,
            request.model,
            initial_fuel=request.initial_fuel,
            fuel_price=request.fuel_price,
            variant=request.variant,
            year=request.year,
        )
    except AirportNotFoundError as exc:
        return airport_not_found(exc)
    except SpecsUnavailableError as exc:
        logger.exception("Specs unavailable for %s", exc.key)
        raise HTTPException(status_code=500, detail=str(exc))
    return ServiceResult.ok(result, duration_ms=_elapsed_ms(started)).model_dump(mode="json")


@router.get("/suggest-aircraft")
async def get_aircraft_suggestion(
    passengers: int = Query(..., ge=0),
    distance_nm: float = Query(..., ge=0),
) -> AircraftSuggestion:
    return suggest_aircraft(passengers, distance_nm)
