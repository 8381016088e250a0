"""FastAPI dependency injection wiring."""

from __future__ import annotations

from fastapi import Request

from aeroestimate.services.estimate.auto_params import AutoParameterEstimator
from aeroestimate.services.estimate.engine import FlightEstimateEngine
from aeroestimate.services.specs.resolver import SpecsResolver

# ------------------------------------------------------------------
# Services (singletons from app.state, built in the lifespan)
# ------------------------------------------------------------------


def get_resolver(request: Request) -> SpecsResolver:
    return request.app.state.resolver


def get_engine(request: Request) -> FlightEstimateEngine:
    return request.app.state.engine


def get_auto_estimator(request: Request) -> AutoParameterEstimator:
    return request.app.state.auto_estimator
