"""FastAPI application factory."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from datetime import timedelta

from dotenv import load_dotenv
from fastapi import FastAPI

# Load .env file from project root (must be before other imports)
load_dotenv()
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from aeroestimate import __version__  # noqa: E402
from aeroestimate.api.routes import aircraft_specs, estimates  # noqa: E402
from aeroestimate.config import EstimatorSettings  # noqa: E402
from aeroestimate.services.airports import AirportDirectory  # noqa: E402
from aeroestimate.services.estimate.auto_params import AutoParameterEstimator  # noqa: E402
from aeroestimate.services.estimate.engine import FlightEstimateEngine  # noqa: E402
from aeroestimate.services.specs.resolver import SpecsResolver  # noqa: E402
from aeroestimate.services.weather.openmeteo_client import OpenMeteoWindProvider  # noqa: E402
from aeroestimate.services.weather.wind import NullWindProvider  # noqa: E402

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the resolver, airport directory and engines on startup."""
    settings = EstimatorSettings.from_env()

    airports = AirportDirectory(csv_path=settings.airports_csv_path)
    try:
        await airports.load_airports()
    except OSError as exc:
        logger.warning("Failed to load airports from %s: %s", settings.airports_csv_path, exc)

    if settings.wind_provider == "openmeteo":
        wind_provider = OpenMeteoWindProvider()
        logger.info("Using Open-Meteo winds aloft")
    else:
        wind_provider = NullWindProvider()

    resolver = SpecsResolver(
        ttl=timedelta(days=settings.specs_ttl_days),
        tier_timeout_s=settings.tier_timeout_s,
    )
    engine = FlightEstimateEngine(
        resolver,
        airports,
        wind_provider,
        default_fuel_price=settings.default_fuel_price,
        hourly_rate=settings.hourly_rate,
    )

    app.state.settings = settings
    app.state.airports = airports
    app.state.resolver = resolver
    app.state.engine = engine
    app.state.auto_estimator = AutoParameterEstimator(engine)
    yield

    if isinstance(wind_provider, OpenMeteoWindProvider):
        await wind_provider.aclose()


app = FastAPI(
    title="AeroEstimate API",
    description="Flight time, fuel and cost estimates for general aviation",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.environ.get("CORS_ORIGINS", "http://localhost:5173").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(estimates.router, prefix="/api")
app.include_router(aircraft_specs.router, prefix="/api")


@app.get("/api/health")
async def health():
    airports: AirportDirectory | None = getattr(app.state, "airports", None)
    return {
        "status": "ok",
        "version": __version__,
        "airports_loaded": airports.is_loaded if airports is not None else False,
        "airport_count": len(airports) if airports is not None else 0,
    }
