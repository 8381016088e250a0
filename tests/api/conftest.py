"""Shared fixtures for API tests."""

from __future__ import annotations

import httpx
import pytest

from aeroestimate.api.app import app
from aeroestimate.services.estimate.auto_params import AutoParameterEstimator
from aeroestimate.services.estimate.engine import FlightEstimateEngine


@pytest.fixture
def test_app(resolver, airports):
    """FastAPI app with in-memory services on app.state.

    ASGITransport does not run the lifespan, so the services it would
    build are installed directly.
    """
    engine = FlightEstimateEngine(resolver, airports)
    app.state.airports = airports
    app.state.resolver = resolver
    app.state.engine = engine
    app.state.auto_estimator = AutoParameterEstimator(engine)
    yield app


@pytest.fixture
async def client(test_app):
    """httpx AsyncClient wired to the test app."""
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
