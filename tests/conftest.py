"""Shared fixtures: airports, an in-memory specs store and a resolver."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from aeroestimate.contracts.airport import Airport
from aeroestimate.services.airports import AirportDirectory
from aeroestimate.services.specs.resolver import SpecsResolver
from tests.persistence.fake_firestore import FakeFirestoreClient


def make_sbsp() -> Airport:
    return Airport(
        ident="SBSP",
        name="Congonhas Airport",
        type="large_airport",
        latitude_deg=-23.6261100769,
        longitude_deg=-46.6563873291,
        elevation_ft=2631,
        iso_country="BR",
        iso_region="BR-SP",
        municipality="São Paulo",
        scheduled_service=True,
        gps_code="SBSP",
        iata_code="CGH",
    )


def make_sbrj() -> Airport:
    return Airport(
        ident="SBRJ",
        name="Santos Dumont Airport",
        type="large_airport",
        latitude_deg=-22.910499572799996,
        longitude_deg=-43.1631011963,
        elevation_ft=11,
        iso_country="BR",
        iso_region="BR-RJ",
        municipality="Rio de Janeiro",
        scheduled_service=True,
        gps_code="SBRJ",
        iata_code="SDU",
    )


@pytest.fixture
def fake_client():
    return FakeFirestoreClient()


@pytest.fixture
def patch_firestore(fake_client):
    with patch(
        "aeroestimate.persistence.repositories.base.get_firestore_client",
        return_value=fake_client,
    ):
        yield fake_client


@pytest.fixture
def airports() -> AirportDirectory:
    return AirportDirectory([make_sbsp(), make_sbrj()])


@pytest.fixture
def resolver(patch_firestore) -> SpecsResolver:
    return SpecsResolver()
