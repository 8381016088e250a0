"""Domain exceptions raised by the estimate services."""

from __future__ import annotations


class EstimatorError(Exception):
    """Base exception for all estimation errors."""


class AirportNotFoundError(EstimatorError):
    """Raised when an airport code matches no known aerodrome."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Airport not found: {code}")


class SpecsUnavailableError(EstimatorError):
    """Raised when the specs pipeline produced nothing for a key.

    The heuristic tier always yields values, so this indicates a broken
    tier configuration rather than a missing aircraft.
    """

    def __init__(self, key: object):
        self.key = key
        super().__init__(f"No performance specs could be resolved for {key}")
