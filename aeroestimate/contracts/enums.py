"""Enumerations shared across all AeroEstimate contracts."""

from enum import Enum


class FlightProfile(str, Enum):
    """Power setting the pilot intends to fly."""
    ECONOMIC = "economic"
    NORMAL = "normal"
    FAST = "fast"


class ConfidenceLevel(str, Enum):
    """Qualitative trust level, used for measurements and whole estimates."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class PerformanceMethod(str, Enum):
    """How a selected performance value was obtained."""
    KNOWN = "known"
    ML = "ml"
    HEURISTIC = "heuristic"


class SpecSourceType(str, Enum):
    """Provenance of a spec measurement or of a resolution pass."""
    POH = "poh"
    MANUFACTURER = "manufacturer"
    REGISTRY_API = "registry_api"
    SCRAPED = "scraped"
    ML_ESTIMATE = "ml_estimate"
    HEURISTIC = "heuristic"
    MANUAL = "manual"  # Manual override entry in the sources log


class EngineType(str, Enum):
    PISTON = "piston"
    TURBOPROP = "turboprop"
    JET = "jet"


class FuelType(str, Enum):
    AVGAS = "avgas"
    JET_A = "jet-a"
