"""AeroEstimate: general-aviation trip time, fuel and cost estimation."""

__version__ = "0.1.0"
