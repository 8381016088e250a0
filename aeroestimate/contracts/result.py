"""Envelope returned by the HTTP layer around estimates and errors."""

from datetime import datetime
from typing import Generic, Self, TypeVar

from pydantic import BaseModel, Field, model_validator

from aeroestimate.contracts.common import utc_now

T = TypeVar("T")

DetailValue = str | int | float | bool | None


class ServiceError(BaseModel):
    code: str = Field(..., description="Stable identifier, e.g. 'airport_not_found'")
    message: str
    details: dict[str, DetailValue] | None = None


class ServiceResult(BaseModel, Generic[T]):
    """Payload of a successful call, or the error of a failed one.

    ``duration_ms`` is wall time spent in the service, when measured.
    """

    success: bool
    data: T | None = None
    error: ServiceError | None = None
    duration_ms: float | None = Field(default=None, ge=0)
    timestamp: datetime = Field(default_factory=utc_now)

    @model_validator(mode="after")
    def validate_outcome(self) -> Self:
        if self.success and self.error is not None:
            raise ValueError("a successful result cannot carry an error")
        if not self.success and self.error is None:
            raise ValueError("a failed result needs an error")
        return self

    @classmethod
    def ok(cls, data: T, duration_ms: float | None = None) -> Self:
        return cls(success=True, data=data, duration_ms=duration_ms)

    @classmethod
    def fail(cls, code: str, message: str, **details: DetailValue) -> Self:
        error = ServiceError(code=code, message=message, details=details or None)
        return cls(success=False, error=error)
