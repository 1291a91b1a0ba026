"""Health check result types."""

from enum import Enum

from pydantic import BaseModel, Field


class HealthStatus(str, Enum):
    """Health check status."""

    OK = "ok"
    ERROR = "error"


class DatabaseHealthResult(BaseModel):
    """Database health check result."""

    status: HealthStatus = Field(..., description="Health status")
    connected: bool = Field(..., description="Whether a connection was made")
    dialect: str | None = Field(None, description="SQLAlchemy dialect name")
    error: str | None = Field(None, description="Error message")

    def to_dict(self) -> dict[str, str | bool | None]:
        """Convert to a plain dict (for API responses)."""
        return self.model_dump(mode="json", exclude_none=False)
