from enum import Enum
from typing import Literal
from pydantic import BaseModel, Field


class HealthStatus(str, Enum):
    OK = "ok"
    ERROR = "error"


class HealthResponse(BaseModel):
    """Health check response model."""
    status: Literal[HealthStatus.OK] = Field(HealthStatus.OK, description="Service status marker for external monitors")


class ErrorResponse(BaseModel):
    """Error body returned alongside a non-2xx status."""
    status: Literal[HealthStatus.ERROR] = Field(HealthStatus.ERROR, description="Always 'error'")
    message: str = Field(..., description="Human-readable reason")


class StatusResponse(BaseModel):
    status: str = "Application is running"
    version: str
