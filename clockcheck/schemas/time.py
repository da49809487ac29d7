from pydantic import BaseModel, Field


class TimeResponse(BaseModel):
    """Current server time."""
    time: str = Field(..., description="UTC instant, ISO-8601 with milliseconds and a 'Z' suffix")
