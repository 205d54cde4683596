"""Health endpoint response model."""

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """Response for GET /api/health."""

    model_config = ConfigDict(populate_by_name=True)

    status: str = "ok"
    api_key_configured: bool = Field(..., alias="apiKeyConfigured")
    message: str
