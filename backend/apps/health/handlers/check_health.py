"""GET /health - Check health of all services."""

from datetime import UTC, datetime

from fastapi import Depends
from pydantic import BaseModel, Field

from config import get_app_config, get_settings
from db.firestore import FirestoreService
from dependencies import get_firestore_service

# --- Response Schemas ---


class ServiceStatus(BaseModel):
    """Status of an individual service."""

    name: str
    status: str = Field(..., description="healthy, degraded, or unhealthy")
    latency_ms: float | None = Field(None, description="Response time in ms")
    error: str | None = Field(None, description="Error message if unhealthy")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status: healthy, degraded, unhealthy")
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Environment name")
    services: list[ServiceStatus] = Field(
        ..., description="Individual service statuses"
    )
    timestamp: datetime


def overall_status(statuses: list[str]) -> str:
    """Fold individual service statuses into one."""
    if all(s == "healthy" for s in statuses):
        return "healthy"
    if any(s == "unhealthy" for s in statuses):
        return "unhealthy"
    return "degraded"


# --- Handler ---


async def check_health(
    firestore: FirestoreService = Depends(get_firestore_service),
) -> HealthResponse:
    """Check health of all services."""
    settings = get_settings()

    firestore_health = await firestore.health_check()

    services = [
        ServiceStatus(
            name="firestore",
            status=firestore_health["status"],
            latency_ms=firestore_health.get("latency_ms"),
            error=firestore_health.get("error"),
        ),
    ]

    return HealthResponse(
        status=overall_status([s.status for s in services]),
        version=get_app_config()["version"],
        environment=settings.environment,
        services=services,
        timestamp=datetime.now(UTC),
    )
