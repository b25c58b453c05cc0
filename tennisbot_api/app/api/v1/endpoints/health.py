"""Liveness endpoint used by load balancers and uptime checks."""

from datetime import datetime, timezone

from fastapi import APIRouter

from tennisbot_api.app.schemas.health import HealthStatus


router = APIRouter()


@router.get("/health", response_model=HealthStatus)
async def health() -> HealthStatus:
    return HealthStatus(status="ok", timestamp=datetime.now(timezone.utc))
