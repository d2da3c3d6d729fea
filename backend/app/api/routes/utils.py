from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter(tags=["utils"])


class HealthStatus(BaseModel):
    status: str
    service: str
    timestamp: datetime


@router.get("/health", response_model=HealthStatus)
def health_check() -> HealthStatus:
    return HealthStatus(status="ok", service="api", timestamp=datetime.now(timezone.utc))
