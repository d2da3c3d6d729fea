from typing import Any

from fastapi import APIRouter

from app.agent.artifacts import ArchitectureRequest, ArchitectureResponse
from app.agent.orchestrator import run_architecture_pipeline

router = APIRouter(tags=["architecture"])


@router.post(
    "/architecture",
    response_model=ArchitectureResponse,
    response_model_exclude_none=True,
)
def recommend_architecture(request_in: ArchitectureRequest) -> Any:
    """Recommend an architecture for a free-text product description."""
    return run_architecture_pipeline(request_in)
