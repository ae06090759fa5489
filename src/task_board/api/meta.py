"""Board metadata endpoints."""

from fastapi import APIRouter, HTTPException

from task_board.api.models import HealthResponse
from task_board.config import STATUSES
from task_board.factory import StoreDep

router = APIRouter()


@router.get("/api/statuses", response_model=list[str])
async def list_statuses() -> list[str]:
    """List workflow stages in display order."""
    return list(STATUSES)


@router.get("/health", response_model=HealthResponse)
async def health(store: StoreDep) -> HealthResponse:
    """Report liveness and the number of tasks held."""
    return HealthResponse(status="ok", tasks=len(store))


@router.api_route(
    "/api/{path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
async def unknown_api_endpoint(path: str) -> None:
    """Answer unknown API paths with JSON instead of the static fallback."""
    raise HTTPException(status_code=404, detail="API endpoint not found")
