"""Health endpoint router composition for service liveness checks."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from remote_app_loader.domain import HealthStatus
from remote_app_loader.routing import RemoteAppRouteTable


def api_create_health_router(route_table: RemoteAppRouteTable) -> APIRouter:
    """Create health-check router reporting service and configuration state.

    Args:
        route_table: Routes for configured applications.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when route_table is invalid.
    """

    if route_table is None:
        raise ValueError("route_table must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return application health state.

        Manifest hosts are not probed; they are fetched per request only.

        Returns:
            JSONResponse: Deterministic health payload for operational checks.
        """

        configured_count = len(route_table.routes)
        health = HealthStatus(
            status="ok",
            detail=f"{configured_count} remote app(s) configured" if configured_count else "no remote apps configured",
        )
        payload = {
            "status": health.status,
            "app": "up",
            "remote_apps": configured_count,
            "detail": health.detail,
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
