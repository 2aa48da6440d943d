"""FastAPI application factory for the remote app loader runtime.

This module defines API application composition used by the service.
"""

from fastapi import FastAPI

from remote_app_loader.access import UserRolesPort
from remote_app_loader.config import AppSettings
from remote_app_loader.jobs import PageOrchestratorPort
from remote_app_loader.routing import RemoteAppRouteTable

from .routers import api_create_health_router, api_create_remote_apps_router


def create_api_application(
    settings: AppSettings,
    route_table: RemoteAppRouteTable,
    page_orchestrator: PageOrchestratorPort,
    roles_provider: UserRolesPort,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        route_table: Routes for configured applications.
        page_orchestrator: Page pipeline orchestrator.
        roles_provider: Current-user roles provider.

    Returns:
        FastAPI: Framework application instance with all routers mounted.
    """
    application = FastAPI(title=settings.site_title)

    @application.get("/", tags=["foundation"])
    def foundation_index() -> dict[str, object]:
        """Return service metadata and configured application slugs.

        Returns:
            dict[str, object]: Minimal response for deployment verification.
        """

        return {
            "service": "remote-app-loader",
            "status": "ready",
            "environment": settings.environment_name,
            "remote_apps": [route.remote_app.slug for route in route_table.routes],
        }

    application.include_router(api_create_health_router(route_table=route_table))
    application.include_router(
        api_create_remote_apps_router(
            route_table=route_table,
            page_orchestrator=page_orchestrator,
            roles_provider=roles_provider,
        )
    )

    return application
