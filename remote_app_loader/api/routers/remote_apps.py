"""Remote application router capturing each configured slug and its sub-paths."""

from __future__ import annotations

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse, Response

from remote_app_loader.access import UserRolesPort
from remote_app_loader.jobs import PageOrchestratorPort, RemoteAppPageResult
from remote_app_loader.routing import RemoteAppRoute, RemoteAppRouteTable


def api_create_remote_apps_router(
    route_table: RemoteAppRouteTable,
    page_orchestrator: PageOrchestratorPort,
    roles_provider: UserRolesPort,
) -> APIRouter:
    """Create router mounting `/<slug>` and `/<slug>/<anything>` per application.

    Args:
        route_table: Routes for configured applications.
        page_orchestrator: Page pipeline orchestrator.
        roles_provider: Current-user roles provider.

    Returns:
        APIRouter: Router exposing one page endpoint pair per application.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if route_table is None:
        raise ValueError("route_table must not be None")
    if page_orchestrator is None:
        raise ValueError("page_orchestrator must not be None")
    if roles_provider is None:
        raise ValueError("roles_provider must not be None")

    router = APIRouter(tags=["remote-apps"])
    for route in route_table.routes:
        page_handler = _api_build_page_handler(
            route=route,
            page_orchestrator=page_orchestrator,
            roles_provider=roles_provider,
        )
        slug_path = f"/{route.remote_app.slug}"
        router.add_api_route(
            slug_path,
            page_handler,
            methods=["GET"],
            name=route.query_marker,
            include_in_schema=False,
        )
        router.add_api_route(
            slug_path + "/{remote_app_path:path}",
            page_handler,
            methods=["GET"],
            name=f"{route.query_marker}_path",
            include_in_schema=False,
        )

    return router


def _api_build_page_handler(
    route: RemoteAppRoute,
    page_orchestrator: PageOrchestratorPort,
    roles_provider: UserRolesPort,
):
    """Build the page endpoint for one application route.

    Args:
        route: Compiled application route.
        page_orchestrator: Page pipeline orchestrator.
        roles_provider: Current-user roles provider.

    Returns:
        Callable[[Request], Response]: Endpoint function.
    """

    def api_remote_app_page(request: Request) -> Response:
        """Serve the remote application page or redirect unauthorized visitors.

        Args:
            request: Incoming request.

        Returns:
            Response: HTML page, redirect, or 404 when the path is not captured.
        """

        current_user_roles = roles_provider.access_current_user_roles(request.headers)
        page_result = page_orchestrator.job_render_page(
            path=request.url.path,
            current_user_roles=current_user_roles,
            query_marker=route.query_marker,
        )
        if page_result is None:
            payload = {
                "status": "error",
                "message": "remote app not found",
            }
            return JSONResponse(content=payload, status_code=status.HTTP_404_NOT_FOUND)
        return api_build_page_response(page_result)

    return api_remote_app_page


def api_build_page_response(page_result: RemoteAppPageResult) -> Response:
    """Convert a page pipeline result into an HTTP response.

    Args:
        page_result: Page pipeline outcome.

    Returns:
        Response: `303` redirect for denied access, `200` HTML otherwise.
    """

    if page_result.status == "redirect":
        return RedirectResponse(url=page_result.redirect_url or "/", status_code=status.HTTP_303_SEE_OTHER)

    headers = {}
    if page_result.manifest_error_code is not None:
        headers["X-Remote-App-Manifest-Error"] = page_result.manifest_error_code
    return HTMLResponse(content=page_result.html or "", status_code=status.HTTP_200_OK, headers=headers)


__all__ = ["api_build_page_response", "api_create_remote_apps_router"]
