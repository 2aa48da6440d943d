"""Tests for remote application HTTP endpoints.

These tests exercise the FastAPI surface with a stub manifest adapter so no
network access is required.
"""

from __future__ import annotations

from fastapi.testclient import TestClient

from remote_app_loader.access import HeaderUserRolesProvider
from remote_app_loader.adapters import ManifestAdapterTimeoutError, ManifestFetchResult
from remote_app_loader.api.application import create_api_application
from remote_app_loader.config import AppSettings, RemoteAppConfig
from remote_app_loader.jobs import PageOrchestratorConfig, RemoteAppPageOrchestrator, RemoteAppPageResult
from remote_app_loader.rendering import PageTemplateRenderer
from remote_app_loader.routing import RemoteAppRouteTable


class _ManifestAdapterStub:
    """Adapter stub returning a fixed manifest or raising a fixed error."""

    def __init__(self, response: object):
        self._response = response

    def adapter_source_name(self) -> str:
        return "stub"

    def adapter_fetch_manifest(self, manifest_url: str) -> ManifestFetchResult:
        if isinstance(self._response, Exception):
            raise self._response
        return ManifestFetchResult(manifest_url=manifest_url, assets=dict(self._response), payload_size=0)


def _build_client(adapter_response: object) -> TestClient:
    """Create test client for one gated remote application.

    Args:
        adapter_response: Manifest mapping or exception for the adapter stub.

    Returns:
        TestClient: Client bound to the application under test.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    settings = AppSettings(environment_name="test", home_url="/", site_title="Example Site")
    route_table = RemoteAppRouteTable(
        [
            RemoteAppConfig(
                slug="portal",
                role="editor",
                base_url="https://cdn.example.com",
                asset_manifest_url="https://cdn.example.com/asset-manifest.json",
            )
        ]
    )
    orchestrator = RemoteAppPageOrchestrator(
        route_table=route_table,
        manifest_adapter=_ManifestAdapterStub(adapter_response),
        page_template=PageTemplateRenderer(site_title=settings.site_title),
        config=PageOrchestratorConfig(home_url=settings.home_url),
    )
    application = create_api_application(
        settings=settings,
        route_table=route_table,
        page_orchestrator=orchestrator,
        roles_provider=HeaderUserRolesProvider(header_name=settings.user_roles_header),
    )
    return TestClient(application)


def test_api_remote_app_sub_path_returns_html_page() -> None:
    """Serve HTML with mount point for captured sub-path and allowed role.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    client = _build_client({"main.js": "static/js/main.a1b2.js"})

    response = client.get("/portal/orders/42", headers={"X-User-Roles": "author, editor"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert '<div id="root"></div>' in response.text
    assert "https://cdn.example.com/static/js/main.a1b2.js" in response.text
    assert "X-Remote-App-Manifest-Error" not in response.headers


def test_api_remote_app_redirects_without_role() -> None:
    """Redirect to home URL when the visitor lacks the required role."""

    client = _build_client({"main.js": "static/js/main.js"})

    response = client.get("/portal", headers={"X-User-Roles": "subscriber"}, follow_redirects=False)

    assert response.status_code == 303
    assert response.headers["location"] == "/"


def test_api_remote_app_manifest_timeout_still_renders_mount_point() -> None:
    """Render bare mount point and expose manifest error code on timeout.

    Returns:
        None: Assertions validate degraded response.

    Raises:
        AssertionError: Raised when failure is surfaced as an error page.
    """

    client = _build_client(ManifestAdapterTimeoutError("manifest request timed out"))

    response = client.get("/portal/", headers={"X-User-Roles": "editor"})

    assert response.status_code == 200
    assert '<div id="root"></div>' in response.text
    assert response.headers["X-Remote-App-Manifest-Error"] == "MANIFEST_TIMEOUT"


def test_api_uncaptured_path_passes_through() -> None:
    """Return framework 404 for paths outside configured slugs."""

    client = _build_client({})

    assert client.get("/portals").status_code == 404


def test_api_index_lists_configured_slugs() -> None:
    """List configured slugs on the foundation index."""

    client = _build_client({})

    payload = client.get("/").json()

    assert payload["remote_apps"] == ["portal"]
    assert payload["environment"] == "test"


class _RecordingOrchestratorStub:
    """Orchestrator stub recording dispatch arguments."""

    def __init__(self):
        self.calls: list[dict[str, object]] = []

    def job_render_page(self, path: str, current_user_roles, query_marker: str | None = None):
        """Record call and render an empty page.

        Args:
            path: Request path.
            current_user_roles: Current user roles.
            query_marker: Internal request marker.

        Returns:
            RemoteAppPageResult: Rendered stub page.
        """

        self.calls.append({"path": path, "query_marker": query_marker})
        return RemoteAppPageResult(status="rendered", slug="portal", html="<div id=\"root\"></div>")

    def job_resolve_actions(self, slug: str):
        raise KeyError(slug)


def test_api_remote_app_endpoint_dispatches_with_query_marker() -> None:
    """Pass the endpoint's query marker to the orchestrator.

    Returns:
        None: Assertions validate dispatch arguments.

    Raises:
        AssertionError: Raised when the endpoint does not dispatch on its marker.
    """

    route_table = RemoteAppRouteTable(
        [RemoteAppConfig(slug="portal", base_url="https://a.test", asset_manifest_url="https://a.test/m.json")]
    )
    orchestrator = _RecordingOrchestratorStub()
    application = create_api_application(
        settings=AppSettings(environment_name="test"),
        route_table=route_table,
        page_orchestrator=orchestrator,
        roles_provider=HeaderUserRolesProvider(),
    )

    response = TestClient(application).get("/portal/settings/profile")

    assert response.status_code == 200
    assert orchestrator.calls == [{"path": "/portal/settings/profile", "query_marker": "remote_app_portal"}]
