"""Job-layer page pipeline for captured remote application requests."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Collection, Mapping

from remote_app_loader.access import access_is_allowed
from remote_app_loader.adapters import ManifestAdapterError, ManifestAdapterPort
from remote_app_loader.assets import assets_resolve_enqueue_actions
from remote_app_loader.config import RemoteAppConfig
from remote_app_loader.domain import AssetResolution, domain_build_stage_event
from remote_app_loader.rendering import EnqueueRegistry, PageTemplatePort
from remote_app_loader.routing import RemoteAppRouteTable

from .interfaces import AssetResolutionResult, PageOrchestratorPort, RemoteAppPageResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageOrchestratorConfig:
    """Configuration values for page pipeline execution.

    Attributes:
        home_url: Redirect target for visitors without the required role.
        shared_scripts: Host-provided script handles mapped to URIs.
        shared_styles: Host-provided stylesheet handles mapped to URIs.
    """

    home_url: str = "/"
    shared_scripts: Mapping[str, str] = field(default_factory=dict)
    shared_styles: Mapping[str, str] = field(default_factory=dict)


class RemoteAppPageOrchestrator(PageOrchestratorPort):
    """Serve captured requests as explicit route, gate, fetch, resolve and render calls."""

    def __init__(
        self,
        route_table: RemoteAppRouteTable,
        manifest_adapter: ManifestAdapterPort,
        page_template: PageTemplatePort,
        config: PageOrchestratorConfig,
    ):
        """Initialize page orchestrator dependencies.

        Args:
            route_table: Routes for configured applications.
            manifest_adapter: Adapter for remote manifest retrieval.
            page_template: Site page template renderer.
            config: Page pipeline configuration.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when dependencies or config values are invalid.
        """

        if route_table is None:
            raise ValueError("route_table must not be None")
        if manifest_adapter is None:
            raise ValueError("manifest_adapter must not be None")
        if page_template is None:
            raise ValueError("page_template must not be None")
        if not config.home_url.strip():
            raise ValueError("config.home_url must not be blank")

        self._route_table = route_table
        self._manifest_adapter = manifest_adapter
        self._page_template = page_template
        self._config = config

    def job_render_page(
        self,
        path: str,
        current_user_roles: Collection[str],
        query_marker: str | None = None,
    ) -> RemoteAppPageResult | None:
        """Run route-match, gate, fetch, resolve and render for one request.

        Args:
            path: Request path.
            current_user_roles: Roles of the requesting user.
            query_marker: Internal request marker set by the matched endpoint; skips path matching when given.

        Returns:
            RemoteAppPageResult | None: Page outcome, `None` when no application captures the path.
        """

        if query_marker is not None:
            route = self._route_table.routing_get_by_marker(query_marker)
        else:
            route = self._route_table.routing_match(path)
        if route is None:
            return None

        remote_app = route.remote_app
        timeline: list[dict[str, object]] = [
            domain_build_stage_event(
                stage="route",
                status="completed",
                details={"slug": remote_app.slug, "query_marker": route.query_marker},
            )
        ]

        if not access_is_allowed(remote_app.role, current_user_roles):
            logger.info("access denied slug=%s required_role=%s", remote_app.slug, remote_app.role)
            timeline.append(
                domain_build_stage_event(
                    stage="access",
                    status="denied",
                    details={"required_role": remote_app.role},
                )
            )
            return RemoteAppPageResult(
                status="redirect",
                slug=remote_app.slug,
                redirect_url=self._config.home_url,
                timeline=timeline,
            )
        timeline.append(domain_build_stage_event(stage="access", status="allowed"))

        resolution, manifest_error_code = self._job_fetch_and_resolve(remote_app=remote_app, timeline=timeline)

        registry = EnqueueRegistry(
            shared_scripts=self._config.shared_scripts,
            shared_styles=self._config.shared_styles,
        )
        for action in resolution.actions:
            registry.registry_enqueue(action)

        html = self._page_template.page_render(
            page_title=remote_app.slug,
            root_id=remote_app.root_id,
            style_tags=registry.registry_render_style_tags(),
            script_tags=registry.registry_render_script_tags(),
        )
        timeline.append(domain_build_stage_event(stage="render", status="completed"))

        return RemoteAppPageResult(
            status="rendered",
            slug=remote_app.slug,
            actions=resolution.actions,
            html=html,
            manifest_error_code=manifest_error_code,
            timeline=timeline,
        )

    def job_resolve_actions(self, slug: str) -> AssetResolutionResult:
        """Fetch and resolve the manifest of one configured application.

        Args:
            slug: Application slug.

        Returns:
            AssetResolutionResult: Resolved actions and failure diagnostics.

        Raises:
            KeyError: Raised when no application has the slug.
        """

        route = self._route_table.routing_get_by_slug(slug)
        if route is None:
            raise KeyError(f"unknown remote app slug={slug}")

        timeline: list[dict[str, object]] = []
        resolution, manifest_error_code = self._job_fetch_and_resolve(remote_app=route.remote_app, timeline=timeline)
        return AssetResolutionResult(
            slug=route.remote_app.slug,
            resolution=resolution,
            manifest_error_code=manifest_error_code,
            timeline=timeline,
        )

    def _job_fetch_and_resolve(
        self,
        remote_app: RemoteAppConfig,
        timeline: list[dict[str, object]],
    ) -> tuple[AssetResolution, str | None]:
        """Fetch the manifest and resolve actions, degrading failures to an empty asset set.

        Args:
            remote_app: Application being served.
            timeline: Mutable diagnostics timeline list.

        Returns:
            tuple[AssetResolution, str | None]: Resolution and manifest failure code.
        """

        manifest_error_code: str | None = None
        assets: dict[str, str] = {}

        timeline.append(domain_build_stage_event(stage="manifest", status="started"))
        try:
            fetch_result = self._manifest_adapter.adapter_fetch_manifest(manifest_url=remote_app.asset_manifest_url)
            assets = fetch_result.assets
            timeline.append(
                domain_build_stage_event(
                    stage="manifest",
                    status="completed",
                    details={"entries": len(assets)},
                )
            )
        except ManifestAdapterError as error:
            manifest_error_code = error.error_code
            logger.warning(
                "manifest unavailable slug=%s url=%s code=%s: %s",
                remote_app.slug,
                remote_app.asset_manifest_url,
                error.error_code,
                error,
            )
            timeline.append(
                domain_build_stage_event(
                    stage="manifest",
                    status="failed",
                    details={"message": str(error)},
                    error_code=error.error_code,
                )
            )

        resolution = assets_resolve_enqueue_actions(config=remote_app, assets=assets)
        logger.debug(
            "resolved assets slug=%s actions=%d has_stylesheet=%s",
            remote_app.slug,
            len(resolution.actions),
            resolution.has_stylesheet,
        )
        timeline.append(
            domain_build_stage_event(
                stage="resolve",
                status="completed",
                details={
                    "actions": len(resolution.actions),
                    "has_stylesheet": resolution.has_stylesheet,
                },
            )
        )
        return resolution, manifest_error_code
