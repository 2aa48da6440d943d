"""Typed interfaces for job-layer page pipeline orchestration."""

from dataclasses import dataclass, field
from typing import Collection, Protocol

from remote_app_loader.domain import AssetResolution, EnqueueAction


@dataclass(frozen=True)
class RemoteAppPageResult:
    """Outcome of one page pipeline run for a captured request.

    Attributes:
        status: `rendered` or `redirect`.
        slug: Slug of the matched application.
        actions: Enqueue actions registered for the page, empty on redirect.
        html: Rendered document, `None` on redirect.
        redirect_url: Redirect target when access was denied.
        manifest_error_code: Manifest failure code when the asset set was empty due to a failure.
        timeline: Structured stage events for diagnostics.
    """

    status: str
    slug: str
    actions: tuple[EnqueueAction, ...] = ()
    html: str | None = None
    redirect_url: str | None = None
    manifest_error_code: str | None = None
    timeline: list[dict[str, object]] = field(default_factory=list)


@dataclass(frozen=True)
class AssetResolutionResult:
    """Outcome of fetch and resolve without access checks or rendering.

    Attributes:
        slug: Application slug.
        resolution: Resolved enqueue actions.
        manifest_error_code: Manifest failure code, `None` on success.
        timeline: Structured stage events for diagnostics.
    """

    slug: str
    resolution: AssetResolution
    manifest_error_code: str | None = None
    timeline: list[dict[str, object]] = field(default_factory=list)


class PageOrchestratorPort(Protocol):
    """Port definition for serving captured remote application requests."""

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

    def job_resolve_actions(self, slug: str) -> AssetResolutionResult:
        """Fetch and resolve the manifest of one configured application.

        Args:
            slug: Application slug.

        Returns:
            AssetResolutionResult: Resolved actions and failure diagnostics.

        Raises:
            KeyError: Raised when no application has the slug.
        """
