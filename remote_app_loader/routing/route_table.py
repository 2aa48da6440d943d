"""Path capture for configured remote applications."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

from remote_app_loader.config import RemoteAppConfig


@dataclass(frozen=True)
class RemoteAppRoute:
    """Compiled route for one remote application.

    Attributes:
        pattern: Regex matched against the request path without its leading slash.
        query_marker: Internal request marker distinct per slug.
        remote_app: Application served by the route.
    """

    pattern: re.Pattern[str]
    query_marker: str
    remote_app: RemoteAppConfig


def routing_build_pattern(slug: str) -> re.Pattern[str]:
    """Compile the `^slug(/.*)?$` capture pattern for a slug."""

    return re.compile(f"^{re.escape(slug)}(/.*)?$")


class RemoteAppRouteTable:
    """Ordered routes for all configured applications, built once at startup."""

    def __init__(self, remote_apps: Sequence[RemoteAppConfig]):
        """Compile one route per configured application.

        Args:
            remote_apps: Configured applications in declared order.

        Raises:
            ValueError: Raised when two applications share a slug.
        """

        routes: list[RemoteAppRoute] = []
        routes_by_marker: dict[str, RemoteAppRoute] = {}
        for remote_app in remote_apps:
            if remote_app.query_marker in routes_by_marker:
                raise ValueError(f"duplicate remote app slug={remote_app.slug}")
            route = RemoteAppRoute(
                pattern=routing_build_pattern(remote_app.slug),
                query_marker=remote_app.query_marker,
                remote_app=remote_app,
            )
            routes.append(route)
            routes_by_marker[route.query_marker] = route

        self._routes = tuple(routes)
        self._routes_by_marker = routes_by_marker

    @property
    def routes(self) -> tuple[RemoteAppRoute, ...]:
        """Return compiled routes in declared order."""

        return self._routes

    def routing_match(self, path: str) -> RemoteAppRoute | None:
        """Return the first route capturing a request path.

        Args:
            path: Request path, with or without a leading slash.

        Returns:
            RemoteAppRoute | None: Matching route, `None` to pass the request through.
        """

        normalized_path = path.split("?", 1)[0].lstrip("/")
        for route in self._routes:
            if route.pattern.match(normalized_path):
                return route
        return None

    def routing_get_by_marker(self, query_marker: str) -> RemoteAppRoute | None:
        """Return the route registered for an internal request marker."""

        return self._routes_by_marker.get(query_marker)

    def routing_get_by_slug(self, slug: str) -> RemoteAppRoute | None:
        """Return the route of the application with the given slug."""

        for route in self._routes:
            if route.remote_app.slug == slug.strip().strip("/"):
                return route
        return None
