"""Per-request script and stylesheet registry with dependency-ordered output."""

from __future__ import annotations

import logging
from html import escape
from typing import Mapping

from remote_app_loader.domain import AssetKind, EnqueueAction

logger = logging.getLogger(__name__)


class EnqueueRegistry:
    """Collect enqueue actions and emit tags with dependencies first.

    Handles are unique per kind; the first registration of a handle wins.
    Shared handles (host-provided libraries) are registered up front and are
    only emitted when an enqueued asset depends on them.
    """

    def __init__(
        self,
        shared_scripts: Mapping[str, str] | None = None,
        shared_styles: Mapping[str, str] | None = None,
    ):
        self._registered: dict[AssetKind, dict[str, EnqueueAction]] = {
            AssetKind.SCRIPT: {},
            AssetKind.STYLESHEET: {},
        }
        self._queue: dict[AssetKind, list[str]] = {
            AssetKind.SCRIPT: [],
            AssetKind.STYLESHEET: [],
        }
        for handle, uri in (shared_scripts or {}).items():
            self.registry_register(EnqueueAction(kind=AssetKind.SCRIPT, handle=handle, uri=uri, dependencies=()))
        for handle, uri in (shared_styles or {}).items():
            self.registry_register(EnqueueAction(kind=AssetKind.STYLESHEET, handle=handle, uri=uri, dependencies=()))

    def registry_register(self, action: EnqueueAction) -> bool:
        """Register an action without enqueuing it.

        Args:
            action: Script or stylesheet action.

        Returns:
            bool: False when the handle was already registered for this kind.
        """

        registered_actions = self._registered[action.kind]
        if action.handle in registered_actions:
            return False
        registered_actions[action.handle] = action
        return True

    def registry_enqueue(self, action: EnqueueAction) -> None:
        """Register an action when new and queue its handle for output.

        Args:
            action: Script or stylesheet action.
        """

        if not self.registry_register(action):
            logger.debug("handle already registered kind=%s handle=%s", action.kind.value, action.handle)
        queued_handles = self._queue[action.kind]
        if action.handle not in queued_handles:
            queued_handles.append(action.handle)

    def registry_resolve_order(self, kind: AssetKind) -> list[EnqueueAction]:
        """Return queued actions of one kind expanded with their dependencies.

        Dependencies come before dependents; each handle appears once.
        Unknown dependency handles are skipped.

        Args:
            kind: Asset kind to resolve.

        Returns:
            list[EnqueueAction]: Actions in output order.
        """

        registered_actions = self._registered[kind]
        ordered_actions: list[EnqueueAction] = []
        done_handles: set[str] = set()
        visiting_handles: set[str] = set()

        def _visit(handle: str) -> None:
            if handle in done_handles or handle in visiting_handles:
                return
            action = registered_actions.get(handle)
            if action is None:
                logger.debug("skipping unknown dependency kind=%s handle=%s", kind.value, handle)
                return
            visiting_handles.add(handle)
            for dependency_handle in action.dependencies:
                _visit(dependency_handle)
            visiting_handles.discard(handle)
            done_handles.add(handle)
            ordered_actions.append(action)

        for queued_handle in self._queue[kind]:
            _visit(queued_handle)
        return ordered_actions

    def registry_render_style_tags(self) -> str:
        """Render `<link>` tags for queued stylesheets and their dependencies."""

        return "\n".join(
            f'<link rel="stylesheet" id="{escape(action.handle)}-css" href="{escape(action.uri)}">'
            for action in self.registry_resolve_order(AssetKind.STYLESHEET)
            if action.uri is not None
        )

    def registry_render_script_tags(self) -> str:
        """Render `<script>` tags for queued scripts and their dependencies."""

        return "\n".join(
            f'<script id="{escape(action.handle)}-js" src="{escape(action.uri)}"></script>'
            for action in self.registry_resolve_order(AssetKind.SCRIPT)
            if action.uri is not None
        )
