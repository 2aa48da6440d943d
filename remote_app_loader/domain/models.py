"""Typed domain models shared across runtime layers.

This module provides simple data contracts for asset resolution results and
health reporting.
"""

from dataclasses import dataclass
from enum import Enum


class AssetKind(str, Enum):
    """Kinds of enqueueable assets a bundler manifest may reference."""

    SCRIPT = "script"
    STYLESHEET = "stylesheet"


@dataclass(frozen=True)
class ClassifiedAsset:
    """One manifest path after ordering and classification.

    Attributes:
        path: Relative path or absolute URI from the manifest.
        is_script: Whether the path names a JavaScript file.
        is_stylesheet: Whether the path names a CSS file.
        is_primary: Whether the path is the runtime/bundle entry.
    """

    path: str
    is_script: bool
    is_stylesheet: bool
    is_primary: bool


@dataclass(frozen=True)
class EnqueueAction:
    """One script or stylesheet registration handed to the enqueue registry.

    Attributes:
        kind: Asset kind.
        handle: Registry handle, unique per kind.
        uri: Absolute asset URI, `None` for registration-only stylesheets.
        dependencies: Handles that must load before this asset.
    """

    kind: AssetKind
    handle: str
    uri: str | None
    dependencies: tuple[str, ...]

    def action_to_payload(self) -> dict[str, object]:
        """Serialize action to a JSON-compatible payload.

        Returns:
            dict[str, object]: Action payload.
        """

        return {
            "kind": self.kind.value,
            "handle": self.handle,
            "uri": self.uri,
            "dependencies": list(self.dependencies),
        }


@dataclass(frozen=True)
class AssetResolution:
    """Ordered enqueue actions resolved from one manifest.

    Attributes:
        actions: Enqueue actions in emission order.
        has_stylesheet: Whether the manifest contributed at least one stylesheet.
    """

    actions: tuple[EnqueueAction, ...]
    has_stylesheet: bool


@dataclass(frozen=True)
class HealthStatus:
    """Health response contract used by health-check surfaces.

    Attributes:
        status: Overall status text for service health.
        detail: Additional message suitable for operational diagnostics.
    """

    status: str
    detail: str
