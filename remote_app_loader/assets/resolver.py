"""Asset manifest resolution into ordered script and stylesheet enqueue actions."""

from __future__ import annotations

import posixpath
import re
from typing import Final, Mapping

from remote_app_loader.config import RemoteAppConfig
from remote_app_loader.domain import AssetKind, AssetResolution, ClassifiedAsset, EnqueueAction

ASSET_IGNORE_PATTERN: Final[re.Pattern[str]] = re.compile(r"precache-manifest|service-worker")
ASSET_PRIMARY_PATTERN: Final[re.Pattern[str]] = re.compile(r"runtime|bundle")
ASSET_FRAMEWORK_SCRIPT_DEPENDENCIES: Final[tuple[str, ...]] = ("react", "react-dom")

_UNSAFE_KEY_CHARACTERS: Final[re.Pattern[str]] = re.compile(r"[^a-z0-9_\-]")


def assets_filter_manifest(assets: Mapping[str, str]) -> dict[str, str]:
    """Drop precache manifests and service workers from a manifest mapping.

    Args:
        assets: Manifest mapping of logical name to path.

    Returns:
        dict[str, str]: Remaining entries in input order.
    """

    return {
        asset_name: asset_path
        for asset_name, asset_path in assets.items()
        if ASSET_IGNORE_PATTERN.search(asset_path) is None
    }


def assets_is_primary(asset_path: str) -> bool:
    """Return whether a path names the runtime or bundle entry."""

    return ASSET_PRIMARY_PATTERN.search(asset_path) is not None


def assets_order_and_classify(assets: Mapping[str, str]) -> list[ClassifiedAsset]:
    """Move runtime/bundle entries first and classify each path by extension.

    Only the primary/non-primary partition is guaranteed; relative order
    inside each partition is not part of the contract. Paths that are neither
    `.js` nor `.css` (source maps, images, fonts) are dropped.

    Args:
        assets: Filtered manifest mapping.

    Returns:
        list[ClassifiedAsset]: Enqueueable assets, primary entries first.
    """

    ordered_paths = sorted(assets.values(), key=lambda asset_path: not assets_is_primary(asset_path))

    classified_assets: list[ClassifiedAsset] = []
    for asset_path in ordered_paths:
        is_script = asset_path.endswith(".js")
        is_stylesheet = asset_path.endswith(".css")
        if not is_script and not is_stylesheet:
            continue
        classified_assets.append(
            ClassifiedAsset(
                path=asset_path,
                is_script=is_script,
                is_stylesheet=is_stylesheet,
                is_primary=assets_is_primary(asset_path),
            )
        )
    return classified_assets


def assets_sanitize_key(value: str) -> str:
    """Lower-case a value and strip everything except letters, digits, `-` and `_`.

    Args:
        value: Raw key candidate.

    Returns:
        str: Identifier-safe key.
    """

    return _UNSAFE_KEY_CHARACTERS.sub("", value.lower())


def assets_build_handle(root_id: str, asset: ClassifiedAsset) -> str:
    """Return the registry handle for one classified asset.

    The primary entry takes the bare root id so other assets can depend on
    it; every other entry is suffixed with its sanitized file name so several
    JavaScript entry points can coexist.

    Args:
        root_id: Mount-point id of the application.
        asset: Classified asset.

    Returns:
        str: Registry handle.
    """

    if asset.is_primary:
        return root_id
    return f"{root_id}-{assets_sanitize_key(posixpath.basename(asset.path))}"


def assets_resolve_uri(base_url: str, asset_path: str) -> str:
    """Return absolute asset URIs unchanged, else join the path onto base_url.

    Args:
        base_url: Application base URL.
        asset_path: Relative path or absolute URI.

    Returns:
        str: Absolute asset URI.
    """

    if "://" in asset_path:
        return asset_path
    return f"{base_url.rstrip('/')}/{asset_path.lstrip('/')}"


def assets_build_enqueue_action(config: RemoteAppConfig, asset: ClassifiedAsset) -> EnqueueAction:
    """Build the enqueue action for one classified asset.

    Args:
        config: Remote application config.
        asset: Classified script or stylesheet.

    Returns:
        EnqueueAction: Script or stylesheet action.

    Raises:
        ValueError: Raised when the asset is neither a script nor a stylesheet.
    """

    handle = assets_build_handle(root_id=config.root_id, asset=asset)
    uri = assets_resolve_uri(base_url=config.base_url, asset_path=asset.path)
    if asset.is_script:
        return EnqueueAction(
            kind=AssetKind.SCRIPT,
            handle=handle,
            uri=uri,
            dependencies=tuple(config.scripts) + ASSET_FRAMEWORK_SCRIPT_DEPENDENCIES,
        )
    if asset.is_stylesheet:
        return EnqueueAction(
            kind=AssetKind.STYLESHEET,
            handle=handle,
            uri=uri,
            dependencies=tuple(config.styles),
        )
    raise ValueError(f"asset is not enqueueable: {asset.path}")


def assets_build_fallback_stylesheet(config: RemoteAppConfig) -> EnqueueAction:
    """Build the registration-only stylesheet that carries configured style dependencies."""

    return EnqueueAction(
        kind=AssetKind.STYLESHEET,
        handle=config.root_id,
        uri=None,
        dependencies=tuple(config.styles),
    )


def assets_resolve_enqueue_actions(config: RemoteAppConfig, assets: Mapping[str, str]) -> AssetResolution:
    """Resolve a decoded manifest into ordered enqueue actions.

    An empty mapping (for example after a failed fetch) yields only the
    fallback stylesheet registration.

    Args:
        config: Remote application config.
        assets: Decoded manifest mapping.

    Returns:
        AssetResolution: Ordered actions and whether a stylesheet was found.
    """

    classified_assets = assets_order_and_classify(assets_filter_manifest(assets))
    actions = [assets_build_enqueue_action(config=config, asset=asset) for asset in classified_assets]
    has_stylesheet = any(action.kind is AssetKind.STYLESHEET for action in actions)
    if not has_stylesheet:
        actions.append(assets_build_fallback_stylesheet(config))
    return AssetResolution(actions=tuple(actions), has_stylesheet=has_stylesheet)


__all__ = [
    "ASSET_FRAMEWORK_SCRIPT_DEPENDENCIES",
    "ASSET_IGNORE_PATTERN",
    "ASSET_PRIMARY_PATTERN",
    "assets_build_enqueue_action",
    "assets_build_fallback_stylesheet",
    "assets_build_handle",
    "assets_filter_manifest",
    "assets_is_primary",
    "assets_order_and_classify",
    "assets_resolve_enqueue_actions",
    "assets_resolve_uri",
    "assets_sanitize_key",
]
