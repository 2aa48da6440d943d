"""Asset layer package for manifest filtering, ordering and enqueue resolution."""

from .resolver import (
    ASSET_FRAMEWORK_SCRIPT_DEPENDENCIES,
    assets_build_enqueue_action,
    assets_build_fallback_stylesheet,
    assets_build_handle,
    assets_filter_manifest,
    assets_is_primary,
    assets_order_and_classify,
    assets_resolve_enqueue_actions,
    assets_resolve_uri,
    assets_sanitize_key,
)

__all__ = [
    "ASSET_FRAMEWORK_SCRIPT_DEPENDENCIES",
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
