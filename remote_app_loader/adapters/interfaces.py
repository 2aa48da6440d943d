"""Typed interfaces for adapter-layer responsibilities."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class ManifestFetchResult:
    """Result contract for manifest fetch operations.

    Attributes:
        manifest_url: URL the manifest was fetched from.
        assets: Flat mapping of logical asset name to path, in manifest order.
        payload_size: Size of the raw response body in bytes.
    """

    manifest_url: str
    assets: dict[str, str]
    payload_size: int


class ManifestAdapterPort(Protocol):
    """Port definition for fetching remote bundler asset manifests."""

    def adapter_source_name(self) -> str:
        """Return adapter source identifier for diagnostics.

        Returns:
            str: Human-readable upstream source identifier.
        """

    def adapter_fetch_manifest(self, manifest_url: str) -> ManifestFetchResult:
        """Fetch and decode one asset manifest.

        Args:
            manifest_url: Full manifest URL.

        Returns:
            ManifestFetchResult: Decoded manifest mapping.

        Raises:
            ManifestAdapterConnectionError: Raised when the upstream is unreachable or returns non-2xx.
            ManifestAdapterTimeoutError: Raised when the request exceeds the timeout.
            ManifestDecodeError: Raised when the body is not a JSON object.
        """
