"""Project-native typed exceptions for asset manifest retrieval failures."""

from __future__ import annotations

from typing import Final

MANIFEST_TIMEOUT_CODE: Final[str] = "MANIFEST_TIMEOUT"
MANIFEST_UNAVAILABLE_CODE: Final[str] = "MANIFEST_UNAVAILABLE"
MANIFEST_MALFORMED_CODE: Final[str] = "MANIFEST_MALFORMED"


class ManifestAdapterError(Exception):
    """Base exception for manifest retrieval and decoding failures.

    Attributes:
        error_code: Stable failure code for diagnostics.
        manifest_url: Manifest URL involved in the failure, when known.
    """

    default_error_code: str = MANIFEST_UNAVAILABLE_CODE

    def __init__(self, message: str, manifest_url: str | None = None, error_code: str | None = None):
        super().__init__(message)
        self.error_code = error_code or self.default_error_code
        self.manifest_url = manifest_url


class ManifestAdapterConnectionError(ManifestAdapterError, ConnectionError):
    """Transport failure or non-success HTTP status while fetching a manifest."""


class ManifestAdapterTimeoutError(ManifestAdapterError, TimeoutError):
    """Manifest request did not complete within the configured timeout."""

    default_error_code = MANIFEST_TIMEOUT_CODE


class ManifestDecodeError(ManifestAdapterError, ValueError):
    """Manifest body was fetched but is not a JSON object."""

    default_error_code = MANIFEST_MALFORMED_CODE
