"""Adapter layer package for remote manifest retrieval boundaries."""

from .interfaces import ManifestAdapterPort, ManifestFetchResult
from .manifest_errors import (
	MANIFEST_MALFORMED_CODE,
	MANIFEST_TIMEOUT_CODE,
	MANIFEST_UNAVAILABLE_CODE,
	ManifestAdapterConnectionError,
	ManifestAdapterError,
	ManifestAdapterTimeoutError,
	ManifestDecodeError,
)
from .manifest_http import ManifestHttpAdapter, manifest_decode_payload

__all__ = [
	"MANIFEST_MALFORMED_CODE",
	"MANIFEST_TIMEOUT_CODE",
	"MANIFEST_UNAVAILABLE_CODE",
	"ManifestAdapterConnectionError",
	"ManifestAdapterError",
	"ManifestAdapterPort",
	"ManifestAdapterTimeoutError",
	"ManifestDecodeError",
	"ManifestFetchResult",
	"ManifestHttpAdapter",
	"manifest_decode_payload",
]
