"""HTTP adapter for retrieving bundler asset manifests from remote hosts."""

from __future__ import annotations

import http.client
import json
import logging
import socket
from typing import Final
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from .interfaces import ManifestAdapterPort, ManifestFetchResult
from .manifest_errors import ManifestAdapterConnectionError, ManifestAdapterTimeoutError, ManifestDecodeError

logger = logging.getLogger(__name__)


def manifest_decode_payload(payload: bytes, manifest_url: str | None = None) -> dict[str, str]:
    """Decode manifest bytes into a flat asset-name to path mapping.

    Only top-level string values are kept. Nested objects such as `files` or
    `entrypoints` are ignored, never interpreted.

    Args:
        payload: Raw response body.
        manifest_url: Optional URL for error context.

    Returns:
        dict[str, str]: Asset mapping in manifest order.

    Raises:
        ManifestDecodeError: Raised when the body is not UTF-8 JSON or not a JSON object.
    """

    try:
        decoded_payload = json.loads(payload.decode("utf-8"))
    except UnicodeDecodeError as error:
        raise ManifestDecodeError("manifest body is not valid UTF-8", manifest_url=manifest_url) from error
    except (json.JSONDecodeError, RecursionError) as error:
        raise ManifestDecodeError("manifest body is not valid JSON", manifest_url=manifest_url) from error

    if not isinstance(decoded_payload, dict):
        raise ManifestDecodeError("manifest body must be a JSON object", manifest_url=manifest_url)

    return {
        str(asset_name): asset_path
        for asset_name, asset_path in decoded_payload.items()
        if isinstance(asset_path, str)
    }


class ManifestHttpAdapter(ManifestAdapterPort):
    """Adapter performing one GET per manifest request, without retries."""

    _USER_AGENT: Final[str] = "remote-app-loader/0.1 (Python/urllib.request)"

    def __init__(self, request_timeout_seconds: float = 10.0):
        """Initialize manifest HTTP adapter.

        Args:
            request_timeout_seconds: HTTP request timeout in seconds.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when timeout is not positive.
        """

        if request_timeout_seconds <= 0:
            raise ValueError("request_timeout_seconds must be > 0")

        self._request_timeout_seconds = request_timeout_seconds

    def adapter_source_name(self) -> str:
        """Return stable adapter source label.

        Returns:
            str: Source identifier.
        """

        return "remote_manifest_http"

    def adapter_fetch_manifest(self, manifest_url: str) -> ManifestFetchResult:
        """Fetch and decode one asset manifest.

        Args:
            manifest_url: Full manifest URL.

        Returns:
            ManifestFetchResult: Decoded manifest mapping.

        Raises:
            ValueError: Raised when manifest_url is blank.
            ManifestAdapterConnectionError: Raised for network failures and non-2xx status.
            ManifestAdapterTimeoutError: Raised when the request times out.
            ManifestDecodeError: Raised when the body is not a JSON object.
        """

        normalized_manifest_url = manifest_url.strip()
        if not normalized_manifest_url:
            raise ValueError("manifest_url must not be blank")

        payload = self._adapter_http_get(url=normalized_manifest_url)
        assets = manifest_decode_payload(payload=payload, manifest_url=normalized_manifest_url)
        logger.debug("fetched manifest url=%s entries=%d", normalized_manifest_url, len(assets))
        return ManifestFetchResult(
            manifest_url=normalized_manifest_url,
            assets=assets,
            payload_size=len(payload),
        )

    def _adapter_http_get(self, url: str) -> bytes:
        """Execute one HTTP GET and return response payload bytes.

        Args:
            url: Manifest URL.

        Returns:
            bytes: HTTP response payload.

        Raises:
            ManifestAdapterConnectionError: Raised for network errors and non-success HTTP status.
            ManifestAdapterTimeoutError: Raised when the transport times out.
        """

        try:
            request = Request(
                url,
                method="GET",
                headers={"User-Agent": self._USER_AGENT, "Accept": "application/json"},
            )
            with urlopen(request, timeout=self._request_timeout_seconds) as response:
                status_code = int(response.getcode() or 200)
                payload = response.read()
        except TimeoutError as error:
            raise ManifestAdapterTimeoutError("manifest request timed out", manifest_url=url) from error
        except HTTPError as error:
            raise ManifestAdapterConnectionError(
                f"manifest upstream returned HTTP {error.code}",
                manifest_url=url,
            ) from error
        except URLError as error:
            if isinstance(error.reason, (TimeoutError, socket.timeout)):
                raise ManifestAdapterTimeoutError("manifest request timed out", manifest_url=url) from error
            raise ManifestAdapterConnectionError("manifest request failed", manifest_url=url) from error
        except ValueError as error:
            raise ManifestAdapterConnectionError(f"manifest url is not fetchable: {url}", manifest_url=url) from error
        except (http.client.HTTPException, OSError) as error:
            raise ManifestAdapterConnectionError(
                f"manifest response could not be read: {type(error).__name__}",
                manifest_url=url,
            ) from error

        if status_code < 200 or status_code >= 300:
            raise ManifestAdapterConnectionError(f"manifest upstream returned HTTP {status_code}", manifest_url=url)

        return bytes(payload)
