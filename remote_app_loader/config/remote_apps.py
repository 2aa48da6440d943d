"""Typed remote application records and loaders for configured app lists."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator


class RemoteAppConfig(BaseModel):
    """Immutable configuration for one externally-hosted single-page application.

    Attributes:
        role: User role required to view the application, `None` for no restriction.
        slug: URL path segment captured for the application.
        base_url: Base URL prepended to relative asset paths.
        asset_manifest_url: Full URL of the bundler asset manifest.
        root_id: Id of the mount-point element the application renders into.
        scripts: Script handles the application's scripts depend on.
        styles: Stylesheet handles the application's styles depend on.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    role: str | None = Field(default=None)
    slug: str = Field(min_length=1)
    base_url: str = Field(min_length=1)
    asset_manifest_url: str = Field(min_length=1)
    root_id: str = Field(default="root", min_length=1)
    scripts: tuple[str, ...] = Field(default=())
    styles: tuple[str, ...] = Field(default=())

    @field_validator("slug")
    @classmethod
    def _validate_slug(cls, value: str) -> str:
        normalized_slug = value.strip().strip("/")
        if not normalized_slug:
            raise ValueError("slug must not be blank")
        return normalized_slug

    @field_validator("base_url", "asset_manifest_url", "root_id")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("role")
    @classmethod
    def _validate_optional_role(cls, value: str | None) -> str | None:
        if value is None:
            return None
        stripped_value = value.strip()
        return stripped_value or None

    @property
    def query_marker(self) -> str:
        """Return the internal request marker that routes to this application.

        Returns:
            str: Marker distinct per slug.
        """

        return f"remote_app_{self.slug}"


_REMOTE_APP_LIST_ADAPTER = TypeAdapter(list[RemoteAppConfig])


def config_parse_remote_apps(raw_records: object) -> list[RemoteAppConfig]:
    """Validate raw app records into typed immutable configs.

    Args:
        raw_records: Decoded JSON list of app records.

    Returns:
        list[RemoteAppConfig]: Validated configs in declared order.

    Raises:
        ValueError: Raised when records are invalid or slugs are duplicated.
    """

    try:
        remote_apps = _REMOTE_APP_LIST_ADAPTER.validate_python(raw_records)
    except ValidationError as error:
        raise ValueError(f"invalid remote app configuration: {error}") from error

    seen_slugs: set[str] = set()
    for remote_app in remote_apps:
        if remote_app.slug in seen_slugs:
            raise ValueError(f"duplicate remote app slug={remote_app.slug}")
        seen_slugs.add(remote_app.slug)
    return remote_apps


def config_read_remote_apps_file(file_path: str) -> list[object]:
    """Read a JSON list of app records from disk.

    Args:
        file_path: Path to a JSON file holding a list of app records.

    Returns:
        list[object]: Raw decoded records.

    Raises:
        ValueError: Raised when the file is missing, unreadable, or not a JSON list.
    """

    path = Path(file_path)
    try:
        decoded_payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as error:
        raise ValueError(f"remote apps file could not be read: {file_path}") from error
    except json.JSONDecodeError as error:
        raise ValueError(f"remote apps file is not valid JSON: {file_path}") from error

    if not isinstance(decoded_payload, list):
        raise ValueError(f"remote apps file must contain a JSON list: {file_path}")
    return decoded_payload
