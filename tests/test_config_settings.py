"""Tests for runtime settings and remote app configuration validation."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from remote_app_loader.config import (
    AppSettings,
    RemoteAppConfig,
    SettingsLoadError,
    config_load_remote_apps,
    config_load_settings,
    config_parse_remote_apps,
)


def test_config_remote_app_defaults_and_normalization() -> None:
    """Apply optional field defaults and normalize slug and blank role.

    Returns:
        None: Assertions validate defaults.

    Raises:
        AssertionError: Raised when defaults are not applied.
    """

    remote_app = RemoteAppConfig(
        slug="/portal/",
        base_url="https://cdn.example.com",
        asset_manifest_url="https://cdn.example.com/asset-manifest.json",
        role="  ",
    )

    assert remote_app.slug == "portal"
    assert remote_app.role is None
    assert remote_app.root_id == "root"
    assert remote_app.scripts == ()
    assert remote_app.styles == ()
    assert remote_app.query_marker == "remote_app_portal"


def test_config_remote_app_is_immutable() -> None:
    """Reject attribute assignment on frozen config."""

    remote_app = RemoteAppConfig(slug="portal", base_url="https://a.test", asset_manifest_url="https://a.test/m.json")

    with pytest.raises(ValidationError):
        remote_app.slug = "other"


def test_config_parse_rejects_missing_required_fields_and_duplicates() -> None:
    """Reject records without required fields and duplicated slugs.

    Returns:
        None: Assertions validate error behavior.

    Raises:
        AssertionError: Raised when invalid records are accepted.
    """

    with pytest.raises(ValueError, match="invalid remote app configuration"):
        config_parse_remote_apps([{"slug": "portal", "base_url": "https://a.test"}])

    record = {"slug": "portal", "base_url": "https://a.test", "asset_manifest_url": "https://a.test/m.json"}
    with pytest.raises(ValueError, match="duplicate remote app slug=portal"):
        config_parse_remote_apps([record, dict(record)])


def test_config_load_settings_reads_remote_apps_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Parse `REMOTE_APPS` JSON list from environment variables.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate parsed settings.

    Raises:
        AssertionError: Raised when settings are not parsed.
    """

    monkeypatch.setenv(
        "REMOTE_APPS",
        json.dumps(
            [
                {
                    "slug": "portal",
                    "role": "editor",
                    "base_url": "https://cdn.example.com",
                    "asset_manifest_url": "https://cdn.example.com/asset-manifest.json",
                    "scripts": ["wp-api"],
                }
            ]
        ),
    )
    monkeypatch.setenv("HOME_URL", "https://site.example.com/")

    settings = config_load_settings()

    assert settings.home_url == "https://site.example.com/"
    assert settings.remote_apps[0].role == "editor"
    assert settings.remote_apps[0].scripts == ("wp-api",)


def test_config_load_settings_wraps_validation_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    """Raise SettingsLoadError for invalid setting values."""

    monkeypatch.setenv("APPLICATION_PORT", "0")

    with pytest.raises(SettingsLoadError, match="Startup configuration validation failed"):
        config_load_settings()


def test_config_load_remote_apps_merges_inline_and_file_records(tmp_path: Path) -> None:
    """Append file records after inline records and validate together.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Assertions validate merge order.

    Raises:
        AssertionError: Raised when records are not merged.
    """

    apps_file = tmp_path / "remote-apps.json"
    apps_file.write_text(
        json.dumps([{"slug": "admin", "base_url": "https://b.test", "asset_manifest_url": "https://b.test/m.json"}]),
        encoding="utf-8",
    )
    settings = AppSettings(
        remote_apps=[
            RemoteAppConfig(slug="portal", base_url="https://a.test", asset_manifest_url="https://a.test/m.json")
        ],
        remote_apps_file=str(apps_file),
    )

    remote_apps = config_load_remote_apps(settings)

    assert [remote_app.slug for remote_app in remote_apps] == ["portal", "admin"]


def test_config_load_remote_apps_reports_unreadable_file(tmp_path: Path) -> None:
    """Raise SettingsLoadError when the apps file is missing."""

    settings = AppSettings(remote_apps_file=str(tmp_path / "missing.json"))

    with pytest.raises(SettingsLoadError, match="could not be read"):
        config_load_remote_apps(settings)
