"""Typed runtime settings with dotenv support and startup validation."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .remote_apps import RemoteAppConfig, config_parse_remote_apps, config_read_remote_apps_file


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the web runtime and remote app mounting.

    Environment variable names map directly to field names in uppercase.
    Example: `home_url` reads from `HOME_URL`.

    Attributes:
        environment_name: Runtime environment label.
        application_host: Host interface for web server binding.
        application_port: Web server port.
        site_title: Site title rendered in the page header.
        home_url: Redirect target for visitors without the required role.
        user_roles_header: Trusted request header carrying comma-separated user roles.
        manifest_request_timeout_seconds: Timeout for one asset manifest GET.
        remote_apps: Remote application records, JSON list in `REMOTE_APPS`.
        remote_apps_file: Optional path to a JSON file with more app records.
        shared_scripts: Host-provided script handles mapped to URIs.
        shared_styles: Host-provided stylesheet handles mapped to URIs.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment_name: str = Field(default="development")
    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(default=8000, ge=1, le=65535)
    site_title: str = Field(default="Remote App Loader")
    home_url: str = Field(default="/", min_length=1)
    user_roles_header: str = Field(default="X-User-Roles", min_length=1)
    manifest_request_timeout_seconds: float = Field(default=10.0, gt=0)
    remote_apps: list[RemoteAppConfig] = Field(default_factory=list)
    remote_apps_file: str | None = Field(default=None)
    shared_scripts: dict[str, str] = Field(default_factory=dict)
    shared_styles: dict[str, str] = Field(default_factory=dict)

    @field_validator("home_url", "user_roles_header")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("remote_apps_file")
    @classmethod
    def _validate_optional_path(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when required settings are missing or invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error


def config_load_remote_apps(settings: AppSettings) -> list[RemoteAppConfig]:
    """Collect remote app configs from settings and the optional apps file.

    Inline `REMOTE_APPS` records come first, file records follow in file order.

    Args:
        settings: Validated runtime settings.

    Returns:
        list[RemoteAppConfig]: Validated app configs with unique slugs.

    Raises:
        SettingsLoadError: Raised when the apps file or any record is invalid.
    """

    raw_records: list[object] = [remote_app.model_dump() for remote_app in settings.remote_apps]
    try:
        if settings.remote_apps_file is not None:
            raw_records.extend(config_read_remote_apps_file(settings.remote_apps_file))
        return config_parse_remote_apps(raw_records)
    except ValueError as error:
        raise SettingsLoadError(
            f"Remote app configuration validation failed. Update REMOTE_APPS or REMOTE_APPS_FILE. Details: {error}"
        ) from error
