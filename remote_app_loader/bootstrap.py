"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from remote_app_loader.access import HeaderUserRolesProvider
from remote_app_loader.adapters import ManifestHttpAdapter
from remote_app_loader.api import create_api_application
from remote_app_loader.config import AppSettings, config_load_remote_apps, config_load_settings
from remote_app_loader.jobs import PageOrchestratorConfig, RemoteAppPageOrchestrator
from remote_app_loader.rendering import PageTemplateRenderer
from remote_app_loader.requirements import RequirementsChecker
from remote_app_loader.routing import RemoteAppRouteTable


def bootstrap_check_requirements(settings: AppSettings) -> None:
    """Verify the runtime environment before any request handling is wired.

    Args:
        settings: Validated runtime settings.

    Raises:
        EnvironmentUnsupportedError: Raised when Python or FastAPI is below the minimum version.
    """

    RequirementsChecker(title=settings.site_title).requirements_check()


def bootstrap_create_route_table(settings: AppSettings) -> RemoteAppRouteTable:
    """Build the route table from configured applications.

    Args:
        settings: Validated runtime settings.

    Returns:
        RemoteAppRouteTable: Routes for configured applications.

    Raises:
        SettingsLoadError: Raised when app records are invalid.
    """

    return RemoteAppRouteTable(config_load_remote_apps(settings))


def bootstrap_create_page_orchestrator(
    settings: AppSettings,
    route_table: RemoteAppRouteTable,
) -> RemoteAppPageOrchestrator:
    """Build the page pipeline orchestrator.

    Args:
        settings: Validated runtime settings.
        route_table: Routes for configured applications.

    Returns:
        RemoteAppPageOrchestrator: Fully wired orchestrator instance.
    """

    return RemoteAppPageOrchestrator(
        route_table=route_table,
        manifest_adapter=ManifestHttpAdapter(
            request_timeout_seconds=settings.manifest_request_timeout_seconds,
        ),
        page_template=PageTemplateRenderer(site_title=settings.site_title),
        config=PageOrchestratorConfig(
            home_url=settings.home_url,
            shared_scripts=dict(settings.shared_scripts),
            shared_styles=dict(settings.shared_styles),
        ),
    )


def bootstrap_create_application() -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
        EnvironmentUnsupportedError: Raised when the runtime is below the supported minimums.
    """

    settings = config_load_settings()
    bootstrap_check_requirements(settings)
    route_table = bootstrap_create_route_table(settings)
    page_orchestrator = bootstrap_create_page_orchestrator(settings=settings, route_table=route_table)
    return create_api_application(
        settings=settings,
        route_table=route_table,
        page_orchestrator=page_orchestrator,
        roles_provider=HeaderUserRolesProvider(header_name=settings.user_roles_header),
    )
