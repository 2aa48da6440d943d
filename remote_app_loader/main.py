"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service
or runs one-off resolution commands.
"""

import argparse
import json
import logging
import sys

import uvicorn

from remote_app_loader.bootstrap import (
    bootstrap_check_requirements,
    bootstrap_create_application,
    bootstrap_create_page_orchestrator,
    bootstrap_create_route_table,
)
from remote_app_loader.config import config_load_settings
from remote_app_loader.requirements import EnvironmentUnsupportedError


def main() -> None:
    """Run selected runtime command with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with status 1 when the environment is unsupported or resolution fails.
    """

    argument_parser = argparse.ArgumentParser(description="Remote App Loader runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "resolve", "routes"),
        help="Runtime command: `api` starts server, `resolve` prints enqueue actions for one app, "
        "`routes` prints captured path patterns",
        type=str,
    )
    argument_parser.add_argument(
        "--slug",
        dest="slug",
        type=str,
        help="Application slug for `resolve`",
    )
    argument_parser.add_argument(
        "--log-level",
        dest="log_level",
        default="INFO",
        type=str,
        help="Root log level",
    )
    parsed_arguments = argument_parser.parse_args()
    logging.basicConfig(level=parsed_arguments.log_level.upper())

    settings = config_load_settings()
    try:
        bootstrap_check_requirements(settings)
    except EnvironmentUnsupportedError as error:
        for notice in error.notices:
            print(notice, file=sys.stderr)
        raise SystemExit(1) from error

    if parsed_arguments.command == "routes":
        route_table = bootstrap_create_route_table(settings)
        for route in route_table.routes:
            print(f"{route.pattern.pattern}\t{route.query_marker}")
        return

    if parsed_arguments.command == "resolve":
        if not parsed_arguments.slug:
            argument_parser.error("--slug is required for `resolve`")
        route_table = bootstrap_create_route_table(settings)
        page_orchestrator = bootstrap_create_page_orchestrator(settings=settings, route_table=route_table)
        try:
            resolution_result = page_orchestrator.job_resolve_actions(slug=parsed_arguments.slug)
        except KeyError as error:
            argument_parser.error(str(error))
        payload = {
            "slug": resolution_result.slug,
            "manifest_error_code": resolution_result.manifest_error_code,
            "has_stylesheet": resolution_result.resolution.has_stylesheet,
            "actions": [action.action_to_payload() for action in resolution_result.resolution.actions],
        }
        print(json.dumps(payload, indent=2))
        if resolution_result.manifest_error_code is not None:
            raise SystemExit(1)
        return

    application = bootstrap_create_application()
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
    )


if __name__ == "__main__":
    main()
