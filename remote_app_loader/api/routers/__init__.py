"""API router package for endpoint composition."""

from .health import api_create_health_router
from .remote_apps import api_build_page_response, api_create_remote_apps_router

__all__ = ["api_build_page_response", "api_create_health_router", "api_create_remote_apps_router"]
