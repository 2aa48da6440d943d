"""Runtime requirement checks performed once at startup."""

from .checker import (
    EnvironmentUnsupportedError,
    RequirementsChecker,
    requirements_parse_version,
    requirements_version_at_least,
)

__all__ = [
    "EnvironmentUnsupportedError",
    "RequirementsChecker",
    "requirements_parse_version",
    "requirements_version_at_least",
]
