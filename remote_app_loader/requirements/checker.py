"""Startup checks for minimum Python and FastAPI runtime versions."""

from __future__ import annotations

import platform
import re
from importlib.metadata import PackageNotFoundError, version
from typing import Callable


class EnvironmentUnsupportedError(RuntimeError):
    """Raised when the runtime environment is below the supported minimums.

    Attributes:
        notices: User-visible messages, one per failed requirement.
    """

    def __init__(self, notices: list[str]):
        super().__init__(" ".join(notices))
        self.notices = tuple(notices)


def requirements_parse_version(raw_version: str) -> tuple[int, ...]:
    """Parse the leading numeric release segment of a version string.

    Args:
        raw_version: Version such as `3.11.4` or `0.110.0rc1`.

    Returns:
        tuple[int, ...]: Numeric components, for example `(0, 110, 0)`.

    Raises:
        ValueError: Raised when the string has no numeric release segment.
    """

    release_match = re.match(r"\s*v?(\d+(?:\.\d+)*)", raw_version)
    if release_match is None:
        raise ValueError(f"unparseable version: {raw_version!r}")
    return tuple(int(part) for part in release_match.group(1).split("."))


def requirements_version_at_least(current_version: str, minimum_version: str) -> bool:
    """Return whether current_version is greater than or equal to minimum_version."""

    current_parts = requirements_parse_version(current_version)
    minimum_parts = requirements_parse_version(minimum_version)
    width = max(len(current_parts), len(minimum_parts))
    padded_current = current_parts + (0,) * (width - len(current_parts))
    padded_minimum = minimum_parts + (0,) * (width - len(minimum_parts))
    return padded_current >= padded_minimum


def _requirements_installed_fastapi_version() -> str:
    try:
        return version("fastapi")
    except PackageNotFoundError:
        return "0"


class RequirementsChecker:
    """Check the running interpreter and web framework against minimum versions."""

    def __init__(
        self,
        title: str,
        min_python: str = "3.10",
        min_fastapi: str = "0.100",
        python_version_provider: Callable[[], str] | None = None,
        fastapi_version_provider: Callable[[], str] | None = None,
    ):
        """Initialize requirements checker.

        Args:
            title: Application title used in notices.
            min_python: Minimum supported Python version.
            min_fastapi: Minimum supported FastAPI version.
            python_version_provider: Optional provider of the running Python version.
            fastapi_version_provider: Optional provider of the installed FastAPI version.

        Raises:
            ValueError: Raised when a minimum version is not parseable.
        """

        requirements_parse_version(min_python)
        requirements_parse_version(min_fastapi)
        self._title = title
        self._min_python = min_python
        self._min_fastapi = min_fastapi
        self._python_version_provider = python_version_provider or platform.python_version
        self._fastapi_version_provider = fastapi_version_provider or _requirements_installed_fastapi_version

    def requirements_notices(self) -> list[str]:
        """Return user-visible notices for every failed requirement.

        Returns:
            list[str]: Empty when the environment passes.
        """

        notices: list[str] = []
        if not requirements_version_at_least(self._python_version_provider(), self._min_python):
            notices.append(
                f"The “{self._title}” service cannot run on Python versions older than "
                f"{self._min_python}. Please upgrade the Python runtime."
            )
        if not requirements_version_at_least(self._fastapi_version_provider(), self._min_fastapi):
            notices.append(
                f"The “{self._title}” service cannot run on FastAPI versions older than "
                f"{self._min_fastapi}. Please upgrade FastAPI."
            )
        return notices

    def requirements_passes(self) -> bool:
        """Return whether every requirement is met."""

        return not self.requirements_notices()

    def requirements_check(self) -> None:
        """Raise when any requirement is not met.

        Raises:
            EnvironmentUnsupportedError: Raised with all failing notices.
        """

        notices = self.requirements_notices()
        if notices:
            raise EnvironmentUnsupportedError(notices)
