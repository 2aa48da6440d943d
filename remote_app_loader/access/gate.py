"""Role-based access gate and current-user role providers."""

from __future__ import annotations

from typing import Collection, Mapping, Protocol


class UserRolesPort(Protocol):
    """Port definition for resolving the current user's roles from a request."""

    def access_current_user_roles(self, request_headers: Mapping[str, str]) -> frozenset[str]:
        """Return roles of the user issuing the request.

        Args:
            request_headers: Case-insensitive request header mapping.

        Returns:
            frozenset[str]: Role names, empty for anonymous visitors.
        """


def access_is_allowed(required_role: str | None, current_user_roles: Collection[str]) -> bool:
    """Return whether the current user holds the required role.

    Args:
        required_role: Role configured for the application, `None` for no restriction.
        current_user_roles: Roles of the current user.

    Returns:
        bool: True when access is allowed.
    """

    if required_role is None:
        return True
    return required_role in current_user_roles


def access_parse_roles_header(header_value: str | None) -> frozenset[str]:
    """Split a comma-separated roles header into a role set.

    Args:
        header_value: Raw header value, `None` when absent.

    Returns:
        frozenset[str]: Non-blank role names.
    """

    if not header_value:
        return frozenset()
    return frozenset(role.strip() for role in header_value.split(",") if role.strip())


class HeaderUserRolesProvider(UserRolesPort):
    """Read user roles from a trusted header set by the fronting proxy."""

    def __init__(self, header_name: str = "X-User-Roles"):
        """Initialize provider.

        Args:
            header_name: Header carrying comma-separated roles.

        Raises:
            ValueError: Raised when header_name is blank.
        """

        normalized_header_name = header_name.strip()
        if not normalized_header_name:
            raise ValueError("header_name must not be blank")
        self._header_name = normalized_header_name

    def access_current_user_roles(self, request_headers: Mapping[str, str]) -> frozenset[str]:
        """Return roles parsed from the configured header.

        Args:
            request_headers: Case-insensitive request header mapping.

        Returns:
            frozenset[str]: Role names, empty when the header is absent.
        """

        return access_parse_roles_header(request_headers.get(self._header_name))
