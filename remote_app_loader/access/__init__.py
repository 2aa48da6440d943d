"""Access layer package for role-based gating of remote applications."""

from .gate import HeaderUserRolesProvider, UserRolesPort, access_is_allowed, access_parse_roles_header

__all__ = ["HeaderUserRolesProvider", "UserRolesPort", "access_is_allowed", "access_parse_roles_header"]
