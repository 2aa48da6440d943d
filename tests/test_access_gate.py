"""Tests for role-based access gate and header roles provider."""

from remote_app_loader.access import HeaderUserRolesProvider, access_is_allowed, access_parse_roles_header


def test_access_denied_when_required_role_missing() -> None:
    """Deny access when the user lacks the required role."""

    assert access_is_allowed("editor", {"subscriber"}) is False


def test_access_allowed_when_required_role_present() -> None:
    """Allow access when the user holds the required role among others."""

    assert access_is_allowed("editor", {"editor", "author"}) is True


def test_access_allowed_without_configured_role() -> None:
    """Allow anonymous visitors when no role is configured."""

    assert access_is_allowed(None, set()) is True


def test_access_header_provider_parses_comma_separated_roles() -> None:
    """Parse trimmed role names from configured header.

    Returns:
        None: Assertions validate parsed role set.

    Raises:
        AssertionError: Raised when roles are not parsed as expected.
    """

    provider = HeaderUserRolesProvider(header_name="X-Roles")

    assert provider.access_current_user_roles({"X-Roles": " editor, author ,,"}) == frozenset({"editor", "author"})
    assert provider.access_current_user_roles({}) == frozenset()
    assert access_parse_roles_header("") == frozenset()
