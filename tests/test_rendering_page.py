"""Tests for enqueue registry ordering and page template output."""

from __future__ import annotations

from remote_app_loader.domain import AssetKind, EnqueueAction
from remote_app_loader.rendering import EnqueueRegistry, PageTemplateRenderer, page_render_mount_point


def test_rendering_registry_emits_dependencies_before_dependents() -> None:
    """Emit shared dependencies first and each handle once.

    Returns:
        None: Assertions validate script tag order.

    Raises:
        AssertionError: Raised when dependency ordering is incorrect.
    """

    registry = EnqueueRegistry(
        shared_scripts={
            "react": "https://unpkg.test/react.js",
            "react-dom": "https://unpkg.test/react-dom.js",
            "unused": "https://unpkg.test/unused.js",
        }
    )
    registry.registry_enqueue(
        EnqueueAction(
            kind=AssetKind.SCRIPT,
            handle="root",
            uri="https://cdn.test/runtime.js",
            dependencies=("react", "react-dom"),
        )
    )
    registry.registry_enqueue(
        EnqueueAction(
            kind=AssetKind.SCRIPT,
            handle="root-mainjs",
            uri="https://cdn.test/main.js",
            dependencies=("missing-handle", "react", "react-dom"),
        )
    )

    script_tags = registry.registry_render_script_tags().splitlines()

    assert script_tags == [
        '<script id="react-js" src="https://unpkg.test/react.js"></script>',
        '<script id="react-dom-js" src="https://unpkg.test/react-dom.js"></script>',
        '<script id="root-js" src="https://cdn.test/runtime.js"></script>',
        '<script id="root-mainjs-js" src="https://cdn.test/main.js"></script>',
    ]


def test_rendering_registration_only_stylesheet_emits_dependencies() -> None:
    """Emit dependencies of registration-only stylesheet without its own tag.

    Returns:
        None: Assertions validate style tag output.

    Raises:
        AssertionError: Raised when placeholder stylesheet renders a tag.
    """

    registry = EnqueueRegistry(shared_styles={"theme-style": "https://site.test/theme.css"})
    registry.registry_enqueue(
        EnqueueAction(kind=AssetKind.STYLESHEET, handle="root", uri=None, dependencies=("theme-style",))
    )

    assert registry.registry_render_style_tags() == (
        '<link rel="stylesheet" id="theme-style-css" href="https://site.test/theme.css">'
    )


def test_rendering_registry_first_registration_wins() -> None:
    """Keep the first action registered for a handle."""

    registry = EnqueueRegistry()
    registry.registry_enqueue(EnqueueAction(kind=AssetKind.SCRIPT, handle="root", uri="https://a.test/1.js", dependencies=()))
    registry.registry_enqueue(EnqueueAction(kind=AssetKind.SCRIPT, handle="root", uri="https://a.test/2.js", dependencies=()))

    assert registry.registry_render_script_tags() == '<script id="root-js" src="https://a.test/1.js"></script>'


def test_rendering_page_wraps_escaped_mount_point_in_header_and_footer() -> None:
    """Render header, escaped mount point and footer in document order.

    Returns:
        None: Assertions validate document structure.

    Raises:
        AssertionError: Raised when mount point is missing or unescaped.
    """

    html = PageTemplateRenderer(site_title="Example Site").page_render(
        page_title="portal",
        root_id='root"><b>',
        style_tags='<link rel="stylesheet" id="root-css" href="https://cdn.test/main.css">',
        script_tags='<script id="root-js" src="https://cdn.test/main.js"></script>',
    )

    mount_point = '<div id="root&quot;&gt;&lt;b&gt;"></div>'
    assert page_render_mount_point('root"><b>') == mount_point
    assert "<title>portal | Example Site</title>" in html
    assert html.index("root-css") < html.index("</head>") < html.index(mount_point) < html.index("root-js")
    assert html.rstrip().endswith("</html>")
