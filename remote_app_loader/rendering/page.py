"""Default site page template with header, mount point and footer."""

from __future__ import annotations

from html import escape

from .interfaces import PageTemplatePort


def page_render_mount_point(root_id: str) -> str:
    """Return the container element the remote application renders into."""

    return f'<div id="{escape(root_id)}"></div>'


class PageTemplateRenderer(PageTemplatePort):
    """Render the site header and footer around a remote application."""

    def __init__(self, site_title: str):
        self._site_title = site_title

    def page_render(self, page_title: str, root_id: str, style_tags: str, script_tags: str) -> str:
        """Render a full HTML document around the application mount point.

        Args:
            page_title: Application title, joined with the site title.
            root_id: Mount-point element id.
            style_tags: Rendered stylesheet tags for the head.
            script_tags: Rendered script tags for the end of the body.

        Returns:
            str: HTML document.
        """

        return "\n".join(
            [
                self._page_render_header(page_title=page_title, style_tags=style_tags),
                page_render_mount_point(root_id),
                self._page_render_footer(script_tags=script_tags),
            ]
        )

    def _page_render_header(self, page_title: str, style_tags: str) -> str:
        title = f"{page_title} | {self._site_title}" if page_title else self._site_title
        header_lines = [
            "<!DOCTYPE html>",
            '<html lang="en">',
            "<head>",
            '<meta charset="utf-8">',
            '<meta name="viewport" content="width=device-width, initial-scale=1">',
            f"<title>{escape(title)}</title>",
        ]
        if style_tags:
            header_lines.append(style_tags)
        header_lines.extend(["</head>", "<body>", f'<header class="site-header">{escape(self._site_title)}</header>'])
        return "\n".join(header_lines)

    def _page_render_footer(self, script_tags: str) -> str:
        footer_lines = [f'<footer class="site-footer">{escape(self._site_title)}</footer>']
        if script_tags:
            footer_lines.append(script_tags)
        footer_lines.extend(["</body>", "</html>"])
        return "\n".join(footer_lines)
