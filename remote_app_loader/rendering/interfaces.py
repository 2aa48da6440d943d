"""Typed interfaces for page rendering responsibilities."""

from typing import Protocol


class PageTemplatePort(Protocol):
    """Port definition for wrapping a mount point in the site's page template."""

    def page_render(self, page_title: str, root_id: str, style_tags: str, script_tags: str) -> str:
        """Render a full HTML document around the application mount point.

        Args:
            page_title: Title for the document head.
            root_id: Mount-point element id.
            style_tags: Rendered stylesheet tags for the head.
            script_tags: Rendered script tags for the end of the body.

        Returns:
            str: HTML document.
        """
