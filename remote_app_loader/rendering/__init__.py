"""Rendering layer package for enqueue registry and page template output."""

from .interfaces import PageTemplatePort
from .page import PageTemplateRenderer, page_render_mount_point
from .registry import EnqueueRegistry

__all__ = ["EnqueueRegistry", "PageTemplatePort", "PageTemplateRenderer", "page_render_mount_point"]
