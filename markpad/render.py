"""Markdown to sanitized HTML rendering for the live preview."""

import logging

import bleach
import markdown

from .constants import EditorConstants

logger = logging.getLogger(__name__)


class MarkdownRenderer:
    """Converts Markdown source to script-safe HTML.

    Python-Markdown does the transform (tables and fenced code through
    ``extra``, heading ids through ``toc``); bleach strips anything that can
    execute.  Errors from either library propagate to the caller.
    """

    def __init__(self):
        self._md = markdown.Markdown(
            extensions=EditorConstants.MARKDOWN_EXTENSIONS,
            extension_configs=EditorConstants.MARKDOWN_EXTENSION_CONFIGS,
        )
        self._cleaner = bleach.Cleaner(
            tags=frozenset(EditorConstants.ALLOWED_TAGS),
            attributes=EditorConstants.ALLOWED_ATTRIBUTES,
            protocols=frozenset(EditorConstants.ALLOWED_PROTOCOLS),
            strip=True,
            strip_comments=True,
        )

    def markdown_to_html(self, text: str) -> str:
        # Heading ids and footnotes are per-document state
        self._md.reset()
        return self._md.convert(text)

    def sanitize(self, html: str) -> str:
        return self._cleaner.clean(html)

    def render(self, text: str) -> str:
        html = self.sanitize(self.markdown_to_html(text))
        logger.debug("Rendered %d characters of markdown", len(text))
        return html


_default_renderer = None


def render_preview(text: str) -> str:
    """Render ``text`` with a shared renderer."""
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = MarkdownRenderer()
    return _default_renderer.render(text)
