"""markpad - A Markdown editor with a sanitized live preview."""

from .model import TextModel, Selection
from .editor import Editor, ToolbarButton
from .preview import PreviewState
from .stats import Stats, compute_stats
from .render import MarkdownRenderer, render_preview
from .persistence import DocumentStore, LocalStorage

__all__ = [
    'TextModel',
    'Selection',
    'Editor',
    'ToolbarButton',
    'PreviewState',
    'Stats',
    'compute_stats',
    'MarkdownRenderer',
    'render_preview',
    'DocumentStore',
    'LocalStorage',
]
