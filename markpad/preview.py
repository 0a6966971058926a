"""Preview visibility state machine."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .render import MarkdownRenderer


class PreviewState(Enum):
    """Whether the preview surface is shown."""
    COLLAPSED = "collapsed"
    EXPANDED = "expanded"


@dataclass
class PreviewSurface:
    """What the host should display for the preview."""
    hidden: bool = True
    split: bool = False  # Editor and preview side by side
    toggle_pressed: bool = False
    html: Optional[str] = None


class PreviewController:
    """Owns the preview state and gates the render pipeline.

    Rendering only happens while expanded; collapsing drops the last
    rendered HTML since it is no longer observable.
    """

    def __init__(self, renderer: Optional[MarkdownRenderer] = None):
        self.renderer = renderer if renderer is not None else MarkdownRenderer()
        self.state = PreviewState.COLLAPSED
        self.surface = PreviewSurface()

    @property
    def is_expanded(self) -> bool:
        return self.state is PreviewState.EXPANDED

    @property
    def html(self) -> Optional[str]:
        return self.surface.html

    def toggle(self, text: str) -> PreviewState:
        if self.is_expanded:
            self.state = PreviewState.COLLAPSED
            self.surface = PreviewSurface()
        else:
            self.state = PreviewState.EXPANDED
            self.surface = PreviewSurface(hidden=False, split=True, toggle_pressed=True)
            # Never show stale content on first reveal
            self._render(text)
        return self.state

    def refresh(self, text: str) -> bool:
        """Re-render if expanded.

        Returns:
            True if the render pipeline ran
        """
        if not self.is_expanded:
            return False
        self._render(text)
        return True

    def _render(self, text: str):
        self.surface.html = self.renderer.render(text)
