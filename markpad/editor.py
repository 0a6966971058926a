"""Editor session: owns the document and routes input events."""

import logging
from dataclasses import dataclass
from typing import Optional

from .commands import CommandRegistry
from .constants import EditorConstants
from .keyboard import KeyEvent, accelerator_for
from .model import Selection, TextModel
from .persistence import DocumentStore
from .preview import PreviewController, PreviewState
from .render import MarkdownRenderer
from .stats import compute_stats, format_stats

logger = logging.getLogger(__name__)


@dataclass
class ToolbarButton:
    """A toolbar control as reported by the host."""
    action: Optional[str] = None  # Declared operation name
    id: Optional[str] = None


class Editor:
    """Markdown editing session.

    Every buffer mutation runs the same cascade, in order: statistics,
    persistence, then the preview render if the preview is expanded.
    The host adapter only forwards events and reads back ``text``,
    ``selection``, ``stats`` and ``preview.surface``.
    """

    def __init__(self, store: Optional[DocumentStore] = None,
                 renderer: Optional[MarkdownRenderer] = None):
        self.store = store if store is not None else DocumentStore()
        self.model = TextModel()
        self.preview = PreviewController(renderer)
        self.command_registry = CommandRegistry()
        self.stats = compute_stats("")

    def start(self):
        """Load the saved document (or the sample) and run the first cascade."""
        saved = self.store.load()
        if saved is None:
            logger.debug("No saved document, using default sample")
            saved = EditorConstants.DEFAULT_MARKDOWN
        self.model.set_text(saved)
        self._after_mutation()

    @property
    def text(self) -> str:
        return self.model.text

    @property
    def selection(self) -> Optional[Selection]:
        return self.model.selection

    @property
    def preview_state(self) -> PreviewState:
        return self.preview.state

    @property
    def rendered_html(self) -> Optional[str]:
        return self.preview.html

    @property
    def stats_text(self) -> str:
        return format_stats(self.stats)

    def _after_mutation(self):
        self.stats = compute_stats(self.model.text)
        self.store.save(self.model.text)
        rendered = self.preview.refresh(self.model.text)
        logger.debug("Cascade: %s, rendered=%s", self.stats, rendered)

    # --- Input routing ---

    def handle_input(self, text: str, selection: Optional[Selection] = None):
        """Raw typing in the text surface."""
        self.model.set_text(text, selection)
        self._after_mutation()

    def handle_selection_change(self, start: int, end: Optional[int] = None):
        self.model.select(start, end)

    def apply_format(self, name: Optional[str]) -> bool:
        """Run a named formatting operation.

        Returns:
            True if the document was modified
        """
        if not self.command_registry.execute(self.model, name):
            return False
        self._after_mutation()
        return True

    def handle_toolbar_click(self, button: Optional[ToolbarButton]) -> bool:
        # The visibility toggle has its own handler
        if button is None or button.id == EditorConstants.TOGGLE_BUTTON_ID:
            return False
        return self.apply_format(button.action)

    def toggle_preview(self) -> PreviewState:
        return self.preview.toggle(self.model.text)

    def handle_key_down(self, event: KeyEvent) -> bool:
        """Apply the bold/italic accelerators, whatever has focus.

        Returns:
            True if the key was consumed
        """
        name = accelerator_for(event)
        if name is None:
            return False
        event.prevent_default()
        self.apply_format(name)
        return True
