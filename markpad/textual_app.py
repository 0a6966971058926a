"""Textual front end for the editor session."""

from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Footer, Header, Static, TextArea
from textual.widgets.text_area import Selection as AreaSelection

from .constants import EditorConstants
from .editor import Editor, ToolbarButton
from .keyboard import parse_key
from .model import Selection


# (label, operation name)
TOOLBAR_BUTTONS = [
    ("B", "bold"),
    ("I", "italic"),
    ("H1", "h1"),
    ("• List", "list"),
    ("Link", "link"),
    ("{ }", "code"),
    ("Table", "table"),
]


def location_to_offset(text: str, location: tuple[int, int]) -> int:
    """Convert a TextArea (row, column) location to a buffer offset."""
    row, column = location
    lines = text.split("\n")
    row = max(0, min(row, len(lines) - 1))
    offset = sum(len(line) + 1 for line in lines[:row])
    return offset + max(0, min(column, len(lines[row])))


def offset_to_location(text: str, offset: int) -> tuple[int, int]:
    """Convert a buffer offset to a TextArea (row, column) location."""
    offset = max(0, min(offset, len(text)))
    before = text[:offset]
    row = before.count("\n")
    return row, offset - (before.rfind("\n") + 1)


class MarkpadApp(App):
    """Editor, toolbar, stats line and a toggleable preview pane."""

    TITLE = "markpad"

    CSS = """
    #grid {
        height: 1fr;
    }
    #editor-card, #preview-card {
        width: 1fr;
    }
    #preview-card {
        display: none;
    }
    #formatbar {
        height: auto;
    }
    #formatbar Button {
        min-width: 5;
    }
    #spacer {
        width: 1fr;
    }
    #editor, #preview {
        height: 1fr;
        border: none;
    }
    #toggle.pressed {
        background: $accent;
    }
    #stats, #hint {
        height: 1;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        # Priority so the text area never sees them
        Binding("ctrl+b", "accelerator('ctrl+b')", "Bold", priority=True),
        Binding("ctrl+i", "accelerator('ctrl+i')", "Italic", priority=True),
    ]

    def __init__(self, editor: Optional[Editor] = None):
        super().__init__()
        self.editor = editor if editor is not None else Editor()

    def compose(self) -> ComposeResult:
        """Create widgets."""
        yield Header()
        with Horizontal(id="grid"):
            with Vertical(id="editor-card"):
                with Horizontal(id="formatbar"):
                    for label, action in TOOLBAR_BUTTONS:
                        yield Button(label, name=action, classes="btn")
                    yield Static("", id="spacer")
                    yield Button("Preview", id=EditorConstants.TOGGLE_BUTTON_ID, classes="btn")
                yield TextArea(id="editor")
                yield Static("", id="stats")
            with Vertical(id="preview-card"):
                yield TextArea(read_only=True, id="preview")
        yield Static(EditorConstants.FOOTER_HINT, id="hint")
        yield Footer()

    def on_mount(self) -> None:
        self.editor.start()
        self._push_text()
        self._sync_view()
        self.query_one("#editor", TextArea).focus()

    # --- Host -> session ---

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        area = event.text_area
        if area.id != "editor":
            return
        # Echo of our own load_text
        if area.text == self.editor.text:
            return
        self.editor.handle_input(area.text, self._area_selection(area))
        self._sync_view()

    def on_text_area_selection_changed(self, event: TextArea.SelectionChanged) -> None:
        area = event.text_area
        if area.id != "editor":
            return
        selection = self._area_selection(area)
        self.editor.handle_selection_change(selection.start, selection.end)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button = event.button
        if button.id == EditorConstants.TOGGLE_BUTTON_ID:
            self.editor.toggle_preview()
        else:
            self._pull_selection()
            if self.editor.handle_toolbar_click(ToolbarButton(action=button.name, id=button.id)):
                self._push_text()
        self._sync_view()
        self.query_one("#editor", TextArea).focus()

    def action_accelerator(self, key: str) -> None:
        self._pull_selection()
        if self.editor.handle_key_down(parse_key(key)):
            self._push_text()
            self._sync_view()

    # --- Session -> host ---

    def _area_selection(self, area: TextArea) -> Selection:
        text = area.text
        start = location_to_offset(text, area.selection.start)
        end = location_to_offset(text, area.selection.end)
        return Selection(min(start, end), max(start, end))

    def _pull_selection(self):
        selection = self._area_selection(self.query_one("#editor", TextArea))
        self.editor.handle_selection_change(selection.start, selection.end)

    def _push_text(self):
        area = self.query_one("#editor", TextArea)
        area.load_text(self.editor.text)
        selection = self.editor.selection
        if selection is not None:
            area.selection = AreaSelection(
                offset_to_location(self.editor.text, selection.start),
                offset_to_location(self.editor.text, selection.end),
            )

    def _sync_view(self):
        surface = self.editor.preview.surface
        self.query_one("#stats", Static).update(self.editor.stats_text)
        self.query_one("#grid").set_class(surface.split, EditorConstants.SPLIT_LAYOUT_CLASS)
        self.query_one("#toggle", Button).set_class(surface.toggle_pressed, "pressed")
        self.query_one("#preview-card").display = not surface.hidden
        if not surface.hidden:
            self.query_one("#preview", TextArea).load_text(surface.html or "")


def main(editor: Optional[Editor] = None):
    """Run the Textual app."""
    app = MarkpadApp(editor=editor)
    app.run()
