from dataclasses import dataclass
from typing import Optional


@dataclass
class Selection:
    start: int = 0
    end: int = 0

    def clamped(self, length: int) -> "Selection":
        """Return a copy with both offsets inside [0, length], start <= end."""
        start = max(0, min(self.start, length))
        end = max(0, min(self.end, length))
        if start > end:
            start, end = end, start
        return Selection(start, end)


class TextModel:
    """Markdown source buffer plus the active selection.

    All mutation is selection-relative.  ``selection`` is ``None`` when the
    host has not reported one, which is not the same thing as a collapsed
    selection at offset 0.
    """

    text: str
    selection: Optional[Selection]

    def __init__(self, text: str = "", selection: Optional[Selection] = None):
        self.text = text
        self.selection = None
        if selection is not None:
            self.select(selection.start, selection.end)

    def set_text(self, text: str, selection: Optional[Selection] = None):
        """Replace the whole buffer, e.g. after raw typing in the host."""
        self.text = text
        if selection is None:
            self.selection = self.selection.clamped(len(text)) if self.selection else None
        else:
            self.selection = selection.clamped(len(text))

    def select(self, start: int, end: Optional[int] = None):
        if end is None:
            end = start
        self.selection = Selection(start, end).clamped(len(self.text))

    def _effective_selection(self) -> Selection:
        # No selection reported: treat as a collapsed selection at offset 0
        if self.selection is None:
            return Selection(0, 0)
        return self.selection.clamped(len(self.text))

    def get_selected_text(self) -> str:
        sel = self._effective_selection()
        return self.text[sel.start:sel.end]

    def insert_at_selection(self, before: str, after: str = ""):
        """Replace the selection with ``before + selected + after``.

        The selection collapses immediately after the inserted ``after``.
        """
        sel = self._effective_selection()
        selected = self.get_selected_text()
        self.text = self.text[:sel.start] + before + selected + after + self.text[sel.end:]
        pos = sel.start + len(before) + len(selected) + len(after)
        self.selection = Selection(pos, pos)

    def surround(self, prefix: str, suffix: Optional[str] = None):
        """Wrap the selection; a missing suffix mirrors the prefix."""
        self.insert_at_selection(prefix, prefix if suffix is None else suffix)

    def line_start(self, offset: int) -> int:
        """Offset just after the nearest newline before ``offset``, or 0."""
        offset = max(0, min(offset, len(self.text)))
        return self.text.rfind("\n", 0, offset) + 1

    def insert_line(self, prefix: str):
        """Insert ``prefix`` at the start of the line holding the selection start.

        Without a selection the last line of the buffer is used.  The
        selection end is ignored; the new selection collapses after the prefix.
        """
        if self.selection is None:
            anchor = len(self.text)
        else:
            anchor = self._effective_selection().start
        start = self.line_start(anchor)
        self.text = self.text[:start] + prefix + self.text[start:]
        pos = start + len(prefix)
        self.selection = Selection(pos, pos)
