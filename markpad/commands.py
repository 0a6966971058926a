"""Command pattern implementation for formatting actions."""

from abc import ABC, abstractmethod
from typing import Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .model import TextModel


TABLE_TEMPLATE = "\n| Column | Column |\n|---|---|\n| A | B |\n"
CODE_FENCE = "\n```\n"


class FormattingCommand(ABC):
    """Base class for formatting commands."""

    @abstractmethod
    def execute(self, model: 'TextModel') -> bool:
        """Execute the command.

        Args:
            model: Buffer and selection to mutate

        Returns:
            True if the command modified the document
        """
        pass


class EditCommand(FormattingCommand):
    """Base class for commands that always modify the document."""

    def execute(self, model: 'TextModel') -> bool:
        self._edit(model)
        return True

    @abstractmethod
    def _edit(self, model: 'TextModel'):
        """Perform the edit."""
        pass


class SurroundCommand(EditCommand):
    """Wrap the selection in a symmetric marker."""

    def __init__(self, marker: str):
        self.marker = marker

    def _edit(self, model):
        model.surround(self.marker)


class LinePrefixCommand(EditCommand):
    """Prefix the current line, independent of selection length."""

    def __init__(self, prefix: str):
        self.prefix = prefix

    def _edit(self, model):
        model.insert_line(self.prefix)


class InsertAroundCommand(EditCommand):
    def __init__(self, before: str, after: str = ""):
        self.before = before
        self.after = after

    def _edit(self, model):
        model.insert_at_selection(self.before, self.after)


class BoldCommand(SurroundCommand):
    def __init__(self):
        super().__init__("**")


class ItalicCommand(SurroundCommand):
    def __init__(self):
        super().__init__("*")


class HeadingCommand(LinePrefixCommand):
    def __init__(self):
        super().__init__("# ")


class ListItemCommand(LinePrefixCommand):
    def __init__(self):
        super().__init__("- ")


class LinkCommand(InsertAroundCommand):
    def __init__(self):
        super().__init__("[", "](https://)")


class CodeBlockCommand(InsertAroundCommand):
    def __init__(self):
        super().__init__(CODE_FENCE, CODE_FENCE)


class TableCommand(InsertAroundCommand):
    # Inserted as a literal block at the cursor; a selection is kept after it
    def __init__(self):
        super().__init__(TABLE_TEMPLATE)


class CommandRegistry:
    """Registry mapping operation names to formatting commands."""

    def __init__(self):
        self._commands: Dict[str, FormattingCommand] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default operation catalog."""
        self.register('bold', BoldCommand())
        self.register('italic', ItalicCommand())
        self.register('heading', HeadingCommand())
        self.register('list-item', ListItemCommand())
        self.register('link', LinkCommand())
        self.register('code-block', CodeBlockCommand())
        self.register('table', TableCommand())

        # Short toolbar names
        self.register('h1', self._commands['heading'])
        self.register('list', self._commands['list-item'])
        self.register('code', self._commands['code-block'])

    def register(self, name: str, command: FormattingCommand):
        """Register a command under an operation name."""
        self._commands[name] = command

    def get_command(self, name: Optional[str]) -> Optional[FormattingCommand]:
        if not name:
            return None
        return self._commands.get(name)

    def execute(self, model: 'TextModel', name: Optional[str]) -> bool:
        """Execute the named command.

        Unknown names are ignored.

        Returns:
            True if the document was modified
        """
        command = self.get_command(name)
        if command is None:
            return False
        return command.execute(model)
