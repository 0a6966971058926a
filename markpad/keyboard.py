"""Keyboard input handling and formatting accelerators."""

from typing import Optional
from dataclasses import dataclass


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    value: str  # The base key (e.g., 'b', 'enter')
    raw: str  # The key name from the host
    is_ctrl: bool = False
    is_meta: bool = False
    is_shift: bool = False
    default_prevented: bool = False

    def prevent_default(self):
        """Tell the host not to apply its own handling of this key."""
        self.default_prevented = True


# Ctrl/Meta + letter -> formatting operation
ACCELERATORS = {
    'b': 'bold',
    'i': 'italic',
}


def parse_key(key: str) -> KeyEvent:
    """Parse a Textual key name such as ``ctrl+b`` or ``ctrl+shift+B``."""
    parts = key.lower().split('+')
    mods = set(parts[:-1])
    return KeyEvent(
        value=parts[-1],
        raw=key,
        is_ctrl='ctrl' in mods,
        is_meta=bool(mods & {'meta', 'super'}),
        is_shift='shift' in mods,
    )


def accelerator_for(event: KeyEvent) -> Optional[str]:
    """Return the formatting operation bound to ``event``, if any."""
    if not (event.is_ctrl or event.is_meta):
        return None
    return ACCELERATORS.get(event.value)
