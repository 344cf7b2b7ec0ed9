"""Keyboard input handling: curtsies tokens to integer key codes."""

from enum import IntEnum
from typing import Optional


def ctrl(letter: str) -> int:
    """Key code produced by Ctrl plus a letter."""
    return ord(letter.upper()) - 64


class KeyCode(IntEnum):
    """Codes for keys that have no single-byte encoding.

    CSI letter sequences (ESC [ X) map to 0x400 + ord(X); tilde sequences
    (ESC [ n ~) map to 0x200 + n.
    """
    HOME = 0x201
    INSERT = 0x202
    DELETE = 0x203
    END = 0x204
    PAGE_UP = 0x205
    PAGE_DOWN = 0x206
    UP = 0x441
    DOWN = 0x442
    RIGHT = 0x443
    LEFT = 0x444
    UNKNOWN = 0x300  # Named keys with no binding (function keys, Alt combos)


TAB = ctrl('i')
ENTER = ctrl('m')
ESCAPE = 0x1B
DEL = 0x7F
QUIT = ctrl('q')

NAMED_KEYS = {
    'up': KeyCode.UP,
    'down': KeyCode.DOWN,
    'left': KeyCode.LEFT,
    'right': KeyCode.RIGHT,
    'home': KeyCode.HOME,
    'end': KeyCode.END,
    'insert': KeyCode.INSERT,
    'delete': KeyCode.DELETE,
    'page_up': KeyCode.PAGE_UP,
    'page_down': KeyCode.PAGE_DOWN,
    'backspace': DEL,
    'tab': TAB,
    'enter': ENTER,
    'return': ENTER,
    'space': ord(' '),
    'spacebar': ord(' '),
    'spc': ord(' '),
    'esc': ESCAPE,
    'escape': ESCAPE,
}


class KeyboardHandler:
    """Turns terminal key tokens into integer key codes."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_key_code(self, timeout: Optional[float] = None) -> Optional[int]:
        """Block for the next key and return its code."""
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> int:
        """Parse a curtsies key token into a key code.

        Args:
            key: Token such as 'a', '<UP>', '<Ctrl-x>' or a raw character.

        Returns:
            ASCII code for literal keys, 1-26 for Ctrl-letters, a KeyCode
            for navigation keys, KeyCode.UNKNOWN for other named keys.
        """
        key_str = str(key)

        # Curtsies-style key names like '<LEFT>', '<Ctrl-x>', '<Esc+u>'
        if len(key_str) > 2 and key_str.startswith('<') and key_str.endswith('>'):
            name = key_str[1:-1]
            lower = name.lower().replace('+', '-')
            parts = lower.split('-')
            base = parts[-1]
            mods = set(parts[:-1])
            if base in ('pageup', 'page_up'):
                base = 'page_up'
            elif base in ('pagedown', 'page_down'):
                base = 'page_down'

            if 'ctrl' in mods and len(base) == 1 and base.isalpha():
                # Terminals deliver Enter as Ctrl-J or Ctrl-M
                if base in ('j', 'm'):
                    return ENTER
                return ctrl(base)
            if mods:
                return KeyCode.UNKNOWN
            if base in NAMED_KEYS:
                return int(NAMED_KEYS[base])
            return KeyCode.UNKNOWN

        if len(key_str) == 1:
            o = ord(key_str)
            if o in (ctrl('j'), ctrl('m')):
                return ENTER
            return o

        # Multi-character strings without a name carry no single key
        return KeyCode.UNKNOWN
