"""Status line shown below the page."""

from .constants import EditorConstants

HEX_DIGITS = b"0123456789abcdef"


class StatusLine:
    """Fixed-width message buffer, separate from the page grid."""

    def __init__(self, width: int):
        self.width = width
        self.buffer = bytearray([EditorConstants.BLANK]) * width

    def clear(self):
        self.buffer[:] = bytearray([EditorConstants.BLANK]) * self.width

    def notify(self, text: str):
        """Show text, cut to the line width."""
        self.clear()
        data = text.encode('ascii', errors='replace')[:self.width]
        self.buffer[:len(data)] = data

    def notify_key(self, code: int):
        """Show a key code as three hex digits."""
        self.clear()
        for i in range(min(3, self.width)):
            self.buffer[i] = HEX_DIGITS[(code >> (4 * (2 - i))) & 0xF]

    @property
    def text(self) -> str:
        return self.buffer.decode('ascii').rstrip()

    def __bytes__(self) -> bytes:
        return bytes(self.buffer)
