"""Fixed-capacity page grid."""

from .constants import EditorConstants


class PageStore:
    """Owns the character grid for every page of a document.

    The grid is a single bytearray of ``total_pages * page_size`` bytes,
    allocated once and filled with blanks. Callers pass page numbers and
    in-page offsets that the cursor model has already clipped.
    """

    def __init__(self, width: int, height: int, total_pages: int = EditorConstants.TOTAL_PAGES):
        self.width = width
        self.height = height
        self.total_pages = total_pages
        self.page_size = width * height
        self.buffer = bytearray([EditorConstants.BLANK]) * (self.page_size * total_pages)

    def buffer_base(self, page: int) -> int:
        """Offset of the first byte of a page in the grid."""
        return page * self.page_size

    def read(self, page: int, point: int) -> int:
        return self.buffer[self.buffer_base(page) + point]

    def write(self, page: int, point: int, byte: int):
        self.buffer[self.buffer_base(page) + point] = byte

    def clip_page(self, page: int) -> int:
        return min(max(page, 0), self.total_pages - 1)

    def select_page(self, current: int, delta: int) -> int:
        """Return the page delta away from current, saturating at either end."""
        return self.clip_page(current + delta)

    def move_block(self, page: int, src: int, dst: int, count: int):
        """Copy count bytes from src to dst within a page; overlap is safe."""
        if count <= 0:
            return
        base = self.buffer_base(page)
        self.buffer[base + dst:base + dst + count] = self.buffer[base + src:base + src + count]

    def fill(self, page: int, start: int, count: int, byte: int = EditorConstants.BLANK):
        if count <= 0:
            return
        base = self.buffer_base(page)
        self.buffer[base + start:base + start + count] = bytes([byte]) * count

    def row_bytes(self, page: int, row: int) -> bytes:
        start = self.buffer_base(page) + row * self.width
        return bytes(self.buffer[start:start + self.width])

    def page_bytes(self, page: int) -> bytes:
        base = self.buffer_base(page)
        return bytes(self.buffer[base:base + self.page_size])

    def clear(self):
        self.buffer[:] = bytearray([EditorConstants.BLANK]) * len(self.buffer)
