"""Paged document model and in-place editing operations."""

from .constants import EditorConstants, bowdlerize
from .cursor import Cursor
from .pages import PageStore

BLANK = EditorConstants.BLANK


def trimmed_length(data: bytes) -> int:
    """Length of data once trailing blanks are removed."""
    return len(data.rstrip(b' '))


class PageModel:
    """A fixed-size multi-page document with a single cursor.

    Rows never grow past ``width`` and pages never grow past ``height``:
    anything shifted off the right of a row or the bottom of a page is
    dropped. Every operation keeps the cursor on the current page.
    """

    def __init__(self, width: int, height: int,
                 total_pages: int = EditorConstants.TOTAL_PAGES,
                 tab_width: int = EditorConstants.TAB_WIDTH):
        self.store = PageStore(width, height, total_pages)
        self.cursor = Cursor(width, height)
        self.tab_width = tab_width

    @property
    def width(self) -> int:
        return self.store.width

    @property
    def height(self) -> int:
        return self.store.height

    @property
    def page_size(self) -> int:
        return self.store.page_size

    @property
    def total_pages(self) -> int:
        return self.store.total_pages

    @property
    def page(self) -> int:
        return self.cursor.page

    @page.setter
    def page(self, value: int):
        self.cursor.page = self.store.clip_page(value)

    @property
    def point(self) -> int:
        return self.cursor.point

    @point.setter
    def point(self, value: int):
        self.cursor.set_point(value)

    # --- Reading ---

    def char_at(self, point=None) -> int:
        if point is None:
            point = self.cursor.point
        return self.store.read(self.cursor.page, point)

    def row(self, row: int, page=None) -> bytes:
        """Raw bytes of a row, trailing blanks included."""
        return self.store.row_bytes(self.cursor.page if page is None else page, row)

    def lines(self, page=None) -> list[bytes]:
        """Every row of a page, for display."""
        return [self.row(r, page) for r in range(self.height)]

    def last_used_row(self, page=None) -> int:
        """Lowest row holding a non-blank byte, or 0 for a blank page."""
        page = self.cursor.page if page is None else page
        used = trimmed_length(self.store.page_bytes(page))
        if used == 0:
            return 0
        return (used - 1) // self.width

    def visible_rows(self, page=None) -> list[bytes]:
        """Rows 0 through last_used_row with trailing blanks trimmed."""
        page = self.cursor.page if page is None else page
        return [self.row(r, page).rstrip(b' ') for r in range(self.last_used_row(page) + 1)]

    # --- Navigation ---

    def move(self, delta: int):
        self.cursor.move(delta)

    def forward_char(self):
        self.cursor.move(1)

    def backward_char(self):
        self.cursor.move(-1)

    def forward_line(self):
        self.cursor.move(self.width)

    def backward_line(self):
        self.cursor.move(-self.width)

    def start_of_line(self):
        self.cursor.move(-self.cursor.column)

    def end_of_line(self):
        """Move just past the last non-blank byte of the row."""
        self.start_of_line()
        self.cursor.move(trimmed_length(self.row(self.cursor.row)))

    def home(self):
        self.cursor.point = 0

    def end(self):
        """Move just past the last non-blank byte of the page."""
        self.cursor.set_point(trimmed_length(self.store.page_bytes(self.cursor.page)))

    def forward_page(self):
        self.cursor.page = self.store.select_page(self.cursor.page, 1)
        self.home()

    def backward_page(self):
        self.cursor.page = self.store.select_page(self.cursor.page, -1)
        self.home()

    def reset_cursor(self):
        self.cursor.reset()

    # --- Editing ---

    def replace(self, byte: int):
        """Overwrite the byte under the point and step forward."""
        self.store.write(self.cursor.page, self.cursor.point, bowdlerize(byte))
        self.forward_char()

    def blanks(self, count: int):
        for _ in range(count):
            self.replace(BLANK)

    def insert(self, byte: int):
        """Insert byte at the point, pushing the rest of the row right.

        The last byte of the row falls off. Inserting in the last column
        just overwrites it, and the point then wraps to the next row.
        """
        c = self.cursor
        self.store.move_block(c.page, c.point, c.point + 1, c.right_margin - 1)
        self.replace(byte)

    def delete(self):
        """Remove the byte under the point, pulling the rest of the row left."""
        c = self.cursor
        tail = c.right_margin - 1
        self.store.move_block(c.page, c.point + 1, c.point, tail)
        self.store.write(c.page, c.point + tail, BLANK)

    def backspace(self):
        self.backward_char()
        self.delete()

    def tab(self):
        """Insert blanks up to the next tab stop."""
        while True:
            before = self.cursor.point
            self.insert(BLANK)
            if self.cursor.column % self.tab_width == 0:
                break
            # Saturated at the last cell of the page
            if self.cursor.point == before:
                break

    def kill_line(self):
        """Blank out the row from the point to its end."""
        c = self.cursor
        self.store.fill(c.page, c.point, c.right_margin)

    def transpose_chars(self):
        """Swap the bytes before and under the point, then step forward."""
        c = self.cursor
        previous = c.offset(-1)
        here = self.store.read(c.page, c.point)
        before = self.store.read(c.page, previous)
        self.store.write(c.page, c.point, before)
        self.store.write(c.page, previous, here)
        self.forward_char()

    def scroll_down(self):
        """Push the rows below the point's row down by one, blanking the first."""
        c = self.cursor
        next_row = c.row_start + self.width
        self.store.move_block(c.page, next_row, next_row + self.width,
                              (c.rows_below - 2) * self.width)
        self.store.fill(c.page, next_row, self.width)

    def newline(self):
        """Split the row at the point, carrying its tail onto a new row below.

        Does nothing on the last row of the page. Rows pushed off the
        bottom of the page are lost.
        """
        c = self.cursor
        if c.row >= self.height - 1:
            return
        self.scroll_down()
        tail = c.right_margin
        self.store.move_block(c.page, c.point, c.row_start + self.width, tail)
        self.blanks(tail)

    def clear(self):
        self.store.clear()
        self.reset_cursor()
