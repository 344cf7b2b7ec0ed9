"""Point-within-page cursor arithmetic."""

from dataclasses import dataclass


@dataclass
class Cursor:
    """Cursor on one page of the grid.

    ``point`` is an offset into the current page. Every assignment goes
    through clip_point, so the cursor can never leave the page; moves past
    either end saturate instead of failing.
    """
    width: int
    height: int
    page: int = 0
    point: int = 0

    @property
    def page_size(self) -> int:
        return self.width * self.height

    def clip_point(self, value: int) -> int:
        return min(max(value, 0), self.page_size - 1)

    def offset(self, delta: int) -> int:
        """Point delta away from the current one, clipped to the page."""
        return self.clip_point(self.point + delta)

    def move(self, delta: int):
        self.point = self.offset(delta)

    def set_point(self, value: int):
        self.point = self.clip_point(value)

    def coords(self) -> tuple[int, int]:
        """Return (row, column) of the point."""
        return divmod(self.point, self.width)

    @property
    def row(self) -> int:
        return self.point // self.width

    @property
    def column(self) -> int:
        return self.point % self.width

    @property
    def right_margin(self) -> int:
        """Cells from the point to the end of its row, point included."""
        return self.width - self.column

    @property
    def rows_below(self) -> int:
        """Rows from the point's row to the bottom of the page, that row included."""
        return self.height - self.row

    @property
    def row_start(self) -> int:
        return self.point - self.column

    def reset(self):
        self.page = 0
        self.point = 0
