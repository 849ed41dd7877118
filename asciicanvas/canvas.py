"""
Character grid that all drawing operates on.

`Canvas` stores the whole surface, border included, as a tuple of rows.
Interior coordinates are 1-based, so interior cell `(x, y)` lives at
`cells[y][x]` and row 0 / column 0 hold the border.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from .commands import Line

BORDER_HORIZONTAL: Final = "-"
BORDER_VERTICAL: Final = "|"
BLANK: Final = " "
INK: Final = "X"

Row = tuple[str, ...]


@dataclass(frozen=True)
class Canvas:
    """An immutable rectangular grid of single characters."""

    cells: tuple[Row, ...] = ()

    @classmethod
    def empty(cls) -> "Canvas":
        return cls(())

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Canvas":
        """Build a canvas from one string per row, e.g. `["-----", "|   |"]`."""
        return cls(tuple(tuple(row) for row in rows))

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    @property
    def is_empty(self) -> bool:
        return not self.cells

    def row(self, y: int) -> Row:
        return self.cells[y]

    def cell(self, x: int, y: int) -> str:
        return self.cells[y][x]

    def in_interior(self, x: int, y: int) -> bool:
        return 0 < x < self.width - 1 and 0 < y < self.height - 1

    def h_line_fits(self, line: "Line") -> bool:
        return (
            line.is_horizontal
            and 0 < line.y1 < self.height - 1  # row is inside the border
            and 0 < line.x1
            and line.x2 < self.width - 1  # whole span is inside the border
        )

    def v_line_fits(self, line: "Line") -> bool:
        return (
            line.is_vertical
            and 0 < line.x1 < self.width - 1  # column is inside the border
            and 0 < line.y1
            and line.y2 < self.height - 1  # whole span is inside the border
        )

    def rectangle_fits(self, top: "Line", left: "Line") -> bool:
        """All four edges share one bounding box, so top and left are enough."""
        return self.h_line_fits(top) and self.v_line_fits(left)
