from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple

Coord = Tuple[int, int]

ROW_WIDTHS: Tuple[int, ...] = (3, 3, 7, 7, 7, 3, 3)
MAX_COLUMNS = 7
CENTER: Coord = (3, 3)


class Board:
    """The jagged cross-shaped peg board.

    Rows 0, 1, 5 and 6 hold 3 cells, rows 2, 3 and 4 hold 7. Out-of-range
    coordinates are never an error: queries answer False and writes are ignored.
    """

    def __init__(self, widths: Iterable[int] = ROW_WIDTHS) -> None:
        self._rows: List[List[bool]] = [[False] * int(w) for w in widths]

    def row_count(self) -> int:
        """Returns the number of rows."""
        return len(self._rows)

    def width_of(self, row: int) -> int:
        """Number of cells in a row, 0 for rows outside the board."""
        if not self.is_row_valid(row):
            return 0
        return len(self._rows[row])

    def shape(self) -> Tuple[int, ...]:
        """Returns the width of every row, top to bottom."""
        return tuple(len(r) for r in self._rows)

    def is_row_valid(self, row: int) -> bool:
        """Checks whether a row index is on the board."""
        return 0 <= row < len(self._rows)

    def is_valid(self, row: int, col: int) -> bool:
        """Checks whether a cell exists on the board."""
        return self.is_row_valid(row) and 0 <= col < len(self._rows[row])

    def is_occupied(self, row: int, col: int) -> bool:
        """Checks whether a peg sits at a cell; False off the board."""
        if self.is_valid(row, col):
            return self._rows[row][col]
        return False

    def set_occupied(self, row: int, col: int, value: bool = True) -> None:
        """Places or removes a peg; ignored off the board."""
        if self.is_valid(row, col):
            self._rows[row][col] = bool(value)

    def count_occupied(self) -> int:
        """Counts the pegs on the board."""
        return sum(1 for row in self._rows for cell in row if cell)

    def clear(self) -> None:
        """Removes every peg."""
        for row in self._rows:
            for c in range(len(row)):
                row[c] = False

    def fill_all(self) -> None:
        """Puts a peg in every cell."""
        for row in self._rows:
            for c in range(len(row)):
                row[c] = True

    def coords(self) -> Iterator[Coord]:
        """Iterates over every valid cell, row by row."""
        for r, row in enumerate(self._rows):
            for c in range(len(row)):
                yield (r, c)

    def pegs(self) -> Iterator[Coord]:
        """Iterates over occupied cells, row by row."""
        for r, c in self.coords():
            if self._rows[r][c]:
                yield (r, c)

    def rows(self) -> List[List[bool]]:
        """Copy of the occupancy grid."""
        return [list(row) for row in self._rows]

    def pretty(
        self,
        highlight: Iterable[Coord] = (),
        selected: Optional[Coord] = None,
    ) -> str:
        """Renders the cross with narrow rows indented under the wide band."""
        marks = set(highlight)
        lines: List[str] = []
        for r, row in enumerate(self._rows):
            indent = (MAX_COLUMNS - len(row)) // 2
            cells: List[str] = ["  "] * indent
            for c, peg in enumerate(row):
                if selected == (r, c):
                    cells.append("@ ")
                elif (r, c) in marks:
                    cells.append("* ")
                else:
                    cells.append("o " if peg else ". ")
            lines.append("".join(cells).rstrip())
        return "\n".join(lines)
