from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, Optional, Tuple

from .board import MAX_COLUMNS, Board, Coord
from .debug import trace

DELTA = 2


class Direction(IntEnum):
    """Jump directions; the value is the PossibleJumps slot index."""
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def offset(self) -> Coord:
        """Unit (row, col) step for this direction."""
        return _OFFSETS[self]

    @property
    def is_vertical(self) -> bool:
        """True for UP and DOWN, which cross rows of different widths."""
        return self in (Direction.UP, Direction.DOWN)


_OFFSETS = {
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
}

# Order in which an unambiguous selection executes its jump.
SWEEP_ORDER: Tuple[Direction, ...] = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


class SelectOutcome(Enum):
    IGNORED = 'ignored'
    SELECTED = 'selected'
    AMBIGUOUS = 'ambiguous'
    EXECUTED = 'executed'


@dataclass(frozen=True)
class SelectResult:
    """What a single tap on the board did."""
    outcome: SelectOutcome
    source: Optional[Coord] = None
    destination: Optional[Coord] = None
    captured: Optional[Coord] = None
    targets: Tuple[Coord, ...] = ()

    @property
    def executed(self) -> bool:
        """True when the tap moved a peg."""
        return self.outcome is SelectOutcome.EXECUTED


@dataclass(frozen=True)
class Selection:
    row: int
    col: int
    ambiguous: bool

    @property
    def coord(self) -> Coord:
        """The selected cell as a (row, col) pair."""
        return (self.row, self.col)


def transpose_column(board: Board, row1: int, col1: int, row2: int) -> int:
    """Maps a column of row1 onto row2, where narrow rows sit 2 columns in from the wide band."""
    w1 = board.width_of(row1)
    w2 = board.width_of(row2)
    if w1 == w2:
        return col1
    if w1 == MAX_COLUMNS:
        return col1 - DELTA
    return col1 + DELTA


def jump_path(board: Board, row: int, col: int, direction: Direction) -> Optional[Tuple[Coord, Coord]]:
    """Returns (jumped_over, landing) for a legal jump, else None.

    The target must be in range and empty and the intermediate in range and
    occupied. The source cell itself is not inspected.
    """
    dr, dc = direction.offset
    if direction.is_vertical:
        row2 = row + DELTA * dr
        if not board.is_row_valid(row2):
            return None
        col2 = transpose_column(board, row, col, row2)
    else:
        row2 = row
        col2 = col + DELTA * dc
    if not board.is_valid(row2, col2) or board.is_occupied(row2, col2):
        return None

    if direction.is_vertical:
        row1 = row + dr
        if not board.is_row_valid(row1):
            return None
        col1 = transpose_column(board, row, col, row1)
    else:
        row1 = row
        col1 = col + dc
    if not board.is_occupied(row1, col1):
        return None
    return (row1, col1), (row2, col2)


def jump_target(board: Board, row: int, col: int, direction: Direction) -> Optional[Coord]:
    """Returns the landing cell of a legal jump, else None."""
    path = jump_path(board, row, col, direction)
    return path[1] if path else None


def direction_towards(source: Coord, destination: Coord) -> Direction:
    """Direction implied by a destination's offset from the source."""
    r1, c1 = source
    r2, c2 = destination
    if r1 == r2:
        return Direction.LEFT if c2 < c1 else Direction.RIGHT
    return Direction.UP if r2 < r1 else Direction.DOWN


class JumpEngine:
    """Jump geometry plus the select-then-choose-destination protocol.

    Holds the PossibleJumps slots and the current selection for one board.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self.possible_jumps: List[Optional[Coord]] = [None] * len(Direction)
        self.selection: Optional[Selection] = None

    # ---------- geometry ----------

    def can_jump(self, row: int, col: int, direction: Direction) -> Optional[Coord]:
        """Like jump_target, but also records the answer in the direction's slot."""
        dest = jump_target(self.board, row, col, direction)
        self.possible_jumps[direction] = dest
        return dest

    def count_jumps(self, row: int, col: int) -> int:
        """Counts the legal jumps from a cell."""
        return sum(1 for d in Direction if jump_target(self.board, row, col, d) is not None)

    def has_any_jump(self, row: int, col: int) -> bool:
        """Checks whether a cell has at least one legal jump."""
        return any(jump_target(self.board, row, col, d) is not None for d in Direction)

    def has_multiple_jumps(self, row: int, col: int) -> bool:
        """Checks whether a cell has more than one legal jump."""
        return self.count_jumps(row, col) > 1

    def any_peg_can_jump(self) -> bool:
        """Checks whether any peg on the board can jump."""
        return any(self.has_any_jump(r, c) for (r, c) in self.board.pegs())

    def targets(self) -> Tuple[Coord, ...]:
        """Returns the filled PossibleJumps slots in slot order."""
        return tuple(dest for dest in self.possible_jumps if dest is not None)

    # ---------- state ----------

    def clear_possible_jumps(self) -> None:
        """Empties every PossibleJumps slot."""
        for i in range(len(self.possible_jumps)):
            self.possible_jumps[i] = None

    def reset(self) -> None:
        """Clears the slots and drops any selection."""
        self.clear_possible_jumps()
        self.selection = None

    # ---------- moves ----------

    def execute_jump(self, row: int, col: int, direction: Direction) -> Optional[Tuple[Coord, Coord]]:
        """Moves the peg at (row, col) and removes the one it jumps over.

        Returns (captured, landing), or None when no peg can make that jump.
        """
        if not self.board.is_occupied(row, col):
            return None
        path = jump_path(self.board, row, col, direction)
        if path is None:
            return None
        (r1, c1), (r2, c2) = path
        self.board.set_occupied(row, col, False)
        self.board.set_occupied(r2, c2, True)
        self.board.set_occupied(r1, c1, False)
        trace('jump', f"{(row, col)} {direction.name.lower()} over {(r1, c1)} to {(r2, c2)}")
        return path

    def select_peg(self, row: int, col: int) -> SelectResult:
        """Handles a tap: selects a peg, or picks a destination for an ambiguous one."""
        if not self.board.is_valid(row, col):
            return SelectResult(SelectOutcome.IGNORED)
        if not self.board.is_occupied(row, col):
            return self.resolve_destination(row, col)

        self.clear_possible_jumps()
        for d in Direction:
            self.can_jump(row, col, d)
        targets = self.targets()

        if len(targets) > 1:
            self.selection = Selection(row, col, ambiguous=True)
            trace('select', f"{(row, col)} has {len(targets)} jumps: {list(targets)}")
            return SelectResult(SelectOutcome.AMBIGUOUS, source=(row, col), targets=targets)

        if not targets:
            self.selection = Selection(row, col, ambiguous=False)
            return SelectResult(SelectOutcome.SELECTED, source=(row, col))

        executed: Optional[Tuple[Coord, Coord]] = None
        for d in SWEEP_ORDER:
            if self.can_jump(row, col, d) is not None:
                path = self.execute_jump(row, col, d)
                if executed is None:
                    executed = path
        self.reset()
        if executed is None:
            return SelectResult(SelectOutcome.SELECTED, source=(row, col))
        captured, landing = executed
        return SelectResult(SelectOutcome.EXECUTED, source=(row, col), destination=landing, captured=captured)

    def resolve_destination(self, row2: int, col2: int) -> SelectResult:
        """Executes the pending ambiguous selection in the direction of (row2, col2).

        The slots are not consulted; the direction comes from the offset alone.
        A direction with no legal jump leaves the selection pending.
        """
        sel = self.selection
        if sel is None or not sel.ambiguous or (row2, col2) == sel.coord:
            return SelectResult(SelectOutcome.IGNORED)
        direction = direction_towards(sel.coord, (row2, col2))
        path = self.execute_jump(sel.row, sel.col, direction)
        if path is None:
            trace('select', f"{(row2, col2)} is not a jump for {sel.coord}")
            return SelectResult(SelectOutcome.IGNORED, source=sel.coord, targets=self.targets())
        self.reset()
        captured, landing = path
        return SelectResult(SelectOutcome.EXECUTED, source=sel.coord, destination=landing, captured=captured)
