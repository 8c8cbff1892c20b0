from __future__ import annotations

import threading
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from .board import CENTER, Board, Coord
from .configurations import DEFAULT_CONFIGURATION, Configuration, get_configuration
from .debug import trace
from .jumps import JumpEngine, SelectOutcome, SelectResult, Selection

MESSAGE_LOST = "No more jumps!"
MESSAGE_WON = "I'm a winner"
MESSAGE_WON_PERFECT = "I'm a perfect winner!"

Observer = Callable[['GameSession'], None]


def _one_based(coord: Coord) -> str:
    return f"{coord[0] + 1}, {coord[1] + 1}"


class GameSession:
    """One game of Hi-Q: a board, its jump engine and the chosen configuration.

    Every mutating call notifies observers exactly once, after the call has
    finished updating state. Public calls hold a re-entrant lock, so observers
    may read the session from inside their callback.
    """

    def __init__(
        self,
        configuration: str = DEFAULT_CONFIGURATION,
        observers: Iterable[Observer] = (),
    ) -> None:
        self._lock = threading.RLock()
        self._observers: List[Observer] = list(observers)
        self.board = Board()
        self.engine = JumpEngine(self.board)
        self._configuration: Configuration = get_configuration(configuration)
        self._message = ''
        self._apply(self._configuration)

    # ---------- observers ----------

    def on_change(self, callback: Observer) -> Callable[[], None]:
        """Registers callback; returns a function that unregisters it."""
        with self._lock:
            self._observers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._observers:
                    self._observers.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        for callback in list(self._observers):
            callback(self)

    # ---------- configuration ----------

    @property
    def configuration(self) -> str:
        return self._configuration.name

    def _apply(self, config: Configuration) -> None:
        self._configuration = config
        config.apply(self.board)
        self.engine.reset()
        self._message = f"Solitaire Checkers in {config.name} configuration"
        trace('config', f"{config.name}: {config.starting_pegs} pegs")

    def configure(self, name: str) -> None:
        """Switches to a named preset; raises UnknownConfiguration and keeps the game otherwise."""
        with self._lock:
            config = get_configuration(name)
            self._apply(config)
            self._notify()

    def reset(self) -> None:
        with self._lock:
            self._apply(self._configuration)
            self._notify()

    start = reset

    # ---------- moves ----------

    def select_peg(self, row: int, col: int) -> SelectResult:
        """Single entry point for a tap on (row, col)."""
        with self._lock:
            result = self.engine.select_peg(row, col)
            self._record(result, (row, col))
            self._notify()
            return result

    def resolve_destination(self, row: int, col: int) -> SelectResult:
        with self._lock:
            result = self.engine.resolve_destination(row, col)
            self._record(result, (row, col))
            self._notify()
            return result

    def _record(self, result: SelectResult, tapped: Coord) -> None:
        if result.outcome is SelectOutcome.AMBIGUOUS and result.source is not None:
            self._message = f"peg {_one_based(result.source)} has multiple jumps"
        elif result.executed and result.destination is not None and result.source is not None:
            if tapped == result.source:
                self._message = f"peg {_one_based(result.source)} jumped"
            else:
                self._message = f"you chose {_one_based(result.destination)}"
        elif result.outcome is SelectOutcome.SELECTED and result.source is not None:
            self._message = f"peg {_one_based(result.source)} cannot jump"

    # ---------- queries ----------

    def board_shape(self) -> Tuple[int, Tuple[int, ...]]:
        return self.board.row_count(), self.board.shape()

    def is_occupied(self, row: int, col: int) -> bool:
        return self.board.is_occupied(row, col)

    def starting_peg_count(self) -> int:
        return self._configuration.starting_pegs

    def remaining_peg_count(self) -> int:
        return self.board.count_occupied()

    def possible_jump_targets(self) -> Tuple[Coord, ...]:
        with self._lock:
            return self.engine.targets()

    @property
    def selection(self) -> Optional[Selection]:
        return self.engine.selection

    def is_won(self) -> bool:
        with self._lock:
            return self.remaining_peg_count() == 1 and not self.board.is_occupied(*CENTER)

    def is_won_ideal(self) -> bool:
        with self._lock:
            return self.remaining_peg_count() == 1 and self.board.is_occupied(*CENTER)

    def is_lost(self) -> bool:
        with self._lock:
            if self.engine.any_peg_can_jump():
                return False
            return self.remaining_peg_count() > 1

    def is_over(self) -> bool:
        with self._lock:
            return self.is_won() or self.is_won_ideal() or self.is_lost()

    def status_text(self) -> str:
        with self._lock:
            if self.is_won_ideal():
                return MESSAGE_WON_PERFECT
            if self.is_won():
                return MESSAGE_WON
            if self.is_lost():
                return MESSAGE_LOST
            return self._message

    def snapshot(self) -> Dict[str, Any]:
        """JSON-ready view of the whole session."""
        with self._lock:
            sel = self.selection
            return {
                "configuration": self.configuration,
                "shape": list(self.board.shape()),
                "rows": self.board.rows(),
                "startingPegs": self.starting_peg_count(),
                "remainingPegs": self.remaining_peg_count(),
                "targets": [[r, c] for (r, c) in self.possible_jump_targets()],
                "selection": None if sel is None else {"row": sel.row, "col": sel.col, "ambiguous": sel.ambiguous},
                "won": self.is_won(),
                "wonIdeal": self.is_won_ideal(),
                "lost": self.is_lost(),
                "status": self.status_text(),
            }

    def pretty(self) -> str:
        """Board text with the selected peg and its jump targets marked."""
        with self._lock:
            sel = self.selection
            return self.board.pretty(self.possible_jump_targets(), sel.coord if sel else None)
