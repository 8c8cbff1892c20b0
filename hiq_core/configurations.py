from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from .board import CENTER, ROW_WIDTHS, Board, Coord


class UnknownConfiguration(ValueError):
    """Raised for a preset name that is not one of the known configurations."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"unknown configuration {name!r}; expected one of {', '.join(configuration_names())}")


@dataclass(frozen=True)
class Configuration:
    """A named starting layout."""
    name: str
    pegs: FrozenSet[Coord]

    @property
    def starting_pegs(self) -> int:
        return len(self.pegs)

    def apply(self, board: Board) -> None:
        board.clear()
        for r, c in self.pegs:
            board.set_occupied(r, c, True)


def _all_cells() -> List[Coord]:
    return [(r, c) for r, w in enumerate(ROW_WIDTHS) for c in range(w)]


def _layout(add: Iterable[Coord] = (), remove: Iterable[Coord] = (), base: Iterable[Coord] = ()) -> FrozenSet[Coord]:
    cells = set(base)
    cells.update(add)
    cells.difference_update(remove)
    return frozenset(cells)


_ARROW = _layout(add=[
    (0, 1),
    (1, 0), (1, 1), (1, 2),
    (2, 1), (2, 2), (2, 3), (2, 4), (2, 5),
    (3, 3),
    (4, 3),
    (5, 0), (5, 1), (5, 2),
    (6, 0), (6, 1), (6, 2),
])

_PRESETS: Tuple[Tuple[str, FrozenSet[Coord]], ...] = (
    ('Solitaire', _layout(base=_all_cells(), remove=[CENTER])),
    ('Cross', _layout(add=[(1, 1), (2, 2), (2, 3), (2, 4), (3, 3), (4, 3)])),
    ('Diamond', _layout(base=_all_cells(), remove=[
        (0, 0), (0, 2), (2, 0), (2, 6), (3, 3), (4, 0), (4, 6), (6, 0), (6, 2),
    ])),
    ('DoubleArrow', _layout(
        base=_ARROW,
        add=[(3, 2), (3, 4), (4, 1), (4, 2), (4, 4), (4, 5)],
        remove=[(6, 0), (6, 2)],
    )),
    ('Arrow', _ARROW),
    ('Fireplace', _layout(add=[
        (0, 0), (0, 1), (0, 2),
        (1, 0), (1, 1), (1, 2),
        (2, 2), (2, 3), (2, 4),
        (3, 2), (3, 4),
    ])),
    ('Plus', _layout(add=[
        (1, 1), (2, 3), (3, 1), (3, 2), (3, 3), (3, 4), (3, 5), (4, 3), (5, 1),
    ])),
    ('Pyramid', _layout(add=[
        (1, 1),
        (2, 2), (2, 3), (2, 4),
        (3, 1), (3, 2), (3, 3), (3, 4), (3, 5),
        (4, 0), (4, 1), (4, 2), (4, 3), (4, 4), (4, 5), (4, 6),
    ])),
)

CONFIGURATIONS: Dict[str, Configuration] = {name: Configuration(name, pegs) for name, pegs in _PRESETS}
DEFAULT_CONFIGURATION = 'Solitaire'


def configuration_names() -> List[str]:
    return [name for name, _ in _PRESETS]


def get_configuration(name: object) -> Configuration:
    """Looks up a preset by its exact name."""
    if not isinstance(name, str) or name not in CONFIGURATIONS:
        raise UnknownConfiguration(name)
    return CONFIGURATIONS[name]


def configuration_or_default(name: Optional[str]) -> str:
    """Returns name when it is a known preset, otherwise the default one."""
    if name in CONFIGURATIONS:
        return str(name)
    return DEFAULT_CONFIGURATION
