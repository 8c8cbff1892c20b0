"""
Hi-Q (solitaire checkers) core Python package.

Pure game logic for the 33-hole cross board, kept free of any UI so the CLI,
the Flask app and the tests share one implementation.
Modules:
- board.py: Board, Coord and board constants
- jumps.py: jump geometry and the select/resolve protocol (JumpEngine)
- configurations.py: the named starting layouts
- session.py: GameSession (status, win/loss, observers)
"""
from __future__ import annotations

from .board import CENTER, ROW_WIDTHS, Board, Coord
from .configurations import (
    CONFIGURATIONS,
    DEFAULT_CONFIGURATION,
    Configuration,
    UnknownConfiguration,
    configuration_names,
    configuration_or_default,
    get_configuration,
)
from .jumps import (
    Direction,
    JumpEngine,
    SelectOutcome,
    SelectResult,
    Selection,
    jump_target,
    transpose_column,
)
from .session import GameSession

__all__ = [
    'CENTER',
    'ROW_WIDTHS',
    'Board',
    'Coord',
    'CONFIGURATIONS',
    'DEFAULT_CONFIGURATION',
    'Configuration',
    'UnknownConfiguration',
    'configuration_names',
    'configuration_or_default',
    'get_configuration',
    'Direction',
    'JumpEngine',
    'SelectOutcome',
    'SelectResult',
    'Selection',
    'jump_target',
    'transpose_column',
    'GameSession',
]
