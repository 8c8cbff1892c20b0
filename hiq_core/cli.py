from __future__ import annotations

import argparse
import os
from typing import List, Optional, Tuple

from .board import Coord
from .configurations import CONFIGURATIONS, configuration_names, configuration_or_default
from .jumps import SelectOutcome
from .session import GameSession


def parse_coord(text: str) -> Optional[Coord]:
    """Parses 'r,c' or 'r c' into a coordinate; None when it is not two integers."""
    sep = ',' if ',' in text else ' '
    parts = [t for t in text.strip().split(sep) if t.strip() != '']
    if len(parts) != 2:
        return None
    try:
        return (int(parts[0]), int(parts[1]))
    except ValueError:
        return None


def parse_moves(text: str) -> List[Coord]:
    moves: List[Coord] = []
    for token in text.split():
        coord = parse_coord(token)
        if coord is None:
            raise ValueError(f'bad move {token!r}, expected r,c')
        moves.append(coord)
    return moves


def _show(session: GameSession) -> None:
    print(session.pretty())
    print(f"{session.status_text()}  ({session.remaining_peg_count()}/{session.starting_peg_count()} pegs)")


def _describe(outcome: SelectOutcome, targets: Tuple[Coord, ...]) -> Optional[str]:
    if outcome is SelectOutcome.AMBIGUOUS:
        return 'Choose a destination: ' + ' '.join(f'{r},{c}' for r, c in targets)
    if outcome is SelectOutcome.IGNORED:
        return 'Nothing to do there.'
    return None


def replay(session: GameSession, moves: List[Coord]) -> None:
    for r, c in moves:
        session.select_peg(r, c)
    _show(session)


def play(session: GameSession) -> None:
    print(f"Solitaire Checkers: {session.configuration}. Enter taps as r,c (0-based), "
          "'reset', 'config NAME' or 'quit'.")
    _show(session)
    while not session.is_over():
        try:
            text = input('> ').strip()
        except EOFError:
            return
        if text in ('q', 'quit', 'exit'):
            return
        if text == 'reset':
            session.reset()
            _show(session)
            continue
        if text.startswith('config'):
            name = text[len('config'):].strip()
            if name not in CONFIGURATIONS:
                print('Unknown configuration. Choose from:', ', '.join(configuration_names()))
                continue
            session.configure(name)
            _show(session)
            continue
        coord = parse_coord(text)
        if coord is None:
            print('Could not parse. Try again.')
            continue
        result = session.select_peg(*coord)
        note = _describe(result.outcome, result.targets)
        if note:
            print(note)
        _show(session)


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Hi-Q solitaire checkers')
    parser.add_argument(
        '--config',
        choices=configuration_names(),
        default=configuration_or_default(os.getenv('HIQ_CONFIGURATION')),
        help='Starting configuration',
    )
    parser.add_argument('--list', action='store_true', help='List configurations and exit')
    parser.add_argument('--moves', default=None, help='Replay taps like "3,1 3,4" and print the result')
    args = parser.parse_args(argv)

    if args.list:
        for name in configuration_names():
            print(f"{name:<12} {CONFIGURATIONS[name].starting_pegs:>2} pegs")
        return

    session = GameSession(args.config)
    if args.moves is not None:
        try:
            moves = parse_moves(args.moves)
        except ValueError as e:
            parser.error(str(e))
        replay(session, moves)
        return
    play(session)


if __name__ == '__main__':
    main()
