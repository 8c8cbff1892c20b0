from __future__ import annotations

# Facade module that re-exports the Hi-Q core.
# Used by the Flask app and tests; the logic lives under hiq_core/*.

try:
    from .hiq_core import (  # type: ignore
        CENTER,
        CONFIGURATIONS,
        DEFAULT_CONFIGURATION,
        Board,
        Coord,
        Direction,
        GameSession,
        JumpEngine,
        SelectOutcome,
        SelectResult,
        UnknownConfiguration,
        configuration_names,
        configuration_or_default,
        jump_target,
        transpose_column,
    )
except ImportError:
    from hiq_core import (  # type: ignore
        CENTER,
        CONFIGURATIONS,
        DEFAULT_CONFIGURATION,
        Board,
        Coord,
        Direction,
        GameSession,
        JumpEngine,
        SelectOutcome,
        SelectResult,
        UnknownConfiguration,
        configuration_names,
        configuration_or_default,
        jump_target,
        transpose_column,
    )


def main() -> None:
    # CLI driver delegated to hiq_core.cli
    try:
        from .hiq_core.cli import main as _main  # type: ignore
    except ImportError:
        from hiq_core.cli import main as _main  # type: ignore
    _main()


if __name__ == '__main__':
    main()
