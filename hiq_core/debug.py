from __future__ import annotations

import os


def debug_enabled() -> bool:
    """Set HIQ_DEBUG=1 to print engine traces."""
    return os.getenv('HIQ_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')


def trace(tag: str, message: str) -> None:
    if debug_enabled():
        print(f"[hiq:{tag}] {message}")
