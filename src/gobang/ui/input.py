"""Keyboard input helpers for the console UI."""

from __future__ import annotations

import readchar


def get_key() -> str:
    """Return the next key pressed by the player."""

    return readchar.readkey()


def confirm(prompt: str) -> bool:
    """Show ``prompt`` and return ``True`` when the player presses ``y``."""

    print(prompt, end="", flush=True)
    key = get_key()
    print(key)
    return key.lower() == "y"
