"""Keys the game reacts to."""

from __future__ import annotations

from enum import Enum


class SupportedKeys(Enum):
    """Keyboard commands of the game."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    SPACE = "space"
    S = "s"
    H = "h"
    F = "f"
    NOT_SUPPORTED = "not_supported"


_KEY_NAMES = {
    "ArrowUp": SupportedKeys.UP,
    "ArrowDown": SupportedKeys.DOWN,
    "ArrowLeft": SupportedKeys.LEFT,
    "ArrowRight": SupportedKeys.RIGHT,
    "Enter": SupportedKeys.ENTER,
    "Space": SupportedKeys.SPACE,
    " ": SupportedKeys.SPACE,
    "S": SupportedKeys.S,
    "s": SupportedKeys.S,
    "H": SupportedKeys.H,
    "h": SupportedKeys.H,
    "F": SupportedKeys.F,
    "f": SupportedKeys.F,
}


def key_from_name(name: str) -> SupportedKeys:
    """Map a browser key name to a command; unknown keys are NOT_SUPPORTED."""
    return _KEY_NAMES.get(name, SupportedKeys.NOT_SUPPORTED)