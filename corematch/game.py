"""Game states, levels and help availability."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from corematch.core import BlockView, Color, CoreView, CoreViewKind


class BoardStatus(Enum):
    """What the middle of the board is showing."""

    GAME = "game"
    ACCOUNT = "account"
    OPTIONS = "options"
    MINT = "mint"
    ABOUT = "about"
    LEADERBOARD = "leaderboard"


class GameStatus(Enum):
    """Lifecycle of a game; MOVE_TO is paired with the level being moved to."""

    INIT = "init"
    READY = "ready"
    RELOAD = "reload"
    ON = "on"
    OVER = "over"
    MOVE_TO = "move_to"


class GameLevel(Enum):
    """Difficulty level that decides how cells are compared."""

    LEVEL1 = 1
    LEVEL2 = 2

    def __str__(self) -> str:
        return f"Level {self.value}"

    def block_view(self) -> BlockView:
        """Face of the cells shown at this level."""
        return BlockView.CORES

    def core_view(self, colors: Optional[Dict[int, Color]]) -> CoreView:
        """Colouring of cores; level 2 needs the parachain colours."""
        if self is GameLevel.LEVEL1:
            return CoreView(CoreViewKind.BINARY)
        if colors is None:
            return CoreView(CoreViewKind.NOT_APPLICABLE)
        return CoreView(CoreViewKind.MULTI, dict(colors))

    def points_minimum(self) -> int:
        """Points needed to complete this level."""
        if self is GameLevel.LEVEL1:
            return 32
        raise ValueError(f"{self} has no points minimum")

    def match_x_position(self) -> int:
        """Column of the match marker at this level."""
        return 3 if self is GameLevel.LEVEL1 else 0

    def css_class(self) -> str:
        """Style class of the board at this level."""
        return f"level__{self.value}"


_STATUS_TEXT = {
    GameStatus.INIT: "Initializing",
    GameStatus.READY: "Ready for play",
    GameStatus.RELOAD: "Reload",
    GameStatus.ON: "Is On!",
    GameStatus.OVER: "Is Over!",
}


def describe_status(status: GameStatus, level: Optional[GameLevel] = None) -> str:
    """Human readable status; MOVE_TO needs the target level."""
    if status is GameStatus.MOVE_TO:
        if level is None:
            raise ValueError("moving to a level requires the level")
        return f"Moving to {level}"
    return _STATUS_TEXT[status]


class GameHelpStatus(Enum):
    """Whether match highlighting can be or is being used."""

    ON = "on"
    NOT_AVAILABLE = "not_available"
    AVAILABLE = "available"

    def is_on(self) -> bool:
        return self is GameHelpStatus.ON

    def is_available(self) -> bool:
        return self is GameHelpStatus.AVAILABLE

    def is_not_available(self) -> bool:
        return self is GameHelpStatus.NOT_AVAILABLE