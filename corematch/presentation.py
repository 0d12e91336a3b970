"""What the game screen shows for a given game state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from corematch.engine import DEFAULT_INITIAL_HELPS, DEFAULT_INITIAL_TRIES, Game
from corematch.game import GameLevel, GameStatus
from corematch.support import SupportedRelayRuntime
from corematch.views import column_boxes, column_title

_LOGOS = {
    SupportedRelayRuntime.POLKADOT: (
        "/images/corematch_logo_polkadot.svg",
        "corematch + polkadot logo",
    ),
    SupportedRelayRuntime.KUSAMA: (
        "/images/corematch_logo_kusama.svg",
        "corematch + kusama logo",
    ),
}

_SWITCH_TARGETS = {
    SupportedRelayRuntime.POLKADOT: SupportedRelayRuntime.KUSAMA,
    SupportedRelayRuntime.KUSAMA: SupportedRelayRuntime.POLKADOT,
}


@dataclass(frozen=True)
class CommandStates:
    """Which command buttons are disabled and whether the network switch shows."""

    start_disabled: bool
    help_disabled: bool
    level2_disabled: bool
    level1_disabled: bool
    about_disabled: bool
    network_switch_visible: bool


def command_states(game: Game) -> CommandStates:
    """State of the command buttons next to the board."""
    on = game.is_game_on()
    return CommandStates(
        start_disabled=on,
        help_disabled=not on or game.is_help_on() or game.helps == 0,
        level2_disabled=(
            not game.is_level_completed(GameLevel.LEVEL1)
            or game.game_level is GameLevel.LEVEL2
        ),
        level1_disabled=not on or game.game_level is GameLevel.LEVEL1,
        about_disabled=False,
        network_switch_visible=game.network_state.is_active(),
    )


def keyboard_hints(game: Game) -> List[str]:
    """Keyboard help shown above the board."""
    if not game.is_game_on():
        return ["Press S or ENTER to start playing"]
    action = "SPACE/ENTER=SELECT" if game.match_index is None else "SPACE/ENTER=MATCH"
    return ["← ↑ → ↓ =MOVE", action, "H=HIGHLIGHT", "F=FLIP"]


def board_caption(game: Game) -> Optional[str]:
    """Caption replacing the board while moving levels or reloading, else None."""
    if game.game_status is GameStatus.MOVE_TO:
        if game.pending_level is None:
            raise ValueError("moving to a level requires the level")
        return f"{game.pending_level} Next!"
    if game.game_status is GameStatus.RELOAD:
        return "RELOADING"
    return None


def visibility_class(game: Game) -> str:
    """'visible' while a game is on, 'hidden' otherwise."""
    return "visible" if game.is_game_on() else "hidden"


def help_box_class(game: Game) -> Optional[str]:
    """Class of the help boxes while highlighting is on."""
    return "is__on" if game.is_help_on() else None


def _column(
    game: Game, max_value: int, value: int, title: str, position: str, box_class: Optional[str]
) -> Dict[str, object]:
    return {
        "title": column_title(value, title),
        "boxes": column_boxes(max_value, value),
        "class": visibility_class(game),
        "position_class": position,
        "box_class": box_class,
    }


def attempts_column(game: Game) -> Dict[str, object]:
    """Column of attempts left, on the left of the board."""
    return _column(game, DEFAULT_INITIAL_TRIES, game.tries, "attempts left!", "left", None)


def helps_column(game: Game) -> Dict[str, object]:
    """Column of helps left, on the right of the board."""
    return _column(
        game, DEFAULT_INITIAL_HELPS, game.helps, "helps left!", "right", help_box_class(game)
    )


def logo_image(runtime: SupportedRelayRuntime) -> Tuple[str, str]:
    """Image path and alternative text of the header logo."""
    return _LOGOS[runtime]


def switch_target(runtime: SupportedRelayRuntime) -> SupportedRelayRuntime:
    """Relay chain the network button switches to."""
    return _SWITCH_TARGETS[runtime]


def stats_table(game: Game) -> Dict[str, int]:
    """Points, duration and attempts left of the current game."""
    return {"Points": game.points, "Duration": game.duration, "Attempts": game.tries}