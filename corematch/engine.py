"""Rules of the matching game, driven by network events and player input."""

from __future__ import annotations

import copy
import logging
import random
from enum import Enum
from typing import Iterable, Mapping, Optional, Union
from urllib.parse import parse_qs

from corematch.block import Block
from corematch.board import Board
from corematch.game import BoardStatus, GameHelpStatus, GameLevel, GameStatus
from corematch.keyboard import SupportedKeys, key_from_name
from corematch.network import NetworkState, NetworkStatus, generate_parachain_colors
from corematch.support import SupportedRelayRuntime

logger = logging.getLogger(__name__)

DEFAULT_INITIAL_POINTS = 0
DEFAULT_BASE_POINTS = 4
DEFAULT_INITIAL_DURATION = 0
DEFAULT_INITIAL_TRIES = 4
DEFAULT_INITIAL_HELPS = 8
NEXT_LEVEL_DELAY_MS = 6000

_ARROWS = (SupportedKeys.UP, SupportedKeys.DOWN, SupportedKeys.LEFT, SupportedKeys.RIGHT)


class SigningStatus(Enum):
    """Outcome of signing the game results."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"


def runtime_from_query(query: Union[str, Mapping[str, str], None]) -> SupportedRelayRuntime:
    """Relay runtime named by the ``chain`` query parameter, Polkadot otherwise."""
    if query is None:
        return SupportedRelayRuntime.POLKADOT
    if isinstance(query, str):
        values = parse_qs(query.lstrip("?")).get("chain", [])
        chain = values[0] if values else None
    else:
        chain = query.get("chain")
    try:
        return SupportedRelayRuntime(chain)
    except ValueError:
        return SupportedRelayRuntime.POLKADOT


class Game:
    """Game state: the board, score, attempts, helps and the followed network.

    Moving to the next level sets ``pending_level``; after
    ``NEXT_LEVEL_DELAY_MS`` the caller is expected to call
    ``on_next_level_timeout`` with that level.
    """

    def __init__(
        self,
        runtime: SupportedRelayRuntime = SupportedRelayRuntime.POLKADOT,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.network_state = NetworkState(runtime)
        self.board = Board()
        self.board_status = BoardStatus.GAME
        self.previous_board_status: Optional[BoardStatus] = None
        self.match_index: Optional[int] = None
        self.match_counter = 0
        self.previous_match_block: Optional[Block] = None
        self.game_status = GameStatus.INIT
        self.pending_level: Optional[GameLevel] = None
        self.game_level = GameLevel.LEVEL1
        self.duration = DEFAULT_INITIAL_DURATION
        self.points = DEFAULT_INITIAL_POINTS
        self.previous_points = DEFAULT_INITIAL_POINTS
        self.tries = DEFAULT_INITIAL_TRIES
        self.helps = DEFAULT_INITIAL_HELPS
        self.game_help_status = GameHelpStatus.AVAILABLE

    # network events

    def on_network_changed(self, runtime: SupportedRelayRuntime) -> None:
        """Switch to another relay chain while a subscription is active."""
        if self.network_state.is_active():
            self.network_state.status = NetworkStatus.SWITCHING
            self.network_state.runtime = runtime
            self.game_status = GameStatus.RELOAD

    def on_subscription_created(self, subscription_id: int) -> None:
        """Activate a new block subscription and reset the game fully."""
        self.network_state.subscription_id = subscription_id
        self.network_state.status = NetworkStatus.ACTIVE
        self._full_reset()

    def on_parachains_collected(self, para_ids: Iterable[int]) -> None:
        """Assign a colour to every parachain."""
        self.network_state.parachain_colors = generate_parachain_colors(para_ids, self.rng)

    def on_block_received(self, subscription_id: int, block: Block) -> None:
        """Add a finalized block to the board if it belongs to the active subscription."""
        if not self.network_state.is_valid(subscription_id):
            return
        self._reset_match_block()
        self.board.push_block(block, self.game_level)

        if self.is_game_on():
            cursor = self.board.cursor_index()
            for index, cell in enumerate(self.board.blocks):
                if cell is None:
                    continue
                if self.game_status is GameStatus.ON and index == cursor:
                    cell.select()
                else:
                    cell.unselect()
                    cell.clear()

            if self.game_help_status.is_on():
                repeated = self.board.repeated_hashes()
                if len(repeated) > 1:
                    target = repeated[-1]
                    highlighted = 0
                    for cell in self.board.blocks:
                        if (
                            cell is not None
                            and cell.corespace_hash(self.game_level) == target
                            and cell.is_help_available()
                            and not cell.is_disabled()
                        ):
                            cell.highlight_help()
                            highlighted += 1
                    self._decr_help_matches(highlighted)

        self._incr_duration()

    # player input

    def click_block(self, index: int) -> None:
        """Move the cursor onto the clicked cell."""
        if not self.is_game_on():
            return
        cursor = self.board.cursor_index()
        if cursor != index:
            self._unselect_block(cursor)
        self.board.set_cursor_index(index)
        self._select_block(index)

    def press_block(self, index: int) -> None:
        """Choose the cell to match, or try to match a cell against it."""
        if not self.is_game_on():
            return
        match_block = self._match_block()
        block = self.board.block_at(index)
        if block is None or block.is_matched() or block.is_disabled():
            return
        if match_block is None:
            self.match_index = self.board.cursor_index()
        elif match_block.block_number == block.block_number:
            self.match_index = None
        elif match_block.corespace_hash(self.game_level) == block.corespace_hash(self.game_level):
            self._block_matched(index)
        else:
            self._block_missed(index)

    def on_animation_ended(self, block_number: int) -> None:
        """Settle a cell once its animation finishes."""
        for block in self.board.blocks:
            if block is not None and block.block_number == block_number:
                break
        else:
            return
        if block.is_matched():
            block.disable()
            if self._is_next_level_available(GameLevel.LEVEL1):
                logger.info("Well Done! Level 2 available for playing.")
                self._next_level(GameLevel.LEVEL2)
        else:
            block.clear()

    def on_next_level_timeout(self, level: GameLevel) -> None:
        """Finish moving to ``level`` and resume play."""
        self.game_level = level
        self.game_status = GameStatus.ON
        self.pending_level = None

    def start(self) -> None:
        """Start a new game unless one is already running."""
        if self.is_game_on():
            return
        self._reset()
        self.previous_board_status = self.board_status
        self.board_status = BoardStatus.GAME
        self.game_status = GameStatus.ON
        self.game_level = GameLevel.LEVEL1

    def help_button(self) -> None:
        """Recount the patterns on the board and switch highlighting on."""
        self.board.recount_matches(self.game_level)
        self.start_help()

    def start_help(self) -> None:
        """Switch match highlighting on while helps are available."""
        if self.is_game_on() and self.game_help_status.is_available():
            self.game_help_status = GameHelpStatus.ON

    def toggle_about(self) -> None:
        """Show the about page, or go back to what was shown before it."""
        if self.board_status is BoardStatus.ABOUT:
            if self.previous_board_status is not None:
                self.board_status = self.previous_board_status
        else:
            self.previous_board_status = self.board_status
            self.board_status = BoardStatus.ABOUT

    def choose_level(self, level: GameLevel) -> None:
        self.game_level = level

    def on_signing_finished(self, status: SigningStatus) -> None:
        """Handle the outcome of signing the results."""
        logger.info("Signing finished: %s", status)
        if status is SigningStatus.FAILED:
            self.game_status = GameStatus.OVER
            return
        raise ValueError(f"unsupported signing status: {status}")

    def key_pressed(self, key: Union[SupportedKeys, str]) -> None:
        """React to a keyboard command or a browser key name."""
        if isinstance(key, str):
            key = key_from_name(key)
        if key is SupportedKeys.ENTER:
            if not self.is_game_on():
                self.start()
            else:
                self.press_block(self.board.cursor_index())
        elif key is SupportedKeys.SPACE:
            if self.is_game_on():
                self.press_block(self.board.cursor_index())
        elif key in _ARROWS:
            self._move_cursor(self.board.next_cursor_position(key))
        elif key is SupportedKeys.S:
            self.start()
        elif key is SupportedKeys.H:
            self.start_help()
        elif key is SupportedKeys.F:
            self.show_details()
        else:
            logger.info("Skip")

    def show_details(self) -> None:
        """Flip the cell under the cursor unless it is already animating."""
        if not self.is_game_on():
            return
        block = self.board.block_at(self.board.cursor_index())
        if block is not None and not block.is_anim_live():
            block.flip()

    # queries

    def is_game_on(self) -> bool:
        return self.game_status in (GameStatus.ON, GameStatus.MOVE_TO)

    def is_game_over(self) -> bool:
        return self.game_status is GameStatus.OVER

    def is_help_on(self) -> bool:
        return self.game_help_status.is_on()

    def is_level_completed(self, level: GameLevel) -> bool:
        """True once enough points were collected for ``level``."""
        return self.points >= level.points_minimum()

    def match_class(self) -> str:
        """Style class marking the cell being matched, or an empty string."""
        if self.match_index is None:
            return ""
        return f"match__{self.match_index}"

    def share_message(self) -> Optional[str]:
        """Text to share after a game, once it is over."""
        if self.previous_match_block is None:
            return None
        results = self.game_results() or ""
        lines = [
            f"corematch.xyz {results} 👀\n",
            self.previous_match_block.runtime.hashtag(),
        ]
        return "\n".join(lines)

    def game_results(self) -> Optional[str]:
        """'points/duration/block number' of the finished game."""
        if self.previous_match_block is None:
            return None
        return f"{self.points}/{self.duration}/{self.previous_match_block.block_number}"

    def last_finalized_block_number(self) -> Optional[int]:
        """Number of the newest block on the board while playing."""
        if not self.is_game_on():
            return None
        block = self.board.block_at(0)
        return None if block is None else block.block_number

    # internals

    def _full_reset(self) -> None:
        self._reset()
        self.board.clear()

    def _reset(self) -> None:
        self.board.reset_blocks()
        self.game_status = GameStatus.READY
        self.game_level = GameLevel.LEVEL2
        self.duration = DEFAULT_INITIAL_DURATION
        self.points = DEFAULT_INITIAL_POINTS
        self.tries = DEFAULT_INITIAL_TRIES
        self.helps = DEFAULT_INITIAL_HELPS
        self.game_help_status = GameHelpStatus.AVAILABLE
        self.board.cursor_position = (0, 0)

    def _reset_match_block(self) -> None:
        self.match_counter = 0
        self.match_index = None

    def _match_block(self) -> Optional[Block]:
        if self.match_index is None:
            return None
        return self.board.block_at(self.match_index)

    def _block_matched(self, index: int) -> None:
        logger.info("Congrats, you found a match!")
        block = self.board.block_at(index)
        if block is not None:
            block.match()
        match_block = self._match_block()
        if match_block is not None:
            match_block.match()
            self.board.release_match(match_block.corespace_hash(self.game_level))
        self._match_succeed()

    def _block_missed(self, index: int) -> None:
        logger.info("Wrong match!")
        block = self.board.block_at(index)
        if block is not None:
            block.miss()
        match_block = self._match_block()
        if match_block is not None:
            match_block.miss()
        self._match_failed()
        self._check_game_status()

    def _check_game_status(self) -> None:
        if self.is_game_over():
            logger.info("** Game Over **")
            match_block = self._match_block()
            if match_block is not None:
                self.previous_match_block = copy.deepcopy(match_block)
                logger.info("\n%s", self.share_message() or "")
                self._unselect_block(self.board.cursor_index())
                self.board_status = BoardStatus.OPTIONS
        self._reset_match_block()

    def _next_level(self, level: GameLevel) -> None:
        self.game_status = GameStatus.MOVE_TO
        self.pending_level = level
        self.helps = DEFAULT_INITIAL_HELPS
        self.game_help_status = GameHelpStatus.AVAILABLE

    def _is_next_level_available(self, current: GameLevel) -> bool:
        if self.game_level is not current:
            return False
        minimum = self.game_level.points_minimum()
        return self.previous_points < minimum <= self.points

    def _unselect_block(self, index: int) -> None:
        block = self.board.block_at(index)
        if block is not None:
            block.unselect()

    def _select_block(self, index: int) -> None:
        if self.is_game_on():
            block = self.board.block_at(index)
            if block is not None:
                block.select()

    def _move_cursor(self, position) -> None:
        if self.is_game_on() and position != self.board.cursor_position:
            self._unselect_block(self.board.cursor_index())
            self.board.cursor_position = position
            self._select_block(self.board.cursor_index())

    def _match_succeed(self) -> None:
        if self.is_game_on():
            self._incr_points()
            self.match_counter += 1

    def _match_failed(self) -> None:
        if self.is_game_on() and self.tries > 0:
            self.tries -= 1
            if self.tries == 0:
                self.game_status = GameStatus.OVER

    def _incr_points(self) -> None:
        if self.is_game_on():
            self.previous_points = self.points
            self.points += DEFAULT_BASE_POINTS * 2 ** self.match_counter

    def _incr_duration(self) -> None:
        if self.is_game_on():
            self.duration += 1

    def _decr_help_matches(self, count: int) -> None:
        if not (self.is_help_on() and self.helps > 0):
            return
        for _ in range(count):
            self.helps -= 1
            if self.helps == 0:
                self.game_help_status = GameHelpStatus.NOT_AVAILABLE
                break