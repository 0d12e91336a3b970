import random

import pytest

from corematch.block import Block
from corematch.core import Core
from corematch.engine import (
    DEFAULT_BASE_POINTS,
    DEFAULT_INITIAL_HELPS,
    DEFAULT_INITIAL_TRIES,
    Game,
    SigningStatus,
    runtime_from_query,
)
from corematch.game import BoardStatus, GameHelpStatus, GameLevel, GameStatus
from corematch.keyboard import SupportedKeys
from corematch.network import NetworkStatus
from corematch.support import SupportedRelayRuntime

SUB = 7


def make_block(number, pattern):
    cores = [Core(i, 1000 if i == pattern else None) for i in range(64)]
    return Block(number, cores, SupportedRelayRuntime.POLKADOT)


def loaded_game(patterns=(1, 1, 2, 3, 4, 5, 6, 7, 8), start=True):
    """Board filled with blocks 1..9; block 9 ends up in cell 0."""
    game = Game(rng=random.Random(1))
    game.on_subscription_created(SUB)
    for number, pattern in enumerate(patterns, start=1):
        game.on_block_received(SUB, make_block(number, pattern))
    if start:
        game.start()
    return game


def test_runtime_from_query():
    assert runtime_from_query({"chain": "Kusama"}) is SupportedRelayRuntime.KUSAMA
    assert runtime_from_query("chain=Kusama") is SupportedRelayRuntime.KUSAMA
    assert runtime_from_query({}) is SupportedRelayRuntime.POLKADOT
    assert runtime_from_query("chain=bogus") is SupportedRelayRuntime.POLKADOT
    assert runtime_from_query(None) is SupportedRelayRuntime.POLKADOT


def test_initial_state():
    game = Game()
    assert game.game_status is GameStatus.INIT
    assert not game.is_game_on()
    assert game.board.blocks == [None] * 9
    assert game.tries == DEFAULT_INITIAL_TRIES
    assert game.helps == DEFAULT_INITIAL_HELPS


def test_subscription_created_activates_and_resets():
    game = Game()
    game.on_subscription_created(SUB)
    assert game.network_state.is_active()
    assert game.network_state.is_valid(SUB)
    assert game.game_status is GameStatus.READY
    assert game.game_level is GameLevel.LEVEL2


def test_block_from_other_subscription_ignored():
    game = Game()
    game.on_subscription_created(SUB)
    game.on_block_received(SUB + 1, make_block(1, 1))
    assert game.board.blocks == [None] * 9


def test_blocks_fill_board_newest_first():
    game = loaded_game(start=False)
    numbers = [b.block_number for b in game.board.blocks]
    assert numbers == list(range(9, 0, -1))
    assert game.duration == 0


def test_start_and_duration():
    game = loaded_game()
    assert game.game_status is GameStatus.ON
    assert game.game_level is GameLevel.LEVEL1
    assert game.board_status is BoardStatus.GAME
    game.on_block_received(SUB, make_block(10, 9))
    assert game.duration == 1
    assert game.board.blocks[0].is_selected()
    assert game.last_finalized_block_number() == 10


def test_last_finalized_block_number_needs_game_on():
    game = loaded_game(start=False)
    assert game.last_finalized_block_number() is None


def test_press_sets_match_then_matches():
    game = loaded_game(patterns=(1, 2, 3, 4, 5, 6, 7, 8, 8))
    game.press_block(0)
    assert game.match_index == 0
    assert game.match_class() == "match__0"
    game.press_block(1)
    assert game.board.blocks[0].is_matched()
    assert game.board.blocks[1].is_matched()
    assert game.points == DEFAULT_BASE_POINTS
    assert game.match_counter == 1


def test_press_same_block_unsets_match():
    game = loaded_game()
    game.press_block(0)
    game.press_block(0)
    assert game.match_index is None
    assert game.match_class() == ""


def test_miss_costs_an_attempt():
    game = loaded_game()
    game.press_block(0)
    game.press_block(2)
    assert game.tries == DEFAULT_INITIAL_TRIES - 1
    assert game.board.blocks[0].missed_class == "missed"
    assert game.board.blocks[2].missed_class == "missed"
    assert game.match_index is None


def test_game_over_after_all_attempts():
    game = loaded_game()
    for _ in range(DEFAULT_INITIAL_TRIES):
        game.press_block(0)
        game.press_block(2)
    assert game.is_game_over()
    assert not game.is_game_on()
    assert game.board_status is BoardStatus.OPTIONS
    assert game.game_results() == "0/0/9"
    message = game.share_message()
    assert message.startswith("corematch.xyz 0/0/9")
    assert message.endswith(SupportedRelayRuntime.POLKADOT.hashtag())


def test_results_absent_before_game_over():
    game = loaded_game()
    assert game.game_results() is None
    assert game.share_message() is None


def test_next_level_after_enough_points():
    game = loaded_game(patterns=(1, 2, 3, 4, 5, 6, 7, 8, 8))
    game.points = 28
    game.press_block(0)
    game.press_block(1)
    assert game.is_level_completed(GameLevel.LEVEL1)
    game.on_animation_ended(8)
    assert game.board.blocks[1].is_disabled()
    assert game.game_status is GameStatus.MOVE_TO
    assert game.pending_level is GameLevel.LEVEL2
    assert game.is_game_on()
    game.on_next_level_timeout(GameLevel.LEVEL2)
    assert game.game_status is GameStatus.ON
    assert game.game_level is GameLevel.LEVEL2
    assert game.pending_level is None


def test_animation_end_clears_unmatched():
    game = loaded_game()
    game.show_details()
    assert game.board.blocks[0].is_anim_live()
    game.on_animation_ended(9)
    assert not game.board.blocks[0].is_anim_live()


def test_arrow_keys_wrap_and_select():
    game = loaded_game()
    game.key_pressed(SupportedKeys.UP)
    assert game.board.cursor_position == (0, 2)
    assert game.board.blocks[6].is_selected()
    assert not game.board.blocks[0].is_selected()
    game.key_pressed("ArrowLeft")
    assert game.board.cursor_position == (2, 2)


def test_enter_starts_game():
    game = loaded_game(start=False)
    game.key_pressed(SupportedKeys.ENTER)
    assert game.is_game_on()
    game.key_pressed(SupportedKeys.ENTER)
    assert game.match_index == 0


def test_flip_only_when_not_animating():
    game = loaded_game()
    game.key_pressed(SupportedKeys.F)
    assert game.board.blocks[0].is_flipped
    game.key_pressed(SupportedKeys.F)
    assert game.board.blocks[0].is_flipped


def test_help_requires_game_on():
    game = loaded_game(start=False)
    game.help_button()
    assert not game.is_help_on()
    game.start()
    game.key_pressed(SupportedKeys.H)
    assert game.is_help_on()


def test_help_highlights_one_pattern():
    game = loaded_game(patterns=(1, 1, 1, 2, 2, 3, 4, 5, 6))
    game.help_button()
    game.on_block_received(SUB, make_block(10, 7))
    highlighted = [b for b in game.board.blocks if b is not None and b.help_class == "help"]
    assert len(highlighted) == 2
    hashes = {b.corespace_hash(game.game_level) for b in highlighted}
    assert len(hashes) == 1
    assert game.helps + len(highlighted) == DEFAULT_INITIAL_HELPS
    assert game.game_help_status is GameHelpStatus.ON


def test_network_change_only_when_active():
    game = Game()
    game.on_network_changed(SupportedRelayRuntime.KUSAMA)
    assert game.network_state.runtime is SupportedRelayRuntime.POLKADOT
    game.on_subscription_created(SUB)
    game.on_network_changed(SupportedRelayRuntime.KUSAMA)
    assert game.network_state.status is NetworkStatus.SWITCHING
    assert game.network_state.runtime is SupportedRelayRuntime.KUSAMA
    assert game.game_status is GameStatus.RELOAD


def test_parachains_collected():
    game = Game(rng=random.Random(3))
    game.on_parachains_collected([2000, 1000, 3000])
    colors = game.network_state.parachain_colors
    assert sorted(colors) == [1000, 2000, 3000]
    assert len({c[0] for c in colors.values()}) == 3


def test_toggle_about():
    game = Game()
    game.toggle_about()
    assert game.board_status is BoardStatus.ABOUT
    game.toggle_about()
    assert game.board_status is BoardStatus.GAME


def test_choose_level():
    game = Game()
    game.choose_level(GameLevel.LEVEL2)
    assert game.game_level is GameLevel.LEVEL2


def test_signing_finished():
    game = Game()
    game.on_signing_finished(SigningStatus.FAILED)
    assert game.is_game_over()
    with pytest.raises(ValueError):
        game.on_signing_finished(SigningStatus.SUCCEEDED)


def test_click_block_moves_cursor():
    game = loaded_game()
    game.click_block(4)
    assert game.board.cursor_index() == 4
    assert game.board.blocks[4].is_selected()
    assert not game.board.blocks[0].is_selected()