import random

from corematch.network import NetworkState, NetworkStatus, generate_parachain_colors
from corematch.support import SupportedRelayRuntime


class FirstPick:
    def randrange(self, stop):
        return 0


def test_new_state_is_initializing():
    state = NetworkState(SupportedRelayRuntime.POLKADOT)
    assert state.is_initializing()
    assert not state.is_active()
    assert not state.is_switching()
    assert state.parachain_colors == {}


def test_switching():
    state = NetworkState(SupportedRelayRuntime.KUSAMA, status=NetworkStatus.SWITCHING)
    assert state.is_switching()


def test_is_valid_requires_subscription():
    state = NetworkState(SupportedRelayRuntime.POLKADOT, status=NetworkStatus.ACTIVE)
    assert not state.is_valid(7)


def test_is_valid_matches_active_subscription():
    state = NetworkState(
        SupportedRelayRuntime.POLKADOT, status=NetworkStatus.ACTIVE, subscription_id=7
    )
    assert state.is_valid(7)
    assert not state.is_valid(8)


def test_is_valid_requires_active():
    state = NetworkState(
        SupportedRelayRuntime.POLKADOT, status=NetworkStatus.SWITCHING, subscription_id=7
    )
    assert not state.is_valid(7)


def test_css_class():
    assert NetworkState(SupportedRelayRuntime.KUSAMA).css_class() == "kusama"


def test_colors_empty():
    assert generate_parachain_colors([]) == {}


def test_colors_single():
    assert generate_parachain_colors([1000], random.Random(1)) == {1000: (0, 96, 68)}


def test_colors_cover_all_ids_with_distinct_hues():
    para_ids = [2000, 1000, 3000, 4000]
    colors = generate_parachain_colors(para_ids, random.Random(3))
    assert sorted(colors) == sorted(para_ids)
    assert list(colors) == sorted(para_ids)
    hues = [color[0] for color in colors.values()]
    assert len(set(hues)) == len(para_ids)
    assert all(color[1:] == (96, 68) for color in colors.values())


def test_colors_deterministic_with_seed():
    para_ids = list(range(1000, 1010))
    first = generate_parachain_colors(para_ids, random.Random(42))
    second = generate_parachain_colors(para_ids, random.Random(42))
    assert first == second


def test_colors_first_pick_keeps_order():
    colors = generate_parachain_colors([1000, 2000, 3000], FirstPick())
    assert [colors[p][0] for p in (1000, 2000, 3000)] == [0, 120, 240]