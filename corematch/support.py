"""Relay-chain and parachain runtimes the game knows how to follow."""

from __future__ import annotations

from enum import Enum


class SupportedRelayRuntime(Enum):
    """A relay chain whose core usage feeds the game board."""

    POLKADOT = "Polkadot"
    KUSAMA = "Kusama"

    def __str__(self) -> str:
        return self.value

    def chain_prefix(self) -> int:
        """SS58 address prefix of the chain."""
        return _CHAIN_PREFIXES[self]

    def default_rpc_url(self) -> str:
        """RPC endpoint used to follow finalized blocks."""
        return _RPC_URLS[self]

    def default_people_rpc_url(self) -> str:
        """RPC endpoint of the chain's people parachain."""
        return _PEOPLE_RPC_URLS[self]

    def unit(self) -> str:
        """Ticker of the native token."""
        return _UNITS[self]

    def decimals(self) -> int:
        """Decimal places of the native token."""
        return _DECIMALS[self]

    def css_class(self) -> str:
        """Lower-case name used as a style class."""
        return str(self).lower()

    def columns_size(self) -> int:
        """Number of cores shown in one row of a cell."""
        return 8

    def hashtag(self) -> str:
        """Tag line appended to shared results."""
        return _HASHTAGS[self]


_CHAIN_PREFIXES = {
    SupportedRelayRuntime.POLKADOT: 0,
    SupportedRelayRuntime.KUSAMA: 2,
}

_RPC_URLS = {
    SupportedRelayRuntime.POLKADOT: "wss://rpc.ibp.network:443/polkadot",
    SupportedRelayRuntime.KUSAMA: "wss://rpc.ibp.network:443/kusama",
}

_PEOPLE_RPC_URLS = {
    SupportedRelayRuntime.POLKADOT: "wss://sys.ibp.network:443/people-polkadot",
    SupportedRelayRuntime.KUSAMA: "wss://sys.ibp.network:443/people-kusama",
}

_UNITS = {
    SupportedRelayRuntime.POLKADOT: "DOT",
    SupportedRelayRuntime.KUSAMA: "KSM",
}

_DECIMALS = {
    SupportedRelayRuntime.POLKADOT: 10,
    SupportedRelayRuntime.KUSAMA: 12,
}

_HASHTAGS = {
    SupportedRelayRuntime.POLKADOT: "@Polkadot #BuildOnPolkadot",
    SupportedRelayRuntime.KUSAMA: "@kusamanetwork #BuildOnKusama",
}

_NAMES = {
    "Polkadot": SupportedRelayRuntime.POLKADOT,
    "polkadot": SupportedRelayRuntime.POLKADOT,
    "DOT": SupportedRelayRuntime.POLKADOT,
    "Kusama": SupportedRelayRuntime.KUSAMA,
    "kusama": SupportedRelayRuntime.KUSAMA,
    "KSM": SupportedRelayRuntime.KUSAMA,
}

_PREFIX_LOOKUP = {prefix: runtime for runtime, prefix in _CHAIN_PREFIXES.items()}


def parse_relay_runtime(value: str | int | SupportedRelayRuntime) -> SupportedRelayRuntime:
    """Resolve a chain name, token ticker or SS58 prefix to a runtime.

    Raises ValueError for anything that is not supported.
    """
    if isinstance(value, SupportedRelayRuntime):
        return value
    if isinstance(value, str):
        runtime = _NAMES.get(value)
    elif isinstance(value, int) and not isinstance(value, bool):
        runtime = _PREFIX_LOOKUP.get(value)
    else:
        runtime = None
    if runtime is None:
        raise ValueError(f"Chain prefix not supported: {value!r}")
    return runtime


class SupportedParachainRuntime(Enum):
    """An asset-hub parachain where results could be stored."""

    ASSET_HUB_POLKADOT = "AssetHubPolkadot"
    ASSET_HUB_KUSAMA = "AssetHubKusama"

    def __str__(self) -> str:
        # Both variants share the same display name.
        return "AssetHub Polkadot"

    def default_rpc_url(self) -> str:
        """RPC endpoint of the parachain."""
        return "wss://sys.ibp.network/westmint"