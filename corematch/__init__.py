"""Memory game engine built on the core usage of finalized relay-chain blocks."""

__version__ = "0.1.0"

__all__ = [
    "block",
    "block_timer",
    "board",
    "core",
    "engine",
    "game",
    "keyboard",
    "network",
    "presentation",
    "support",
    "utils",
    "views",
]