"""A finalized block shown as a cell of cores on the board."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from typing import List, Optional

from corematch.core import Core
from corematch.game import GameLevel
from corematch.support import SupportedRelayRuntime

_RGB = {
    SupportedRelayRuntime.POLKADOT: "230, 0, 122",
    SupportedRelayRuntime.KUSAMA: "0, 0, 0",
}


def _format_alpha(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass
class Block:
    """A block number with its cores and the display state of its cell."""

    block_number: int
    corespace: List[Core]
    runtime: SupportedRelayRuntime
    selected_class: Optional[str] = None
    disable_class: Optional[str] = None
    missed_class: Optional[str] = None
    matched_class: Optional[str] = None
    help_class: Optional[str] = None
    anim_class: Optional[str] = None
    is_flipped: bool = field(default=False)

    def select(self) -> None:
        self.selected_class = "highlight"

    def unselect(self) -> None:
        self.selected_class = None

    def is_selected(self) -> bool:
        return self.selected_class is not None

    def match(self) -> None:
        self.matched_class = "matched"
        self.help_class = None

    def is_matched(self) -> bool:
        return self.matched_class is not None

    def disable(self) -> None:
        self.matched_class = None
        self.disable_class = "disabled"

    def is_disabled(self) -> bool:
        return self.disable_class is not None

    def miss(self) -> None:
        self.missed_class = "missed"

    def flip(self) -> None:
        """Start the flip animation and turn the cell over."""
        self.anim_class = "anim"
        self.is_flipped = not self.is_flipped

    def is_anim_live(self) -> bool:
        return self.anim_class is not None

    def clear(self) -> None:
        """Drop miss, help and animation marks."""
        self.missed_class = None
        self.help_class = None
        self.anim_class = None

    def is_help_available(self) -> bool:
        return self.matched_class is None

    def highlight_help(self) -> None:
        self.help_class = "help"

    def network_class(self) -> str:
        return self.runtime.css_class()

    def inline_style(self) -> str:
        """Background whose opacity follows the core usage."""
        alpha = _format_alpha(self.corespace_usage() / 100.0)
        return f"background-color: rgba({_RGB[self.runtime]}, {alpha});"

    def reset(self) -> None:
        """Drop every state mark except the animation."""
        self.selected_class = None
        self.disable_class = None
        self.missed_class = None
        self.matched_class = None
        self.help_class = None

    def classes(self) -> str:
        """Space separated style classes of the cell."""
        parts = [
            self.network_class(),
            self.selected_class,
            self.disable_class,
            self.missed_class,
            self.matched_class,
            self.help_class,
            self.anim_class,
        ]
        return " ".join(part for part in parts if part)

    def corespace_hash(self, game_level: GameLevel) -> bytes:
        """32-byte BLAKE2b digest of the pattern compared at ``game_level``."""
        if game_level is GameLevel.LEVEL1:
            data = bytes(1 if core.para_id is not None else 0 for core in self.corespace)
        else:
            data = b"".join(
                (core.para_id or 0).to_bytes(4, "little") for core in self.corespace
            )
        return hashlib.blake2b(data, digest_size=32).digest()

    def corespace_usage(self) -> int:
        """Percentage of occupied cores, rounded down."""
        if not self.corespace:
            raise ValueError("corespace is empty")
        filled = sum(1 for core in self.corespace if core.para_id is not None)
        return filled * 100 // len(self.corespace)

    def corespace_ascii(self) -> str:
        """Cores drawn as squares, one row per column width."""
        columns = self.runtime.columns_size()
        cells = []
        for position, core in enumerate(self.corespace, start=1):
            cell = "◾" if core.para_id is not None else "◻️"
            if position % columns == 0:
                cell += "\n"
            cells.append(cell)
        return "".join(cells)