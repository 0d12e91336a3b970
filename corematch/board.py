"""The 3x3 grid of cells, its match counters and the keyboard cursor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from corematch.block import Block
from corematch.game import GameLevel
from corematch.keyboard import SupportedKeys

DEFAULT_TOTAL_BLOCKS = 9
GRID_SIZE = 3

Position = Tuple[int, int]


def _empty_cells() -> List[Optional[Block]]:
    return [None] * DEFAULT_TOTAL_BLOCKS


@dataclass
class Board:
    """Cells ordered newest first, with a count of cells per pattern hash."""

    blocks: List[Optional[Block]] = field(default_factory=_empty_cells)
    matches: Dict[bytes, int] = field(default_factory=dict)
    cursor_position: Position = (0, 0)

    def push_block(self, block: Block, level: GameLevel) -> Optional[Block]:
        """Put ``block`` in the first cell and drop the oldest one.

        Returns the block that fell off the board, if any.
        """
        self.blocks.insert(0, block)
        block_hash = block.corespace_hash(level)
        self.matches[block_hash] = self.matches.get(block_hash, 0) + 1
        if len(self.blocks) <= DEFAULT_TOTAL_BLOCKS:
            return None
        dropped = self.blocks.pop()
        if dropped is not None:
            dropped_hash = dropped.corespace_hash(level)
            counter = self.matches.get(dropped_hash)
            if counter is not None:
                if counter >= 1:
                    counter -= 1
                if counter == 0:
                    del self.matches[dropped_hash]
                else:
                    self.matches[dropped_hash] = counter
        return dropped

    def recount_matches(self, level: GameLevel) -> None:
        """Rebuild the pattern counters from the cells on the board."""
        counts: Dict[bytes, int] = {}
        for block in self.blocks:
            if block is not None:
                block_hash = block.corespace_hash(level)
                counts[block_hash] = counts.get(block_hash, 0) + 1
        self.matches = counts

    def repeated_hashes(self) -> List[bytes]:
        """Pattern hashes seen on more than one cell, in ascending order."""
        return sorted(h for h, counter in self.matches.items() if counter > 1)

    def release_match(self, block_hash: bytes) -> None:
        """Take a matched pair of cells off the counter for ``block_hash``."""
        counter = self.matches.get(block_hash)
        if counter is not None and counter >= 2:
            self.matches[block_hash] = counter - 2

    def block_at(self, index: int) -> Optional[Block]:
        """The block in cell ``index``, or None when empty or off the board."""
        if 0 <= index < len(self.blocks):
            return self.blocks[index]
        return None

    def cursor_index(self) -> int:
        """Cell index under the cursor."""
        x, y = self.cursor_position
        return y * GRID_SIZE + x

    def set_cursor_index(self, index: int) -> None:
        """Move the cursor onto cell ``index``."""
        if index < 0:
            raise ValueError(f"cell index must not be negative: {index}")
        self.cursor_position = (index % GRID_SIZE, index // GRID_SIZE)

    def next_cursor_position(self, key: SupportedKeys) -> Position:
        """Where an arrow key would take the cursor, wrapping at the edges."""
        x, y = self.cursor_position
        last = GRID_SIZE - 1
        if key is SupportedKeys.UP:
            return (x, last if y == 0 else y - 1)
        if key is SupportedKeys.DOWN:
            return (x, 0 if y == last else y + 1)
        if key is SupportedKeys.LEFT:
            return (last if x == 0 else x - 1, y)
        if key is SupportedKeys.RIGHT:
            return (0 if x == last else x + 1, y)
        return (x, y)

    def reset_blocks(self) -> None:
        """Drop the state marks of every cell on the board."""
        for block in self.blocks:
            if block is not None:
                block.reset()

    def clear(self) -> None:
        """Empty every cell; the pattern counters are left as they are."""
        self.blocks = _empty_cells()