"""Countdown shown between finalized blocks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

SIX_SECS_TARGET = 6


@dataclass
class BlockTimer:
    """Counts down from six seconds in tenths of a second."""

    seconds: int = SIX_SECS_TARGET
    milliseconds: int = 0

    def tick(self) -> bool:
        """Advance one tenth of a second; False once the countdown is done."""
        if self.seconds == 0 and self.milliseconds == 0:
            return False
        if self.milliseconds == 0:
            self.milliseconds = 9
            self.seconds -= 1
        else:
            self.milliseconds -= 1
        return True

    def reset(self) -> None:
        """Restart the countdown."""
        self.seconds = SIX_SECS_TARGET
        self.milliseconds = 0

    def label(self, block_number: Optional[int]) -> str:
        """Text with the block number and the remaining time."""
        number = 0 if block_number is None else block_number
        return f"#{number} / {self.seconds}.{self.milliseconds}s"