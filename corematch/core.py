"""Cores of a relay chain and how they are drawn inside a cell."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

Color = Tuple[int, int, int]


class BlockView(Enum):
    """Which face of a cell is shown."""

    CORES = "core usage"
    PALETTE = "block palette"

    def __str__(self) -> str:
        return self.value


class CoreViewKind(Enum):
    """How cores are coloured."""

    NOT_APPLICABLE = "not_applicable"
    BINARY = "binary"
    MULTI = "multi"


@dataclass
class CoreView:
    """Colouring of cores; MULTI views carry an HSL colour per para id."""

    kind: CoreViewKind
    colors: Dict[int, Color] = field(default_factory=dict)

    def _require_applicable(self) -> None:
        if self.kind is CoreViewKind.NOT_APPLICABLE:
            raise ValueError("core view is not applicable")

    def css_class(self, para_id: Optional[int]) -> str:
        """Style class of a core occupied by ``para_id`` (None when free)."""
        self._require_applicable()
        if para_id is None:
            return "core__0"
        if self.kind is CoreViewKind.BINARY:
            return "core__1"
        return f"para__{para_id}"

    def style(self, para_id: Optional[int]) -> Optional[str]:
        """Inline style of a core, or None when no colour applies."""
        self._require_applicable()
        if self.kind is CoreViewKind.BINARY or para_id is None:
            return None
        color = self.colors.get(para_id)
        if color is None:
            return None
        hue, saturation, lightness = color
        return f"background-color: hsl({hue} {saturation}% {lightness}%);"


@dataclass(frozen=True)
class Core:
    """One core: its position and the parachain occupying it, if any."""

    index: int
    para_id: Optional[int] = None