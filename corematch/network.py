"""State of the connection to the relay chain being followed."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Optional

from corematch.core import Color
from corematch.support import SupportedRelayRuntime

STOP_SIGNAL = "stop"
CONTINUE_SIGNAL = "continue"


class NetworkStatus(Enum):
    """Lifecycle of the block subscription."""

    INITIALIZING = "initializing"
    SWITCHING = "switching"
    ACTIVE = "active"
    INACTIVE = "inactive"


@dataclass
class NetworkState:
    """The followed runtime, its subscription and the parachain colours."""

    runtime: SupportedRelayRuntime
    status: NetworkStatus = NetworkStatus.INITIALIZING
    subscription_id: Optional[int] = None
    parachain_colors: Dict[int, Color] = field(default_factory=dict)

    def is_initializing(self) -> bool:
        return self.status is NetworkStatus.INITIALIZING

    def is_active(self) -> bool:
        return self.status is NetworkStatus.ACTIVE

    def is_switching(self) -> bool:
        return self.status is NetworkStatus.SWITCHING

    def is_valid(self, subscription_id: int) -> bool:
        """True when data from ``subscription_id`` belongs to the active subscription."""
        return (
            self.subscription_id is not None
            and self.status is NetworkStatus.ACTIVE
            and self.subscription_id == subscription_id
        )

    def css_class(self) -> str:
        return self.runtime.css_class()


def generate_parachain_colors(
    para_ids: Iterable[int], rng: Optional[random.Random] = None
) -> Dict[int, Color]:
    """Give each para id a distinct hue, spread evenly and shuffled by ``rng``."""
    ids = list(para_ids)
    rng = rng if rng is not None else random.Random()
    count = len(ids)
    colors = [(360 // count * i, 96, 68) for i in range(count)] if count else []
    assigned = {}
    for para_id in ids:
        assigned[para_id] = colors.pop(rng.randrange(len(colors)))
    return dict(sorted(assigned.items()))