"""Column indicators for attempts and helps left."""

from __future__ import annotations

from typing import List


def column_boxes(max_value: int, value: int) -> List[bool]:
    """One flag per box: True for each one still available, then False."""
    if value < 0 or max_value < value:
        raise ValueError("value must lie between 0 and max_value")
    return [True] * value + [False] * (max_value - value)


def column_title(value: int, title: str) -> str:
    """Tooltip such as '3 attempts left!'."""
    return f"{value} {title}"