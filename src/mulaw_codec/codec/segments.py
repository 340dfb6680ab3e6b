"""Segment boundary table shared by the μ-law encoder."""
from __future__ import annotations

from typing import Sequence

# Upper end of each of the 8 exponential segments (biased, 14-bit magnitude).
SEG_UEND: tuple[int, ...] = (0x3F, 0x7F, 0xFF, 0x1FF, 0x3FF, 0x7FF, 0xFFF, 0x1FFF)


def search(value: int, table: Sequence[int] = SEG_UEND) -> int:
    """Return the index of the first threshold >= ``value``, or ``len(table)`` if none."""

    for index, upper in enumerate(table):
        if value <= upper:
            return index
    return len(table)
