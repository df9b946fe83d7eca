"""Positional slot assignment for the mosaic grid."""

from __future__ import annotations

from typing import Mapping

from ..extract.descriptors import MAX_ITEMS
from ..io.models import SizeClass, SlotSpec

# 1 large, 4 small, 1 wide
_SLOT_TABLE: Mapping[int, SlotSpec] = {
    0: SlotSpec(SizeClass.LARGE, has_overlay=True),
    5: SlotSpec(SizeClass.WIDE, has_overlay=True),
}
_DEFAULT_SLOT = SlotSpec(SizeClass.SMALL, has_overlay=False)


class InvalidLayoutCount(ValueError):
    """Raised when a layout is requested for an unsupported number of items."""

    def __init__(self, count: int) -> None:
        super().__init__(f"Layout count must be between 0 and {MAX_ITEMS}, got {count}")
        self.count = count


def slot_for_index(index: int) -> SlotSpec:
    """Return the slot for ordinal *index*."""
    if index < 0:
        raise ValueError(f"Slot index must be non-negative, got {index}")
    return _SLOT_TABLE.get(index, _DEFAULT_SLOT)


def assign_layout(count: int) -> list[SlotSpec]:
    """Return one slot per position for a grid of *count* items."""
    if not 0 <= count <= MAX_ITEMS:
        raise InvalidLayoutCount(count)
    return [slot_for_index(index) for index in range(count)]
