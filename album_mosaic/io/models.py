"""Data models shared across the album mosaic pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class SizeClass(str, Enum):
    """Size treatment of a grid slot."""

    LARGE = "large"
    SMALL = "small"
    WIDE = "wide"


@dataclass(frozen=True, slots=True)
class Photo:
    """An accepted image reference found in album markup."""

    url: str
    width: int
    height: int


@dataclass(frozen=True, slots=True)
class SlotSpec:
    """Visual role assigned to one ordinal position in the grid."""

    size_class: SizeClass
    has_overlay: bool


@dataclass(frozen=True, slots=True)
class Placement:
    """A photo paired with the slot it occupies."""

    index: int
    photo: Photo
    slot: SlotSpec


@dataclass(slots=True)
class GalleryReport:
    """Summary of a single gallery build."""

    source_url: str | None
    fetched: bool
    placements: List[Placement] = field(default_factory=list)

    @property
    def photos(self) -> int:
        return len(self.placements)

    @property
    def available(self) -> bool:
        return bool(self.placements)
