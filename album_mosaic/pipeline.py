"""Wire fetching, extraction and slot assignment together."""

from __future__ import annotations

import logging
from typing import Sequence

from .crawl.fetch import DEFAULT_RELAY, DEFAULT_TIMEOUT, fetch_text
from .extract.descriptors import extract_photos
from .io.models import GalleryReport, Photo, Placement
from .layout.slots import assign_layout

logger = logging.getLogger(__name__)


def place_photos(photos: Sequence[Photo]) -> list[Placement]:
    """Pair each photo with the slot for its position, preserving order."""
    slots = assign_layout(len(photos))
    return [
        Placement(index=index, photo=photo, slot=slot)
        for index, (photo, slot) in enumerate(zip(photos, slots))
    ]


def gallery_from_text(source_text: str | None, source_url: str | None = None) -> GalleryReport:
    """Build a gallery report from already retrieved page text."""
    if source_text is None:
        logger.warning("No page text for %s; gallery unavailable", source_url)
        return GalleryReport(source_url=source_url, fetched=False)
    photos = extract_photos(source_text)
    return GalleryReport(
        source_url=source_url, fetched=True, placements=place_photos(photos)
    )


def build_gallery(
    album_url: str,
    relay: str | None = DEFAULT_RELAY,
    timeout: float = DEFAULT_TIMEOUT,
) -> GalleryReport:
    """Fetch *album_url* and lay out the photos embedded in it.

    A failed fetch produces a report with no placements rather than an error.
    """
    text = fetch_text(album_url, relay=relay, timeout=timeout)
    return gallery_from_text(text, source_url=album_url)
