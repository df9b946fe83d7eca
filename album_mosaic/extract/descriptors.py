"""Discover embedded photo descriptors within album page markup."""

from __future__ import annotations

import logging
import re
from typing import Iterator

from ..io.models import Photo

logger = logging.getLogger(__name__)

HOST_PREFIX = "https://lh3.googleusercontent.com/"
THRESHOLD = 300
MAX_ITEMS = 6

RawDescriptor = tuple[str, str, str]

# ["<url>",<width>,<height>]
_DESCRIPTOR_PATTERN = re.compile(
    r'\["(' + re.escape(HOST_PREFIX) + r'[^"]+)",(\d+),(\d+)\]',
    re.ASCII,
)


def iter_descriptors(source_text: str | None) -> Iterator[RawDescriptor]:
    """Yield every raw ``(url, width, height)`` descriptor in *source_text*.

    Descriptors are produced in source order, before any size filtering or
    deduplication is applied.
    """
    if not source_text:
        return
    for match in _DESCRIPTOR_PATTERN.finditer(source_text):
        yield match.group(1), match.group(2), match.group(3)


def extract_photos(source_text: str | None) -> list[Photo]:
    """Return up to ``MAX_ITEMS`` distinct, large photos found in *source_text*.

    Photos are returned in order of first occurrence. Candidates with a
    dimension of ``THRESHOLD`` pixels or less are ignored, as are repeats of
    an already accepted URL. Scanning stops as soon as the quota is reached.
    Malformed or empty input yields an empty list.
    """
    photos: list[Photo] = []
    seen: set[str] = set()

    for url, raw_width, raw_height in iter_descriptors(source_text):
        width = _parse_dimension(raw_width)
        height = _parse_dimension(raw_height)
        if width is None or height is None:
            logger.debug("Skipping %s: unparseable dimensions", url)
            continue
        if width <= THRESHOLD or height <= THRESHOLD:
            logger.debug("Skipping %s: %dx%d below threshold", url, width, height)
            continue
        if url in seen:
            logger.debug("Skipping %s: duplicate", url)
            continue
        seen.add(url)
        photos.append(Photo(url=url, width=width, height=height))
        if len(photos) >= MAX_ITEMS:
            break

    logger.info("Found %d valid photos", len(photos))
    return photos


def _parse_dimension(value: str) -> int | None:
    try:
        return int(value, 10)
    except (TypeError, ValueError):
        return None
