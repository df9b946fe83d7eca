"""Output helpers for persisting gallery results."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from .models import GalleryReport


def report_payload(report: GalleryReport) -> dict[str, Any]:
    """Return a JSON-serialisable mapping describing *report*."""
    return {
        "source_url": report.source_url,
        "fetched": report.fetched,
        "photos": report.photos,
        "placements": [asdict(placement) for placement in report.placements],
    }


def write_manifest(path: Path, report: GalleryReport) -> Path:
    """Write *report* to *path* as JSON and return the path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(report_payload(report), indent=2),
        encoding="utf-8",
    )
    return path
