"""Command-line interface for the album_mosaic project."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Iterable

from .crawl.fetch import DEFAULT_RELAY, DEFAULT_TIMEOUT, fetch_text
from .extract.descriptors import iter_descriptors
from .io.models import GalleryReport
from .io.outputs import write_manifest
from .pipeline import gallery_from_text
from .render.html import render_gallery, render_page

MANIFEST_NAME = "gallery.json"
HTML_NAME = "gallery.html"


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments for the album mosaic pipeline."""
    parser = argparse.ArgumentParser(
        description="Extract photos from a public album page and lay them out as a mosaic."
    )
    parser.add_argument("album_url", help="URL of the public album page.")
    relay_group = parser.add_mutually_exclusive_group()
    relay_group.add_argument(
        "--relay",
        default=DEFAULT_RELAY,
        help="Relay URL prefix the album URL is appended to (default: %(default)s).",
    )
    relay_group.add_argument(
        "--no-relay",
        action="store_true",
        help="Fetch the album URL directly instead of through a relay.",
    )
    parser.add_argument(
        "--out",
        default=None,
        help="Directory where gallery.json and gallery.html will be written.",
    )
    parser.add_argument(
        "--html",
        default=None,
        help="Path of a file to write the rendered HTML fragment to.",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="HTTP timeout in seconds (default: %(default)s).",
    )
    parser.add_argument(
        "--debug-descriptors",
        action="store_true",
        help="Print the raw descriptors found in the page before filtering.",
    )
    parser.add_argument(
        "--debug-limit",
        type=int,
        metavar="N",
        default=10,
        help="Number of raw descriptors shown by --debug-descriptors (default: %(default)s).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(list(argv) if argv is not None else None)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )


def _debug_descriptors(text: str | None, limit: int) -> None:
    """Print the first *limit* raw descriptors found in *text*."""
    if limit <= 0:
        return
    if not text:
        print("[descriptors] (no text)")
        return
    shown = 0
    for url, width, height in iter_descriptors(text):
        shown += 1
        print(f"  {shown}. {width}x{height} -> {url}")
        if shown >= limit:
            break
    if not shown:
        print("[descriptors] (no descriptors)")


def _print_summary(report: GalleryReport) -> None:
    print(report.photos)
    if not report.fetched:
        print(f"[warn] {report.source_url}: no page text fetched")
    elif not report.available:
        print(f"[warn] {report.source_url}: no photos found")
    for placement in report.placements:
        overlay = " +overlay" if placement.slot.has_overlay else ""
        print(
            f"[photos] {placement.index + 1}. {placement.slot.size_class.value}{overlay}"
            f" ({placement.photo.width}x{placement.photo.height}) -> {placement.photo.url}"
        )


def main(argv: Iterable[str] | None = None) -> int:
    """Entry point for the CLI."""
    args = parse_args(argv)
    _configure_logging(args.verbose)

    relay = None if args.no_relay else args.relay
    text = fetch_text(args.album_url, relay=relay, timeout=args.timeout)
    if args.debug_descriptors:
        _debug_descriptors(text, args.debug_limit)

    report = gallery_from_text(text, source_url=args.album_url)
    _print_summary(report)

    fragment = render_gallery(report.placements)
    if args.out:
        out_dir = Path(args.out)
        manifest_path = write_manifest(out_dir / MANIFEST_NAME, report)
        print(f"[saved] {manifest_path}")
        html_path = out_dir / HTML_NAME
        html_path.write_text(render_page(fragment), encoding="utf-8")
        print(f"[saved] {html_path}")
    if args.html:
        html_path = Path(args.html)
        html_path.parent.mkdir(parents=True, exist_ok=True)
        html_path.write_text(fragment, encoding="utf-8")
        print(f"[saved] {html_path}")
    if not args.out and not args.html:
        print(fragment)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
