"""Tests for the fetch, extract and layout wiring."""

import logging
from unittest.mock import patch

from album_mosaic.extract.descriptors import HOST_PREFIX
from album_mosaic.io.models import Photo, SizeClass
from album_mosaic.pipeline import build_gallery, gallery_from_text, place_photos


def _descriptor(name: str, width: int = 800, height: int = 600) -> str:
    return f'["{HOST_PREFIX}{name}",{width},{height}]'


def test_place_photos_preserves_order_and_assigns_slots():
    photos = [Photo(url=f"{HOST_PREFIX}{i}", width=400, height=400) for i in range(6)]
    placements = place_photos(photos)
    assert [p.photo for p in placements] == photos
    assert [p.index for p in placements] == list(range(6))
    assert placements[0].slot.size_class is SizeClass.LARGE
    assert placements[5].slot.size_class is SizeClass.WIDE
    assert [p.slot.has_overlay for p in placements] == [True, False, False, False, False, True]


def test_place_photos_empty():
    assert place_photos([]) == []


def test_gallery_from_text_without_text_is_unavailable():
    report = gallery_from_text(None, source_url="https://photos.app.goo.gl/x")
    assert report.fetched is False
    assert report.photos == 0
    assert not report.available


def test_gallery_from_text_with_no_descriptors_is_fetched_but_empty():
    report = gallery_from_text("<html></html>")
    assert report.fetched is True
    assert report.placements == []


def test_build_gallery_uses_fetched_text():
    html = "".join(_descriptor(f"p{i}") for i in range(8))
    with patch("album_mosaic.pipeline.fetch_text", return_value=html) as fetch:
        report = build_gallery("https://photos.app.goo.gl/album", relay=None)
    fetch.assert_called_once()
    assert fetch.call_args.args == ("https://photos.app.goo.gl/album",)
    assert fetch.call_args.kwargs["relay"] is None
    assert report.fetched is True
    assert report.photos == 6
    assert report.source_url == "https://photos.app.goo.gl/album"


def test_build_gallery_degrades_on_fetch_failure():
    with patch("album_mosaic.pipeline.fetch_text", return_value=None):
        report = build_gallery("https://photos.app.goo.gl/album")
    assert report.fetched is False
    assert report.placements == []


def test_gallery_from_text_logs_unavailable_gallery(caplog):
    with caplog.at_level(logging.WARNING, logger="album_mosaic.pipeline"):
        gallery_from_text(None, source_url="https://photos.app.goo.gl/x")
    assert "gallery unavailable" in caplog.text
