"""Render slot placements as an HTML grid fragment."""

from __future__ import annotations

from typing import Sequence

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..io.models import Placement, SizeClass

UNAVAILABLE_MESSAGE = "Não foi possível carregar as fotos no momento."
DEFAULT_ALT_TEXT = "Foto da Galeria CuidaPet"
DEFAULT_CAPTION = "Paciente CuidaPet"
DEFAULT_SUBCAPTION = "Atendimento Domiciliar"

_CARD_CLASSES = "relative group overflow-hidden rounded-3xl shadow-md cursor-pointer bg-gray-100"
_SIZE_CLASSES: dict[SizeClass, str] = {
    SizeClass.LARGE: "col-span-2 row-span-2",
    SizeClass.WIDE: "col-span-2",
    SizeClass.SMALL: "",
}
_IMG_CLASSES = (
    "w-full h-full object-cover transition-transform duration-700 "
    "group-hover:scale-110"
)
_OVERLAY_CLASSES = (
    "absolute inset-0 bg-gradient-to-t from-black/70 via-transparent "
    "to-transparent opacity-0 group-hover:opacity-100 transition-opacity "
    "duration-300 flex flex-col justify-end p-6"
)
_CAPTION_CLASSES = (
    "text-white font-bold text-xl translate-y-4 group-hover:translate-y-0 "
    "transition-transform"
)
_SUBCAPTION_CLASSES = (
    "text-brand-light text-sm translate-y-4 group-hover:translate-y-0 "
    "transition-transform delay-75"
)
_UNAVAILABLE_CLASSES = "text-center text-gray-500 col-span-full"


def render_gallery(
    placements: Sequence[Placement],
    alt_text: str = DEFAULT_ALT_TEXT,
    caption: str = DEFAULT_CAPTION,
    subcaption: str = DEFAULT_SUBCAPTION,
) -> str:
    """Return the grid items for *placements* as an HTML fragment.

    An empty sequence renders the unavailable message instead of an empty
    grid.
    """
    soup = BeautifulSoup("", "lxml")
    if not placements:
        message = soup.new_tag("p", attrs={"class": _UNAVAILABLE_CLASSES})
        message.string = UNAVAILABLE_MESSAGE
        return str(message)

    items = [
        _build_item(soup, placement, alt_text, caption, subcaption)
        for placement in placements
    ]
    return "".join(str(item) for item in items)


def render_page(fragment: str, container_id: str = "gallery-grid") -> str:
    """Wrap *fragment* in the grid container element."""
    soup = BeautifulSoup("", "lxml")
    container = soup.new_tag("div", attrs={"id": container_id})
    content = BeautifulSoup(fragment, "lxml")
    body = content.body
    children = list(body.children) if body is not None else []
    for child in children:
        container.append(child.extract())
    return str(container)


def _build_item(
    soup: BeautifulSoup,
    placement: Placement,
    alt_text: str,
    caption: str,
    subcaption: str,
) -> Tag:
    size = _SIZE_CLASSES[placement.slot.size_class]
    classes = f"{_CARD_CLASSES} {size}" if size else _CARD_CLASSES
    item = soup.new_tag(
        "div",
        attrs={
            "class": classes,
            "data-slot": placement.slot.size_class.value,
            "data-index": str(placement.index),
        },
    )

    if placement.slot.has_overlay:
        overlay = soup.new_tag("div", attrs={"class": _OVERLAY_CLASSES})
        title = soup.new_tag("p", attrs={"class": _CAPTION_CLASSES})
        title.string = caption
        detail = soup.new_tag("p", attrs={"class": _SUBCAPTION_CLASSES})
        detail.string = subcaption
        overlay.append(title)
        overlay.append(detail)
        item.append(overlay)

    image = soup.new_tag(
        "img",
        attrs={
            "src": placement.photo.url,
            "alt": alt_text,
            "class": _IMG_CLASSES,
            "loading": "lazy",
            "width": str(placement.photo.width),
            "height": str(placement.photo.height),
        },
    )
    item.append(image)
    return item
