"""Label color helpers."""

import hashlib

from label_picker.models import Label


LABEL_PALETTE = [
    "#DC4E58",
    "#F48D38",
    "#FFB94A",
    "#4ED8A0",
    "#22ADF6",
    "#326BBA",
    "#7A65F2",
    "#BE2EE4",
    "#BF3D5E",
    "#32B08C",
]


def color_for_label(name: str) -> str:
    """Pick a stable palette color for a label name."""
    digest = hashlib.md5(name.strip().lower().encode("utf-8")).digest()
    return LABEL_PALETTE[digest[0] % len(LABEL_PALETTE)]


def label_color(label: Label, default: str | None = None) -> str:
    """Resolve the display color of a label.

    Falls back to ``default`` and then to the name-derived palette color.
    """
    return label.color or default or color_for_label(label.name)
