"""Keyboard navigation of the highlighted candidate."""

from collections.abc import Sequence
from enum import IntEnum

from label_picker.models import Label


class ArrowDirection(IntEnum):
    UP = -1
    DOWN = 1


def move_highlight(
    current: str | None,
    available: Sequence[Label],
    direction: ArrowDirection,
) -> str | None:
    """Move the highlight one step, clamping at both ends of ``available``.

    ``current`` is looked up by label *name* while the returned value is the
    *id* of the newly highlighted label. Callers that feed the result back in
    must translate it to a name first (see ``LabelEditorController``).

    Returns ``current`` unchanged when there is nothing to move over or
    nothing highlighted.
    """
    if not available or current is None:
        return current

    index = next(
        (i for i, label in enumerate(available) if label.name == current),
        -1,
    )
    adjacent = min(max(index + direction, 0), len(available) - 1)
    return available[adjacent].id
