"""Availability filter: which catalog labels can still be offered."""

from collections.abc import Sequence

from label_picker.models import Label


def difference_by_name(
    labels: Sequence[Label], selected: Sequence[Label]
) -> list[Label]:
    """Return ``labels`` without any label whose name appears in ``selected``.

    Membership is keyed by ``name``, not ``id``. The relative order of
    ``labels`` is preserved.
    """
    selected_names = {label.name for label in selected}
    return [label for label in labels if label.name not in selected_names]


def compute_available(
    catalog: Sequence[Label],
    selected: Sequence[Label],
    filter_text: str,
) -> list[Label]:
    """Compute the candidate list for the given filter text.

    Args:
        catalog: Every known label, in display order
        selected: Labels already attached to the entity
        filter_text: Current search input; ``""`` disables filtering

    Returns:
        Catalog labels that are not selected and, when ``filter_text`` is
        non-empty, whose name contains it (case-sensitive)
    """
    available = difference_by_name(catalog, selected)
    if not filter_text:
        return available
    return [label for label in available if filter_text in label.name]


def find_by_id(labels: Sequence[Label], label_id: str | None) -> Label | None:
    """Return the label whose ``id`` is ``label_id``, or None."""
    if label_id is None:
        return None
    return next((label for label in labels if label.id == label_id), None)


def find_by_name(labels: Sequence[Label], name: str) -> Label | None:
    """Return the first label called ``name``, or None."""
    return next((label for label in labels if label.name == name), None)


def all_labels_used(catalog: Sequence[Label], selected: Sequence[Label]) -> bool:
    """True when no catalog label is left to offer."""
    return not difference_by_name(catalog, selected)
