"""Loading the label catalog and the initial selection from a JSON file."""

import json
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from pydantic import BaseModel, Field

from label_picker.core.availability import find_by_name
from label_picker.models import Label


logger = logging.getLogger(__name__)


class CatalogFile(BaseModel):
    """On-disk shape: ``{"labels": [...], "selected": ["name", ...]}``."""

    labels: list[Label] = Field(default_factory=list)
    selected: list[str] = Field(default_factory=list)

    def selected_labels(self) -> list[Label]:
        return resolve_selected(self.labels, self.selected)


def resolve_selected(labels: Sequence[Label], names: Iterable[str]) -> list[Label]:
    """Resolve selected names against the catalog, in selection order.

    Names missing from the catalog are skipped with a warning.
    """
    resolved: list[Label] = []
    for name in names:
        label = find_by_name(labels, name)
        if label is None:
            logger.warning("Selected label %r is not in the catalog", name)
            continue
        resolved.append(label)
    return resolved


def load_catalog(path: Path) -> tuple[list[Label], list[Label]]:
    """Read a catalog file.

    Returns:
        Tuple of (catalog labels, selected labels)

    Raises:
        OSError: If the file can't be read
        ValueError: If the file is not a valid catalog document
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    catalog = CatalogFile.model_validate(data)
    return catalog.labels, catalog.selected_labels()
