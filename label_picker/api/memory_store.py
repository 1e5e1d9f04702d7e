"""In-memory label backend used when no label server is configured."""

import asyncio
import logging
import uuid
from collections.abc import Iterable

from label_picker.api.labels_client import LabelsApiError
from label_picker.models import Label


logger = logging.getLogger(__name__)


class InMemoryLabelStore:
    """Keeps created labels in process; ids are random uuid4 hex strings."""

    def __init__(self, labels: Iterable[Label] = (), latency: float = 0.0):
        self._labels: list[Label] = list(labels)
        self.latency = latency

    @property
    def labels(self) -> list[Label]:
        return list(self._labels)

    async def list_labels(self) -> list[Label]:
        return self.labels

    async def create_label(self, name: str, properties: dict[str, str]) -> Label:
        if self.latency:
            await asyncio.sleep(self.latency)

        name = name.strip()
        if not name:
            raise LabelsApiError("Label name must not be empty")
        if any(label.name == name for label in self._labels):
            raise LabelsApiError(f"Label {name!r} already exists")

        label = Label(id=uuid.uuid4().hex, name=name, properties=dict(properties))
        self._labels.append(label)
        logger.debug("Stored label %s in memory", name)
        return label
