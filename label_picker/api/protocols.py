from __future__ import annotations

from typing import Protocol

from label_picker.models import Label


class LabelCreator(Protocol):
    """Protocol for backends that persist newly created labels."""

    async def create_label(self, name: str, properties: dict[str, str]) -> Label:
        """Create a label.

        Args:
            name: Display name of the new label.
            properties: Opaque key/value properties such as ``color``.

        Returns:
            The created label, carrying the id assigned by the backend.
        """
        ...
