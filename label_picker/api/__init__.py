"""Label creation backends."""

from label_picker.api.http_client import BaseHttpClient, HttpClientError
from label_picker.api.labels_client import LabelsApiClient, LabelsApiError
from label_picker.api.memory_store import InMemoryLabelStore
from label_picker.api.protocols import LabelCreator


__all__ = [
    "BaseHttpClient",
    "HttpClientError",
    "InMemoryLabelStore",
    "LabelCreator",
    "LabelsApiClient",
    "LabelsApiError",
]
