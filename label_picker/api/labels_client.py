"""API client for the label catalog endpoints."""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from label_picker.api.http_client import BaseHttpClient, HttpClientError
from label_picker.models import Label


logger = logging.getLogger(__name__)

LABELS_PATH = "/api/v2/labels"


class LabelsApiError(Exception):
    """Exception raised for label API errors."""

    pass


class LabelsApiClient(BaseHttpClient):
    """Client for listing and creating labels on a label server."""

    def __init__(
        self,
        server_url: str,
        api_token: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(server_url, timeout=timeout, transport=transport)
        self.api_token = api_token
        self._headers = {"Content-Type": "application/json"}
        if api_token:
            self._headers["Authorization"] = f"Token {api_token}"

    async def list_labels(self) -> list[Label]:
        """Fetch the full label catalog."""
        try:
            response = await self.get(LABELS_PATH, headers=self._headers)
        except HttpClientError as e:
            raise LabelsApiError(f"Request to {LABELS_PATH!r} failed: {e}") from e

        try:
            body = response.json()
        except ValueError as e:
            raise LabelsApiError("Label list response is not JSON") from e

        items = body.get("labels", []) if isinstance(body, dict) else body
        if not isinstance(items, list):
            raise LabelsApiError("Malformed label list response")

        try:
            return [Label.model_validate(item) for item in items]
        except ValidationError as e:
            raise LabelsApiError(f"Malformed label in response: {e}") from e

    async def create_label(self, name: str, properties: dict[str, str]) -> Label:
        """Create a label and return it with its server-assigned id."""
        payload: dict[str, Any] = {"name": name, "properties": properties}
        try:
            response = await self.post(
                LABELS_PATH, json_data=payload, headers=self._headers
            )
        except HttpClientError as e:
            raise LabelsApiError(f"Failed to create label {name!r}: {e}") from e

        try:
            body = response.json()
        except ValueError as e:
            raise LabelsApiError(f"Create response for {name!r} is not JSON") from e

        data = body.get("label", body) if isinstance(body, dict) else None
        try:
            label = Label.model_validate(data)
        except ValidationError as e:
            raise LabelsApiError(f"Malformed create response for {name!r}") from e

        logger.info("Created label %s (%s)", label.name, label.id)
        return label
