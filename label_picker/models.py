"""Label record shared by the core, the API clients and the widgets."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Label(BaseModel):
    """A named, identified tag that can be attached to an entity.

    ``name`` keys availability filtering. ``id`` keys the highlight cursor
    and the final selection against the catalog.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    properties: dict[str, str] = Field(default_factory=dict)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> str:
        """Accept numeric ids from servers that emit them."""
        if isinstance(v, int):
            return str(v)
        return v

    @property
    def color(self) -> str | None:
        return self.properties.get("color")
