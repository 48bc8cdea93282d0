"""JSON rendering of a release collection.

The document has the shape::

    {"releases": [{"version": ..., "commits": [...], "commit_id": ...,
                   "timestamp": ...}, ...]}

Absent optional values are written as ``null``. The ``previous`` link is
not written: the list already carries every release, and a chain position
has no meaning outside its chain.
"""

from __future__ import annotations

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from .errors import SerializationError
from .models import Release


class Releases(BaseModel):
    """An ordered view over releases, used only for serialization."""

    releases: list[Release]

    def as_json(self, indent: int | None = None) -> str:
        """Return the collection as a JSON document.

        Raises:
            SerializationError: If any release cannot be encoded.
        """
        try:
            return self.model_dump_json(by_alias=True, indent=indent)
        except PydanticSerializationError as exc:
            raise SerializationError(f"Cannot encode releases: {exc}") from exc

    @classmethod
    def from_json(cls, text: str | bytes) -> Releases:
        """Decode a document produced by as_json.

        Raises:
            SerializationError: If the text is not a valid releases document.
        """
        try:
            return cls.model_validate_json(text)
        except ValidationError as exc:
            raise SerializationError(f"Cannot decode releases: {exc}") from exc
