from typing import Any, ClassVar, Optional

from pydantic import Field, field_validator
from typing_extensions import Literal

from .base import Value
from ....utils.ids import ITEM_ID_PATTERN


class EntityValue(Value):
    """Reference to another item.

    The REST API sends just the id ("Q42"); legacy payloads repeat it as
    ``entity-type`` and ``numeric-id``, which are kept when present.
    """

    kind: Literal["wikibase_item"] = Field(default="wikibase_item", frozen=True)
    id: str
    entity_type: Optional[str] = None
    numeric_id: Optional[int] = None

    wikibase_type: ClassVar[str] = "wikibase-item"

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        if not ITEM_ID_PATTERN.fullmatch(v):
            raise ValueError(f"Entity id must be in the format 'Q123', got: {v}")
        return v

    @classmethod
    def from_content(cls, content: Any) -> "EntityValue":
        if isinstance(content, str):
            return cls(id=content)
        entity_id = content.get("id")
        numeric_id = content.get("numeric-id")
        if entity_id is None and numeric_id is not None:
            entity_id = f"Q{numeric_id}"
        return cls(
            id=entity_id,
            entity_type=content.get("entity-type"),
            numeric_id=numeric_id,
        )

    def to_content(self) -> str:
        return self.id
