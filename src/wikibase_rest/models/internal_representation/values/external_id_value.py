from typing import ClassVar

from pydantic import Field
from typing_extensions import Literal

from .base import Value, decode_string


class ExternalIdValue(Value):
    kind: Literal["external_id"] = Field(default="external_id", frozen=True)
    value: str

    wikibase_type: ClassVar[str] = "external-id"

    @classmethod
    def from_content(cls, content) -> "ExternalIdValue":
        return cls(value=decode_string(content))

    def to_content(self) -> str:
        return self.value
