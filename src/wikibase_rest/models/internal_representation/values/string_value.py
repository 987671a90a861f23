from typing import ClassVar

from pydantic import Field
from typing_extensions import Literal

from .base import Value, decode_string


class StringValue(Value):
    kind: Literal["string"] = Field(default="string", frozen=True)
    value: str

    wikibase_type: ClassVar[str] = "string"

    @classmethod
    def from_content(cls, content) -> "StringValue":
        return cls(value=decode_string(content))

    def to_content(self) -> str:
        return self.value
