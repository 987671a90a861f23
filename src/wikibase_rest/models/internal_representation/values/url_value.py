from typing import ClassVar

from pydantic import Field
from typing_extensions import Literal

from .base import Value, decode_string


class UrlValue(Value):
    kind: Literal["url"] = Field(default="url", frozen=True)
    value: str

    wikibase_type: ClassVar[str] = "url"

    @classmethod
    def from_content(cls, content) -> "UrlValue":
        return cls(value=decode_string(content))

    def to_content(self) -> str:
        return self.value
