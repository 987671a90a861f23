from typing import ClassVar

from pydantic import Field
from typing_extensions import Literal

from .base import Value, decode_string


class CommonsMediaValue(Value):
    kind: Literal["commons_media"] = Field(default="commons_media", frozen=True)
    value: str

    wikibase_type: ClassVar[str] = "commonsMedia"

    @classmethod
    def from_content(cls, content) -> "CommonsMediaValue":
        return cls(value=decode_string(content))

    def to_content(self) -> str:
        return self.value
