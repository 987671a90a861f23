from typing import Any, ClassVar

from pydantic import Field, field_validator
from typing_extensions import Literal

from .base import Value


class MonolingualValue(Value):
    kind: Literal["monolingual_text"] = Field(default="monolingual_text", frozen=True)
    language: str
    text: str

    wikibase_type: ClassVar[str] = "monolingualtext"

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        if "\n" in v or "\r" in v:
            raise ValueError("MonolingualText text must not contain newline characters")
        return v

    @classmethod
    def from_content(cls, content: dict[str, Any]) -> "MonolingualValue":
        return cls(language=content["language"], text=content["text"])

    def to_content(self) -> dict[str, str]:
        return {"language": self.language, "text": self.text}
