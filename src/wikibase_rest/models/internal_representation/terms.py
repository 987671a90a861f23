from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


def normalize_language(lang: Any) -> str:
    if isinstance(lang, Enum):
        lang = lang.value
    return str(lang).lower()


class Term(BaseModel):
    """A language code and text, used for labels, descriptions and aliases."""

    lang: str
    value: str

    model_config = ConfigDict(frozen=True)

    @field_validator("lang", mode="before")
    @classmethod
    def validate_lang(cls, v: Any) -> str:
        return normalize_language(v)
