import re
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict


ENTITY_URI_PREFIX = "http://www.wikidata.org/entity/"
BARE_ENTITY_ID = re.compile(r"^Q[0-9]+$")


class Value(BaseModel):
    """Common contract of every Wikibase value type.

    `from_content` decodes the `content` (REST) or `datavalue.value` (legacy)
    JSON of a snak, `to_content` produces the `content` JSON for a write.
    NoValue and SomeValue carry nothing and encode to `None`.
    """

    kind: str
    wikibase_type: ClassVar[Optional[str]] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_content(cls, content: Any) -> "Value":
        raise NotImplementedError

    def to_content(self) -> Any:
        raise NotImplementedError


def expand_entity_uri(v: str) -> str:
    if BARE_ENTITY_ID.match(v):
        return ENTITY_URI_PREFIX + v
    return v


def decode_string(content: Any) -> str:
    if not isinstance(content, str):
        raise ValueError(f"Expected a string value, got: {content!r}")
    return content
