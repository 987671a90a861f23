from pydantic import Field
from typing_extensions import Literal

from .base import Value


class SomeValue(Value):
    """The "unknown value" placeholder."""

    kind: Literal["some_value"] = Field(default="some_value", frozen=True)

    @classmethod
    def from_content(cls, content=None) -> "SomeValue":
        return cls()

    def to_content(self) -> None:
        return None
