from pydantic import Field
from typing_extensions import Literal

from .base import Value


class NoValue(Value):
    kind: Literal["no_value"] = Field(default="no_value", frozen=True)

    @classmethod
    def from_content(cls, content=None) -> "NoValue":
        return cls()

    def to_content(self) -> None:
        return None
