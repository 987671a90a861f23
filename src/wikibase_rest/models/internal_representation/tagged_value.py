from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator

from .datatypes import SnakType
from .value_kinds import ValueKind
from .values import AnyValue, NoValue, SomeValue, Value


class TaggedValue(BaseModel):
    """A value kind plus its payload.

    ``content`` is present exactly when ``kind`` is neither ``no_value`` nor
    ``some_value``, and its own kind always matches ``kind``.
    """

    kind: ValueKind
    content: Optional[AnyValue] = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_content(self) -> "TaggedValue":
        if self.kind.has_content:
            if self.content is None:
                raise ValueError(f"A {self.kind.value} value requires content")
            if self.content.kind != self.kind:
                raise ValueError(
                    f"Content of kind {self.content.kind} does not match tag {self.kind.value}"
                )
        elif self.content is not None:
            raise ValueError(f"A {self.kind.value} value must not carry content")
        return self

    @classmethod
    def of(cls, value: Value) -> "TaggedValue":
        kind = ValueKind(value.kind)
        return cls(kind=kind, content=value if kind.has_content else None)

    @property
    def wire_type(self) -> SnakType:
        if self.kind == ValueKind.NO_VALUE:
            return SnakType.NOVALUE
        if self.kind == ValueKind.SOME_VALUE:
            return SnakType.SOMEVALUE
        return SnakType.VALUE

    def unwrap(self) -> Value:
        """Return the value model, including NoValue/SomeValue placeholders."""
        if self.kind == ValueKind.NO_VALUE:
            return NoValue()
        if self.kind == ValueKind.SOME_VALUE:
            return SomeValue()
        return self.content
