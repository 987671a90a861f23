from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from .datatypes import SnakType
from .tagged_value import TaggedValue
from .values import Value
from ...utils.ids import normalize_property_id


class Snak(BaseModel):
    """A property paired with a value, or with the fact it has none.

    ``value`` is ``None`` only when the property's data-type is not supported
    by this library; ``data_type`` then still records what the API sent.
    """

    property_id: str
    data_type: Optional[str] = None
    snak_type: SnakType
    value: Optional[TaggedValue] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("property_id", mode="before")
    @classmethod
    def validate_property_id(cls, v: Any) -> str:
        return normalize_property_id(v)

    @model_validator(mode="after")
    def validate_snak_type(self) -> "Snak":
        if self.value is None:
            if self.snak_type != SnakType.VALUE:
                raise ValueError(f"A {self.snak_type.value} snak must carry its value tag")
            return self
        if self.value.wire_type != self.snak_type:
            raise ValueError(
                f"Snak type {self.snak_type.value} does not match value kind {self.value.kind.value}"
            )
        return self

    @classmethod
    def of(cls, property_id: Union[int, str], value: Value, data_type: Optional[str] = None) -> "Snak":
        tagged = TaggedValue.of(value)
        return cls(
            property_id=property_id,
            data_type=data_type or value.wikibase_type,
            snak_type=tagged.wire_type,
            value=tagged,
        )
