from typing import Any, ClassVar, Optional

from pydantic import Field, field_validator
from typing_extensions import Literal

from .base import Value, expand_entity_uri


class QuantityValue(Value):
    """Quantity with an optional uncertainty interval.

    Amount and bounds stay decimal strings ("+10.38") exactly as Wikibase
    sends them; bounds that are missing on the wire stay ``None``.
    """

    kind: Literal["quantity"] = Field(default="quantity", frozen=True)
    amount: str
    unit: str = "1"
    upper_bound: Optional[str] = None
    lower_bound: Optional[str] = None

    wikibase_type: ClassVar[str] = "quantity"

    @field_validator("unit")
    @classmethod
    def validate_unit(cls, v: str) -> str:
        return expand_entity_uri(v)

    @field_validator("amount", "upper_bound", "lower_bound")
    @classmethod
    def validate_numeric(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            try:
                float(v)
            except ValueError:
                raise ValueError(f"Value must be a valid number, got: {v}")
        return v

    @classmethod
    def from_content(cls, content: dict[str, Any]) -> "QuantityValue":
        return cls(
            amount=content["amount"],
            unit=content.get("unit", "1"),
            upper_bound=content.get("upperBound"),
            lower_bound=content.get("lowerBound"),
        )

    def to_content(self) -> dict[str, str]:
        content = {"amount": self.amount, "unit": self.unit}
        if self.upper_bound is not None:
            content["upperBound"] = self.upper_bound
        if self.lower_bound is not None:
            content["lowerBound"] = self.lower_bound
        return content
