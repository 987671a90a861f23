from typing import Any, ClassVar, Optional

from pydantic import Field, field_validator
from typing_extensions import Literal

from .base import Value, expand_entity_uri

EARTH = "http://www.wikidata.org/entity/Q2"
ARC_SECOND = 1 / 3600


class GlobeValue(Value):
    kind: Literal["globe_coordinate"] = Field(default="globe_coordinate", frozen=True)
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    precision: Optional[float] = ARC_SECOND
    globe: str = EARTH
    altitude: Optional[float] = None

    wikibase_type: ClassVar[str] = "globe-coordinate"

    @field_validator("globe")
    @classmethod
    def validate_globe(cls, v: str) -> str:
        return expand_entity_uri(v)

    @classmethod
    def from_content(cls, content: dict[str, Any]) -> "GlobeValue":
        return cls(
            latitude=content["latitude"],
            longitude=content["longitude"],
            precision=content.get("precision"),
            globe=content.get("globe", EARTH),
            altitude=content.get("altitude"),
        )

    def to_content(self) -> dict[str, Any]:
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "precision": self.precision if self.precision is not None else ARC_SECOND,
            "globe": self.globe,
        }
