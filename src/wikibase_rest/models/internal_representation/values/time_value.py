import re
from typing import Any, ClassVar

from pydantic import Field, field_validator
from typing_extensions import Literal

from .base import Value, expand_entity_uri

GREGORIAN_CALENDAR = "http://www.wikidata.org/entity/Q1985727"

TIME_PATTERN = re.compile(
    r"^[+-][0-9]{1,16}-(?:1[0-2]|0[0-9])-(?:3[01]|0[0-9]|[12][0-9])T(?:2[0-3]|[01][0-9]):[0-5][0-9]:[0-5][0-9]Z$"
)

# Indexed by the Wikibase precision integer.
PRETTY_PRECISIONS = (
    "gigayear",
    "100_megayear",
    "10_megayear",
    "megayear",
    "100_kiloyear",
    "10_kiloyear",
    "millennium",
    "century",
    "decade",
    "year",
    "month",
    "day",
    "hour",
    "minute",
    "second",
)


class TimeValue(Value):
    """A point in time as Wikibase stores it.

    ``time`` looks like ISO 8601 but is not: "+2022-00-00T00:00:00Z" at year
    precision (9) means "2022", "+2022-03-00T00:00:00Z" at month precision
    (10) means "March 2022". It is kept as a string for that reason.

    ``timezone``, ``before`` and ``after`` only appear in legacy payloads and
    are never written.
    """

    kind: Literal["time"] = Field(default="time", frozen=True)
    time: str
    precision: int = Field(ge=0, le=14)
    calendar_model: str = GREGORIAN_CALENDAR
    timezone: int = 0
    before: int = 0
    after: int = 0

    wikibase_type: ClassVar[str] = "time"

    @field_validator("time")
    @classmethod
    def validate_time_format(cls, v: str) -> str:
        if not (v.startswith("+") or v.startswith("-")):
            v = "+" + v

        if not TIME_PATTERN.match(v):
            raise ValueError(f"Time value must be in format '+%Y-%m-%dT%H:%M:%SZ', got: {v}")
        return v

    @field_validator("calendar_model")
    @classmethod
    def validate_calendar_model(cls, v: str) -> str:
        return expand_entity_uri(v)

    @property
    def pretty_precision(self) -> str:
        return PRETTY_PRECISIONS[self.precision]

    @property
    def calendarmodel(self) -> str:
        return self.calendar_model

    @classmethod
    def from_content(cls, content: dict[str, Any]) -> "TimeValue":
        return cls(
            time=content["time"],
            precision=content["precision"],
            calendar_model=content.get("calendarmodel", GREGORIAN_CALENDAR),
            timezone=content.get("timezone", 0),
            before=content.get("before", 0),
            after=content.get("after", 0),
        )

    def to_content(self) -> dict[str, Any]:
        return {
            "time": self.time,
            "precision": self.precision,
            "calendarmodel": self.calendar_model,
        }
