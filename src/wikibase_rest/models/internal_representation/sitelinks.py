from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator


def normalize_site(site: Any) -> str:
    if isinstance(site, Enum):
        site = site.value
    return str(site)


class Sitelink(BaseModel):
    """Link from an item to a page on another wiki, e.g. ``enwiki``."""

    site: str
    title: str
    badges: list[str] = []
    url: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("site", mode="before")
    @classmethod
    def validate_site(cls, v: Any) -> str:
        return normalize_site(v)
