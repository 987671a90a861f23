from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict

from .datatypes import SnakType
from .qualifiers import Qualifier
from .ranks import Rank
from .references import Reference
from .snaks import Snak
from .tagged_value import TaggedValue


class Statement(BaseModel):
    id: str
    property_id: str
    data_type: Optional[str] = None
    value: Optional[TaggedValue]
    qualifiers: list[Qualifier] = []
    references: list[Reference] = []
    rank: Rank = Rank.NORMAL

    model_config = ConfigDict(frozen=True)

    @property
    def main_snak(self) -> Snak:
        return Snak(
            property_id=self.property_id,
            data_type=self.data_type,
            snak_type=self.value.wire_type if self.value else SnakType.VALUE,
            value=self.value,
        )

    def get_qualifiers(self, properties: Optional[Iterable[str]] = None) -> list[Qualifier]:
        if not properties:
            return list(self.qualifiers)
        wanted = set(properties)
        return [q for q in self.qualifiers if q.property_id in wanted]
