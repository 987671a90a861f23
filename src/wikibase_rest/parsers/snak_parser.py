from typing import Any, Optional

from .value_parser import read_snak_fields, tag_value
from ..models.internal_representation.datatypes import SnakType
from ..models.internal_representation.snaks import Snak


def parse_snak(snak_json: dict[str, Any], property_id: str = "") -> Snak:
    fields = read_snak_fields(snak_json, property_id)
    return Snak(
        property_id=fields.property_id,
        data_type=fields.data_type,
        snak_type=SnakType(fields.snak_type),
        value=tag_value(fields.snak_type, fields.data_type, fields.content),
    )


def parse_grouped_snaks(
    grouped_json: dict[str, list[dict[str, Any]]],
    order: Optional[list[str]] = None,
) -> list[Snak]:
    """Flatten legacy ``{property_id: [snak, ...]}`` maps, honouring an explicit order."""
    property_ids = [p for p in order or [] if p in grouped_json]
    property_ids.extend(p for p in grouped_json if p not in property_ids)

    return [
        parse_snak(snak_json, property_id)
        for property_id in property_ids
        for snak_json in grouped_json[property_id]
    ]
