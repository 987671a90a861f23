from typing import Any, Optional, Union

from .snak_parser import parse_grouped_snaks, parse_snak
from ..models.internal_representation.qualifiers import Qualifier


def parse_qualifier(qualifier_json: dict[str, Any], property_id: str = "") -> Qualifier:
    return parse_snak(qualifier_json, property_id)


def parse_qualifiers(
    qualifiers_json: Union[list[dict[str, Any]], dict[str, list[dict[str, Any]]]],
    order: Optional[list[str]] = None,
) -> list[Qualifier]:
    """Flatten qualifiers into one ordered list.

    The REST API sends a flat list; the legacy shape groups snaks by property
    id, optionally ordered by a separate ``qualifiers-order`` list.
    """
    if isinstance(qualifiers_json, list):
        return [parse_qualifier(qualifier_json) for qualifier_json in qualifiers_json]
    return parse_grouped_snaks(qualifiers_json, order)
