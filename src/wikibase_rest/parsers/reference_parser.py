from typing import Any

from .snak_parser import parse_grouped_snaks, parse_snak
from ..models.internal_representation.json_fields import JsonField
from ..models.internal_representation.references import Reference


def parse_reference(reference_json: dict[str, Any]) -> Reference:
    reference_hash = reference_json.get(JsonField.HASH.value, "")

    if JsonField.PARTS.value in reference_json:
        parts = [parse_snak(part) for part in reference_json[JsonField.PARTS.value]]
    else:
        parts = parse_grouped_snaks(
            reference_json.get(JsonField.SNAKS.value, {}),
            reference_json.get(JsonField.SNAKS_ORDER.value),
        )

    return Reference(hash=reference_hash, parts=parts)


def parse_references(references_json: list[dict[str, Any]]) -> list[Reference]:
    return [parse_reference(reference_json) for reference_json in references_json]
