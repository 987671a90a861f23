from typing import Any, Iterable

from ..models.internal_representation.json_fields import JsonField
from ..models.internal_representation.ranks import Rank
from ..models.internal_representation.references import Reference
from ..models.internal_representation.snaks import Snak
from ..models.internal_representation.tagged_value import TaggedValue


def encode_value(tagged: TaggedValue) -> dict[str, Any]:
    """Build the REST ``value`` object: ``{"type": ..., "content": ...}``.

    ``novalue`` and ``somevalue`` have no ``content`` key at all.
    """
    value_json: dict[str, Any] = {JsonField.TYPE.value: tagged.wire_type.value}
    if tagged.content is not None:
        value_json[JsonField.CONTENT.value] = tagged.content.to_content()
    return value_json


def serialize_snak(snak: Snak) -> dict[str, Any]:
    if snak.value is None:
        raise ValueError(
            f"Cannot serialize a {snak.property_id} snak with unsupported data type {snak.data_type}"
        )
    return {
        JsonField.PROPERTY.value: {JsonField.ID.value: snak.property_id},
        JsonField.VALUE.value: encode_value(snak.value),
    }


def serialize_reference(reference: Reference) -> dict[str, Any]:
    return {JsonField.PARTS.value: [serialize_snak(part) for part in reference.parts]}


def serialize_statement(
    property_id: str,
    value: TaggedValue,
    qualifiers: Iterable[Snak] = (),
    references: Iterable[Reference] = (),
    rank: Rank = Rank.NORMAL,
) -> dict[str, Any]:
    return {
        JsonField.PROPERTY.value: {JsonField.ID.value: property_id},
        JsonField.VALUE.value: encode_value(value),
        JsonField.QUALIFIERS.value: [serialize_snak(q) for q in qualifiers],
        JsonField.REFERENCES.value: [serialize_reference(r) for r in references],
        JsonField.RANK.value: rank.value,
    }
