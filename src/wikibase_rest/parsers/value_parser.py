import logging
from types import MappingProxyType
from typing import Any, Mapping, NamedTuple, Optional

from ..models.internal_representation.datatypes import Datatype, SnakType
from ..models.internal_representation.json_fields import JsonField
from ..models.internal_representation.tagged_value import TaggedValue
from ..models.internal_representation.value_kinds import ValueKind
from ..models.internal_representation.values import (
    CommonsMediaValue,
    EntityValue,
    ExternalIdValue,
    GlobeValue,
    MonolingualValue,
    QuantityValue,
    StringValue,
    TimeValue,
    UrlValue,
    Value,
)

logger = logging.getLogger(__name__)

# The property's declared data-type decides the value model. Several
# data-types share the plain string payload shape.
DECODERS: Mapping[Datatype, type[Value]] = MappingProxyType(
    {
        Datatype.STRING: StringValue,
        Datatype.EXTERNAL_ID: ExternalIdValue,
        Datatype.URL: UrlValue,
        Datatype.COMMONS_MEDIA: CommonsMediaValue,
        Datatype.QUANTITY: QuantityValue,
        Datatype.TIME: TimeValue,
        Datatype.GLOBE_COORDINATE: GlobeValue,
        Datatype.MONOLINGUALTEXT: MonolingualValue,
        Datatype.WIKIBASE_ITEM: EntityValue,
    }
)


class SnakFields(NamedTuple):
    property_id: str
    data_type: Optional[str]
    snak_type: Optional[str]
    content: Any


def read_snak_fields(snak_json: dict[str, Any], property_id: str = "") -> SnakFields:
    """Pull the fields of a snak out of either wire shape.

    REST:   {"property": {"id", "data-type"}, "value": {"type", "content"}}
    Legacy: {"snaktype", "property", "datatype", "datavalue": {"type", "value"}}
    """
    if JsonField.SNAKTYPE.value in snak_json:
        datavalue = snak_json.get(JsonField.DATAVALUE.value) or {}
        return SnakFields(
            property_id=snak_json.get(JsonField.PROPERTY.value, property_id),
            data_type=snak_json.get(JsonField.DATATYPE.value),
            snak_type=snak_json.get(JsonField.SNAKTYPE.value),
            content=datavalue.get(JsonField.VALUE.value),
        )

    property_json = snak_json.get(JsonField.PROPERTY.value) or {}
    value_json = snak_json.get(JsonField.VALUE.value) or {}
    return SnakFields(
        property_id=property_json.get(JsonField.ID.value, property_id),
        data_type=property_json.get(JsonField.DATA_TYPE.value),
        snak_type=value_json.get(JsonField.TYPE.value),
        content=value_json.get(JsonField.CONTENT.value),
    )


def decode_value(data_type: Optional[str], content: Any) -> Optional[Value]:
    datatype = Datatype.lookup(data_type)
    if datatype is None:
        logger.warning(f"Unsupported data type ({data_type})")
        return None

    try:
        return DECODERS[datatype].from_content(content)
    except (KeyError, TypeError, AttributeError) as e:
        raise ValueError(f"Malformed {datatype.value} value {content!r}: {e}") from e


def parse_value(snak_json: dict[str, Any]) -> Optional[TaggedValue]:
    fields = read_snak_fields(snak_json)
    return tag_value(fields.snak_type, fields.data_type, fields.content)


def tag_value(snak_type: Optional[str], data_type: Optional[str], content: Any) -> Optional[TaggedValue]:
    if snak_type == SnakType.NOVALUE.value:
        return TaggedValue(kind=ValueKind.NO_VALUE)

    if snak_type == SnakType.SOMEVALUE.value:
        return TaggedValue(kind=ValueKind.SOME_VALUE)

    if snak_type != SnakType.VALUE.value:
        raise ValueError(f"Unknown snak type: {snak_type}")

    value = decode_value(data_type, content)
    if value is None:
        return None
    return TaggedValue.of(value)
