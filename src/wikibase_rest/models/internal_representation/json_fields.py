from enum import Enum


class JsonField(str, Enum):
    ID = "id"
    TYPE = "type"
    LABELS = "labels"
    DESCRIPTIONS = "descriptions"
    ALIASES = "aliases"
    STATEMENTS = "statements"
    CLAIMS = "claims"
    SITELINKS = "sitelinks"
    PROPERTY = "property"
    DATA_TYPE = "data-type"
    VALUE = "value"
    CONTENT = "content"
    QUALIFIERS = "qualifiers"
    QUALIFIERS_ORDER = "qualifiers-order"
    REFERENCES = "references"
    RANK = "rank"
    HASH = "hash"
    PARTS = "parts"
    # legacy Action API snak fields
    MAINSNAK = "mainsnak"
    SNAKTYPE = "snaktype"
    DATATYPE = "datatype"
    DATAVALUE = "datavalue"
    SNAKS = "snaks"
    SNAKS_ORDER = "snaks-order"
