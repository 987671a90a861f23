from enum import Enum


class Datatype(str, Enum):
    """Property data-types as named by the Wikibase REST API (`data-type`)."""

    STRING = "string"
    EXTERNAL_ID = "external-id"
    URL = "url"
    COMMONS_MEDIA = "commonsMedia"
    QUANTITY = "quantity"
    TIME = "time"
    GLOBE_COORDINATE = "globe-coordinate"
    MONOLINGUALTEXT = "monolingualtext"
    WIKIBASE_ITEM = "wikibase-item"

    @classmethod
    def lookup(cls, data_type: str | None) -> "Datatype | None":
        if data_type is None:
            return None
        try:
            return cls(data_type)
        except ValueError:
            return None


class SnakType(str, Enum):
    VALUE = "value"
    NOVALUE = "novalue"
    SOMEVALUE = "somevalue"
