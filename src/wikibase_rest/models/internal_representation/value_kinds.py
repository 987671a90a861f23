from enum import Enum


class ValueKind(str, Enum):
    NO_VALUE = "no_value"
    SOME_VALUE = "some_value"
    STRING = "string"
    EXTERNAL_ID = "external_id"
    URL = "url"
    COMMONS_MEDIA = "commons_media"
    QUANTITY = "quantity"
    TIME = "time"
    GLOBE_COORDINATE = "globe_coordinate"
    MONOLINGUAL_TEXT = "monolingual_text"
    WIKIBASE_ITEM = "wikibase_item"

    @property
    def has_content(self) -> bool:
        return self not in (ValueKind.NO_VALUE, ValueKind.SOME_VALUE)
