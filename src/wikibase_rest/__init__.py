"""Typed client for the Wikibase REST API."""

from .client import Client, HttpResponse, HttpTransport, RequestsTransport
from .models.errors import ApiError, DisallowedBotEditError, DisallowedIpEditError, WikibaseError
from .models.internal_representation import (
    Datatype,
    Item,
    LanguageCode,
    Qualifier,
    Rank,
    Reference,
    ReferencePart,
    Sitelink,
    Snak,
    SnakType,
    Statement,
    TaggedValue,
    Term,
    ValueKind,
)
from .models.internal_representation.values import (
    CommonsMediaValue,
    EntityValue,
    ExternalIdValue,
    GlobeValue,
    MonolingualValue,
    NoValue,
    QuantityValue,
    SomeValue,
    StringValue,
    TimeValue,
    UrlValue,
    Value,
)

__version__ = "0.1.0"

__all__ = [
    "Client",
    "HttpResponse",
    "HttpTransport",
    "RequestsTransport",
    "ApiError",
    "DisallowedBotEditError",
    "DisallowedIpEditError",
    "WikibaseError",
    "Datatype",
    "Item",
    "LanguageCode",
    "Qualifier",
    "Rank",
    "Reference",
    "ReferencePart",
    "Sitelink",
    "Snak",
    "SnakType",
    "Statement",
    "TaggedValue",
    "Term",
    "ValueKind",
    "Value",
    "NoValue",
    "SomeValue",
    "StringValue",
    "ExternalIdValue",
    "UrlValue",
    "CommonsMediaValue",
    "QuantityValue",
    "TimeValue",
    "GlobeValue",
    "MonolingualValue",
    "EntityValue",
]
