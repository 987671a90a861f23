from typing import Annotated, Union

from pydantic import Field

from .base import Value
from .novalue_value import NoValue
from .somevalue_value import SomeValue
from .string_value import StringValue
from .external_id_value import ExternalIdValue
from .url_value import UrlValue
from .commons_media_value import CommonsMediaValue
from .quantity_value import QuantityValue
from .time_value import TimeValue
from .globe_value import GlobeValue
from .monolingual_value import MonolingualValue
from .entity_value import EntityValue

AnyValue = Annotated[
    Union[
        NoValue,
        SomeValue,
        StringValue,
        ExternalIdValue,
        UrlValue,
        CommonsMediaValue,
        QuantityValue,
        TimeValue,
        GlobeValue,
        MonolingualValue,
        EntityValue,
    ],
    Field(discriminator="kind"),
]

VALUE_TYPES = (
    NoValue,
    SomeValue,
    StringValue,
    ExternalIdValue,
    UrlValue,
    CommonsMediaValue,
    QuantityValue,
    TimeValue,
    GlobeValue,
    MonolingualValue,
    EntityValue,
)

__all__ = [
    "Value",
    "AnyValue",
    "VALUE_TYPES",
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
