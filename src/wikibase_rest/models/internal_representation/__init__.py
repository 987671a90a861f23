from .value_kinds import ValueKind
from .datatypes import Datatype, SnakType
from .ranks import Rank
from .language_codes import LanguageCode
from .values import Value
from .tagged_value import TaggedValue
from .snaks import Snak
from .qualifiers import Qualifier
from .references import Reference, ReferencePart
from .statements import Statement
from .terms import Term
from .sitelinks import Sitelink
from .item import Item

__all__ = [
    "ValueKind",
    "Datatype",
    "SnakType",
    "Rank",
    "LanguageCode",
    "Value",
    "TaggedValue",
    "Snak",
    "Qualifier",
    "Reference",
    "ReferencePart",
    "Statement",
    "Term",
    "Sitelink",
    "Item",
]
