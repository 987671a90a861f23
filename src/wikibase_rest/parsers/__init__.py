from .item_parser import parse_aliases, parse_item, parse_sitelinks, parse_terms
from .qualifier_parser import parse_qualifier, parse_qualifiers
from .reference_parser import parse_reference, parse_references
from .snak_parser import parse_snak
from .statement_parser import parse_statement
from .value_parser import decode_value, parse_value

__all__ = [
    "parse_item",
    "parse_terms",
    "parse_aliases",
    "parse_sitelinks",
    "parse_qualifiers",
    "parse_qualifier",
    "parse_references",
    "parse_reference",
    "parse_snak",
    "parse_statement",
    "parse_value",
    "decode_value",
]
