import logging

from typing import Any, Union

from .statement_parser import parse_statement
from ..models.internal_representation.item import Item
from ..models.internal_representation.json_fields import JsonField
from ..models.internal_representation.sitelinks import Sitelink
from ..models.internal_representation.statements import Statement
from ..models.internal_representation.terms import Term


logger = logging.getLogger(__name__)

# REST terms are plain strings, legacy terms are {"language", "value"} objects.
TermJson = Union[str, dict[str, str]]


def parse_item(item_json: dict[str, Any]) -> Item:
    # Handle nested structure {"entities": {"Q42": {...}}}
    if "entities" in item_json:
        entities = item_json["entities"]
        entity_ids = list(entities.keys())
        if entity_ids:
            item_json = entities[entity_ids[0]]

    statements_json = item_json.get(JsonField.STATEMENTS.value)
    if statements_json is None:
        statements_json = item_json.get(JsonField.CLAIMS.value, {})

    return Item(
        id=item_json.get(JsonField.ID.value, ""),
        labels=parse_terms(item_json.get(JsonField.LABELS.value, {})),
        descriptions=parse_terms(item_json.get(JsonField.DESCRIPTIONS.value, {})),
        aliases=parse_aliases(item_json.get(JsonField.ALIASES.value, {})),
        statements=_parse_statements(statements_json),
        sitelinks=parse_sitelinks(item_json.get(JsonField.SITELINKS.value, {})),
    )


def _term_value(term_json: TermJson) -> str:
    if isinstance(term_json, dict):
        return term_json.get("value", "")
    return term_json


def parse_terms(terms_json: dict[str, TermJson]) -> list[Term]:
    return [Term(lang=lang, value=_term_value(term_json)) for lang, term_json in terms_json.items()]


def parse_aliases(aliases_json: dict[str, list[TermJson]]) -> list[Term]:
    return [
        Term(lang=lang, value=_term_value(alias_json))
        for lang, alias_list in aliases_json.items()
        for alias_json in alias_list
    ]


def parse_sitelinks(sitelinks_json: dict[str, dict[str, Any]]) -> list[Sitelink]:
    return [
        Sitelink(
            site=sitelink_json.get("site", site),
            title=sitelink_json.get("title", ""),
            badges=sitelink_json.get("badges", []),
            url=sitelink_json.get("url"),
        )
        for site, sitelink_json in sitelinks_json.items()
    ]


def _parse_statements(statements_json: dict[str, list[dict[str, Any]]]) -> list[Statement]:
    statements = []
    for property_id, statement_list in statements_json.items():
        for statement_json in statement_list:
            try:
                statement = parse_statement(statement_json, property_id)
                statements.append(statement)
            except ValueError as e:
                logger.warning(f"Failed to parse statement for property {property_id}: {e}")
                continue

    return statements
