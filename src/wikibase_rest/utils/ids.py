import re
from typing import Union

ITEM_ID_PATTERN = re.compile(r"Q[0-9]+")
PROPERTY_ID_PATTERN = re.compile(r"P[0-9]+")
STATEMENT_ID_PATTERN = re.compile(r"Q[0-9]+\$[\w-]+", re.ASCII)
DIGITS_PATTERN = re.compile(r"[0-9]+")


def _normalize_entity_id(entity_id: Union[int, str], prefix: str, pattern: re.Pattern) -> str | None:
    # bool is an int subclass but never a valid id
    if isinstance(entity_id, bool):
        return None
    if isinstance(entity_id, int):
        return f"{prefix}{entity_id}" if entity_id >= 0 else None
    if isinstance(entity_id, str):
        if DIGITS_PATTERN.fullmatch(entity_id):
            return f"{prefix}{entity_id}"
        if pattern.fullmatch(entity_id):
            return entity_id
    return None


def normalize_item_id(item_id: Union[int, str]) -> str:
    """Normalize 123, "123" or "Q123" to "Q123"."""
    normalized = _normalize_entity_id(item_id, "Q", ITEM_ID_PATTERN)
    if normalized is None:
        raise ValueError(
            f"{item_id!r} is an invalid Wikibase QID. Must be an integer, "
            "a string representation of an integer, or in the format 'Q123'."
        )
    return normalized


def normalize_property_id(property_id: Union[int, str]) -> str:
    """Normalize 123, "123" or "P123" to "P123"."""
    normalized = _normalize_entity_id(property_id, "P", PROPERTY_ID_PATTERN)
    if normalized is None:
        raise ValueError(
            f"{property_id!r} is an invalid Wikibase PID. Must be an integer, "
            "a string representation of an integer, or in the format 'P123'."
        )
    return normalized


def validate_statement_id(statement_id: str) -> str:
    if not isinstance(statement_id, str) or not STATEMENT_ID_PATTERN.fullmatch(statement_id):
        raise ValueError(
            f"{statement_id!r} is an invalid Wikibase Statement ID. "
            "Must be a string in the format 'Q123$f004ec2b-4857-3b69-b370-e8124f5bd3ac'."
        )
    return statement_id
