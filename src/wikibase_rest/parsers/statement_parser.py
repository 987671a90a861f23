from typing import Any

from .qualifier_parser import parse_qualifiers
from .reference_parser import parse_references
from .value_parser import read_snak_fields, tag_value
from ..models.internal_representation.json_fields import JsonField
from ..models.internal_representation.ranks import Rank
from ..models.internal_representation.statements import Statement


def parse_statement(statement_json: dict[str, Any], property_id: str = "") -> Statement:
    if JsonField.MAINSNAK.value in statement_json:
        main_json = statement_json[JsonField.MAINSNAK.value]
    else:
        # REST statements carry property and value at the top level
        main_json = statement_json
    main = read_snak_fields(main_json, property_id)

    rank = statement_json.get(JsonField.RANK.value, Rank.NORMAL.value)
    qualifiers_json = statement_json.get(JsonField.QUALIFIERS.value) or []
    references_json = statement_json.get(JsonField.REFERENCES.value) or []

    return Statement(
        id=statement_json.get(JsonField.ID.value, ""),
        property_id=main.property_id,
        data_type=main.data_type,
        value=tag_value(main.snak_type, main.data_type, main.content),
        qualifiers=parse_qualifiers(
            qualifiers_json, statement_json.get(JsonField.QUALIFIERS_ORDER.value)
        ),
        references=parse_references(references_json),
        rank=Rank(rank),
    )
