import pytest

from helpers import load_json
from wikibase_rest.models.internal_representation import Rank, SnakType, ValueKind
from wikibase_rest.parsers import parse_statement


def test_parse_statement_basic():
    """Test parsing a REST statement"""
    statement = parse_statement(load_json("statements/Q123_statement.json"))

    assert statement.id == "Q123$4D6DB9C5-2BA8-4E3C-9F2A-5E2A8C6B1F01"
    assert statement.property_id == "P31"
    assert statement.data_type == "wikibase-item"
    assert statement.value.kind == ValueKind.WIKIBASE_ITEM
    assert statement.value.content.id == "Q5"
    assert statement.rank == Rank.NORMAL
    assert len(statement.qualifiers) == 1
    assert statement.qualifiers[0].property_id == "P580"
    assert statement.qualifiers[0].value.content.time == "+2019-11-14T00:00:00Z"
    assert statement.references == []


def test_parse_legacy_statement_with_grouped_qualifiers():
    """Legacy qualifiers are grouped by property and follow qualifiers-order"""
    statement_json = {
        "mainsnak": {
            "snaktype": "value",
            "property": "P6",
            "datatype": "wikibase-item",
            "datavalue": {
                "value": {"entity-type": "item", "numeric-id": 666, "id": "Q666"},
                "type": "wikibase-entityid"
            }
        },
        "type": "statement",
        "id": "Q6$123",
        "rank": "preferred",
        "qualifiers": {
            "P2": [
                {
                    "snaktype": "value",
                    "property": "P2",
                    "datatype": "wikibase-item",
                    "datavalue": {
                        "value": {"entity-type": "item", "numeric-id": 42, "id": "Q42"},
                        "type": "wikibase-entityid"
                    }
                }
            ],
            "P3": [
                {
                    "snaktype": "novalue",
                    "property": "P3",
                    "datatype": "string"
                }
            ]
        },
        "qualifiers-order": ["P3", "P2"],
        "references": []
    }

    statement = parse_statement(statement_json)
    assert statement.rank == Rank.PREFERRED
    assert statement.value.content.id == "Q666"
    assert [q.property_id for q in statement.qualifiers] == ["P3", "P2"]
    assert statement.qualifiers[0].snak_type == SnakType.NOVALUE
    assert statement.qualifiers[1].value.content.id == "Q42"


def test_parse_statement_with_references():
    statement_json = load_json("entities/Q123.json")["statements"]["P31"][0]

    statement = parse_statement(statement_json)
    assert len(statement.references) == 1
    reference = statement.references[0]
    assert reference.hash == "d4bd87b862b12d99d26e86472d44f26858dee639"
    assert [part.property_id for part in reference.parts] == ["P854", "P813"]
    assert reference.parts[0].value.kind == ValueKind.URL
    assert reference.parts[1].value.content.pretty_precision == "month"


def test_parse_statement_with_novalue_main_value():
    statement = parse_statement(
        {
            "id": "Q1$abc",
            "rank": "normal",
            "property": {"id": "P40", "data-type": "wikibase-item"},
            "value": {"type": "novalue"},
        }
    )

    assert statement.value.kind == ValueKind.NO_VALUE
    assert statement.main_snak.snak_type == SnakType.NOVALUE
    assert statement.qualifiers == []


def test_parse_statement_unsupported_data_type_keeps_statement():
    statement = parse_statement(
        {
            "id": "Q1$abc",
            "rank": "normal",
            "property": {"id": "P2534", "data-type": "math"},
            "value": {"type": "value", "content": "x"},
        }
    )

    assert statement.value is None
    assert statement.data_type == "math"
    assert statement.main_snak.value is None


def test_parse_statement_rank_defaults_to_normal():
    statement = parse_statement(
        {
            "id": "Q1$abc",
            "property": {"id": "P1545", "data-type": "string"},
            "value": {"type": "value", "content": "1"},
        }
    )
    assert statement.rank == Rank.NORMAL


def test_parse_statement_invalid_rank_raises():
    with pytest.raises(ValueError):
        parse_statement(
            {
                "id": "Q1$abc",
                "rank": "bogus",
                "property": {"id": "P1545", "data-type": "string"},
                "value": {"type": "value", "content": "1"},
            }
        )


def test_get_qualifiers_filters_by_property():
    statement = parse_statement(load_json("entities/Q123.json")["statements"]["P31"][0])
    assert [q.property_id for q in statement.get_qualifiers()] == ["P580", "P582"]
    assert [q.property_id for q in statement.get_qualifiers(["P582"])] == ["P582"]
