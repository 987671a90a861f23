from wikibase_rest.models.internal_representation import SnakType, ValueKind
from wikibase_rest.parsers import parse_qualifier, parse_qualifiers


def test_parse_qualifier_rest_shape():
    qualifier = parse_qualifier(
        {
            "property": {"id": "P1545", "data-type": "string"},
            "value": {"type": "value", "content": "1"}
        }
    )

    assert qualifier.property_id == "P1545"
    assert qualifier.data_type == "string"
    assert qualifier.snak_type == SnakType.VALUE
    assert qualifier.value.content.value == "1"


def test_parse_qualifiers_flat_list_keeps_order():
    qualifiers = parse_qualifiers(
        [
            {"property": {"id": "P2", "data-type": "string"}, "value": {"type": "value", "content": "a"}},
            {"property": {"id": "P1", "data-type": "string"}, "value": {"type": "somevalue"}},
            {"property": {"id": "P2", "data-type": "string"}, "value": {"type": "value", "content": "b"}},
        ]
    )

    assert [q.property_id for q in qualifiers] == ["P2", "P1", "P2"]
    assert qualifiers[1].value.kind == ValueKind.SOME_VALUE


def test_parse_qualifiers_grouped_by_property():
    qualifiers = parse_qualifiers(
        {
            "P2": [
                {"snaktype": "value", "property": "P2", "datatype": "string",
                 "datavalue": {"value": "a", "type": "string"}},
                {"snaktype": "value", "property": "P2", "datatype": "string",
                 "datavalue": {"value": "b", "type": "string"}},
            ],
            "P1": [
                {"snaktype": "novalue", "property": "P1"}
            ],
        }
    )

    assert [q.property_id for q in qualifiers] == ["P2", "P2", "P1"]
    assert [q.value.content.value for q in qualifiers[:2]] == ["a", "b"]
    assert qualifiers[2].value.kind == ValueKind.NO_VALUE


def test_parse_qualifier_falls_back_to_group_property_id():
    qualifiers = parse_qualifiers({"P7": [{"snaktype": "somevalue"}]})
    assert qualifiers[0].property_id == "P7"


def test_parse_qualifiers_empty():
    assert parse_qualifiers([]) == []
    assert parse_qualifiers({}) == []
