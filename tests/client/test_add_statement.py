import pytest

from helpers import API_URL
from wikibase_rest import DisallowedBotEditError, DisallowedIpEditError
from wikibase_rest.models.internal_representation import Rank, Reference, Snak
from wikibase_rest.models.internal_representation.values import (
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
)

STATEMENTS_URL = f"{API_URL}/entities/items/Q123/statements"


def expected_body(value_json, rank="normal", qualifiers=None, references=None, **extra):
    body = {
        "statement": {
            "property": {"id": "P123"},
            "value": value_json,
            "qualifiers": qualifiers or [],
            "references": references or [],
            "rank": rank,
        },
        "bot": False,
    }
    body.update(extra)
    return body


@pytest.mark.parametrize(
    "value,value_json",
    [
        (StringValue(value="test data"), {"type": "value", "content": "test data"}),
        (ExternalIdValue(value="123"), {"type": "value", "content": "123"}),
        (CommonsMediaValue(value="FooBar.jpg"), {"type": "value", "content": "FooBar.jpg"}),
        (UrlValue(value="https://example.com"), {"type": "value", "content": "https://example.com"}),
        (EntityValue(id="Q1234"), {"type": "value", "content": "Q1234"}),
        (MonolingualValue(language="en", text="Foobar"), {"type": "value", "content": {"language": "en", "text": "Foobar"}}),
        (
            TimeValue(time="+2022-08-12T00:00:00Z", precision=11, calendar_model="https://wikidata.org/entity/Q1234"),
            {
                "type": "value",
                "content": {
                    "time": "+2022-08-12T00:00:00Z",
                    "precision": 11,
                    "calendarmodel": "https://wikidata.org/entity/Q1234",
                },
            },
        ),
        (
            QuantityValue(amount="+1", unit="https://wikidata.org/entity/Q1234"),
            {"type": "value", "content": {"amount": "+1", "unit": "https://wikidata.org/entity/Q1234"}},
        ),
        (
            GlobeValue(latitude=52.516666666667, longitude=13.383333333333, precision=0.016666666666667,
                       globe="https://wikidata.org/entity/Q2"),
            {
                "type": "value",
                "content": {
                    "latitude": 52.516666666667,
                    "longitude": 13.383333333333,
                    "precision": 0.016666666666667,
                    "globe": "https://wikidata.org/entity/Q2",
                },
            },
        ),
        (SomeValue(), {"type": "somevalue"}),
        (NoValue(), {"type": "novalue"}),
    ],
    ids=lambda v: getattr(v, "kind", None),
)
def test_add_statement_values(make_client, transport, value, value_json):
    assert make_client().add_statement("Q123", "P123", value) is True

    call = transport.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == STATEMENTS_URL
    assert call["json"] == expected_body(value_json)


@pytest.mark.parametrize("item_id,property_id", [(123, 123), ("123", "123"), ("Q123", "P123")])
def test_add_statement_normalizes_ids(make_client, transport, item_id, property_id):
    make_client().add_statement(item_id, property_id, StringValue(value="x"))

    assert transport.calls[0]["url"] == STATEMENTS_URL
    assert transport.calls[0]["json"]["statement"]["property"] == {"id": "P123"}


@pytest.mark.parametrize("rank", ["preferred", "deprecated", Rank.PREFERRED, Rank.DEPRECATED])
def test_add_statement_rank(make_client, transport, rank):
    make_client().add_statement("Q123", "P123", StringValue(value="x"), rank=rank)

    assert transport.calls[0]["json"]["statement"]["rank"] == Rank.normalize(rank).value


def test_add_statement_with_qualifiers_and_references(make_client, transport):
    qualifiers = [Snak.of("P580", TimeValue(time="+2019-11-14T00:00:00Z", precision=11))]
    references = [Reference(parts=[Snak.of("P854", UrlValue(value="https://example.com"))])]

    make_client().add_statement("Q123", "P123", EntityValue(id="Q5"), qualifiers=qualifiers, references=references)

    assert transport.calls[0]["json"] == expected_body(
        {"type": "value", "content": "Q5"},
        qualifiers=[
            {
                "property": {"id": "P580"},
                "value": {
                    "type": "value",
                    "content": {
                        "time": "+2019-11-14T00:00:00Z",
                        "precision": 11,
                        "calendarmodel": "http://www.wikidata.org/entity/Q1985727",
                    },
                },
            }
        ],
        references=[
            {"parts": [{"property": {"id": "P854"}, "value": {"type": "value", "content": "https://example.com"}}]}
        ],
    )


def test_add_statement_tags_and_comment(make_client, transport):
    make_client().add_statement("Q123", "P123", StringValue(value="x"), tags=["foo"], comment="Adding a statement")

    body = transport.calls[0]["json"]
    assert body["tags"] == ["foo"]
    assert body["comment"] == "Adding a statement"


def test_add_statement_failure_returns_false(make_client, transport):
    transport.respond("POST", STATEMENTS_URL, status=400, body={"code": "invalid-value", "message": "Bad value"})

    assert make_client().add_statement("Q123", "P123", StringValue(value="x")) is False


def test_add_statement_invalid_item_id(make_client, transport):
    with pytest.raises(ValueError, match="'bad id' is an invalid Wikibase QID"):
        make_client().add_statement("bad id", "P123", StringValue(value="x"))
    assert transport.calls == []


def test_add_statement_invalid_property_id(make_client, transport):
    with pytest.raises(ValueError, match="'bad id' is an invalid Wikibase PID"):
        make_client().add_statement("Q123", "bad id", StringValue(value="x"))
    assert transport.calls == []


def test_add_statement_invalid_rank(make_client, transport):
    with pytest.raises(ValueError, match="'foobar' is an invalid rank"):
        make_client().add_statement("Q123", "P123", StringValue(value="x"), rank="foobar")
    assert transport.calls == []


@pytest.mark.parametrize("value", [True, "test data", None, {"type": "value", "content": "x"}])
def test_add_statement_invalid_value(make_client, transport, value):
    with pytest.raises(ValueError, match="Expected an instance of one of the Wikibase value types for value"):
        make_client().add_statement("Q123", "P123", value)
    assert transport.calls == []


def test_add_statement_invalid_value_message(make_client):
    with pytest.raises(ValueError) as exc_info:
        make_client().add_statement("Q123", "P123", True)
    assert str(exc_info.value) == (
        "Expected an instance of one of the Wikibase value types for value, but got True."
    )


def test_add_statement_validates_before_policy(make_client, transport):
    with pytest.raises(ValueError, match="invalid Wikibase QID"):
        make_client(allow_ip_edits=False).add_statement("bad id", "P123", StringValue(value="x"))


def test_add_statement_ip_edit_disallowed(make_client, transport):
    with pytest.raises(DisallowedIpEditError):
        make_client(allow_ip_edits=False).add_statement("Q123", "P123", StringValue(value="x"))
    assert transport.calls == []


def test_add_statement_bot_edit_disallowed(make_client, transport):
    with pytest.raises(DisallowedBotEditError):
        make_client(bot=True, allow_ip_edits=True).add_statement("Q123", "P123", StringValue(value="x"))
    assert transport.calls == []


def test_add_statement_invalid_qualifier_property(make_client, transport):
    with pytest.raises(ValueError, match="'bad id' is an invalid Wikibase PID"):
        make_client().add_statement(
            "Q123", "P123", StringValue(value="y"), qualifiers=[Snak.of("bad id", StringValue(value="x"))]
        )
    assert transport.calls == []


def test_add_statement_invalid_reference_property(make_client, transport):
    with pytest.raises(ValueError, match="is an invalid Wikibase PID"):
        make_client().add_statement(
            "Q123",
            "P123",
            StringValue(value="y"),
            references=[Reference(parts=[Snak.of("P854\n", UrlValue(value="https://example.com"))])],
        )
    assert transport.calls == []


def test_add_statement_normalizes_qualifier_property(make_client, transport):
    make_client().add_statement("Q123", "P123", StringValue(value="y"), qualifiers=[Snak.of(1545, StringValue(value="1"))])

    assert transport.calls[0]["json"]["statement"]["qualifiers"] == [
        {"property": {"id": "P1545"}, "value": {"type": "value", "content": "1"}}
    ]
