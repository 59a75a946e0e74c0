import json
from uuid import UUID

import pytest

from eventstore_http import Event, MalformedResponse, dto, new_event
from tests.factories import MyDataType, an_event


def test_assigns_id_when_none_given() -> None:
    event = new_event("", "SomeEventType", {"a": 1})

    assert UUID(event.event_id)


def test_keeps_given_id() -> None:
    event = new_event("my-id", "SomeEventType", {"a": 1})

    assert event.event_id == "my-id"


def test_events_are_immutable() -> None:
    event = an_event()

    with pytest.raises(ValueError):
        event.event_type = "Other"  # type: ignore[misc]


def test_envelope_uses_wire_names() -> None:
    event = an_event(MyDataType(field_1=1, field_2="x"), metadata={"m": True})

    assert dto.envelope(event) == {
        "eventId": event.event_id,
        "eventType": "SomeEventType",
        "data": {"field_1": 1, "field_2": "x"},
        "metadata": {"m": True},
    }


def test_envelope_omits_missing_metadata() -> None:
    assert "metadata" not in dto.envelope(an_event())


def test_decoded_events_print_like_originals() -> None:
    events = [an_event(), an_event(metadata={"source": "test"})]

    decoded = dto.decode_events(dto.encode_events(events))

    assert [e.pretty_print() for e in decoded] == [e.pretty_print() for e in events]


def test_pretty_print_is_indented_json() -> None:
    printed = an_event(event_id="abc").pretty_print()

    assert printed.startswith("{\n")
    assert json.loads(printed)["eventId"] == "abc"


def test_metadata_envelope_wraps_raw_json() -> None:
    encoded = dto.encode_metadata('{"baz":"boo"}')

    event = dto.decode_event(encoded)
    assert event.event_type == "MetaData"
    assert event.event_id
    assert event.data == {"baz": "boo"}
    assert encoded.endswith(b'"data":{"baz":"boo"}}')


@pytest.mark.parametrize(
    "raw",
    [
        b'{"n":1e3}',
        b'{"s":"\\u00e9"}',
        b'{"p":1.50}',
        b'{"k":1,"k":2}',
        b'{ "spaced" : [1, 2] }',
    ],
)
def test_metadata_envelope_keeps_raw_json_bytes(raw: bytes) -> None:
    assert dto.encode_metadata(raw).endswith(b'"data":' + raw + b"}")


def test_metadata_envelope_strips_surrounding_whitespace() -> None:
    encoded = dto.encode_metadata(" \n{\"a\":1}\n")

    assert encoded.endswith(b'"data":{"a":1}}')


def test_metadata_envelope_rejects_invalid_json() -> None:
    with pytest.raises(ValueError):
        dto.encode_metadata(b"{not json")


def test_keeps_non_ascii_payload_unescaped() -> None:
    event = new_event("id", "Greeted", {"text": "żółć"})

    assert "żółć".encode() in dto.encode_event(event)


@pytest.mark.parametrize("body", [b"not json", b'{"eventId": "x"}', b"{}"])
def test_rejects_what_is_not_a_list_of_envelopes(body: bytes) -> None:
    with pytest.raises(MalformedResponse):
        dto.decode_events(body)


def test_decodes_single_envelope() -> None:
    event = dto.decode_event(b'{"eventId":"1","eventType":"T","data":{"a":1}}')

    assert event == Event(event_id="1", event_type="T", data={"a": 1})
