import json
from collections.abc import Iterable, Mapping
from typing import Any, TypeAlias

from pydantic import TypeAdapter, ValidationError

from eventstore_http.event import METADATA_EVENT_TYPE, Event, new_event
from eventstore_http.exceptions import MalformedResponse

RawPayload: TypeAlias = bytes | bytearray | str | Mapping[str, Any]

EVENTS_CONTENT_TYPE = "application/vnd.eventstore.events+json"

_events_adapter = TypeAdapter(list[Event])


def envelope(from_event: Event) -> dict[str, Any]:
    entry = from_event.model_dump(mode="json", by_alias=True)
    if entry["metadata"] is None:
        del entry["metadata"]
    return entry


def encode_events(events: Iterable[Event]) -> bytes:
    return _dumps([envelope(event) for event in events])


def encode_event(event: Event) -> bytes:
    return _dumps(envelope(event))


def encode_metadata(payload: RawPayload) -> bytes:
    """Encodes a `MetaData` event carrying `payload` as its data.

    Raw JSON is checked to be valid and then written as is, so the store
    receives the caller's exact bytes.
    """
    head = envelope(new_event("", METADATA_EVENT_TYPE, None))
    del head["data"]
    return _dumps(head)[:-1] + b',"data":' + raw_json(payload) + b"}"


def raw_json(payload: RawPayload) -> bytes:
    if isinstance(payload, (bytes, bytearray, str)):
        json.loads(payload)
        raw = payload.encode("utf-8") if isinstance(payload, str) else bytes(payload)
        return raw.strip()
    return _dumps(dict(payload))


def decode_events(body: bytes | str) -> list[Event]:
    try:
        return _events_adapter.validate_json(body)
    except ValidationError as exc:
        raise MalformedResponse(f"Not a list of event envelopes: {exc}") from exc


def decode_event(body: bytes | str) -> Event:
    try:
        return Event.model_validate_json(body)
    except ValidationError as exc:
        raise MalformedResponse(f"Not an event envelope: {exc}") from exc


def _dumps(value: Any) -> bytes:
    encoded = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return encoded.encode("utf-8")
