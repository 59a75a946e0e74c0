__all__ = [
    "Client",
    "ConcurrencyViolation",
    "Config",
    "ErrorResponse",
    "Event",
    "EventStoreException",
    "Feed",
    "MalformedResponse",
    "RawPayload",
    "ResponseError",
    "StreamWriter",
    "TemporarilyUnavailable",
    "TransportFailure",
    "Unauthorized",
    "Unexpected",
    "classify",
    "new_event",
]

from eventstore_http.classifier import classify
from eventstore_http.client import Client
from eventstore_http.config import Config
from eventstore_http.dto import RawPayload
from eventstore_http.event import Event, new_event
from eventstore_http.exceptions import (
    ConcurrencyViolation,
    ErrorResponse,
    EventStoreException,
    MalformedResponse,
    ResponseError,
    TemporarilyUnavailable,
    TransportFailure,
    Unauthorized,
    Unexpected,
)
from eventstore_http.feed import Feed
from eventstore_http.stream_writer import StreamWriter
