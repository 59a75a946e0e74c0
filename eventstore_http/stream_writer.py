import logging
from dataclasses import dataclass

import httpx

from eventstore_http import classifier, dto, feed, stream
from eventstore_http.event import Event
from eventstore_http.exceptions import (
    MalformedResponse,
    ResponseError,
    TransportFailure,
)

logger = logging.getLogger(__name__)

EXPECTED_VERSION_HEADER = "ES-ExpectedVersion"


@dataclass(frozen=True, repr=False)
class StreamWriter:
    """Writes events and metadata to a single stream.

    Holds no state besides the stream it is bound to, so one writer can be
    shared between threads. Each call issues its own requests and is never
    retried.
    """

    _http: httpx.Client
    name: stream.Name

    def __repr__(self) -> str:
        return f"StreamWriter({str(self.name)!r})"

    def append(self, *events: Event, expected_version: int | None = None) -> None:
        """Appends events to the stream in a single request.

        Implements optimistic locking when `expected_version` is given: the
        store accepts the events only if the stream is at that version.

        Examples:
            >>> stream_writer.append(new_event("", "OrderPlaced", {...}))
            None
            >>> stream_writer.append(event_1, event_2, expected_version=5)
            None

        Args:
            *events: Events to append, in the order they should be stored.
            expected_version: The version the stream must have. None skips
                the check.

        Raises:
            ConcurrencyViolation: The stream is not at `expected_version`.
            Unauthorized: Credentials are missing or insufficient.
            TemporarilyUnavailable: The store can't serve the request now.
            Unexpected: Any other status the store responded with.
            TransportFailure: No response was received.
        """
        headers = {"Content-Type": dto.EVENTS_CONTENT_TYPE}
        if expected_version is not None:
            headers[EXPECTED_VERSION_HEADER] = str(expected_version)

        self._post(self.name, self.name.path, dto.encode_events(events), headers)

    def write_metadata(
        self,
        stream_name: str | None,
        metadata: dto.RawPayload,
    ) -> None:
        """Replaces the metadata of a stream.

        The metadata URL is looked up in the stream's feed before every write.

        Args:
            stream_name: Stream to write metadata of, the bound one if None.
            metadata: Raw JSON (bytes or str) or a mapping. Invalid JSON
                raises ValueError before any request is made.

        Raises:
            Same errors as `append`, coming either from the feed lookup or
            from the write itself. MalformedResponse if the feed has no
            metadata link. Nothing is written when the lookup fails.
        """
        name = self.name if stream_name is None else stream.Name(stream_name)
        body = dto.encode_metadata(metadata)
        url = feed.fetch_metadata_url(self._http, name)
        self._post(
            name,
            url,
            body,
            {"Content-Type": dto.EVENTS_CONTENT_TYPE},
        )

    def _post(
        self,
        name: stream.Name,
        url: str,
        body: bytes,
        headers: dict[str, str],
    ) -> None:
        logger.debug("POST %s to stream %s", url, name)
        try:
            response = self._http.post(url, content=body, headers=headers)
        except httpx.DecodingError as exc:
            raise MalformedResponse(f"Unreadable response for stream {name}") from exc
        except httpx.RequestError as exc:
            raise TransportFailure(f"Could not write to stream {name}") from exc

        try:
            classifier.check(response)
        except ResponseError as error:
            logger.warning(
                "Store rejected write to stream %s with HTTP %d",
                name,
                error.status_code,
            )
            raise
