import logging

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from eventstore_http import classifier, stream
from eventstore_http.exceptions import MalformedResponse, TransportFailure

logger = logging.getLogger(__name__)

FEED_CONTENT_TYPE = "application/vnd.eventstore.atom+json"
METADATA_RELATION = "metadata"


class Link(BaseModel):
    model_config = ConfigDict(frozen=True)

    uri: str
    relation: str


class Entry(BaseModel):
    title: str = ""
    id: str = ""
    updated: str = ""
    summary: str = ""
    links: list[Link] = Field(default_factory=list)


class Feed(BaseModel):
    """First page of a stream's Atom feed, reduced to what writes need."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = ""
    id: str = ""
    updated: str = ""
    stream_id: str = Field(default="", alias="streamId")
    head_of_stream: bool = Field(default=False, alias="headOfStream")
    self_url: str = Field(default="", alias="selfUrl")
    e_tag: str = Field(default="", alias="eTag")
    links: list[Link] = Field(default_factory=list)
    entries: list[Entry] = Field(default_factory=list)

    def link(self, relation: str) -> str | None:
        found = (link.uri for link in self.links if link.relation == relation)
        return next(found, None)

    @property
    def metadata_url(self) -> str | None:
        return self.link(METADATA_RELATION)

    def pretty_print(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)


def fetch_first_page(http: httpx.Client, name: stream.Name) -> Feed:
    logger.debug("Reading first feed page of stream %s", name)
    try:
        response = http.get(name.first_page, headers={"Accept": FEED_CONTENT_TYPE})
    except httpx.DecodingError as exc:
        raise MalformedResponse(f"Feed of stream {name} is unreadable") from exc
    except httpx.RequestError as exc:
        raise TransportFailure(f"Could not read feed of stream {name}") from exc
    classifier.check(response)
    try:
        return Feed.model_validate_json(response.content)
    except ValidationError as exc:
        raise MalformedResponse(f"Feed of stream {name} is not parseable") from exc


def fetch_metadata_url(http: httpx.Client, name: stream.Name) -> str:
    """Discovers where metadata of a stream is written to.

    The store doesn't guarantee the shape of that URL, so it has to be read
    from the `metadata` link of the stream's first feed page every time.

    Args:
        http: Client to issue the feed request with.
        name: The stream to look up.

    Returns:
        The metadata URL exactly as the feed announces it.
    """
    url = fetch_first_page(http, name).metadata_url
    if url is None:
        raise MalformedResponse(f"Feed of stream {name} has no metadata link")
    logger.debug("Metadata of stream %s lives at %s", name, url)
    return url
