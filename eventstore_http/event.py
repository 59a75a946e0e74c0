from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

METADATA_EVENT_TYPE = "MetaData"


class Event(BaseModel):
    """Event as exchanged with the store.

    An empty `event_id` asks for one to be assigned, see `new_event`.

    Example usage:
    ```
    event = new_event("", "OrderCancelled", {"order_id": "#123"})
    stream_writer.append(event)
    ```
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    event_id: str = Field(default="", alias="eventId")
    event_type: str = Field(alias="eventType")
    data: Any = None
    metadata: Any = None

    def pretty_print(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)


def new_event(
    event_id: str,
    event_type: str,
    data: Any,
    metadata: Any = None,
) -> Event:
    return Event(
        event_id=event_id or str(uuid4()),
        event_type=event_type,
        data=data,
        metadata=metadata,
    )
