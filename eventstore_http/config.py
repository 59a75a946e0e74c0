from typing import TypeAlias

from pydantic import AnyHttpUrl, BaseModel, ConfigDict, Field, PositiveFloat

Seconds: TypeAlias = PositiveFloat


class Config(BaseModel):
    """
    Configuration of the connection to the store's HTTP API.

    Attributes:
        url (AnyHttpUrl):
            Base URL of the store, stream paths are resolved against it.
        timeout (Seconds | None):
            Optional timeout (in seconds) for every request.
            If None, the default httpx timeout is used.
        username (str | None):
            User for HTTP basic auth. Used only together with `password`.
        password (str | None):
            Password for HTTP basic auth.
        headers (dict[str, str]):
            Extra headers sent with every request.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    url: AnyHttpUrl = Field(default="http://127.0.0.1:2113", validate_default=True)
    timeout: Seconds | None = None
    username: str | None = None
    password: str | None = None
    headers: dict[str, str] = Field(default_factory=dict)
