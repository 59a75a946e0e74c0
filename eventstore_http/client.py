from types import TracebackType
from typing import Any

import httpx
from typing_extensions import Self

from eventstore_http import stream
from eventstore_http.config import Config
from eventstore_http.stream_writer import StreamWriter


class Client:
    """Entry point to the store's HTTP API.

    Example usage:
    ```
    with Client(Config(url="http://127.0.0.1:2113")) as client:
        client.new_stream_writer("orders-1").append(event)
    ```

    An `httpx.Client` passed in is used as is and left open on `close`,
    `config` only shapes a client built here.
    """

    def __init__(
        self,
        config: Config | None = None,
        http: httpx.Client | None = None,
    ) -> None:
        self.config = config or Config()
        self._owns_http = http is None
        self._http = http or httpx.Client(**_client_options(self.config))

    def new_stream_writer(self, stream_name: str) -> StreamWriter:
        return StreamWriter(self._http, stream.Name(stream_name))

    def set_header(self, name: str, value: str) -> None:
        self._http.headers[name] = value

    def delete_header(self, name: str) -> None:
        self._http.headers.pop(name, None)

    def set_basic_auth(self, username: str, password: str) -> None:
        self._http.auth = httpx.BasicAuth(username, password)

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()


def _client_options(config: Config) -> dict[str, Any]:
    options: dict[str, Any] = {
        "base_url": str(config.url),
        "headers": config.headers,
    }
    if config.timeout is not None:
        options["timeout"] = config.timeout
    if config.username is not None and config.password is not None:
        options["auth"] = httpx.BasicAuth(config.username, config.password)
    return options
