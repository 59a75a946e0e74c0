from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorResponse:
    """Raw HTTP response the store rejected a request with."""

    status_code: int
    body: bytes = b""
    method: str | None = None
    url: str | None = None


class EventStoreException(Exception):
    pass


class ResponseError(EventStoreException):
    """Base class for errors reported by the store through an HTTP status."""

    def __init__(self, error_response: ErrorResponse) -> None:
        self.error_response = error_response
        super().__init__(error_response)

    @property
    def status_code(self) -> int:
        return self.error_response.status_code

    def __str__(self) -> str:
        response = self.error_response
        if response.method and response.url:
            return f"{response.method} {response.url} -> HTTP {response.status_code}"
        return f"HTTP {response.status_code}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.error_response!r})"


class ConcurrencyViolation(ResponseError):
    pass


class Unauthorized(ResponseError):
    pass


class TemporarilyUnavailable(ResponseError):
    pass


class Unexpected(ResponseError):
    pass


class TransportFailure(EventStoreException):
    pass


class MalformedResponse(TransportFailure):
    pass
