__all__ = [
    "ERRORS_BY_STATUS",
    "check",
    "classify",
    "is_success",
]

from collections.abc import Mapping
from types import MappingProxyType

import httpx

from eventstore_http.exceptions import (
    ConcurrencyViolation,
    ErrorResponse,
    ResponseError,
    TemporarilyUnavailable,
    Unauthorized,
    Unexpected,
)

ERRORS_BY_STATUS: Mapping[int, type[ResponseError]] = MappingProxyType(
    {
        httpx.codes.BAD_REQUEST: ConcurrencyViolation,
        httpx.codes.UNAUTHORIZED: Unauthorized,
        httpx.codes.SERVICE_UNAVAILABLE: TemporarilyUnavailable,
    }
)


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def classify(
    status_code: int,
    body: bytes = b"",
    method: str | None = None,
    url: str | None = None,
) -> ResponseError | None:
    """Maps a store response onto the error it stands for.

    Statuses without an entry in `ERRORS_BY_STATUS` become `Unexpected`.

    Examples:
        >>> classify(201, b"") is None
        True
        >>> classify(400, b"")
        ConcurrencyViolation(ErrorResponse(status_code=400, ...))
        >>> classify(505, b"")
        Unexpected(ErrorResponse(status_code=505, ...))

    Args:
        status_code: HTTP status code of the response.
        body: Raw response body.
        method: Method of the request that got the response, for diagnostics.
        url: URL of the request that got the response, for diagnostics.

    Returns:
        None for 2xx responses, otherwise the error instance (not raised).
    """
    if is_success(status_code):
        return None
    error_type = ERRORS_BY_STATUS.get(status_code, Unexpected)
    return error_type(
        ErrorResponse(status_code=status_code, body=body, method=method, url=url)
    )


def check(response: httpx.Response) -> None:
    """Raises the classified error for a non-2xx response."""
    error = classify(
        response.status_code,
        response.content,
        method=response.request.method,
        url=str(response.request.url),
    )
    if error is not None:
        raise error
