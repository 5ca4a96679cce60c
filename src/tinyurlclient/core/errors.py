from __future__ import annotations
import asyncio
from dataclasses import dataclass
from typing import Optional


class TinyUrlError(Exception):
    """Base class for everything the client raises on purpose."""


class InvalidArgumentError(TinyUrlError, ValueError):
    """
    Local validation failure. Raised before any request is sent.

    param_name: the offending argument ("url", "alias", "http_client", "request")
    reason: "missing", "malformed" or "format"
    """

    def __init__(self, param_name: str, reason: str, message: Optional[str] = None):
        self.param_name = param_name
        self.reason = reason
        super().__init__(message or f"Invalid argument '{param_name}': {reason}")


class TinyUrlServiceError(TinyUrlError):
    """
    The request was attempted and the service (or the network) did not deliver
    a short URL. The transport exception, if any, is chained as __cause__.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.body = body
        super().__init__(message)


@dataclass(frozen=True)
class ApiError:
    code: str
    message: str


ERROR_CODES: dict[type[BaseException], str] = {
    InvalidArgumentError: "INVALID_ARGUMENT",
    TinyUrlServiceError: "SERVICE_ERROR",
    asyncio.CancelledError: "CANCELLED",
}


def describe_error(exc: BaseException) -> ApiError:
    """
    Converts an exception raised by the client into (code, message).

    Subclasses resolve to the code of their nearest registered base;
    anything unregistered becomes UNEXPECTED_ERROR.
    """
    code = "UNEXPECTED_ERROR"
    for klass in type(exc).__mro__:
        if klass in ERROR_CODES:
            code = ERROR_CODES[klass]
            break

    message = str(exc)
    if not message:
        message = "Operation cancelled" if code == "CANCELLED" else type(exc).__name__
    return ApiError(code=code, message=message)
