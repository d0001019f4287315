"""Custom exception classes for the WebDriver HTTP client"""

from typing import Any, List, Optional, Union

from .config import RETRY_EXHAUSTED_PREFIX


class WebDriverHTTPError(Exception):
    """Base exception for client errors"""

    pass


class FatalWebDriverError(WebDriverHTTPError):
    """Unrecoverable failure, aborts the current operation

    Never returned as a result value. Callers that want to survive it must
    catch it explicitly.
    """

    pass


class RequestEncodingError(FatalWebDriverError):
    """Raised when command params cannot be serialized to JSON"""

    pass


class RetriesExhaustedError(FatalWebDriverError):
    """Raised when every transport attempt failed

    `reasons` holds each distinct transport failure in first-seen order,
    as collected by RetryState.
    """

    def __init__(self, reasons: List[str]):
        self.reasons = list(reasons)
        super().__init__("\n".join([RETRY_EXHAUSTED_PREFIX] + self.reasons))


class UnknownRemoteError(FatalWebDriverError):
    """Raised for a remote error payload that matches no known shape"""

    def __init__(self, message: str, value: Optional[Any] = None):
        self.message = message
        self.value = value
        super().__init__(message)


class ResponseDecodeError(WebDriverHTTPError):
    """Response body could not be decoded into a wire envelope

    Returned inside ``Err`` by the decoder rather than raised.
    """

    def __init__(
        self,
        message: str,
        body: Union[str, bytes] = b"",
        cause: Optional[Exception] = None,
    ):
        self.body = body
        self.cause = cause
        super().__init__(message)
