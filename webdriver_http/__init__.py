"""WebDriver HTTP client
Transport, response decoding and error classification for the JSON wire protocol
"""

__version__ = "0.1.0"

from .classifier import RULES, Rule, classify
from .client import HTTPClient
from .decoder import check_status, decode
from .encoder import encode, to_params
from .exceptions import (
    FatalWebDriverError,
    RequestEncodingError,
    ResponseDecodeError,
    RetriesExhaustedError,
    UnknownRemoteError,
    WebDriverHTTPError,
)
from .logging_config import setup_logging
from .models import (
    Command,
    DecodedResponse,
    Err,
    Method,
    Ok,
    RequestOptions,
    Result,
    RetryState,
    WebDriverErrorKind,
    default_headers,
    default_headers_map,
)
from .transport import Transport

__all__ = [
    "__version__",
    "HTTPClient",
    "Transport",
    "Command",
    "DecodedResponse",
    "Err",
    "Method",
    "Ok",
    "RequestOptions",
    "Result",
    "RetryState",
    "WebDriverErrorKind",
    "RULES",
    "Rule",
    "classify",
    "check_status",
    "decode",
    "encode",
    "to_params",
    "default_headers",
    "default_headers_map",
    "setup_logging",
    "FatalWebDriverError",
    "RequestEncodingError",
    "ResponseDecodeError",
    "RetriesExhaustedError",
    "UnknownRemoteError",
    "WebDriverHTTPError",
]
