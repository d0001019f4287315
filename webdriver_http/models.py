"""Data models and enums for the WebDriver HTTP client"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from .config import DEFAULT_HEADERS, MAX_ATTEMPTS

Headers = Tuple[Tuple[str, str], ...]
Params = Union[Mapping[str, Any], str]


class Method(Enum):
    """HTTP methods used by the WebDriver wire protocol"""

    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"

    @classmethod
    def parse(cls, method: Union["Method", str]) -> "Method":
        """Accept a Method or a case-insensitive method name"""
        if isinstance(method, cls):
            return method
        try:
            return cls(str(method).upper())
        except ValueError:
            raise ValueError(f"Unsupported HTTP method: {method!r}") from None


class WebDriverErrorKind(Enum):
    """Recoverable protocol errors callers are expected to branch on"""

    STALE_REFERENCE = "stale_reference"  # Re-locate the element
    INVALID_SELECTOR = "invalid_selector"
    UNEXPECTED_ALERT = "unexpected_alert"


@dataclass(frozen=True)
class RequestOptions:
    """Per-command encoding options"""

    encode_json: bool = True


def default_headers() -> List[Tuple[str, str]]:
    return list(DEFAULT_HEADERS)


def default_headers_map() -> Dict[str, str]:
    headers = {}
    for key, value in default_headers():
        headers[key] = value
    return headers


@dataclass(frozen=True)
class Command:
    """A fully built request, immutable once constructed"""

    method: Method
    url: str
    params: Params = field(default_factory=dict)
    headers: Headers = DEFAULT_HEADERS
    options: RequestOptions = RequestOptions()

    def __post_init__(self):
        object.__setattr__(self, "method", Method.parse(self.method))
        if isinstance(self.params, Mapping):
            # Shallow read-only view; the caller keeps no handle to mutate it
            object.__setattr__(self, "params", MappingProxyType(dict(self.params)))
        object.__setattr__(self, "headers", tuple((k, v) for k, v in self.headers))

    @classmethod
    def build(
        cls,
        method: Union[Method, str],
        url: str,
        params: Optional[Params] = None,
        options: Optional[RequestOptions] = None,
        headers: Optional[Iterable[Tuple[str, str]]] = None,
    ) -> "Command":
        return cls(
            method=method,
            url=url,
            params={} if params is None else params,
            headers=tuple(default_headers() if headers is None else headers),
            options=options or RequestOptions(),
        )


@dataclass
class RetryState:
    """Attempt counter and distinct failure reasons for one send()"""

    max_attempts: int = MAX_ATTEMPTS
    attempt: int = 0
    reasons: List[str] = field(default_factory=list)

    @property
    def exhausted(self) -> bool:
        return self.attempt >= self.max_attempts

    def record_failure(self, reason: str) -> None:
        """Count a failed attempt, keeping each reason once"""
        self.attempt += 1
        if reason not in self.reasons:
            self.reasons.append(reason)


@dataclass(frozen=True)
class DecodedResponse:
    """Decoded wire envelope: {"status": <int, optional>, "value": <any>}"""

    body: Dict[str, Any]

    @property
    def status(self) -> Optional[int]:
        return self.body.get("status")

    @property
    def value(self) -> Any:
        return self.body.get("value")


@dataclass(frozen=True)
class Ok:
    """Successful result carrying the decoded response"""

    response: DecodedResponse

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Typed failure: a WebDriverErrorKind, a ResponseDecodeError or a message"""

    reason: Any

    @property
    def is_ok(self) -> bool:
        return False


Result = Union[Ok, Err]
