"""Classification of remote error payloads"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from loguru import logger

from .config import (
    INVALID_ELEMENT_STATE_CLASS,
    INVALID_SELECTOR_CLASS,
    INVALID_SELECTOR_MESSAGE,
    STALE_ELEMENT_CLASS,
    STALE_ELEMENT_MESSAGES,
    UNEXPECTED_ALERT_MESSAGE,
)
from .exceptions import UnknownRemoteError
from .models import DecodedResponse, Err, Ok, Result, WebDriverErrorKind


@dataclass(frozen=True)
class Rule:
    """Maps a matching response value to an error kind"""

    description: str
    matches: Callable[[Dict[str, Any]], bool]
    kind: WebDriverErrorKind


def class_is(name: str) -> Callable[[Dict[str, Any]], bool]:
    return lambda value: value.get("class") == name


def message_starts_with(prefix: str) -> Callable[[Dict[str, Any]], bool]:
    def matches(value: Dict[str, Any]) -> bool:
        message = value.get("message")
        return isinstance(message, str) and message.startswith(prefix)

    return matches


# Evaluated in order, first match wins
RULES: List[Rule] = [
    Rule(
        f"class {STALE_ELEMENT_CLASS}",
        class_is(STALE_ELEMENT_CLASS),
        WebDriverErrorKind.STALE_REFERENCE,
    ),
    *[
        Rule(
            f"message {prefix!r}",
            message_starts_with(prefix),
            WebDriverErrorKind.STALE_REFERENCE,
        )
        for prefix in STALE_ELEMENT_MESSAGES
    ],
    Rule(
        f"message {INVALID_SELECTOR_MESSAGE!r}",
        message_starts_with(INVALID_SELECTOR_MESSAGE),
        WebDriverErrorKind.INVALID_SELECTOR,
    ),
    Rule(
        f"class {INVALID_SELECTOR_CLASS}",
        class_is(INVALID_SELECTOR_CLASS),
        WebDriverErrorKind.INVALID_SELECTOR,
    ),
    Rule(
        f"class {INVALID_ELEMENT_STATE_CLASS}",
        class_is(INVALID_ELEMENT_STATE_CLASS),
        WebDriverErrorKind.INVALID_SELECTOR,
    ),
    Rule(
        f"message {UNEXPECTED_ALERT_MESSAGE!r}",
        message_starts_with(UNEXPECTED_ALERT_MESSAGE),
        WebDriverErrorKind.UNEXPECTED_ALERT,
    ),
]


def classify(response: DecodedResponse) -> Result:
    """
    Classify a decoded response.

    Returns:
        Err(kind) for a known remote error shape, Ok(response) otherwise

    Raises:
        UnknownRemoteError: value has "error" and "message" but matches no rule
    """
    value = response.value
    if not isinstance(value, dict):
        return Ok(response)

    for rule in RULES:
        if rule.matches(value):
            logger.debug(f"Remote error matched {rule.description} → {rule.kind.value}")
            return Err(rule.kind)

    if "error" in value and "message" in value:
        logger.error(f"❌ Unrecognized remote error: {value}")
        raise UnknownRemoteError(value["message"], value)

    return Ok(response)
