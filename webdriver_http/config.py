"""Configuration constants for the WebDriver HTTP client"""

# Retry configuration
MAX_ATTEMPTS = 5  # 5th transport failure is fatal
MIN_JITTER = 1  # Milliseconds
MAX_JITTER = 50  # Milliseconds

RETRY_EXHAUSTED_PREFIX = "webdriver_http had an internal issue with httpx:"

# Legacy wire protocol status for a protocol-level error
STATUS_OBSCURED = 13

# Timeouts
DEFAULT_REQUEST_TIMEOUT = 30.0  # Seconds

DEFAULT_HEADERS = (
    ("Accept", "application/json"),
    ("Content-Type", "application/json"),
)

# Remote exception identifiers (Selenium server "class" field)
STALE_ELEMENT_CLASS = "org.openqa.selenium.StaleElementReferenceException"
INVALID_SELECTOR_CLASS = "org.openqa.selenium.InvalidSelectorException"
INVALID_ELEMENT_STATE_CLASS = "org.openqa.selenium.InvalidElementStateException"

# Message phrasings, matched at the start of value["message"]
STALE_ELEMENT_MESSAGES = (
    "Stale element reference",
    "stale element reference",
    "An element command failed because the referenced element is no longer available",
)
INVALID_SELECTOR_MESSAGE = "invalid selector"
UNEXPECTED_ALERT_MESSAGE = "unexpected alert"

# Locator strategy names for the find-element endpoints
LOCATOR_STRATEGY_MAP = {
    "xpath": "xpath",
    "css": "css selector",
}
