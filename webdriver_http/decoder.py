"""Response decoding and legacy status check"""

import httpx
import orjson
from loguru import logger

from .config import STATUS_OBSCURED
from .exceptions import ResponseDecodeError
from .models import DecodedResponse, Err, Ok, Result


def decode(response: httpx.Response) -> Result:
    """
    Decode a raw HTTP response into a wire envelope.

    204 responses are never parsed and always decode to {"value": None}.
    """
    if response.status_code == 204:
        return Ok(DecodedResponse({"value": None}))

    body = response.content
    try:
        decoded = orjson.loads(body)
    except orjson.JSONDecodeError as e:
        logger.debug(f"Invalid JSON in {response.status_code} response: {e}")
        return Err(ResponseDecodeError(f"Invalid JSON response: {e}", body, e))

    if not isinstance(decoded, dict):
        return Err(
            ResponseDecodeError(
                f"Expected a JSON object, got {type(decoded).__name__}", body
            )
        )

    return check_status(DecodedResponse(decoded))


def check_status(response: DecodedResponse) -> Result:
    """Turn the legacy obscured status into an error message"""
    if response.status == STATUS_OBSCURED:
        value = response.value
        message = value.get("message") if isinstance(value, dict) else None
        return Err(message)

    return Ok(response)
