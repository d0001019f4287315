"""Request body encoding"""

from collections.abc import Mapping
from typing import Any, Dict, Tuple, Union

import orjson

from .config import LOCATOR_STRATEGY_MAP
from .exceptions import RequestEncodingError
from .models import Command


def encode(command: Command) -> Union[str, bytes]:
    """
    Build the wire body for a command.

    Returns:
        "" for empty params, the params string untouched when JSON encoding
        is disabled, otherwise the JSON-encoded params.

        Non-string mapping keys (ints, enums, ...) are encoded as strings.

    Raises:
        RequestEncodingError: params are not JSON serializable, or are not
            str/bytes while JSON encoding is disabled
    """
    params = command.params

    if isinstance(params, Mapping) and len(params) == 0:
        return ""

    if not command.options.encode_json:
        if not isinstance(params, (str, bytes)):
            raise RequestEncodingError(
                f"Raw params for {command.method.value} {command.url} must be "
                f"str or bytes, got {type(params).__name__}"
            )
        return params

    if isinstance(params, Mapping):
        params = dict(params)

    try:
        return orjson.dumps(params, option=orjson.OPT_NON_STR_KEYS)
    except orjson.JSONEncodeError as e:
        raise RequestEncodingError(
            f"Cannot encode params for {command.method.value} {command.url}: {e}"
        ) from e


def to_params(compiled_query: Tuple[str, str]) -> Dict[str, Any]:
    """Convert a compiled (strategy, selector) locator to find-element params"""
    strategy, selector = compiled_query
    try:
        using = LOCATOR_STRATEGY_MAP[strategy]
    except KeyError:
        raise ValueError(f"Unknown locator strategy: {strategy!r}") from None
    return {"using": using, "value": selector}
