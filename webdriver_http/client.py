"""WebDriver wire protocol client"""

from typing import Any, Iterable, Mapping, Optional, Tuple, Union

from loguru import logger

from .classifier import classify
from .decoder import decode
from .encoder import encode
from .models import Command, Err, Method, Params, RequestOptions, Result
from .transport import Transport


class HTTPClient:
    """
    Sends WebDriver commands and normalizes the responses:
    - Request body encoding (JSON or passthrough)
    - Jittered retry on connection failures
    - JSON envelope decoding with legacy status check
    - Remote error classification into WebDriverErrorKind

    Typed failures come back as Err. Retry exhaustion and unrecognized
    remote errors raise FatalWebDriverError subclasses.
    """

    def __init__(
        self,
        transport: Optional[Transport] = None,
        request_options: Optional[Mapping[str, Any]] = None,
    ):
        """
        Initialize client.

        Args:
            transport: Transport to send through (creates one if omitted)
            request_options: Forwarded untouched to every httpx request.
                Empty by default so the pool's own timeouts apply.
        """
        self._owns_transport = transport is None
        self.transport = transport or Transport()
        self.request_options = dict(request_options or {})

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        if self._owns_transport:
            self.transport.close()

    def request(
        self,
        method: Union[Method, str],
        url: str,
        params: Optional[Params] = None,
        opts: Optional[RequestOptions] = None,
        headers: Optional[Iterable[Tuple[str, str]]] = None,
    ) -> Result:
        """Build a command from the arguments and execute it"""
        return self.execute(Command.build(method, url, params, opts, headers))

    def execute(self, command: Command) -> Result:
        body = encode(command)
        response = self.transport.send(
            command.method,
            command.url,
            body,
            command.headers,
            self.request_options,
        )

        decoded = decode(response)
        if isinstance(decoded, Err):
            logger.debug(
                f"Decode failed for {command.method.value} {command.url}: {decoded.reason}"
            )
            return decoded

        return classify(decoded.response)
