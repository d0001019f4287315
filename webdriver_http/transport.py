"""HTTP transport with jittered retry on connection-level failures"""

import random
import time
from typing import Any, Callable, Iterable, Mapping, Optional, Tuple, Union

import httpx
from loguru import logger

from .config import DEFAULT_REQUEST_TIMEOUT, MAX_ATTEMPTS, MAX_JITTER, MIN_JITTER
from .exceptions import RetriesExhaustedError
from .models import Method, RetryState


def describe_error(error: Exception) -> str:
    return f"{type(error).__name__}: {error}"


class Transport:
    """
    Sends requests over a pooled httpx client.

    Only transport-level failures are retried, with a random sleep of
    MIN_JITTER..MAX_JITTER milliseconds between attempts. Any HTTP response,
    whatever its status code, is returned to the caller as is.
    """

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        max_attempts: int = MAX_ATTEMPTS,
        max_jitter: int = MAX_JITTER,
        sleep: Callable[[float], None] = time.sleep,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize transport.

        Args:
            client: Shared httpx client (connection pool). When omitted the
                transport creates one and closes it in close().
            max_attempts: Total attempts before giving up
            max_jitter: Upper bound of the retry sleep in milliseconds
            sleep: Blocking sleep taking seconds
            rng: Random source for jitter
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if max_jitter < MIN_JITTER:
            raise ValueError(f"max_jitter must be at least {MIN_JITTER}")

        self._owns_client = client is None
        self.client = client or httpx.Client(timeout=DEFAULT_REQUEST_TIMEOUT)
        self.max_attempts = max_attempts
        self.max_jitter = max_jitter
        self.sleep = sleep
        self.rng = rng or random.Random()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def jitter(self) -> int:
        """Random retry delay in milliseconds, inclusive bounds"""
        return self.rng.randint(MIN_JITTER, self.max_jitter)

    def send(
        self,
        method: Union[Method, str],
        url: str,
        body: Union[str, bytes],
        headers: Iterable[Tuple[str, str]],
        request_options: Optional[Mapping[str, Any]] = None,
    ) -> httpx.Response:
        """
        Perform the HTTP exchange, retrying transport failures.

        Args:
            request_options: Passed through untouched to httpx.Client.request
                (timeout, extensions, ...)

        Raises:
            RetriesExhaustedError: every attempt failed at the transport level
        """
        method = Method.parse(method)
        headers = list(headers)
        extra = dict(request_options or {})
        state = RetryState(max_attempts=self.max_attempts)

        while not state.exhausted:
            logger.debug(f"→ {method.value} {url} (attempt {state.attempt + 1})")
            try:
                response = self.client.request(
                    method.value, url, content=body, headers=headers, **extra
                )
            except httpx.TransportError as e:
                state.record_failure(describe_error(e))
                if state.exhausted:
                    break

                delay = self.jitter()
                logger.warning(
                    f"⚠️ Attempt {state.attempt}/{self.max_attempts} failed "
                    f"({method.value} {url}): {describe_error(e)}"
                )
                logger.info(f"   Retrying in {delay}ms...")
                self.sleep(delay / 1000)
                continue

            if state.attempt > 0:
                logger.success(f"✓ Recovered after {state.attempt} retries")
            logger.debug(f"← Response {response.status_code} ({method.value} {url})")
            return response

        logger.error(
            f"❌ {method.value} {url} failed after {state.attempt} attempts"
        )
        raise RetriesExhaustedError(state.reasons)
