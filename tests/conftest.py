import random

import httpx
import pytest

from webdriver_http.transport import Transport


@pytest.fixture
def sleeps():
    """Captures retry sleeps instead of blocking"""
    return []


@pytest.fixture
def make_transport(sleeps):
    """Build a Transport over an httpx.MockTransport handler"""
    created = []

    def factory(handler, **kwargs):
        client = httpx.Client(transport=httpx.MockTransport(handler))
        created.append(client)
        kwargs.setdefault("sleep", sleeps.append)
        kwargs.setdefault("rng", random.Random(1234))
        return Transport(client=client, **kwargs)

    yield factory

    for client in created:
        client.close()
