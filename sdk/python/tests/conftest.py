import random

import base58
import pytest
from Crypto.Hash import RIPEMD160

from eos_sdk import EndpointPool, EosClient
from eos_sdk.models import (
    EndpointUnsupported,
    RpcOk,
    SemanticFailure,
    TransportFailure,
)

ENDPOINTS = ['https://node-a.example', 'https://node-b.example', 'https://node-c.example']


def legacy_key(key: bytes) -> str:
    """EOS-prefixed public key string for 33 compressed key bytes."""
    checksum = RIPEMD160.new(key).digest()[:4]
    return 'EOS' + base58.b58encode(key + checksum).decode('ascii')


class FakeTransport:
    """Transport returning scripted outcomes and recording every call."""

    def __init__(self, responses=None):
        # each response is raw data (wrapped in RpcOk) or an outcome factory
        self.responses = list(responses or [])
        self.calls = []
        self.closed = False

    def queue(self, *responses):
        self.responses.extend(responses)

    def call(self, endpoint, path, params=None):
        self.calls.append((endpoint, path, params))
        if not self.responses:
            raise AssertionError(f"Unexpected call to {endpoint}{path}")
        response = self.responses.pop(0)
        if callable(response):
            return response(endpoint, path)
        return RpcOk(endpoint=endpoint, path=path, data=response)

    def close(self):
        self.closed = True


def transport_failure(message='Invalid JSON response (HTTP 502)'):
    return lambda endpoint, path: TransportFailure(endpoint=endpoint, path=path, message=message)


def unknown_endpoint():
    return lambda endpoint, path: EndpointUnsupported(
        endpoint=endpoint, path=path, message='Unknown Endpoint', status_code=404
    )


def semantic_failure(message='unknown key', code=3060002):
    return lambda endpoint, path: SemanticFailure(
        endpoint=endpoint, path=path, message=message, status_code=500, code=code
    )


@pytest.fixture
def pool():
    return EndpointPool(ENDPOINTS, rng=random.Random(42))


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def client(pool, transport):
    return EosClient(pool=pool, transport=transport)
