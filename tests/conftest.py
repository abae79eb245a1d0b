# tests/conftest.py
import json
from unittest.mock import AsyncMock, MagicMock

import pytest
import requests

from zendesk_client.config import ClientOptions
from zendesk_client.transport import Transport

TRANSPORT_METHODS = ("request", "get", "post", "put", "delete", "get_all", "request_all")


@pytest.fixture
def transport():
    """A transport double recording every call made by a resource client."""
    fake = MagicMock(spec=Transport)
    for name in TRANSPORT_METHODS:
        setattr(fake, name, AsyncMock(name=name, return_value=None))
    fake.base_url = "https://acme.zendesk.com/api/v2"
    return fake


@pytest.fixture
def options():
    return ClientOptions(subdomain="acme", username="agent@acme.com", token="secret")


def _make_response(status: int, payload=None, url: str = "https://acme.zendesk.com/api/v2") -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response.url = url
    response.headers["Content-Type"] = "application/json"
    if payload is None:
        response._content = b""
    else:
        response._content = json.dumps(payload).encode("utf-8")
    response.request = requests.Request("GET", url).prepare()
    return response


@pytest.fixture
def make_response():
    return _make_response


@pytest.fixture
def http_transport(options):
    """A real transport whose session.request is replaced per test."""
    session = requests.Session()
    session.request = MagicMock(name="request")
    return Transport("https://acme.zendesk.com/api/v2", options, session=session)
