"""Shared fixtures: a configuration and a recording stand-in for requests.Session."""

from typing import Optional
from urllib.parse import parse_qsl, urlsplit

import pytest
import requests

from amazon_mws.api.base import RequestExecutor
from amazon_mws.client import MWSClient
from amazon_mws.config import MWSConfig

MARKETPLACE_ID = "A1F83G8C2ARO7P"
SELLER_ID = "SELLER123"


def make_response(
    body: str = "",
    status_code: int = 200,
    content_type: str = "text/xml",
) -> requests.Response:
    """Build a real requests.Response carrying ``body``."""
    response = requests.Response()
    response.status_code = status_code
    response._content = body.encode("utf-8")
    response.encoding = "utf-8"
    response.headers["Content-Type"] = content_type
    return response


def mws_response(operation: str, result: str) -> str:
    """Wrap ``result`` the way MWS wraps operation payloads."""
    return (
        '<?xml version="1.0"?>'
        f'<{operation}Response xmlns="https://mws.amazonservices.com/">'
        f"<{operation}Result>{result}</{operation}Result>"
        f"<ResponseMetadata><RequestId>abc-123</RequestId></ResponseMetadata>"
        f"</{operation}Response>"
    )


class RecordingSession:
    """Records each request and replays queued responses in order."""

    def __init__(self, *responses: requests.Response) -> None:
        self.responses = list(responses)
        self.calls: list[dict] = []

    def queue(self, response: requests.Response) -> None:
        self.responses.append(response)

    def request(self, method: str, url: str, data: Optional[bytes] = None, headers=None, timeout=None):
        self.calls.append({"method": method, "url": url, "data": data, "headers": headers, "timeout": timeout})
        if not self.responses:
            raise AssertionError(f"Unexpected request to {url}")
        return self.responses.pop(0)

    def query(self, index: int = -1) -> dict[str, str]:
        """Decoded query parameters of a recorded call."""
        return dict(parse_qsl(urlsplit(self.calls[index]["url"]).query, keep_blank_values=True))


@pytest.fixture
def config():
    return MWSConfig(
        marketplace_id=MARKETPLACE_ID,
        seller_id=SELLER_ID,
        access_key_id="AKIDEXAMPLE",
        secret_access_key="secret",
    )


@pytest.fixture
def session():
    return RecordingSession()


@pytest.fixture
def executor(config, session):
    return RequestExecutor(config, session)


@pytest.fixture
def client(config, session):
    return MWSClient(config, session, message_id_factory=iter(range(1, 1000)).__next__)
