"""Reusable helpers for building canned provider responses."""

import httpx
from authlib.integrations.httpx_client import AsyncOAuth2Client

PROFILE_URL = "https://open-api.example.cn/v2/me"


def make_response(status_code=200, text="", url=PROFILE_URL):
    """Build a real httpx.Response so raise_for_status() behaves normally."""
    return httpx.Response(status_code, text=text, request=httpx.Request("GET", url))


def mock_oauth_client(mock_client):
    """Return the object `async with AsyncOAuth2Client(...) as c` yields."""
    return mock_client.return_value.__aenter__.return_value


def real_oauth_client(handler):
    """
    Factory for a real AsyncOAuth2Client whose requests go to `handler`.
    
    Patch it in place of AsyncOAuth2Client so Authlib still signs the
    requests and parses the token responses, but nothing leaves the process.
    """
    transport = httpx.MockTransport(handler)
    
    def factory(**kwargs):
        return AsyncOAuth2Client(transport=transport, **kwargs)
    
    return factory
