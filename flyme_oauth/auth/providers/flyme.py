"""
Flyme OAuth 2.0 provider.

Supplies the Flyme endpoint URLs and turns the response of Flyme's
"who am I" API into a normalized Profile. Flyme wraps every payload in an
envelope with its own status code, independent of the HTTP status:

    {"code": "200", "value": {"openId": "...", "nickname": "...", "icon": "..."}}

Usage:
    strategy = FlymeStrategy(
        StrategyOptions(
            client_id="123-456-789",
            client_secret="shhh-its-a-secret",
            callback_url="https://www.example.net/auth/flyme/callback",
        ),
        verify=lambda access_token, refresh_token, profile: find_or_create(profile),
    )
"""

import json
import logging

import httpx
from authlib.common.errors import AuthlibBaseError
from authlib.integrations.httpx_client import AsyncOAuth2Client

from flyme_oauth.auth.options import StrategyOptions
from flyme_oauth.auth.providers.base import Profile
from flyme_oauth.auth.strategy import OAuth2Strategy, VerifyCallback
from flyme_oauth.exceptions import (
    InternalOAuthError,
    ProfileParseError,
    ProviderRejectedError,
)

logger = logging.getLogger(__name__)

PROVIDER_NAME = "flyme"

AUTHORIZATION_URL = "https://open-api.example.cn/oauth/authorize"
TOKEN_URL = "https://open-api.example.cn/oauth/token"
USER_PROFILE_URL = "https://open-api.example.cn/v2/me"

# Flyme sends its envelope code as a string
SUCCESS_CODE = "200"


class FlymeProvider:
    """ProviderAdapter for Flyme accounts."""
    
    name = PROVIDER_NAME
    
    def __init__(self, options: StrategyOptions):
        self.client_id = options.client_id
        self.client_secret = options.client_secret
        self.timeout = options.timeout
        self._authorization_url = options.authorization_url or AUTHORIZATION_URL
        self._token_url = options.token_url or TOKEN_URL
        self.user_profile_url = options.user_profile_url or USER_PROFILE_URL
    
    @property
    def authorization_url(self) -> str:
        return self._authorization_url
    
    @property
    def token_url(self) -> str:
        return self._token_url
    
    async def fetch_profile(self, access_token: str) -> Profile:
        """
        Retrieve the user profile from Flyme.
        
        Args:
            access_token: Token obtained by the engine's code exchange
            
        Returns:
            Profile with provider "flyme" and id/username/avatar taken from
            value.openId / value.nickname / value.icon
            
        Raises:
            InternalOAuthError: Request failed, or Flyme answered with a
                non-success envelope code (as ProviderRejectedError)
            ProfileParseError: Body is not the expected JSON envelope
        """
        token = {"access_token": access_token, "token_type": "bearer"}
        try:
            async with AsyncOAuth2Client(
                client_id=self.client_id,
                client_secret=self.client_secret,
                token=token,
                token_placement="header",
                timeout=self.timeout,
            ) as client:
                resp = await client.get(self.user_profile_url)
                resp.raise_for_status()
        except (httpx.HTTPError, AuthlibBaseError) as e:
            logger.debug(f"Profile request to {self.user_profile_url} failed: {e}")
            raise InternalOAuthError("failed to fetch user profile", e) from e
        
        return parse_profile(resp.text)


def parse_profile(body: str) -> Profile:
    """
    Build a Profile from a raw Flyme profile response body.
    
    Raises:
        ProviderRejectedError: Envelope code is not "200"
        ProfileParseError: Body is not JSON or lacks the value fields
    """
    try:
        data = json.loads(body)
        code = data.get("code")
    except (ValueError, AttributeError) as e:
        raise ProfileParseError("failed to parse user profile", e) from e
    
    if code != SUCCESS_CODE:
        logger.warning(f"Flyme rejected profile request with code {code!r}")
        raise ProviderRejectedError("failed to fetch user profile", code=code)
    
    try:
        value = data["value"]
        return Profile(
            provider=PROVIDER_NAME,
            id=value["openId"],
            username=value["nickname"],
            avatar=value["icon"],
            raw=body,
            json=data,
        )
    except (KeyError, TypeError) as e:
        raise ProfileParseError("failed to parse user profile", e) from e


class FlymeStrategy(OAuth2Strategy):
    """OAuth2Strategy wired to Flyme; the verify callback is forwarded unchanged."""
    
    def __init__(self, options: StrategyOptions, verify: VerifyCallback):
        super().__init__(FlymeProvider(options), options, verify)
