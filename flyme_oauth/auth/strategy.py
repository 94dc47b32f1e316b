"""
Generic OAuth 2.0 strategy.

Composes a ProviderAdapter (endpoints + profile normalization) with Authlib's
AsyncOAuth2Client, which performs the actual protocol work. Any adapter that
satisfies the ProviderAdapter protocol can be plugged in; no subclassing of
the provider is required.

Flow:
    get_authorize_url(state)  -> redirect the user to the provider
    authenticate(code)        -> code exchange (Authlib)
                              -> provider.fetch_profile(access_token)
                              -> verify(access_token, refresh_token, profile)
"""

import inspect
import logging
from typing import Any, Awaitable, Callable, Optional, Union

import httpx
from authlib.common.errors import AuthlibBaseError
from authlib.integrations.httpx_client import AsyncOAuth2Client

from flyme_oauth.auth.options import StrategyOptions
from flyme_oauth.auth.providers.base import Profile, ProviderAdapter
from flyme_oauth.exceptions import AuthenticationFailedError, InternalOAuthError

logger = logging.getLogger(__name__)

VerifyCallback = Callable[
    [str, Optional[str], Profile],
    Union[Any, Awaitable[Any]],
]


class OAuth2Strategy:
    """
    Authenticates users against any ProviderAdapter via OAuth 2.0.
    
    Attributes:
        name: Provider name, used as the registry key
        provider: The ProviderAdapter supplying endpoints and profiles
    """
    
    def __init__(
        self,
        provider: ProviderAdapter,
        options: StrategyOptions,
        verify: VerifyCallback,
    ):
        if verify is None:
            raise TypeError("OAuth2Strategy requires a verify callback")
        
        self.provider = provider
        self.name = provider.name
        self.client_id = options.client_id
        self.client_secret = options.client_secret
        self.redirect_uri = options.callback_url
        self.scope = list(options.scope)
        self.timeout = options.timeout
        self._verify = verify
    
    def _client(self) -> AsyncOAuth2Client:
        return AsyncOAuth2Client(
            client_id=self.client_id,
            client_secret=self.client_secret,
            redirect_uri=self.redirect_uri,
            scope=" ".join(self.scope) if self.scope else None,
            timeout=self.timeout,
        )
    
    def get_authorize_url(self, state: str) -> str:
        """Return the provider authorization URL for this state."""
        client = self._client()
        url, _ = client.create_authorization_url(
            self.provider.authorization_url,
            state=state
        )
        return url
    
    async def authenticate(self, code: str) -> Any:
        """
        Exchange an authorization code and resolve it to an application user.
        
        Args:
            code: Authorization code from the provider callback
            
        Returns:
            Whatever the verify callback returned
            
        Raises:
            InternalOAuthError: Token exchange or profile request failed
            ProfileParseError: Profile response could not be interpreted
            AuthenticationFailedError: Verify callback returned no user
        """
        try:
            async with self._client() as client:
                token = await client.fetch_token(
                    self.provider.token_url,
                    code=code
                )
        except (httpx.HTTPError, AuthlibBaseError, ValueError) as e:
            # Authlib raises ValueError for non-JSON token responses
            raise InternalOAuthError("failed to obtain access token", e) from e
        
        access_token = token.get("access_token")
        if not access_token:
            raise InternalOAuthError("failed to obtain access token")
        refresh_token = token.get("refresh_token")
        
        profile = await self.provider.fetch_profile(access_token)
        logger.debug(f"Fetched {self.name} profile for id={profile.id}")
        
        user = self._verify(access_token, refresh_token, profile)
        if inspect.isawaitable(user):
            user = await user
        
        if not user:
            raise AuthenticationFailedError(self.name)
        return user
