from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

@dataclass
class Profile:
    """Normalized user profile, identical in shape across providers."""
    provider: str
    id: str
    username: str | None
    avatar: str | None
    raw: str = field(default="", repr=False)  # response body, verbatim
    json: Any = field(default=None, repr=False)  # parsed body, verbatim

    def to_dict(self) -> dict:
        return {
            "provider": self.provider,
            "id": self.id,
            "username": self.username,
            "avatar": self.avatar,
        }


@runtime_checkable
class ProviderAdapter(Protocol):
    """
    Capability interface every identity provider plugs into OAuth2Strategy.
    
    The adapter only knows where the provider lives and how to turn its
    "who am I" response into a Profile. Authorization redirects, code
    exchange and token handling stay with the engine.
    """
    
    name: str
    
    @property
    def authorization_url(self) -> str:
        """Provider endpoint the user is redirected to."""
        ...
    
    @property
    def token_url(self) -> str:
        """Provider endpoint that exchanges codes for tokens."""
        ...
    
    async def fetch_profile(self, access_token: str) -> Profile:
        """Fetch and normalize the profile of the token's owner."""
        ...
