from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from flyme_oauth.config import Settings


@dataclass
class StrategyOptions:
    """
    Configuration record for an OAuth2 strategy.
    
    Credentials are not validated here; an empty client_id only
    surfaces once the provider rejects the request.
    
    Attributes:
        client_id: Application client ID issued by the provider
        client_secret: Application client secret
        callback_url: URL the provider redirects to after authorization
        authorization_url: Override for the provider's authorize endpoint
        token_url: Override for the provider's token endpoint
        user_profile_url: Override for the provider's profile endpoint
        scope: Permission scopes to request, in order
        timeout: Seconds before the HTTP transport gives up
    """
    client_id: str
    client_secret: str
    callback_url: str
    authorization_url: Optional[str] = None
    token_url: Optional[str] = None
    user_profile_url: Optional[str] = None
    scope: list[str] = field(default_factory=list)
    timeout: float = 10.0

    @classmethod
    def from_settings(cls, settings: "Settings") -> "StrategyOptions":
        return cls(
            client_id=settings.FLYME_CLIENT_ID,
            client_secret=settings.FLYME_CLIENT_SECRET,
            callback_url=settings.FLYME_CALLBACK_URL,
            authorization_url=settings.FLYME_AUTHORIZATION_URL,
            token_url=settings.FLYME_TOKEN_URL,
            user_profile_url=settings.FLYME_USER_PROFILE_URL,
            scope=settings.flyme_scope_list,
            timeout=settings.HTTP_TIMEOUT,
        )
