"""
Flyme OAuth 2.0 authentication strategy.

Usage:
    from flyme_oauth import FlymeStrategy, StrategyOptions, StrategyRegistry
    
    StrategyRegistry.register(FlymeStrategy(options, verify))
"""

from flyme_oauth.auth.options import StrategyOptions
from flyme_oauth.auth.providers.base import Profile, ProviderAdapter
from flyme_oauth.auth.providers.flyme import FlymeProvider, FlymeStrategy
from flyme_oauth.auth.registry import StrategyRegistry
from flyme_oauth.auth.strategy import OAuth2Strategy
from flyme_oauth.exceptions import (
    AuthenticationFailedError,
    InternalOAuthError,
    OAuthError,
    ProfileParseError,
    ProviderRejectedError,
    StrategyNotFoundError,
)

__all__ = [
    "StrategyOptions", "Profile", "ProviderAdapter",
    "FlymeProvider", "FlymeStrategy",
    "OAuth2Strategy", "StrategyRegistry",
    "OAuthError", "InternalOAuthError", "ProviderRejectedError",
    "ProfileParseError", "AuthenticationFailedError", "StrategyNotFoundError",
]
