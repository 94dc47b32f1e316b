"""
Custom exceptions for the Flyme OAuth adapter.

Exception Hierarchy:
    OAuthError (base)
    ├── InternalOAuthError - Transport failure talking to the provider
    │   └── ProviderRejectedError - Provider answered with a non-success code
    ├── ProfileParseError - Profile body could not be interpreted
    ├── AuthenticationFailedError - Verify callback rejected the user
    └── StrategyNotFoundError - Unknown strategy name requested
"""

from typing import Optional


class OAuthError(Exception):
    """
    Base exception for all authentication errors raised by this package.
    
    Attributes:
        message: Human-readable error description
    """
    
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InternalOAuthError(OAuthError):
    """
    Raised when a request to the provider fails.
    
    Wraps the underlying httpx / Authlib exception so callers can tell
    a provider outage apart from a bug in their own verify callback.
    
    Attributes:
        cause: The original exception, or None when there is none
    """
    
    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message)
    
    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"


class ProviderRejectedError(InternalOAuthError):
    """
    Raised when the provider returns HTTP 200 but an application-level
    failure code in its response envelope.
    
    Subclasses InternalOAuthError so existing handlers for transport
    errors keep catching it. There is no underlying exception here,
    so ``cause`` is always None.
    
    Example:
        >>> ProviderRejectedError("failed to fetch user profile", code="401")
        ProviderRejectedError: failed to fetch user profile (code=401)
    """
    
    def __init__(self, message: str, code: Optional[str] = None):
        self.code = code
        super().__init__(message, cause=None)
    
    def __str__(self) -> str:
        return f"{self.message} (code={self.code})"


class ProfileParseError(OAuthError):
    """
    Raised when the profile response is not valid JSON or lacks
    the expected ``value`` envelope fields.
    
    Attributes:
        cause: The JSON decode / lookup exception
    """
    
    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message)


class AuthenticationFailedError(OAuthError):
    """Raised when the verify callback returns no user."""
    
    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"Authentication via '{provider}' was rejected")


class StrategyNotFoundError(OAuthError):
    """
    Raised when an unknown strategy name is requested from the registry.
    
    Example:
        >>> StrategyRegistry.get("github")
        StrategyNotFoundError: Strategy 'github' not found. Available: ['flyme']
    """
    
    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        super().__init__(f"Strategy '{name}' not found. Available: {available}")
