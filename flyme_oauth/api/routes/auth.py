import logging
import secrets
import time

from fastapi import APIRouter, HTTPException, Query

from flyme_oauth.auth.registry import StrategyRegistry
from flyme_oauth.config import settings
from flyme_oauth.exceptions import (
    AuthenticationFailedError,
    InternalOAuthError,
    ProfileParseError,
    StrategyNotFoundError,
)
from flyme_oauth.schemas.auth import AuthUrlResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

# In-memory state storage (use Redis in production)
# Key: state, Value: (provider name it was issued for, expiry on the monotonic clock)
oauth_states: dict[str, tuple[str, float]] = {}


def _get_strategy(provider: str):
    try:
        return StrategyRegistry.get(provider)
    except StrategyNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


def _prune_expired_states(now: float) -> None:
    expired = [state for state, (_, expires_at) in oauth_states.items() if expires_at <= now]
    for state in expired:
        del oauth_states[state]


@router.get("/{provider}/login", response_model=AuthUrlResponse)
async def login(provider: str):
    """Initiate the OAuth flow for a registered provider."""
    strategy = _get_strategy(provider)
    
    now = time.monotonic()
    _prune_expired_states(now)
    
    state = secrets.token_urlsafe(32)
    oauth_states[state] = (provider, now + settings.OAUTH_STATE_TTL_SECONDS)
    
    return {"auth_url": strategy.get_authorize_url(state)}


@router.get("/{provider}/callback")
async def callback(
    provider: str,
    code: str = Query(...),
    state: str = Query(...)
):
    """Handle the provider redirect and return the verified user."""
    strategy = _get_strategy(provider)
    
    # Verify state (single use, expires after OAUTH_STATE_TTL_SECONDS)
    issued_for, expires_at = oauth_states.pop(state, (None, 0.0))
    if issued_for != provider or expires_at <= time.monotonic():
        raise HTTPException(status_code=400, detail="Invalid state")
    
    try:
        return await strategy.authenticate(code)
    except AuthenticationFailedError as e:
        raise HTTPException(status_code=401, detail=e.message)
    except (InternalOAuthError, ProfileParseError) as e:
        # Raw provider error stays in the log, not the response
        logger.error(f"{provider} authentication failed: {e}")
        raise HTTPException(
            status_code=502,
            detail=f"Could not retrieve profile from {provider}"
        )
