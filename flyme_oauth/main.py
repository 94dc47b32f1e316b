from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flyme_oauth.api.routes import auth, health
from flyme_oauth.auth.options import StrategyOptions
from flyme_oauth.auth.providers.base import Profile
from flyme_oauth.auth.providers.flyme import FlymeStrategy
from flyme_oauth.auth.registry import StrategyRegistry
from flyme_oauth.config import settings
from flyme_oauth.logger import setup_logger
from flyme_oauth.schemas.auth import ProfileResponse

logger = setup_logger()


def verify_profile(access_token: str, refresh_token: str | None, profile: Profile):
    """Default verify callback: the normalized profile is the user."""
    return ProfileResponse(**profile.to_dict())


def register_default_strategies() -> None:
    if not StrategyRegistry.is_registered("flyme"):
        StrategyRegistry.register(
            FlymeStrategy(StrategyOptions.from_settings(settings), verify_profile)
        )
        logger.info("Registered strategy 'flyme'")


register_default_strategies()

app = FastAPI(
    title="Flyme OAuth API",
    version="1.0.0",
    description="OAuth 2.0 login via Flyme accounts"
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes
app.include_router(auth.router)
app.include_router(health.router)

@app.get("/")
async def root():
    return {"message": "Flyme OAuth API", "version": "1.0.0"}
