from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Flyme OAuth
    FLYME_CLIENT_ID: str = ""
    FLYME_CLIENT_SECRET: str = ""
    FLYME_CALLBACK_URL: str = "http://localhost:5005/auth/flyme/callback"
    
    # Endpoint overrides (None = provider defaults)
    FLYME_AUTHORIZATION_URL: str | None = None
    FLYME_TOKEN_URL: str | None = None
    FLYME_USER_PROFILE_URL: str | None = None
    
    # Comma separated, e.g. "uc_basic_info,uc_email"
    FLYME_SCOPE: str = ""
    
    # Seconds, passed to the httpx transport
    HTTP_TIMEOUT: float = 10.0
    
    # Seconds a login state stays valid for its callback
    OAUTH_STATE_TTL_SECONDS: int = 600
    
    # CORS
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:8080"
    
    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5005
    DEBUG: bool = True
    
    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def flyme_scope_list(self) -> list[str]:
        return [s.strip() for s in self.FLYME_SCOPE.split(",") if s.strip()]

settings = Settings()
