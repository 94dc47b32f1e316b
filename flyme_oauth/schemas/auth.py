from pydantic import BaseModel

class AuthUrlResponse(BaseModel):
    auth_url: str

class ProfileResponse(BaseModel):
    provider: str
    id: str
    username: str | None = None
    avatar: str | None = None
