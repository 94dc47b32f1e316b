from flyme_oauth.schemas.auth import AuthUrlResponse, ProfileResponse

__all__ = ["AuthUrlResponse", "ProfileResponse"]
