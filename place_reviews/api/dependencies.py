"""Request Dependencies: bearer-token identity for protected routes.

Invariants:
    - Protected routes never run without a verified user id
    - Missing or invalid tokens raise AuthError (401 via the global handler)
"""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from place_reviews.config import get_settings, Settings
from place_reviews.core.errors import AuthError
from place_reviews.infrastructure.security import decode_access_token

_bearer = HTTPBearer(auto_error=False)


async def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    settings: Settings = Depends(get_settings),
) -> int:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthError("Authentication required")
    return decode_access_token(
        credentials.credentials, settings.jwt_secret, settings.jwt_algorithm,
    )
