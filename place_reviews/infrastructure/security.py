"""Security Primitives: bcrypt password hashing and JWT bearer tokens.

Invariants:
    - Plain passwords are never stored or logged; only bcrypt hashes persist
    - Tokens carry sub (user id as string), iat and exp
    - decode_access_token raises AuthError for every invalid/expired/malformed token
"""

from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from place_reviews.core.errors import AuthError


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # malformed stored hash
        return False


def create_access_token(
    user_id: int, secret: str, algorithm: str = "HS256", expires_minutes: int = 60,
) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "iat": now,
        "exp": now + timedelta(minutes=expires_minutes),
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_access_token(token: str, secret: str, algorithm: str = "HS256") -> int:
    """Return the user id carried by a valid token."""
    try:
        payload = jwt.decode(token, secret, algorithms=[algorithm])
    except jwt.ExpiredSignatureError:
        raise AuthError("Token has expired")
    except jwt.InvalidTokenError:
        raise AuthError("Invalid token")

    sub = payload.get("sub")
    try:
        return int(sub)
    except (TypeError, ValueError):
        raise AuthError("Invalid token")
