"""Session token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from pinwall.config import AuthSettings


class TokenPayload(BaseModel):
    """Session token payload.

    Only the user id is carried; the full user is reloaded on every request.
    """

    user_id: str
    sid: str  # Session id, used to end the session server-side
    exp: datetime


class JWTError(Exception):
    """Token is malformed, tampered with or expired."""

    pass


def create_token(user_id: str, session_id: str, settings: AuthSettings) -> str:
    """Create a signed session token.

    Args:
        user_id: User ID
        session_id: Session ID
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.session_expiry_days)

    payload = {
        "user_id": user_id,
        "sid": session_id,
        "exp": expiry,
    }

    return jwt.encode(
        payload, settings.session_secret, algorithm=settings.session_algorithm
    )


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a session token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.session_secret, algorithms=[settings.session_algorithm]
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    try:
        return TokenPayload(**payload)
    except ValueError:
        raise JWTError("Invalid token payload")
