"""Identity taken from bearer tokens issued by the external identity provider.

The service never handles passwords. A client signs in with the identity
provider and sends its access token; we verify the signature with the shared
secret and use the ``sub`` claim as the user id.
"""

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from jose import jwt
from jose.exceptions import ExpiredSignatureError, JWTError
from loguru import logger

from letterhouse.core.config import get_settings
from letterhouse.schemas.auth import CurrentUser

settings = get_settings()


class UserRole(str, Enum):
    OWNER = "owner"
    VISITOR = "visitor"


def create_access_token(
    subject: str, expires_delta: Optional[timedelta] = None, **extra_claims
) -> str:
    """Create a JWT access token the way the identity provider does.

    Used by tests and local tooling; production tokens come from the provider.
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta if expires_delta else timedelta(hours=1))
    payload = {"sub": subject, "iat": now, "exp": expire, **extra_claims}
    if settings.jwt_audience and "aud" not in payload:
        payload["aud"] = settings.jwt_audience
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict:
    """Decode and verify a JWT token.

    Raises:
        HTTPException: If token is invalid or expired
    """
    options = {"verify_aud": settings.jwt_audience is not None}
    try:
        return jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            options=options,
        )
    except ExpiredSignatureError:
        _log_auth_failure("Token has expired")
        raise HTTPException(status_code=401, detail="Token has expired")
    except JWTError as e:
        _log_auth_failure(f"Invalid token: {str(e)}")
        raise HTTPException(status_code=401, detail="Invalid token")


async def get_optional_user(request: Request) -> Optional[CurrentUser]:
    """Current user, or None for anonymous visitors.

    A token that is present but invalid is still rejected.
    """
    token = _extract_token_from_request(request)
    if not token:
        return None

    payload = decode_token(token)
    user_id = payload.get("sub")
    if not user_id:
        _log_auth_failure("Token missing 'sub' claim")
        raise HTTPException(status_code=401, detail="Invalid token format")

    user = CurrentUser(id=str(user_id), email=payload.get("email"))
    logger.debug(f"Authenticated user: {user.id}")
    return user


async def get_current_user(
    user: Optional[CurrentUser] = Depends(get_optional_user),
) -> CurrentUser:
    """Current user; anonymous requests are rejected."""
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


def resolve_role(owner_id: str, user: Optional[CurrentUser]) -> UserRole:
    if user is not None and user.id == owner_id:
        return UserRole.OWNER
    return UserRole.VISITOR


# Helper functions
def _extract_token_from_request(request: Request) -> Optional[str]:
    """Extract the bearer token from the Authorization header."""
    auth_header = request.headers.get("authorization", "")
    scheme, _, token = auth_header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def _log_auth_failure(message: str):
    """Log authentication failures."""
    logger.warning(f"Authentication failed: {message}")
