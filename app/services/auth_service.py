"""
Authentication service.
Decodes bearer JWTs and gates admin-only endpoints.
"""

from typing import Any

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
import jwt

from app.config import settings
from app.domain.enums import UserRole

# auto_error=False so a missing header is a 401, not FastAPI's default
_bearer_scheme = HTTPBearer(auto_error=False)


def _verify_token(token: str) -> dict[str, Any]:
    """Decode and verify the JWT, returning its payload."""
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            leeway=30,  # 30-second tolerance for clock drift
        )
    except jwt.ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired",
        )
    except jwt.InvalidTokenError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token: {e}",
        )

    if not payload.get("username"):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token missing username",
        )
    return payload


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
) -> dict[str, Any]:
    """
    FastAPI dependency resolving the caller from their bearer token.
    Returns {"username": ..., "role": UserRole}.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )

    payload = _verify_token(credentials.credentials)
    role = UserRole.ADMIN if payload.get("isAdmin") is True else UserRole.USER
    return {"username": payload["username"], "role": role}


async def require_admin(
    current_user: dict[str, Any] = Depends(get_current_user),
) -> dict[str, Any]:
    """FastAPI dependency for admin-only endpoints."""
    if current_user.get("role") != UserRole.ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only admins can modify jobs",
        )
    return current_user
