"""
Authentication Utility - JWT and Password handling.

Provides:
- Password hashing with bcrypt
- JWT token verification
- FastAPI dependencies for protected routes

A request without a valid token is anonymous, not an error; the
ensure_* dependencies decide whether anonymous is acceptable.
"""

from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from jobly.core.config import get_settings
from jobly.core.errors import UnauthorizedError

settings = get_settings()

# Password hashing
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)

# Bearer token extractor; missing header -> None instead of 403
bearer_scheme = HTTPBearer(auto_error=False)


def hash_password(password: str) -> str:
    """Hash password with bcrypt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash."""
    return pwd_context.verify(plain_password, hashed_password)


def decode_token(token: str) -> Optional[dict]:
    """Decode and verify JWT token."""
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[dict]:
    """
    FastAPI dependency - the caller's principal, or None when anonymous.

    Returns:
        {"username": str, "isAdmin": bool} or None
    """
    if credentials is None:
        return None

    payload = decode_token(credentials.credentials)
    if not payload or not payload.get("username"):
        return None

    return {"username": payload["username"], "isAdmin": bool(payload.get("isAdmin", False))}


async def ensure_admin(user: Optional[dict] = Depends(get_current_user)) -> dict:
    """Dependency - Require a token with isAdmin set."""
    if not user or not user["isAdmin"]:
        raise UnauthorizedError()
    return user


async def ensure_correct_user_or_admin(username: str, user: Optional[dict] = Depends(get_current_user)) -> dict:
    """
    Dependency - Require an admin, or the user named in the route path.

    Usage:
        @router.get("/{username}")
        async def route(username: str, user: dict = Depends(ensure_correct_user_or_admin)):
            ...
    """
    if not user or not (user["isAdmin"] or user["username"] == username):
        raise UnauthorizedError()
    return user
