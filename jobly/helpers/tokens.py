from jose import jwt

from jobly.core.config import get_settings


def create_token(user: dict) -> str:
    """
    Sign a JWT for a user.

    user: {"username": ..., "isAdmin": ...}. isAdmin defaults to False
    when missing.
    """
    settings = get_settings()
    payload = {
        "username": user["username"],
        "isAdmin": bool(user.get("isAdmin", False)),
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.jwt_algorithm)
