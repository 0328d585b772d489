"""
Authentication Routes

POST /auth/token - Exchange username/password for a JWT
POST /auth/register - Register a new (non-admin) user and get a JWT
"""

from fastapi import APIRouter

from jobly.models import User
from jobly.helpers.tokens import create_token
from jobly.schemas.schemas import UserAuth, UserRegister, TokenResponse, ERROR_RESPONSES

router = APIRouter(prefix="/auth", tags=["Authentication"], responses=ERROR_RESPONSES)


@router.post("/token", response_model=TokenResponse)
async def login(request: UserAuth):
    """
    Login and receive JWT token.

    Include token in requests: Authorization: Bearer <token>
    """
    user = User.authenticate(request.username, request.password)
    return TokenResponse(token=create_token(user))


@router.post("/register", response_model=TokenResponse, status_code=201)
async def register(request: UserRegister):
    """Register a new user. Self-registered users are never admins."""
    user = User.register({**request.model_dump(), "isAdmin": False})
    return TokenResponse(token=create_token(user))
