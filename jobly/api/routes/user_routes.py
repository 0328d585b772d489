"""
User Routes

POST /users - Create a user, possibly an admin (admin only)
GET /users - List users (admin only)
GET /users/{username} - Get user with applied job ids (admin or same user)
PATCH /users/{username} - Update user (admin or same user)
DELETE /users/{username} - Delete user (admin or same user)
POST /users/{username}/jobs/{job_id} - Apply to a job (admin or same user)
"""

from fastapi import APIRouter, Depends

from jobly.core.auth import ensure_admin, ensure_correct_user_or_admin
from jobly.helpers.tokens import create_token
from jobly.models import User
from jobly.schemas.schemas import (
    UserNew, UserUpdate, UserResponse, UserDetailResponse, UserCreatedResponse,
    UserListResponse, AppliedResponse, DeletedResponse, ERROR_RESPONSES
)

router = APIRouter(prefix="/users", tags=["Users"], responses=ERROR_RESPONSES)


@router.post("", response_model=UserCreatedResponse, status_code=201)
async def create_user(data: UserNew, admin: dict = Depends(ensure_admin)):
    """
    Add a new user. Unlike /auth/register this is for admins, and the
    new user may itself be an admin.
    """
    user = User.register(data.model_dump())
    return {"user": user, "token": create_token(user)}


@router.get("", response_model=UserListResponse)
async def list_users(admin: dict = Depends(ensure_admin)):
    return {"users": User.find_all()}


@router.get("/{username}", response_model=UserDetailResponse)
async def get_user(username: str, user: dict = Depends(ensure_correct_user_or_admin)):
    return {"user": User.get(username)}


@router.patch("/{username}", response_model=UserResponse)
async def update_user(username: str, data: UserUpdate, user: dict = Depends(ensure_correct_user_or_admin)):
    """Update some of {firstName, lastName, password, email}."""
    return {"user": User.update(username, data.model_dump(exclude_unset=True))}


@router.delete("/{username}", response_model=DeletedResponse)
async def delete_user(username: str, user: dict = Depends(ensure_correct_user_or_admin)):
    User.remove(username)
    return DeletedResponse(deleted=username)


@router.post("/{username}/jobs/{job_id}", response_model=AppliedResponse)
async def apply_to_job(username: str, job_id: int, user: dict = Depends(ensure_correct_user_or_admin)):
    """Apply to a job. Applying twice is a no-op."""
    User.apply_to_job(username, job_id)
    return AppliedResponse(applied=job_id)
