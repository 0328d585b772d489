"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.

Field names are the camelCase names clients send and receive. Request
schemas forbid unknown fields, which is how PATCH bodies are restricted
to the columns a caller may change.
"""

from decimal import Decimal
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Optional, List, Union


class RequestSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")


def reject_null(value):
    """Omitting a field leaves the column alone; null would clear a NOT NULL column."""
    if value is None:
        raise ValueError("may not be null")
    return value


# ============================================================
# AUTH SCHEMAS
# ============================================================

class UserAuth(RequestSchema):
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=1)

class UserRegister(RequestSchema):
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=5, max_length=20)
    firstName: str = Field(..., min_length=1, max_length=30)
    lastName: str = Field(..., min_length=1, max_length=30)
    email: EmailStr

class TokenResponse(BaseModel):
    token: str


# ============================================================
# USER SCHEMAS
# ============================================================

class UserNew(UserRegister):
    isAdmin: bool = False

class UserUpdate(RequestSchema):
    password: Optional[str] = Field(None, min_length=5, max_length=20)
    firstName: Optional[str] = Field(None, min_length=1, max_length=30)
    lastName: Optional[str] = Field(None, min_length=1, max_length=30)
    email: Optional[EmailStr] = None

    @field_validator("password", "firstName", "lastName", "email")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)

class UserOut(BaseModel):
    username: str
    firstName: str
    lastName: str
    email: str
    isAdmin: bool

class UserDetailOut(UserOut):
    jobs: List[int] = []

class UserResponse(BaseModel):
    user: UserOut

class UserDetailResponse(BaseModel):
    user: UserDetailOut

class UserCreatedResponse(BaseModel):
    user: UserOut
    token: str

class UserListResponse(BaseModel):
    users: List[UserOut]

class AppliedResponse(BaseModel):
    applied: int


# ============================================================
# COMPANY SCHEMAS
# ============================================================

class CompanyNew(RequestSchema):
    handle: str = Field(..., min_length=1, max_length=25)
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    numEmployees: Optional[int] = Field(None, ge=0)
    logoUrl: Optional[str] = None

class CompanyUpdate(RequestSchema):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    numEmployees: Optional[int] = Field(None, ge=0)
    logoUrl: Optional[str] = None

    @field_validator("name")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)

class CompanyOut(BaseModel):
    handle: str
    name: str
    description: Optional[str] = None
    numEmployees: Optional[int] = None
    logoUrl: Optional[str] = None

class CompanyJobOut(BaseModel):
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None

class CompanyDetailOut(CompanyOut):
    jobs: List[CompanyJobOut] = []

class CompanyResponse(BaseModel):
    company: CompanyOut

class CompanyDetailResponse(BaseModel):
    company: CompanyDetailOut

class CompanyListResponse(BaseModel):
    companies: List[CompanyOut]


# ============================================================
# JOB SCHEMAS
# ============================================================

class JobNew(RequestSchema):
    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)
    companyHandle: str = Field(..., min_length=1, max_length=25)

class JobUpdate(RequestSchema):
    # companyHandle is not updatable
    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)

    @field_validator("title")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)

class JobOut(BaseModel):
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None
    companyHandle: str

class JobResponse(BaseModel):
    job: JobOut

class JobListResponse(BaseModel):
    jobs: List[JobOut]


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class DeletedResponse(BaseModel):
    deleted: Union[int, str]

class ErrorResponse(BaseModel):
    detail: Union[str, List[str]]

# Documented error bodies shared by every router
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid input"},
    401: {"model": ErrorResponse, "description": "Missing or insufficient credentials"},
    404: {"model": ErrorResponse, "description": "Not found"},
}
