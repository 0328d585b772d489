"""
Company Routes

POST /companies - Create company (admin only)
GET /companies - List companies, filterable by nameLike, minEmployees, maxEmployees
GET /companies/{handle} - Company details with its jobs
PATCH /companies/{handle} - Update company (admin only)
DELETE /companies/{handle} - Delete company (admin only)
"""

from fastapi import APIRouter, Depends, Query
from typing import Optional

from jobly.core.auth import ensure_admin
from jobly.models import Company
from jobly.schemas.schemas import (
    CompanyNew, CompanyUpdate, CompanyResponse, CompanyDetailResponse,
    CompanyListResponse, DeletedResponse, ERROR_RESPONSES
)

router = APIRouter(prefix="/companies", tags=["Companies"], responses=ERROR_RESPONSES)


@router.post("", response_model=CompanyResponse, status_code=201)
async def create_company(data: CompanyNew, admin: dict = Depends(ensure_admin)):
    """Create a company. Admin only."""
    company = Company.create(data.model_dump())
    return {"company": company}


@router.get("", response_model=CompanyListResponse)
async def list_companies(
    name_like: Optional[str] = Query(None, alias="nameLike", description="Case-insensitive substring of the name"),
    min_employees: Optional[int] = Query(None, alias="minEmployees", ge=0),
    max_employees: Optional[int] = Query(None, alias="maxEmployees", ge=0),
):
    """List all companies, optionally filtered. Anyone can call this."""
    filters = {
        key: value
        for key, value in (
            ("nameLike", name_like),
            ("minEmployees", min_employees),
            ("maxEmployees", max_employees),
        )
        if value is not None
    }
    companies = Company.find_all(filters or None)
    return {"companies": companies}


@router.get("/{handle}", response_model=CompanyDetailResponse)
async def get_company(handle: str):
    """Get a company and its jobs."""
    return {"company": Company.get(handle)}


@router.patch("/{handle}", response_model=CompanyResponse)
async def update_company(handle: str, data: CompanyUpdate, admin: dict = Depends(ensure_admin)):
    """Update some of {name, description, numEmployees, logoUrl}. Admin only."""
    company = Company.update(handle, data.model_dump(exclude_unset=True))
    return {"company": company}


@router.delete("/{handle}", response_model=DeletedResponse)
async def delete_company(handle: str, admin: dict = Depends(ensure_admin)):
    """Delete a company. Its jobs go with it. Admin only."""
    Company.remove(handle)
    return DeletedResponse(deleted=handle)
