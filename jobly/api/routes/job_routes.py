"""
Job Routes

POST /jobs - Create job posting (admin only)
GET /jobs - List jobs, filterable by titleLike, minSalary, hasEquity
GET /jobs/{job_id} - Get job details
PATCH /jobs/{job_id} - Update job (admin only)
DELETE /jobs/{job_id} - Delete job (admin only)
"""

from fastapi import APIRouter, Depends, Query
from typing import Optional

from jobly.core.auth import ensure_admin
from jobly.models import Job
from jobly.schemas.schemas import (
    JobNew, JobUpdate, JobResponse, JobListResponse, DeletedResponse, ERROR_RESPONSES
)

router = APIRouter(prefix="/jobs", tags=["Jobs"], responses=ERROR_RESPONSES)


@router.post("", response_model=JobResponse, status_code=201)
async def create_job(job: JobNew, admin: dict = Depends(ensure_admin)):
    """Create a job posting for an existing company. Admin only."""
    return {"job": Job.create(job.model_dump())}


@router.get("", response_model=JobListResponse)
async def list_jobs(
    title_like: Optional[str] = Query(None, alias="titleLike", description="Case-insensitive substring of the title"),
    min_salary: Optional[int] = Query(None, alias="minSalary", ge=0),
    has_equity: Optional[bool] = Query(None, alias="hasEquity", description="Only jobs with non-zero equity"),
):
    """List all job postings, optionally filtered. Anyone can call this."""
    filters = {
        key: value
        for key, value in (
            ("titleLike", title_like),
            ("minSalary", min_salary),
            ("hasEquity", has_equity),
        )
        if value is not None
    }
    return {"jobs": Job.find_all(filters or None)}


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(job_id: int):
    """Get details of a specific job."""
    return {"job": Job.get(job_id)}


@router.patch("/{job_id}", response_model=JobResponse)
async def update_job(job_id: int, update: JobUpdate, admin: dict = Depends(ensure_admin)):
    """Update some of {title, salary, equity}. Admin only."""
    return {"job": Job.update(job_id, update.model_dump(exclude_unset=True))}


@router.delete("/{job_id}", response_model=DeletedResponse)
async def delete_job(job_id: int, admin: dict = Depends(ensure_admin)):
    """Delete a job posting. Cascades to applications. Admin only."""
    Job.remove(job_id)
    return DeletedResponse(deleted=job_id)
