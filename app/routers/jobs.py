"""
Job endpoints — creation, search, detail, partial update and removal.
All logic delegated to JobService. Mutations are admin-only.
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from app.dependencies import get_job_service
from app.domain.models import (
    PG_INT_MAX,
    Job,
    JobCreate,
    JobDeleteResponse,
    JobFilter,
    JobListResponse,
    JobResponse,
    JobUpdate,
)
from app.services.auth_service import require_admin
from app.services.job_service import JobService

router = APIRouter(prefix="/jobs", tags=["Jobs"])

# Query-string keys GET /jobs accepts
_FILTER_KEYS = {"title", "minSalary", "hasEquity"}


@router.post(
    "",
    response_model=JobResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_job(
    body: JobCreate,
    _admin: dict[str, Any] = Depends(require_admin),
    job_svc: JobService = Depends(get_job_service),
):
    """Create a new job posting for a company."""
    job = await job_svc.create_job(
        title=body.title,
        company_handle=body.company_handle,
        salary=body.salary,
        equity=body.equity,
    )
    return JobResponse(job=Job(**job))


@router.get("", response_model=JobListResponse)
async def list_jobs(
    request: Request,
    title: str | None = Query(None),
    min_salary: int | None = Query(None, alias="minSalary", ge=0, le=PG_INT_MAX),
    has_equity: bool | None = Query(None, alias="hasEquity"),
    job_svc: JobService = Depends(get_job_service),
):
    """
    List jobs (public).
    Optional filters: title (case-insensitive, partial), minSalary, hasEquity.
    """
    unknown = set(request.query_params.keys()) - _FILTER_KEYS
    if unknown:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="You may only filter on title, minSalary and hasEquity",
        )

    criteria = None
    if request.query_params:
        criteria = JobFilter(title=title, min_salary=min_salary, has_equity=has_equity)

    jobs = await job_svc.list_jobs(criteria)
    return JobListResponse(jobs=[Job(**j) for j in jobs])


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(
    job_id: str,
    job_svc: JobService = Depends(get_job_service),
):
    """Get a single job (public)."""
    job = await job_svc.get_job(job_id)
    return JobResponse(job=Job(**job))


@router.patch("/{job_id}", response_model=JobResponse)
async def update_job(
    job_id: str,
    body: JobUpdate,
    _admin: dict[str, Any] = Depends(require_admin),
    job_svc: JobService = Depends(get_job_service),
):
    """Change a job's title, salary or equity."""
    job = await job_svc.update_job(job_id, body.to_payload())
    return JobResponse(job=Job(**job))


@router.delete("/{job_id}", response_model=JobDeleteResponse)
async def delete_job(
    job_id: str,
    _admin: dict[str, Any] = Depends(require_admin),
    job_svc: JobService = Depends(get_job_service),
):
    """Remove a job."""
    removed = await job_svc.remove_job(job_id)
    return JobDeleteResponse(deleted=removed)
