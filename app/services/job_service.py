"""
Job service — CRUD for job listings.
Single Responsibility: only handles job data operations.
"""

import logging
import re
from typing import Any

from app.domain.errors import DuplicateEntityError, InvalidIdentifierError, NotFoundEntityError
from app.domain.models import PG_INT_MAX, JobFilter
from app.ports.database_port import DatabasePort

logger = logging.getLogger(__name__)


def parse_job_id(job_id: str | int) -> int:
    """Job ids are integers that fit the id column; anything else is a missing job."""
    if isinstance(job_id, int) or (
        isinstance(job_id, str) and re.fullmatch(r"\d+", job_id, re.ASCII)
    ):
        value = int(job_id)
        if 0 <= value <= PG_INT_MAX:
            return value
    raise InvalidIdentifierError(f"Invalid Job ID: {job_id}")


class JobService:
    """Handles job CRUD operations."""

    def __init__(self, db: DatabasePort) -> None:
        self._db = db

    async def create_job(
        self,
        title: str,
        company_handle: str,
        salary: int | None = None,
        equity: Any = None,
    ) -> dict[str, Any]:
        """
        Insert a new job record and return the created row.

        The duplicate check is best-effort: two concurrent creates can both
        pass it, in which case the store's unique constraint rejects the
        second insert with the same DuplicateEntityError.
        """
        existing = await self._db.find_job_by_title_and_company(title, company_handle)
        if existing:
            logger.warning(f"Rejected duplicate job '{title}' at {company_handle}")
            raise DuplicateEntityError(f"Duplicate job title: {title}")

        job = await self._db.create_job(
            {
                "title": title,
                "salary": salary,
                "equity": equity,
                "company_handle": company_handle,
            }
        )
        logger.info(f"Created job {job['id']} '{title}' at {company_handle}")
        return job

    async def list_jobs(self, criteria: JobFilter | None = None) -> list[dict[str, Any]]:
        """All jobs by company, or — when any criterion is set — matches by salary."""
        if criteria is None or not criteria.is_active:
            return await self._db.list_jobs()
        return await self._db.list_jobs_filtered(criteria)

    async def get_job(self, job_id: str | int) -> dict[str, Any]:
        job_id = parse_job_id(job_id)
        job = await self._db.get_job(job_id)
        if not job:
            raise NotFoundEntityError(f"Invalid Job ID: {job_id}")
        return job

    async def update_job(self, job_id: str | int, data: dict[str, Any]) -> dict[str, Any]:
        """
        Partial update: only the fields present in `data` change.

        Raises NoFieldsError for an empty payload and NotFoundEntityError
        when there is no such job.
        """
        job_id = parse_job_id(job_id)
        job = await self._db.update_job(job_id, data)
        if not job:
            raise NotFoundEntityError(f"Invalid Job ID: {job_id}")
        logger.info(f"Updated job {job_id}: {', '.join(data)}")
        return job

    async def remove_job(self, job_id: str | int) -> int:
        job_id = parse_job_id(job_id)
        removed = await self._db.remove_job(job_id)
        if removed is None:
            logger.warning(f"Delete requested for missing job {job_id}")
            raise NotFoundEntityError(f"No job with ID: {job_id}")
        logger.info(f"Removed job {removed}")
        return removed
