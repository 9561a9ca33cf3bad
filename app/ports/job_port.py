from abc import ABC, abstractmethod
from typing import Any

from app.domain.models import JobFilter


class JobPort(ABC):
    @abstractmethod
    async def create_job(self, data: dict[str, Any]) -> dict[str, Any]:
        """Insert a new job and return the created row."""
        ...

    @abstractmethod
    async def find_job_by_title_and_company(
        self, title: str, company_handle: str
    ) -> dict[str, Any] | None:
        """Find a job with this exact title at this company."""
        ...

    @abstractmethod
    async def list_jobs(self) -> list[dict[str, Any]]:
        """List every job, ordered by company handle."""
        ...

    @abstractmethod
    async def list_jobs_filtered(self, criteria: JobFilter) -> list[dict[str, Any]]:
        """List jobs matching the criteria, highest salary first."""
        ...

    @abstractmethod
    async def get_job(self, job_id: int) -> dict[str, Any] | None:
        """Fetch a single job by ID."""
        ...

    @abstractmethod
    async def update_job(self, job_id: int, data: dict[str, Any]) -> dict[str, Any] | None:
        """Partially update a job record and return the updated row."""
        ...

    @abstractmethod
    async def remove_job(self, job_id: int) -> int | None:
        """Delete a job, returning its ID, or None if there was no such job."""
        ...
