"""
Pydantic models for requests, responses, and internal data transfer.
Pure data — no I/O, no side effects.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Largest value a Postgres integer column holds
PG_INT_MAX = 2**31 - 1


# ── Job ───────────────────────────────────────────────────────


class JobCreate(BaseModel):
    """Request body for POST /jobs."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1)
    salary: int | None = Field(default=None, ge=0, le=PG_INT_MAX)
    equity: Decimal | None = Field(default=None, ge=0, le=1)
    company_handle: str = Field(..., min_length=1, max_length=25, alias="companyHandle")


class JobUpdate(BaseModel):
    """
    Request body for PATCH /jobs/{id}.
    Only title, salary and equity may change; the id and owning company never do.
    """

    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, min_length=1)
    salary: int | None = Field(default=None, ge=0, le=PG_INT_MAX)
    equity: Decimal | None = Field(default=None, ge=0, le=1)

    @field_validator("title")
    @classmethod
    def title_not_null(cls, v: str | None) -> str:
        # Runs only for an explicit value; an omitted title is simply not updated
        if v is None:
            raise ValueError("title may not be null")
        return v

    def to_payload(self) -> dict[str, str | int | Decimal | None]:
        """Fields the client actually sent, in the order they were declared."""
        return self.model_dump(exclude_unset=True)


class JobFilter(BaseModel):
    """Search criteria for GET /jobs."""

    title: str | None = None
    min_salary: int | None = Field(default=None, ge=0, le=PG_INT_MAX)
    has_equity: bool | None = None

    @property
    def is_active(self) -> bool:
        """True when at least one criterion contributes a predicate."""
        return self.title is not None or self.min_salary is not None or bool(self.has_equity)


class Job(BaseModel):
    """A job row as returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    salary: int | None = None
    equity: Decimal | None = None
    company_handle: str = Field(..., alias="companyHandle")


class JobResponse(BaseModel):
    """Envelope for a single job."""

    job: Job


class JobListResponse(BaseModel):
    """Envelope for GET /jobs."""

    jobs: list[Job]


class JobDeleteResponse(BaseModel):
    """Response for DELETE /jobs/{id}."""

    deleted: int
