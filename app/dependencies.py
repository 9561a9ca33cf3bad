"""
Dependency Injection container.

Wires abstract ports → concrete adapters. To swap the store, change the
adapter instantiation here. Nothing else in the codebase changes.
"""

from functools import lru_cache

from fastapi import Depends

from app.adapters.postgres_adapter import PostgresAdapter
from app.config import settings
from app.ports.database_port import DatabasePort


# ── Singletons (cached) ──────────────────────────────────────


@lru_cache(maxsize=1)
def _get_postgres_adapter() -> PostgresAdapter:
    # The pool itself is created lazily on the first query
    return PostgresAdapter(
        database_url=settings.database_url,
        min_pool_size=settings.db_min_pool_size,
        max_pool_size=settings.db_max_pool_size,
    )


# ── FastAPI Dependencies (return abstract types) ──────────────


def get_db() -> DatabasePort:
    """Inject the database adapter."""
    return _get_postgres_adapter()


# ── Domain Services ───────────────────────────────────────────

from app.services.job_service import JobService  # noqa: E402


def get_job_service(db: DatabasePort = Depends(get_db)) -> JobService:
    """Injects the DB adapter into the job service."""
    return JobService(db=db)
