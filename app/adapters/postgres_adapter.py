"""
Concrete implementation of DatabasePort using an asyncpg connection pool.
"""

import logging
from typing import Any

import asyncpg
from asyncpg import exceptions as pg_exc

from app.adapters.sql import (
    JOB_COLUMN_ALIASES,
    JOB_COLUMNS,
    sql_for_job_filter,
    sql_for_job_list,
    sql_for_partial_update,
)
from app.domain.errors import DuplicateEntityError, InvalidReferenceError
from app.domain.models import JobFilter
from app.ports.database_port import DatabasePort

logger = logging.getLogger(__name__)


class PostgresAdapter(DatabasePort):
    """All database I/O goes through parameterized queries on a shared pool."""

    def __init__(
        self,
        database_url: str,
        min_pool_size: int = 1,
        max_pool_size: int = 10,
        pool: asyncpg.Pool | None = None,
    ) -> None:
        self._database_url = database_url
        self._min_pool_size = min_pool_size
        self._max_pool_size = max_pool_size
        self._pool = pool

    async def _get_pool(self) -> asyncpg.Pool:
        if self._pool is None:
            self._pool = await asyncpg.create_pool(
                dsn=self._database_url,
                min_size=self._min_pool_size,
                max_size=self._max_pool_size,
                command_timeout=15,
            )
            logger.info(
                f"Postgres pool ready (min={self._min_pool_size}, max={self._max_pool_size})"
            )
        return self._pool

    async def close(self) -> None:
        if self._pool is not None:
            await self._pool.close()
            self._pool = None

    @staticmethod
    def _row_to_dict(row: asyncpg.Record | None) -> dict[str, Any] | None:
        return dict(row) if row is not None else None

    # ── Jobs ──────────────────────────────────────────────────

    async def create_job(self, data: dict[str, Any]) -> dict[str, Any]:
        pool = await self._get_pool()
        try:
            row = await pool.fetchrow(
                f"""
                INSERT INTO jobs (title, salary, equity, company_handle)
                VALUES ($1, $2, $3, $4)
                RETURNING {JOB_COLUMNS}
                """,
                data["title"],
                data.get("salary"),
                data.get("equity"),
                data["company_handle"],
            )
        except pg_exc.UniqueViolationError as exc:
            # Two creates raced past the duplicate pre-check
            logger.warning(f"Unique violation inserting job '{data['title']}': {exc}")
            raise DuplicateEntityError(f"Duplicate job title: {data['title']}") from exc
        except pg_exc.ForeignKeyViolationError as exc:
            raise InvalidReferenceError(
                f"No company with handle: {data['company_handle']}"
            ) from exc
        return dict(row)

    async def find_job_by_title_and_company(
        self, title: str, company_handle: str
    ) -> dict[str, Any] | None:
        pool = await self._get_pool()
        row = await pool.fetchrow(
            f"""
            SELECT {JOB_COLUMNS}
            FROM jobs
            WHERE title = $1 AND company_handle = $2
            """,
            title,
            company_handle,
        )
        return self._row_to_dict(row)

    async def list_jobs(self) -> list[dict[str, Any]]:
        pool = await self._get_pool()
        query = sql_for_job_list()
        rows = await pool.fetch(query.text, *query.params)
        return [dict(r) for r in rows]

    async def list_jobs_filtered(self, criteria: JobFilter) -> list[dict[str, Any]]:
        pool = await self._get_pool()
        query = sql_for_job_filter(criteria)
        rows = await pool.fetch(query.text, *query.params)
        return [dict(r) for r in rows]

    async def get_job(self, job_id: int) -> dict[str, Any] | None:
        pool = await self._get_pool()
        row = await pool.fetchrow(
            f"SELECT {JOB_COLUMNS} FROM jobs WHERE id = $1",
            job_id,
        )
        return self._row_to_dict(row)

    async def update_job(self, job_id: int, data: dict[str, Any]) -> dict[str, Any] | None:
        set_cols, values = sql_for_partial_update(data, JOB_COLUMN_ALIASES)
        id_idx = len(values) + 1

        pool = await self._get_pool()
        try:
            row = await pool.fetchrow(
                f"""
                UPDATE jobs
                SET {set_cols}
                WHERE id = ${id_idx}
                RETURNING {JOB_COLUMNS}
                """,
                *values,
                job_id,
            )
        except pg_exc.UniqueViolationError as exc:
            raise DuplicateEntityError(f"Duplicate job title: {data.get('title')}") from exc
        return self._row_to_dict(row)

    async def remove_job(self, job_id: int) -> int | None:
        pool = await self._get_pool()
        return await pool.fetchval(
            "DELETE FROM jobs WHERE id = $1 RETURNING id",
            job_id,
        )
