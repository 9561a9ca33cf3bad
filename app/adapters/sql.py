"""
SQL fragment builders used by the Postgres adapter.

Pure string/list transformations — nothing here touches the database.
Every value is bound through a positional `$N` placeholder; only column
identifiers are interpolated, and those are quoted.
"""

from __future__ import annotations

from typing import Any, Mapping, NamedTuple

from app.domain.errors import NoFieldsError
from app.domain.models import JobFilter

JOB_COLUMNS = "id, title, salary, equity, company_handle"

# Logical field name → column name, for fields whose names differ
JOB_COLUMN_ALIASES: dict[str, str] = {"companyHandle": "company_handle"}


class PartialUpdate(NamedTuple):
    set_cols: str
    values: list[Any]


class QuerySpec(NamedTuple):
    text: str
    params: list[Any]


def quote_identifier(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


def sql_for_partial_update(
    data_to_update: Mapping[str, Any],
    js_to_sql: Mapping[str, str],
) -> PartialUpdate:
    """
    Build the SET clause of an UPDATE from the fields a client sent.

    Args:
        data_to_update: {field: new_value}; only the fields being changed
        js_to_sql: maps field names to column names where they differ,
            e.g. {"numEmployees": "num_employees"}

    Returns:
        PartialUpdate('"num_employees"=$1, "title"=$2', [5, "X"])

    Raises:
        NoFieldsError: if data_to_update is empty
    """
    keys = list(data_to_update)
    if not keys:
        raise NoFieldsError("No data")

    cols = [
        f"{quote_identifier(js_to_sql.get(key, key))}=${idx}"
        for idx, key in enumerate(keys, start=1)
    ]
    return PartialUpdate(", ".join(cols), [data_to_update[key] for key in keys])


def _like_contains(term: str) -> str:
    escaped = term.lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def sql_for_job_filter(criteria: JobFilter) -> QuerySpec:
    """
    Build the SELECT for a filtered job search.

    Each present criterion appends one (clause, param) pair, in the fixed
    order title → min_salary → has_equity; placeholders are numbered by
    position so the param list always lines up with the clause.

    Filtered results are ordered by salary, highest first. With no active
    criterion this falls back to the full listing, ordered by company.
    """
    predicates: list[tuple[str, Any]] = []

    if criteria.title is not None:
        predicates.append(("lower(title) LIKE {}", _like_contains(criteria.title)))
    if criteria.min_salary is not None:
        predicates.append(("salary >= {}", criteria.min_salary))
    if criteria.has_equity:
        predicates.append(("equity <> {}", 0))

    if not predicates:
        return sql_for_job_list()

    where = " AND ".join(
        clause.format(f"${idx}") for idx, (clause, _) in enumerate(predicates, start=1)
    )
    return QuerySpec(
        f"SELECT {JOB_COLUMNS} FROM jobs WHERE {where} ORDER BY salary DESC",
        [param for _, param in predicates],
    )


def sql_for_job_list() -> QuerySpec:
    """Unfiltered listing. Ordered by company handle, unlike filtered searches."""
    return QuerySpec(f"SELECT {JOB_COLUMNS} FROM jobs ORDER BY company_handle", [])
