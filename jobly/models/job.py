"""
Job model - SQL for the jobs table.
"""

from typing import Any, Mapping, Optional

from jobly.core.errors import NotFoundError, ValidationError
from jobly.db import postgres as db
from jobly.helpers.sql import sql_for_partial_update, sql_job_filter

JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'

JS_TO_SQL = {
    "companyHandle": "company_handle",
}


class Job:

    @staticmethod
    def create(data: Mapping[str, Any]) -> dict:
        """
        Create a job and return it.

        data: {title, salary, equity, companyHandle}

        Raises ValidationError if the company does not exist.
        """
        company_handle = data["companyHandle"]
        handle_check = db.execute(
            "SELECT handle FROM companies WHERE handle = $1",
            [company_handle],
        )
        if not handle_check:
            raise ValidationError(f"No company found with handle: {company_handle}")

        rows = db.execute(
            f"""INSERT INTO jobs (title, salary, equity, company_handle)
                VALUES ($1, $2, $3, $4)
                RETURNING {JOB_COLUMNS}""",
            [data["title"], data.get("salary"), data.get("equity"), company_handle],
        )
        return rows[0]

    @staticmethod
    def find_all(filters: Optional[Mapping[str, Any]] = None) -> list:
        """All jobs ordered by title, optionally narrowed by {titleLike, minSalary, hasEquity}."""
        query = f"SELECT {JOB_COLUMNS} FROM jobs"
        values = []

        if filters:
            filter_string, values = sql_job_filter(filters)
            # hasEquity=false alone yields no predicate
            if filter_string:
                query += f" WHERE {filter_string}"

        query += " ORDER BY title"
        return db.execute(query, values)

    @staticmethod
    def get(job_id: int) -> dict:
        rows = db.execute(
            f"SELECT {JOB_COLUMNS} FROM jobs WHERE id = $1",
            [job_id],
        )
        if not rows:
            raise NotFoundError(f"No job found with ID {job_id}")

        return rows[0]

    @staticmethod
    def update(job_id: int, data: Mapping[str, Any]) -> dict:
        """Partial update of {title, salary, equity}."""
        set_cols, values = sql_for_partial_update(data, JS_TO_SQL)
        id_idx = f"${len(values) + 1}"

        rows = db.execute(
            f"""UPDATE jobs
                SET {set_cols}
                WHERE id = {id_idx}
                RETURNING {JOB_COLUMNS}""",
            [*values, job_id],
        )
        if not rows:
            raise NotFoundError(f"No job found with ID {job_id}")

        return rows[0]

    @staticmethod
    def remove(job_id: int) -> None:
        rows = db.execute(
            "DELETE FROM jobs WHERE id = $1 RETURNING id",
            [job_id],
        )
        if not rows:
            raise NotFoundError(f"No job found with ID {job_id}")
