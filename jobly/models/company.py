"""
Company model - SQL for the companies table.
"""

from typing import Any, Mapping, Optional

from jobly.core.errors import NotFoundError, ValidationError
from jobly.db import postgres as db
from jobly.helpers.sql import sql_company_filter, sql_for_partial_update

COMPANY_COLUMNS = 'handle, name, description, num_employees AS "numEmployees", logo_url AS "logoUrl"'

# Logical names whose column differs
JS_TO_SQL = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}


class Company:

    @staticmethod
    def create(data: Mapping[str, Any]) -> dict:
        """
        Create a company and return it.

        data: {handle, name, description, numEmployees, logoUrl}

        Raises ValidationError if the handle or the name is taken.
        """
        duplicate_check = db.execute(
            "SELECT handle FROM companies WHERE handle = $1 OR name = $2",
            [data["handle"], data["name"]],
        )
        if duplicate_check:
            raise ValidationError(f"Duplicate company: {data['handle']}")

        rows = db.execute(
            f"""INSERT INTO companies
                   (handle, name, description, num_employees, logo_url)
                VALUES ($1, $2, $3, $4, $5)
                RETURNING {COMPANY_COLUMNS}""",
            [
                data["handle"],
                data["name"],
                data.get("description"),
                data.get("numEmployees"),
                data.get("logoUrl"),
            ],
        )
        return rows[0]

    @staticmethod
    def find_all(filters: Optional[Mapping[str, Any]] = None) -> list:
        """
        All companies ordered by name, optionally narrowed by
        {nameLike, minEmployees, maxEmployees}.

        Raises ValidationError for filters with nothing usable in them
        or with minEmployees > maxEmployees.
        """
        query = f"SELECT {COMPANY_COLUMNS} FROM companies"
        values = []

        if filters:
            filter_string, values = sql_company_filter(filters)
            query += f" WHERE {filter_string}"

        query += " ORDER BY name"
        return db.execute(query, values)

    @staticmethod
    def get(handle: str) -> dict:
        """A company with its jobs: {handle, ..., jobs: [{id, title, salary, equity}]}"""
        rows = db.execute(
            f"SELECT {COMPANY_COLUMNS} FROM companies WHERE handle = $1",
            [handle],
        )
        if not rows:
            raise NotFoundError(f"No company: {handle}")

        company = rows[0]
        company["jobs"] = db.execute(
            """SELECT id, title, salary, equity
               FROM jobs
               WHERE company_handle = $1
               ORDER BY id""",
            [handle],
        )
        return company

    @staticmethod
    def update(handle: str, data: Mapping[str, Any]) -> dict:
        """
        Partial update. data may hold any of {name, description,
        numEmployees, logoUrl}; callers restrict the keys.

        Raises ValidationError if name belongs to another company.
        """
        if data.get("name") is not None:
            name_check = db.execute(
                "SELECT handle FROM companies WHERE name = $1 AND handle <> $2",
                [data["name"], handle],
            )
            if name_check:
                raise ValidationError(f"Duplicate company name: {data['name']}")

        set_cols, values = sql_for_partial_update(data, JS_TO_SQL)
        handle_idx = f"${len(values) + 1}"

        rows = db.execute(
            f"""UPDATE companies
                SET {set_cols}
                WHERE handle = {handle_idx}
                RETURNING {COMPANY_COLUMNS}""",
            [*values, handle],
        )
        if not rows:
            raise NotFoundError(f"No company: {handle}")

        return rows[0]

    @staticmethod
    def remove(handle: str) -> None:
        rows = db.execute(
            "DELETE FROM companies WHERE handle = $1 RETURNING handle",
            [handle],
        )
        if not rows:
            raise NotFoundError(f"No company: {handle}")
