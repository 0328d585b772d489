"""
User model - SQL for the users and applications tables.

Passwords are stored as bcrypt hashes and never returned.
"""

from typing import Any, Mapping

from jobly.core.auth import hash_password, verify_password
from jobly.core.errors import NotFoundError, UnauthorizedError, ValidationError
from jobly.core.logging_config import get_logger
from jobly.db import postgres as db
from jobly.helpers.sql import sql_for_partial_update

logger = get_logger(__name__)

USER_COLUMNS = ('username, first_name AS "firstName", last_name AS "lastName", '
                'email, is_admin AS "isAdmin"')

JS_TO_SQL = {
    "firstName": "first_name",
    "lastName": "last_name",
    "isAdmin": "is_admin",
}


class User:

    @staticmethod
    def authenticate(username: str, password: str) -> dict:
        """
        Check a username/password pair.

        Returns {username, firstName, lastName, email, isAdmin}.
        Raises UnauthorizedError when the user is missing or the password is wrong.
        """
        rows = db.execute(
            f"SELECT {USER_COLUMNS}, password FROM users WHERE username = $1",
            [username],
        )

        if rows:
            user = rows[0]
            hashed = user.pop("password")
            if verify_password(password, hashed):
                return user

        logger.info(f"Failed login for {username}")
        raise UnauthorizedError("Invalid username/password")

    @staticmethod
    def register(data: Mapping[str, Any]) -> dict:
        """
        Create a user and return it (without the password).

        data: {username, password, firstName, lastName, email, isAdmin}

        Raises ValidationError on a duplicate username.
        """
        username = data["username"]
        duplicate_check = db.execute(
            "SELECT username FROM users WHERE username = $1",
            [username],
        )
        if duplicate_check:
            raise ValidationError(f"Duplicate username: {username}")

        rows = db.execute(
            f"""INSERT INTO users
                   (username, password, first_name, last_name, email, is_admin)
                VALUES ($1, $2, $3, $4, $5, $6)
                RETURNING {USER_COLUMNS}""",
            [
                username,
                hash_password(data["password"]),
                data["firstName"],
                data["lastName"],
                data["email"],
                bool(data.get("isAdmin", False)),
            ],
        )
        return rows[0]

    @staticmethod
    def find_all() -> list:
        return db.execute(f"SELECT {USER_COLUMNS} FROM users ORDER BY username")

    @staticmethod
    def get(username: str) -> dict:
        """A user with the ids of jobs they applied to: {..., jobs: [id, ...]}"""
        rows = db.execute(
            f"SELECT {USER_COLUMNS} FROM users WHERE username = $1",
            [username],
        )
        if not rows:
            raise NotFoundError(f"No user: {username}")

        user = rows[0]
        applications = db.execute(
            "SELECT job_id FROM applications WHERE username = $1 ORDER BY job_id",
            [username],
        )
        user["jobs"] = [a["job_id"] for a in applications]
        return user

    @staticmethod
    def update(username: str, data: Mapping[str, Any]) -> dict:
        """
        Partial update of {firstName, lastName, password, email, isAdmin}.

        A new password is hashed before it is stored.
        """
        data = dict(data)
        if data.get("password"):
            data["password"] = hash_password(data["password"])

        set_cols, values = sql_for_partial_update(data, JS_TO_SQL)
        username_idx = f"${len(values) + 1}"

        rows = db.execute(
            f"""UPDATE users
                SET {set_cols}
                WHERE username = {username_idx}
                RETURNING {USER_COLUMNS}""",
            [*values, username],
        )
        if not rows:
            raise NotFoundError(f"No user: {username}")

        return rows[0]

    @staticmethod
    def remove(username: str) -> None:
        rows = db.execute(
            "DELETE FROM users WHERE username = $1 RETURNING username",
            [username],
        )
        if not rows:
            raise NotFoundError(f"No user: {username}")

    @staticmethod
    def apply_to_job(username: str, job_id: int) -> None:
        """Record an application. Raises NotFoundError if the job or user is missing."""
        if not db.execute("SELECT id FROM jobs WHERE id = $1", [job_id]):
            raise NotFoundError(f"No job: {job_id}")

        if not db.execute("SELECT username FROM users WHERE username = $1", [username]):
            raise NotFoundError(f"No username: {username}")

        db.execute(
            """INSERT INTO applications (job_id, username)
               VALUES ($1, $2)
               ON CONFLICT DO NOTHING""",
            [job_id, username],
        )
