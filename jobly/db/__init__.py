"""
Database module - PostgreSQL connection and query execution.
"""
from jobly.db.postgres import get_db_session, execute, test_postgres_connection

__all__ = [
    "get_db_session",
    "execute",
    "test_postgres_connection",
]
