import re
from contextlib import contextmanager
from typing import Any, Dict, List, Sequence, Tuple

from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker

from jobly.core.config import get_settings
from jobly.core.logging_config import get_logger

settings = get_settings()
logger = get_logger(__name__)

# Create engine with connection pool
# pool_size=5: maintain 5 connections ready
# max_overflow=10: allow 10 extra connections under load
engine = create_engine(
    settings.postgres_url,
    pool_size=5,
    max_overflow=10,
    pool_pre_ping=True,
    echo=settings.debug  # Log SQL queries in debug mode
)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# $1, $2, ... $10 (longest match, so $10 is never read as $1 followed by "0")
POSITIONAL_PARAM = re.compile(r"\$(\d+)")


@contextmanager
def get_db_session():
    """
    Context manager for database sessions.
    Usage:
        with get_db_session() as db:
            db.execute(text("SELECT * FROM users"))
    """
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def test_postgres_connection() -> bool:
    """
    Test if PostgreSQL is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        with get_db_session() as db:
            result = db.execute(text("SELECT 1 as test"))
            row = result.fetchone()
            return row[0] == 1
    except Exception as e:
        logger.error(f"PostgreSQL connection failed: {e}")
        return False


def bind_positional(sql: str, params: Sequence[Any] = ()) -> Tuple[str, Dict[str, Any]]:
    """
    Rewrite $n placeholders into named binds SQLAlchemy understands.

        bind_positional("SELECT * FROM jobs WHERE id = $1", [7])
        -> ("SELECT * FROM jobs WHERE id = :p1", {"p1": 7})

    Raises:
        ValueError if a placeholder has no matching parameter
    """
    params = list(params or ())
    bound = {}

    def replace(match):
        idx = int(match.group(1))
        if idx < 1 or idx > len(params):
            raise ValueError(f"Placeholder ${idx} has no parameter ({len(params)} given)")
        name = f"p{idx}"
        bound[name] = params[idx - 1]
        return f":{name}"

    return POSITIONAL_PARAM.sub(replace, sql), bound


def execute(sql: str, params: Sequence[Any] = ()) -> List[dict]:
    """
    Execute SQL written with $n placeholders and return rows as dicts.

    Column labels are kept verbatim, so quoted aliases such as
    company_handle AS "companyHandle" come back as "companyHandle".
    Statements that return no rows give [].
    """
    statement, bound = bind_positional(sql, params)
    with get_db_session() as db:
        result = db.execute(text(statement), bound)
        if not result.returns_rows:
            return []
        return [dict(row) for row in result.mappings().all()]

