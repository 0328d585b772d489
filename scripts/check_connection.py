#!/usr/bin/env python3
"""
Connection Check Script

Run this to verify the database is reachable and the schema is loaded.
Usage: python scripts/check_connection.py
"""
import sys

from jobly.core.config import get_settings
from jobly.db.postgres import execute, test_postgres_connection

TABLES = ("companies", "jobs", "users", "applications")


def main() -> int:
    settings = get_settings()
    print("=" * 50)
    print("JOBLY - CONNECTION CHECK")
    print("=" * 50)

    print("\n[1] Testing PostgreSQL...")
    print(f"    URL: postgresql://{settings.postgres_user}:****@{settings.postgres_host}:{settings.postgres_port}/{settings.database_name}")
    if not test_postgres_connection():
        print("    ❌ PostgreSQL: FAILED")
        return 1
    print("    ✅ PostgreSQL: CONNECTED")

    print("\n[2] Checking tables...")
    rows = execute(
        "SELECT table_name FROM information_schema.tables WHERE table_schema = $1",
        ["public"],
    )
    present = {r["table_name"] for r in rows}
    missing = [t for t in TABLES if t not in present]
    for table in TABLES:
        print(f"    {'✅' if table in present else '❌'} {table}")

    if missing:
        print("\n    Load the schema: psql -f scripts/schema.sql")
        return 1

    print("\n" + "=" * 50)
    print("Connection check complete!")
    print("=" * 50)
    return 0


if __name__ == "__main__":
    sys.exit(main())
