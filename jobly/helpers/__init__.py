"""
Helpers module - SQL fragment builders and token creation.
"""
from jobly.helpers.sql import sql_for_partial_update, sql_company_filter, sql_job_filter
from jobly.helpers.tokens import create_token

__all__ = [
    "sql_for_partial_update",
    "sql_company_filter",
    "sql_job_filter",
    "create_token",
]
