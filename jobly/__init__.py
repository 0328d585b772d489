"""
Jobly
A job board REST API.

Architecture:
- PostgreSQL: companies, jobs, users, applications
- Models issue parameterized SQL built by jobly.helpers.sql
- FastAPI routes with JWT-based authorization
"""

__version__ = "1.0.0"
