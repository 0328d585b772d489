"""
Models module - one class per table, each method a SQL round trip.

Models raise JoblyError subclasses (NotFoundError, ValidationError, ...)
and leave the HTTP translation to the API layer.
"""
from jobly.models.company import Company
from jobly.models.job import Job
from jobly.models.user import User

__all__ = ["Company", "Job", "User"]
