"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- A recording stand-in for the SQL execution function
- FastAPI test client
- Authorization headers for regular users and an admin
"""

import os

# Must be set before jobly reads its settings
os.environ.setdefault("JOBLY_ENV", "test")

import pytest
from fastapi.testclient import TestClient

from jobly.helpers.tokens import create_token
from jobly.main import app


class FakeExecute:
    """
    Replaces jobly.db.postgres.execute.

    Records every (sql, params) call with whitespace collapsed, and answers
    each call with the next queued result ([] once the queue is empty).
    """

    def __init__(self):
        self.calls = []
        self.results = []

    def queue(self, *results):
        self.results.extend(results)

    def __call__(self, sql, params=()):
        self.calls.append((" ".join(sql.split()), list(params or [])))
        return self.results.pop(0) if self.results else []

    @property
    def last_sql(self):
        return self.calls[-1][0]

    @property
    def last_params(self):
        return self.calls[-1][1]


@pytest.fixture
def fake_db(monkeypatch):
    fake = FakeExecute()
    monkeypatch.setattr("jobly.db.postgres.execute", fake)
    return fake


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


def bearer(username, is_admin=False):
    token = create_token({"username": username, "isAdmin": is_admin})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def u1_headers():
    return bearer("u1")


@pytest.fixture
def u2_headers():
    return bearer("u2")


@pytest.fixture
def a1_headers():
    return bearer("a1", is_admin=True)
