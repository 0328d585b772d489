"""
Test suite for /users and /auth endpoints.
"""

import pytest
from jose import jwt

from jobly.core.config import get_settings
from jobly.models import User

U1 = {"username": "u1", "firstName": "U1F", "lastName": "U1L", "email": "user1@user.com", "isAdmin": False}

NEW_USER = {
    "username": "u-new",
    "firstName": "First-new",
    "lastName": "Last-newL",
    "password": "password-new",
    "email": "new@email.com",
    "isAdmin": False,
}


def decode(token):
    settings = get_settings()
    return jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])


class TestAuthToken:

    def test_works(self, client, monkeypatch):
        monkeypatch.setattr(User, "authenticate", staticmethod(lambda username, password: dict(U1)))

        response = client.post("/auth/token", json={"username": "u1", "password": "password1"})

        assert response.status_code == 200
        assert decode(response.json()["token"]) == {"username": "u1", "isAdmin": False}

    def test_wrong_password(self, client, fake_db):
        response = client.post("/auth/token", json={"username": "nope", "password": "password1"})

        assert response.status_code == 401

    def test_missing_data(self, client, fake_db):
        response = client.post("/auth/token", json={"username": "u1"})

        assert response.status_code == 400


class TestAuthRegister:

    def test_for_anon(self, client, fake_db):
        fake_db.queue([], [{**U1, "username": "new"}])

        response = client.post("/auth/register", json={
            "username": "new",
            "firstName": "first",
            "lastName": "last",
            "password": "password",
            "email": "new@email.com",
        })

        assert response.status_code == 201
        assert decode(response.json()["token"])["username"] == "new"
        assert fake_db.last_params[5] is False

    def test_cannot_register_as_admin(self, client, fake_db):
        response = client.post("/auth/register", json={
            "username": "new",
            "firstName": "first",
            "lastName": "last",
            "password": "password",
            "email": "new@email.com",
            "isAdmin": True,
        })

        assert response.status_code == 400
        assert fake_db.calls == []

    def test_bad_email(self, client, fake_db):
        response = client.post("/auth/register", json={
            "username": "new",
            "firstName": "first",
            "lastName": "last",
            "password": "password",
            "email": "not-an-email",
        })

        assert response.status_code == 400


class TestCreateUser:

    def test_admin_can_create_admin(self, client, fake_db, a1_headers):
        created = {k: v for k, v in NEW_USER.items() if k != "password"}
        fake_db.queue([], [{**created, "isAdmin": True}])

        response = client.post("/users", json={**NEW_USER, "isAdmin": True}, headers=a1_headers)

        assert response.status_code == 201
        body = response.json()
        assert body["user"] == {**created, "isAdmin": True}
        assert decode(body["token"]) == {"username": "u-new", "isAdmin": True}

    def test_unauth_for_users(self, client, fake_db, u1_headers):
        response = client.post("/users", json=NEW_USER, headers=u1_headers)

        assert response.status_code == 401


class TestListUsers:

    def test_works_for_admin(self, client, fake_db, a1_headers):
        fake_db.queue([dict(U1)])

        response = client.get("/users", headers=a1_headers)

        assert response.json() == {"users": [U1]}

    def test_unauth_for_users(self, client, fake_db, u1_headers):
        response = client.get("/users", headers=u1_headers)

        assert response.status_code == 401


class TestGetUser:

    def test_works_for_same_user(self, client, fake_db, u1_headers):
        fake_db.queue([dict(U1)], [{"job_id": 3}])

        response = client.get("/users/u1", headers=u1_headers)

        assert response.json() == {"user": {**U1, "jobs": [3]}}

    def test_works_for_admin(self, client, fake_db, a1_headers):
        fake_db.queue([dict(U1)], [])

        response = client.get("/users/u1", headers=a1_headers)

        assert response.status_code == 200

    def test_unauth_for_other_user(self, client, fake_db, u2_headers):
        response = client.get("/users/u1", headers=u2_headers)

        assert response.status_code == 401
        assert fake_db.calls == []

    def test_unauth_for_anon(self, client, fake_db):
        response = client.get("/users/u1")

        assert response.status_code == 401

    def test_not_found(self, client, fake_db, a1_headers):
        response = client.get("/users/nope", headers=a1_headers)

        assert response.status_code == 404


class TestUpdateUser:

    def test_works_for_same_user(self, client, fake_db, u1_headers):
        fake_db.queue([{**U1, "firstName": "New"}])

        response = client.patch("/users/u1", json={"firstName": "New"}, headers=u1_headers)

        assert response.json() == {"user": {**U1, "firstName": "New"}}
        assert fake_db.last_params == ["New", "u1"]

    def test_cannot_grant_admin(self, client, fake_db, u1_headers):
        response = client.patch("/users/u1", json={"isAdmin": True}, headers=u1_headers)

        assert response.status_code == 400

    @pytest.mark.parametrize("field", ["password", "firstName", "lastName", "email"])
    def test_null_required_field(self, client, fake_db, u1_headers, field):
        response = client.patch("/users/u1", json={field: None}, headers=u1_headers)

        assert response.status_code == 400
        assert fake_db.calls == []

    def test_unauth_for_other_user(self, client, fake_db, u2_headers):
        response = client.patch("/users/u1", json={"firstName": "New"}, headers=u2_headers)

        assert response.status_code == 401


class TestDeleteUser:

    def test_works_for_same_user(self, client, fake_db, u1_headers):
        fake_db.queue([{"username": "u1"}])

        response = client.delete("/users/u1", headers=u1_headers)

        assert response.json() == {"deleted": "u1"}

    def test_unauth_for_other_user(self, client, fake_db, u2_headers):
        response = client.delete("/users/u1", headers=u2_headers)

        assert response.status_code == 401


class TestApply:

    def test_works_for_same_user(self, client, fake_db, u1_headers):
        fake_db.queue([{"id": 3}], [{"username": "u1"}], [])

        response = client.post("/users/u1/jobs/3", headers=u1_headers)

        assert response.status_code == 200
        assert response.json() == {"applied": 3}

    def test_unauth_for_other_user(self, client, fake_db, u2_headers):
        response = client.post("/users/u1/jobs/3", headers=u2_headers)

        assert response.status_code == 401

    def test_no_such_job(self, client, fake_db, a1_headers):
        response = client.post("/users/u1/jobs/0", headers=a1_headers)

        assert response.status_code == 404
