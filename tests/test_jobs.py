"""
Test suite for /jobs endpoints.
"""

from decimal import Decimal

NEW_JOB = {"title": "My New Job", "salary": 150000, "equity": 0.15, "companyHandle": "c1"}


def job_row(**overrides):
    row = {"id": 1, "title": "Job 1", "salary": 10000, "equity": Decimal("0.1"), "companyHandle": "c1"}
    row.update(overrides)
    return row


class TestCreateJob:

    def test_ok_for_admin(self, client, fake_db, a1_headers):
        fake_db.queue([{"handle": "c1"}], [job_row(id=9, title="My New Job", salary=150000, equity=Decimal("0.15"))])

        response = client.post("/jobs", json=NEW_JOB, headers=a1_headers)

        assert response.status_code == 201
        assert response.json() == {
            "job": {"id": 9, "title": "My New Job", "salary": 150000, "equity": "0.15", "companyHandle": "c1"}
        }

    def test_unauth_for_non_admin(self, client, fake_db, u1_headers):
        response = client.post("/jobs", json=NEW_JOB, headers=u1_headers)

        assert response.status_code == 401

    def test_unauth_for_anon(self, client, fake_db):
        response = client.post("/jobs", json=NEW_JOB)

        assert response.status_code == 401

    def test_missing_data(self, client, fake_db, a1_headers):
        response = client.post("/jobs", json={}, headers=a1_headers)

        assert response.status_code == 400

    def test_extra_data(self, client, fake_db, a1_headers):
        response = client.post("/jobs", json={**NEW_JOB, "foo": "extra data"}, headers=a1_headers)

        assert response.status_code == 400

    def test_equity_above_one(self, client, fake_db, a1_headers):
        response = client.post("/jobs", json={**NEW_JOB, "equity": 1.5}, headers=a1_headers)

        assert response.status_code == 400

    def test_unknown_company(self, client, fake_db, a1_headers):
        response = client.post("/jobs", json={**NEW_JOB, "companyHandle": "nope"}, headers=a1_headers)

        assert response.status_code == 400


class TestListJobs:

    def test_ok_for_anon_with_no_filters(self, client, fake_db):
        fake_db.queue([job_row(), job_row(id=2, title="Job 2", salary=20000, equity=Decimal("0.2"), companyHandle="c3")])

        response = client.get("/jobs")

        assert response.status_code == 200
        assert [job["title"] for job in response.json()["jobs"]] == ["Job 1", "Job 2"]
        assert response.json()["jobs"][0]["equity"] == "0.1"
        assert "WHERE" not in fake_db.last_sql

    def test_all_filters(self, client, fake_db):
        response = client.get("/jobs", params={"titleLike": "job", "minSalary": "15000", "hasEquity": "true"})

        assert response.status_code == 200
        assert "WHERE title ILIKE $1 AND salary >= $2 AND equity > 0" in fake_db.last_sql
        assert fake_db.last_params == ["%job%", 15000]

    def test_has_equity_false_only(self, client, fake_db):
        response = client.get("/jobs", params={"hasEquity": "false"})

        assert response.status_code == 200
        assert "WHERE" not in fake_db.last_sql

    def test_bad_salary(self, client, fake_db):
        response = client.get("/jobs", params={"minSalary": "-5"})

        assert response.status_code == 400


class TestGetJob:

    def test_works_for_anon(self, client, fake_db):
        fake_db.queue([job_row()])

        response = client.get("/jobs/1")

        assert response.json() == {
            "job": {"id": 1, "title": "Job 1", "salary": 10000, "equity": "0.1", "companyHandle": "c1"}
        }

    def test_not_found(self, client, fake_db):
        response = client.get("/jobs/0")

        assert response.status_code == 404


class TestUpdateJob:

    def test_works_for_admin(self, client, fake_db, a1_headers):
        fake_db.queue([job_row(title="Updated Job Title")])

        response = client.patch("/jobs/1", json={"title": "Updated Job Title"}, headers=a1_headers)

        assert response.status_code == 200
        assert response.json()["job"]["title"] == "Updated Job Title"
        assert fake_db.last_params == ["Updated Job Title", 1]

    def test_unauth_for_non_admin(self, client, fake_db, u1_headers):
        response = client.patch("/jobs/1", json={"title": "Updated Job Title"}, headers=u1_headers)

        assert response.status_code == 401

    def test_unauth_for_anon(self, client, fake_db):
        response = client.patch("/jobs/1", json={"title": "Updated Job Title"})

        assert response.status_code == 401

    def test_not_found(self, client, fake_db, a1_headers):
        response = client.patch("/jobs/0", json={"title": "Updated Job Title"}, headers=a1_headers)

        assert response.status_code == 404

    def test_invalid_data(self, client, fake_db, a1_headers):
        response = client.patch("/jobs/1", json={"foo": "Extra Data Not Allowed"}, headers=a1_headers)

        assert response.status_code == 400

    def test_cannot_move_company(self, client, fake_db, a1_headers):
        response = client.patch("/jobs/1", json={"companyHandle": "c2"}, headers=a1_headers)

        assert response.status_code == 400
        assert fake_db.calls == []

    def test_null_title(self, client, fake_db, a1_headers):
        response = client.patch("/jobs/1", json={"title": None}, headers=a1_headers)

        assert response.status_code == 400
        assert fake_db.calls == []

    def test_null_salary_clears_it(self, client, fake_db, a1_headers):
        fake_db.queue([{"id": 1, "title": "Job 1", "salary": None, "equity": "0.1", "companyHandle": "c1"}])

        response = client.patch("/jobs/1", json={"salary": None}, headers=a1_headers)

        assert response.status_code == 200
        assert fake_db.last_params == [None, 1]


class TestDeleteJob:

    def test_works_for_admin(self, client, fake_db, a1_headers):
        fake_db.queue([{"id": 1}])

        response = client.delete("/jobs/1", headers=a1_headers)

        assert response.json() == {"deleted": 1}

    def test_unauth_for_non_admin(self, client, fake_db, u1_headers):
        response = client.delete("/jobs/1", headers=u1_headers)

        assert response.status_code == 401

    def test_not_found(self, client, fake_db, a1_headers):
        response = client.delete("/jobs/0", headers=a1_headers)

        assert response.status_code == 404
