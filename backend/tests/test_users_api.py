"""API tests for POST /create/user."""

from app.database import get_db
from app.main import app


class _BrokenSession:
    """Session whose every query fails, as if the database were down."""

    async def execute(self, *args, **kwargs):
        raise RuntimeError("connection refused by db-host:5432")

    async def rollback(self):
        pass


async def _broken_db():
    yield _BrokenSession()


class TestCreateUser:
    def test_creates_user(self, test_client):
        resp = test_client.post("/create/user", json={"username": "bob", "email": "bob@example.com"})

        assert resp.status_code == 200
        data = resp.json()
        assert data["message"] == "user created successfully."
        assert data["user"]["username"] == "bob"
        assert data["user"]["email"] == "bob@example.com"
        assert isinstance(data["user"]["id"], int)

    def test_validation_errors_return_400(self, test_client):
        resp = test_client.post("/create/user", json={"email": "no-at-sign"})

        assert resp.status_code == 400
        assert resp.json() == {
            "errors": [
                "Username is required and should be string.",
                "email is require and should be string.",
            ]
        }

    def test_duplicate_email_is_rejected(self, test_client, user):
        resp = test_client.post(
            "/create/user", json={"username": "other", "email": "alice@example.com"}
        )

        assert resp.status_code == 404
        assert resp.json() == {"message": "user already existed."}

    def test_non_object_body_returns_400(self, test_client):
        resp = test_client.post("/create/user", json=["bob", "bob@example.com"])

        assert resp.status_code == 400
        assert "errors" in resp.json()

    def test_database_failure_returns_opaque_500(self, test_client):
        app.dependency_overrides[get_db] = _broken_db
        resp = test_client.post("/create/user", json={"username": "bob", "email": "bob@example.com"})

        assert resp.status_code == 500
        data = resp.json()
        assert data["message"] == "Internal server error."
        assert data["errorId"]
        assert "db-host" not in resp.text
