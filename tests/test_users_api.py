"""HTTP tests for /api/users: status codes, default role, PUT/PATCH semantics and error mapping."""

import os
import unittest

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEED_ON_STARTUP", "false")

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import get_db
from app.main import app
from app.models import ApplicationUser, Base, Role
from app.services.seeding import seed_reference_data

ADA = {
    "firstName": "Ada",
    "lastName": "Lovelace",
    "email": "ada@example.com",
    "password": "x",
    "roles": [],
}


class _ApiTestCase(unittest.TestCase):
    """Points the app at a fresh in-memory database per test; seeds unless seed=False."""

    seed = True

    def setUp(self) -> None:
        engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(engine)
        self.session_factory = sessionmaker(bind=engine, autocommit=False, autoflush=False)
        if self.seed:
            db = self.session_factory()
            try:
                seed_reference_data(db)
            finally:
                db.close()

        def override_get_db():
            db = self.session_factory()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()

    def _count_users(self) -> int:
        db = self.session_factory()
        try:
            return db.query(ApplicationUser).count()
        finally:
            db.close()


class TestUserLifecycleScenario(_ApiTestCase):
    """Create Ada, read her back, patch her last name, delete her."""

    def test_full_scenario(self) -> None:
        created = self.client.post("/api/users", json=ADA)
        self.assertEqual(created.status_code, 200)
        body = created.json()
        self.assertIsInstance(body["id"], int)
        self.assertEqual(len(body["roles"]), 1)
        self.assertEqual(body["roles"][0]["name"], "ROLE_GUEST")
        self.assertEqual(body["roles"][0]["friendlyName"], "Guest")
        self.assertEqual(body["firstName"], "Ada")
        self.assertEqual(body["email"], "ada@example.com")
        self.assertIsNone(body["oauth2Provider"])

        user_id = body["id"]
        fetched = self.client.get(f"/api/users/{user_id}")
        self.assertEqual(fetched.status_code, 200)
        self.assertEqual(fetched.json(), body)

        patched = self.client.patch(f"/api/users/{user_id}", json={"lastName": "King"})
        self.assertEqual(patched.status_code, 200)
        self.assertEqual(patched.json()["lastName"], "King")
        self.assertEqual(patched.json()["firstName"], "Ada")

        deleted = self.client.delete(f"/api/users/{user_id}")
        self.assertEqual(deleted.status_code, 204)
        self.assertEqual(deleted.content, b"")

        missing = self.client.get(f"/api/users/{user_id}")
        self.assertEqual(missing.status_code, 404)
        self.assertEqual(missing.content, b"")


class TestCreateUser(_ApiTestCase):
    """POST /api/users applies the default role only when roles is empty."""

    def test_roles_omitted_gets_default(self) -> None:
        payload = {k: v for k, v in ADA.items() if k != "roles"}
        response = self.client.post("/api/users", json=payload)
        self.assertEqual(response.status_code, 200)
        self.assertEqual([r["name"] for r in response.json()["roles"]], ["ROLE_GUEST"])

    def test_explicit_roles_kept_without_default(self) -> None:
        payload = dict(ADA, roles=[{"name": "ROLE_USER"}, {"name": "ROLE_ADMIN"}])
        response = self.client.post("/api/users", json=payload)
        self.assertEqual(response.status_code, 200)
        names = {r["name"] for r in response.json()["roles"]}
        self.assertEqual(names, {"ROLE_USER", "ROLE_ADMIN"})

    def test_role_reference_by_id(self) -> None:
        roles = self.client.get("/api/roles").json()
        admin = next(r for r in roles if r["name"] == "ROLE_ADMIN")
        response = self.client.post("/api/users", json=dict(ADA, roles=[admin]))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["roles"], [admin])

    def test_unknown_role_is_422(self) -> None:
        payload = dict(ADA, roles=[{"name": "ROLE_WIZARD"}])
        response = self.client.post("/api/users", json=payload)
        self.assertEqual(response.status_code, 422)
        self.assertEqual(self._count_users(), 0)

    def test_roles_null_gets_default(self) -> None:
        response = self.client.post("/api/users", json=dict(ADA, roles=None))
        self.assertEqual(response.status_code, 200)
        self.assertEqual([r["name"] for r in response.json()["roles"]], ["ROLE_GUEST"])

    def test_role_reference_without_id_or_name_is_422(self) -> None:
        payload = dict(ADA, roles=[{"friendlyName": "Guest"}])
        response = self.client.post("/api/users", json=payload)
        self.assertEqual(response.status_code, 422)
        self.assertIn("id or a name", response.json()["detail"])
        self.assertNotIn("None", response.json()["detail"])
        self.assertEqual(self._count_users(), 0)

    def test_duplicate_email_is_409(self) -> None:
        self.assertEqual(self.client.post("/api/users", json=ADA).status_code, 200)
        response = self.client.post("/api/users", json=dict(ADA, firstName="Augusta"))
        self.assertEqual(response.status_code, 409)
        self.assertEqual(self._count_users(), 1)

    def test_missing_email_is_422(self) -> None:
        payload = {k: v for k, v in ADA.items() if k != "email"}
        self.assertEqual(self.client.post("/api/users", json=payload).status_code, 422)


class TestCreateUserWithoutDefaultRole(_ApiTestCase):
    """Without a seeded ROLE_GUEST, creating a user with no roles is a server error."""

    seed = False

    def test_returns_500_and_stores_nothing(self) -> None:
        response = self.client.post("/api/users", json=ADA)
        self.assertEqual(response.status_code, 500)
        self.assertIn("ROLE_GUEST", response.json()["detail"])
        self.assertEqual(self._count_users(), 0)

    def test_explicit_roles_still_work(self) -> None:
        db = self.session_factory()
        try:
            db.add(Role(name="ROLE_USER", friendly_name="User"))
            db.commit()
        finally:
            db.close()
        response = self.client.post("/api/users", json=dict(ADA, roles=[{"name": "ROLE_USER"}]))
        self.assertEqual(response.status_code, 200)


class TestReadUsers(_ApiTestCase):
    def test_list_empty(self) -> None:
        response = self.client.get("/api/users")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), [])

    def test_list_all(self) -> None:
        self.client.post("/api/users", json=ADA)
        self.client.post("/api/users", json=dict(ADA, email="grace@example.com", firstName="Grace"))
        emails = {u["email"] for u in self.client.get("/api/users").json()}
        self.assertEqual(emails, {"ada@example.com", "grace@example.com"})

    def test_unknown_id_is_404(self) -> None:
        response = self.client.get("/api/users/777")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.content, b"")


class TestPutUser(_ApiTestCase):
    """PUT replaces the mutable fields, keeps roles, and never creates."""

    def test_replaces_fields_but_not_roles(self) -> None:
        user = self.client.post("/api/users", json=ADA).json()
        replacement = {
            "email": "countess@example.com",
            "password": "new",
            "lastName": "King",
            "oauth2Provider": "google",
            "oauth2Id": "g-1",
            "roles": [{"name": "ROLE_ADMIN"}],
        }
        response = self.client.put(f"/api/users/{user['id']}", json=replacement)
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertIsNone(body["firstName"])
        self.assertEqual(body["lastName"], "King")
        self.assertEqual(body["email"], "countess@example.com")
        self.assertEqual(body["password"], "new")
        self.assertEqual(body["oauth2Provider"], "google")
        self.assertEqual(body["oauth2Id"], "g-1")
        self.assertEqual([r["name"] for r in body["roles"]], ["ROLE_GUEST"])

    def test_unknown_id_is_404_and_not_created(self) -> None:
        response = self.client.put("/api/users/55", json=ADA)
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.content, b"")
        self.assertEqual(self._count_users(), 0)

    def test_email_taken_is_409(self) -> None:
        self.client.post("/api/users", json=ADA)
        other = self.client.post("/api/users", json=dict(ADA, email="grace@example.com")).json()
        response = self.client.put(f"/api/users/{other['id']}", json=ADA)
        self.assertEqual(response.status_code, 409)


class TestPatchUser(_ApiTestCase):
    """PATCH overwrites only non-null fields."""

    def test_email_only_leaves_everything_else(self) -> None:
        payload = dict(ADA, oauth2Provider="github", oauth2Id="gh-9", roles=[{"name": "ROLE_USER"}])
        before = self.client.post("/api/users", json=payload).json()
        response = self.client.patch(f"/api/users/{before['id']}", json={"email": "ada@lovelace.org"})
        self.assertEqual(response.status_code, 200)
        after = response.json()
        self.assertEqual(after["email"], "ada@lovelace.org")
        for field in ("firstName", "lastName", "password", "oauth2Provider", "oauth2Id", "roles"):
            self.assertEqual(after[field], before[field], field)

    def test_explicit_null_is_ignored(self) -> None:
        user = self.client.post("/api/users", json=ADA).json()
        response = self.client.patch(f"/api/users/{user['id']}", json={"firstName": None})
        self.assertEqual(response.json()["firstName"], "Ada")

    def test_unknown_id_is_404(self) -> None:
        response = self.client.patch("/api/users/31", json={"lastName": "King"})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.content, b"")

    def test_email_taken_is_409(self) -> None:
        self.client.post("/api/users", json=ADA)
        other = self.client.post("/api/users", json=dict(ADA, email="grace@example.com")).json()
        response = self.client.patch(f"/api/users/{other['id']}", json={"email": "ada@example.com"})
        self.assertEqual(response.status_code, 409)


class TestDeleteUser(_ApiTestCase):
    def test_unknown_id_is_204(self) -> None:
        response = self.client.delete("/api/users/123")
        self.assertEqual(response.status_code, 204)
        self.assertEqual(self.client.get("/api/users/123").status_code, 404)


if __name__ == "__main__":
    unittest.main()
