"""Shared base class for tests that drive the app through TestClient."""

import unittest

from fastapi.testclient import TestClient

from pacs_site.core.database import SessionLocal, engine
from pacs_site.main import app
from pacs_site.models import Base


class SiteTestCase(unittest.TestCase):
    """Fresh schema per test; entering TestClient runs the startup bootstrap (roles, admin, demo data)."""

    def setUp(self) -> None:
        Base.metadata.drop_all(bind=engine)
        client = TestClient(app)
        self.client = client.__enter__()
        self.addCleanup(client.__exit__, None, None, None)
        self.db = SessionLocal()
        self.addCleanup(self.db.close)

    def login_admin(self, username: str = "admin", password: str = "admin") -> None:
        resp = self.client.post(
            "/login",
            data={"username": username, "password": password},
            follow_redirects=False,
        )
        self.assertEqual(resp.status_code, 303)
        self.assertEqual(resp.headers["location"], "/admin")
