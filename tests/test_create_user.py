"""Tests for the create_user CLI."""

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

from sqlalchemy.orm import sessionmaker

from pacs_site.core.database import build_engine
from pacs_site.core.security import verify_password
from pacs_site.models import Role, User
from pacs_site.models.role import ROLE_NAMES
from pacs_site.scripts import create_user
from pacs_site.services.bootstrap import create_schema


class TestCreateUser(unittest.TestCase):
    def setUp(self) -> None:
        engine = build_engine("sqlite://")
        self.addCleanup(engine.dispose)
        create_schema(engine)
        self.factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
        db = self.factory()
        db.add_all(Role(name=name) for name in ROLE_NAMES)
        db.commit()
        db.close()
        patcher = patch.object(create_user, "SessionLocal", self.factory)
        patcher.start()
        self.addCleanup(patcher.stop)

    def _run(self, *argv: str) -> int:
        with redirect_stdout(io.StringIO()), redirect_stderr(io.StringIO()):
            return create_user.main(list(argv))

    def test_creates_user_with_role(self) -> None:
        self.assertEqual(self._run("claire", "a-long-passphrase", "staff", "--email", "c@example.org"), 0)
        db = self.factory()
        self.addCleanup(db.close)
        user = db.query(User).filter(User.username == "claire").one()
        self.assertTrue(verify_password("a-long-passphrase", user.password))
        self.assertEqual(db.get(Role, user.role_id).name, "staff")
        self.assertEqual(user.email, "c@example.org")

    def test_short_password_rejected(self) -> None:
        self.assertEqual(self._run("claire", "short"), 1)

    def test_duplicate_rejected(self) -> None:
        self.assertEqual(self._run("claire", "a-long-passphrase"), 0)
        self.assertEqual(self._run("claire", "a-long-passphrase"), 1)


if __name__ == "__main__":
    unittest.main()
