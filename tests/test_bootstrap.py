"""Tests for startup bootstrap: idempotent seeding, atomic roles/admin unit, failure handling."""

import unittest
from unittest.mock import MagicMock, patch

from pydantic import SecretStr
from sqlalchemy.orm import sessionmaker

from pacs_site.core.database import build_engine
from pacs_site.core.errors import BootstrapError
from pacs_site.core.security import verify_password
from pacs_site.models import Event, Product, Role, User, Volunteer
from pacs_site.models.role import ROLE_NAMES
from pacs_site.services.bootstrap import bootstrap, create_schema, run_startup


def _settings(seed_demo: bool = True) -> MagicMock:
    settings = MagicMock()
    settings.DEFAULT_ADMIN_USERNAME = "admin"
    settings.DEFAULT_ADMIN_PASSWORD = SecretStr("admin")
    settings.SEED_DEMO_CONTENT = seed_demo
    return settings


class BootstrapTestCase(unittest.TestCase):
    """Private in-memory database per test."""

    def setUp(self) -> None:
        self.engine = build_engine("sqlite://")
        self.addCleanup(self.engine.dispose)
        self.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        create_schema(self.engine)
        self.db = self.session_factory()
        self.addCleanup(self.db.close)


class TestBootstrapSeeds(BootstrapTestCase):
    def test_seeds_roles_admin_and_demo_content(self) -> None:
        bootstrap(self.session_factory, _settings())
        self.assertEqual(
            [name for (name,) in self.db.query(Role.name).order_by(Role.id)],
            list(ROLE_NAMES),
        )
        admin = self.db.query(User).one()
        self.assertEqual(admin.username, "admin")
        self.assertTrue(verify_password("admin", admin.password))
        self.assertNotEqual(admin.password, "admin")
        self.assertEqual(self.db.query(Volunteer).count(), 3)
        self.assertEqual(self.db.query(Event).count(), 3)
        self.assertEqual(self.db.query(Product).count(), 4)

    def test_idempotent(self) -> None:
        bootstrap(self.session_factory, _settings())
        bootstrap(self.session_factory, _settings())
        self.assertEqual(self.db.query(Role).count(), 3)
        self.assertEqual(self.db.query(User).count(), 1)
        self.assertEqual(self.db.query(Event).count(), 3)
        self.assertEqual(self.db.query(Product).count(), 4)

    def test_no_default_admin_when_users_exist(self) -> None:
        bootstrap(self.session_factory, _settings(seed_demo=False))
        self.db.query(User).delete()
        role = self.db.query(Role).filter(Role.name == "staff").one()
        self.db.add(User(username="claire", password="x", role_id=role.id))
        self.db.commit()
        bootstrap(self.session_factory, _settings(seed_demo=False))
        self.assertEqual([u.username for u in self.db.query(User).all()], ["claire"])

    def test_demo_content_can_be_disabled(self) -> None:
        bootstrap(self.session_factory, _settings(seed_demo=False))
        self.assertEqual(self.db.query(Event).count(), 0)
        self.assertEqual(self.db.query(User).count(), 1)


class TestBootstrapFailure(BootstrapTestCase):
    """A failure while creating the admin rolls back the roles as well."""

    @patch("pacs_site.services.bootstrap.hash_password")
    def test_rolls_back_roles_when_admin_fails(self, mock_hash: MagicMock) -> None:
        mock_hash.side_effect = RuntimeError("hashing failed")
        with self.assertRaises(BootstrapError):
            bootstrap(self.session_factory, _settings())
        self.assertEqual(self.db.query(Role).count(), 0)
        self.assertEqual(self.db.query(User).count(), 0)

    @patch("pacs_site.services.bootstrap.hash_password")
    def test_run_startup_reports_failure(self, mock_hash: MagicMock) -> None:
        mock_hash.side_effect = RuntimeError("hashing failed")
        self.assertFalse(run_startup(self.engine, self.session_factory, _settings()))

    def test_run_startup_success(self) -> None:
        self.assertTrue(run_startup(self.engine, self.session_factory, _settings()))
        self.assertEqual(self.db.query(User).count(), 1)


if __name__ == "__main__":
    unittest.main()
