"""Unit and integration tests for the expired-session purge."""

import unittest
from datetime import UTC, datetime, timedelta
from unittest.mock import MagicMock, patch

from sqlalchemy.orm import sessionmaker

from pacs_site import retention
from pacs_site.core.database import build_engine
from pacs_site.models import Role, User, UserSession
from pacs_site.services.bootstrap import create_schema
from pacs_site.services.retention import purge_expired_sessions


class TestPurgeNothingExpired(unittest.TestCase):
    """When no session is past its expiry, purge returns 0 and still commits."""

    def test_returns_zero(self) -> None:
        session = MagicMock()
        session.query.return_value.filter.return_value.delete.return_value = 0
        self.assertEqual(purge_expired_sessions(session), 0)
        session.commit.assert_called_once()


class TestPurgeDeletesExpired(unittest.TestCase):
    def test_returns_deleted_count(self) -> None:
        session = MagicMock()
        session.query.return_value.filter.return_value.delete.return_value = 2
        self.assertEqual(purge_expired_sessions(session), 2)
        session.add.assert_not_called()
        session.commit.assert_called_once()


class TestPurgeIntegration(unittest.TestCase):
    """Real in-memory database: only expired rows are deleted."""

    def test_purge_against_real_db(self) -> None:
        engine = build_engine("sqlite://")
        self.addCleanup(engine.dispose)
        create_schema(engine)
        db = sessionmaker(bind=engine)()
        self.addCleanup(db.close)

        role = Role(name="admin")
        db.add(role)
        db.flush()
        user = User(username="admin", password="x", role_id=role.id)
        db.add(user)
        db.flush()
        now = datetime.now(UTC)
        db.add_all(
            [
                UserSession(id="old", user_id=user.id, role="admin", expires_at=now - timedelta(hours=1)),
                UserSession(id="live", user_id=user.id, role="admin", expires_at=now + timedelta(hours=1)),
            ]
        )
        db.commit()

        self.assertEqual(purge_expired_sessions(db, now=now), 1)
        self.assertEqual([s.id for s in db.query(UserSession).all()], ["live"])
        self.assertEqual(purge_expired_sessions(db, now=now), 0)


class TestRetentionCli(unittest.TestCase):
    """python -m pacs_site.retention exit codes."""

    @patch("pacs_site.retention.purge_expired_sessions", return_value=3)
    @patch("pacs_site.retention.SessionLocal")
    def test_success(self, mock_session_local: MagicMock, _mock_purge: MagicMock) -> None:
        self.assertEqual(retention.main(), 0)
        mock_session_local.return_value.close.assert_called_once()

    @patch("pacs_site.retention.purge_expired_sessions", side_effect=RuntimeError("db down"))
    @patch("pacs_site.retention.SessionLocal")
    def test_failure(self, mock_session_local: MagicMock, _mock_purge: MagicMock) -> None:
        self.assertEqual(retention.main(), 1)
        mock_session_local.return_value.close.assert_called_once()


if __name__ == "__main__":
    unittest.main()
