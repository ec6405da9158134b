"""Unit tests for credential checks, session records and cookie signing."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt
from sqlalchemy.orm import sessionmaker

from pacs_site.core.database import build_engine
from pacs_site.core.errors import InvalidCredentials
from pacs_site.core.security import (
    PASSWORD_MAX_LEN,
    create_session_cookie,
    decode_session_cookie,
    hash_password,
    resolve_session_secret,
    verify_password,
)
from pacs_site.models import Role, User, UserSession
from pacs_site.services.auth import (
    INVALID_CREDENTIALS_MESSAGE,
    authenticate,
    close_session,
    login,
    resolve_session,
)
from pacs_site.services.bootstrap import create_schema


class TestPasswordHashing(unittest.TestCase):
    def test_hash_is_bcrypt_and_verifies(self) -> None:
        hashed = hash_password("admin")
        self.assertTrue(hashed.startswith("$2b$10$"))
        self.assertTrue(verify_password("admin", hashed))
        self.assertFalse(verify_password("Admin", hashed))

    def test_malformed_hash_does_not_verify(self) -> None:
        self.assertFalse(verify_password("admin", "not-a-hash"))


class TestSessionCookie(unittest.TestCase):
    def test_decode_returns_sid(self) -> None:
        token = create_session_cookie("abc", datetime.now(UTC) + timedelta(hours=1))
        self.assertEqual(decode_session_cookie(token), "abc")

    def test_tampered_cookie_rejected(self) -> None:
        token = jwt.encode(
            {"sid": "abc", "exp": datetime.now(UTC) + timedelta(hours=1)},
            "another-secret",
            algorithm="HS256",
        )
        with self.assertRaises(jwt.PyJWTError):
            decode_session_cookie(token)

    def test_expired_cookie_rejected(self) -> None:
        token = create_session_cookie("abc", datetime.now(UTC) - timedelta(seconds=5))
        with self.assertRaises(jwt.ExpiredSignatureError):
            decode_session_cookie(token)

    def test_missing_sid_rejected(self) -> None:
        token = jwt.encode(
            {"exp": datetime.now(UTC) + timedelta(hours=1)},
            resolve_session_secret(),
            algorithm="HS256",
        )
        with self.assertRaises(jwt.InvalidTokenError):
            decode_session_cookie(token)


class AuthDbTestCase(unittest.TestCase):
    def setUp(self) -> None:
        engine = build_engine("sqlite://")
        self.addCleanup(engine.dispose)
        create_schema(engine)
        self.db = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
        self.addCleanup(self.db.close)
        role = Role(name="admin")
        self.db.add(role)
        self.db.flush()
        self.user = User(username="admin", password=hash_password("admin"), role_id=role.id)
        self.db.add(self.user)
        self.db.commit()


class TestAuthenticate(AuthDbTestCase):
    def test_valid_credentials(self) -> None:
        user, role = authenticate(self.db, " admin ", "admin")
        self.assertEqual(user.id, self.user.id)
        self.assertEqual(role, "admin")

    def test_rejections_share_one_message(self) -> None:
        for username, password in (
            ("admin", "wrong"),
            ("nobody", "admin"),
            ("", "admin"),
            ("admin", None),
            ("admin", "x" * (PASSWORD_MAX_LEN + 1)),
        ):
            with self.subTest(username=username):
                with self.assertRaises(InvalidCredentials) as ctx:
                    authenticate(self.db, username, password)
                self.assertEqual(ctx.exception.message, INVALID_CREDENTIALS_MESSAGE)


class TestSessions(AuthDbTestCase):
    def test_login_then_resolve(self) -> None:
        record = login(self.db, "admin", "admin")
        current = resolve_session(self.db, record.id)
        self.assertIsNotNone(current)
        self.assertEqual(current.username, "admin")
        self.assertTrue(current.is_admin)

    def test_login_destroys_previous_session(self) -> None:
        first = login(self.db, "admin", "admin").id
        second = login(self.db, "admin", "admin", previous_session_id=first).id
        self.assertNotEqual(first, second)
        self.assertIsNone(resolve_session(self.db, first))
        self.assertEqual(self.db.query(UserSession).count(), 1)

    def test_expired_session_not_resolved(self) -> None:
        record = login(self.db, "admin", "admin")
        record.expires_at = datetime.now(UTC) - timedelta(seconds=1)
        self.db.commit()
        self.assertIsNone(resolve_session(self.db, record.id))

    def test_close_session(self) -> None:
        record = login(self.db, "admin", "admin")
        sid = record.id
        close_session(self.db, sid)
        self.assertIsNone(resolve_session(self.db, sid))


if __name__ == "__main__":
    unittest.main()
