"""Credential checks and server-side session records."""

import logging
from datetime import UTC, datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pacs_site.core.errors import InvalidCredentials, PersistenceError
from pacs_site.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
    new_session_id,
    session_expiry,
    verify_password,
)
from pacs_site.models import Role, User, UserSession
from pacs_site.schemas.auth import CurrentUser

logger = logging.getLogger(__name__)

# Same message for unknown user and wrong password (no username enumeration).
INVALID_CREDENTIALS_MESSAGE = "Identifiant ou mot de passe incorrect."
DATABASE_ERROR_MESSAGE = "Erreur de base de données."


def authenticate(db: Session, username: str | None, password: str | None) -> tuple[User, str]:
    """Return (user, role name) for valid credentials; raise InvalidCredentials otherwise."""
    username = (username or "").strip()
    password = password or ""
    if not (USERNAME_MIN_LEN <= len(username) <= USERNAME_MAX_LEN):
        raise InvalidCredentials(INVALID_CREDENTIALS_MESSAGE)
    if not (PASSWORD_MIN_LEN <= len(password) <= PASSWORD_MAX_LEN):
        raise InvalidCredentials(INVALID_CREDENTIALS_MESSAGE)

    row = (
        db.query(User, Role.name)
        .join(Role, User.role_id == Role.id)
        .filter(User.username == username)
        .first()
    )
    if row is None:
        logger.info("Login failed: unknown user")
        raise InvalidCredentials(INVALID_CREDENTIALS_MESSAGE)
    user, role_name = row
    if not verify_password(password, user.password):
        logger.info("Login failed: bad password for user_id=%s", user.id)
        raise InvalidCredentials(INVALID_CREDENTIALS_MESSAGE)
    return user, role_name


def open_session(db: Session, user: User, role: str) -> UserSession:
    record = UserSession(
        id=new_session_id(),
        user_id=user.id,
        role=role,
        expires_at=session_expiry(),
    )
    db.add(record)
    return record


def login(
    db: Session,
    username: str | None,
    password: str | None,
    previous_session_id: str | None = None,
) -> UserSession:
    """
    Check credentials and create a session record. A session already carried
    by the browser is destroyed first so ids are never reused across logins.
    """
    try:
        user, role = authenticate(db, username, password)
        if previous_session_id:
            db.query(UserSession).filter(UserSession.id == previous_session_id).delete(
                synchronize_session=False
            )
        record = open_session(db, user, role)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Login query failed")
        raise PersistenceError(DATABASE_ERROR_MESSAGE) from e
    logger.info("User %s logged in (role=%s)", user.id, role)
    return record


def resolve_session(db: Session, session_id: str) -> CurrentUser | None:
    """Return the user behind a live session id, or None if unknown or expired."""
    row = (
        db.query(UserSession, User.username)
        .join(User, UserSession.user_id == User.id)
        .filter(
            UserSession.id == session_id,
            UserSession.expires_at > datetime.now(UTC),
        )
        .first()
    )
    if row is None:
        return None
    record, username = row
    return CurrentUser(
        id=record.user_id,
        username=username,
        role=record.role,
        session_id=record.id,
    )


def close_session(db: Session, session_id: str) -> None:
    db.query(UserSession).filter(UserSession.id == session_id).delete(
        synchronize_session=False
    )
    db.commit()
