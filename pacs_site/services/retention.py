"""Session retention: delete login sessions whose expiry has passed."""

import logging
from datetime import UTC, datetime

from sqlalchemy.orm import Session

from pacs_site.models import UserSession

logger = logging.getLogger(__name__)


def purge_expired_sessions(session: Session, now: datetime | None = None) -> int:
    """
    Delete sessions with expires_at <= now. Returns the number deleted.
    Idempotent: safe to run repeatedly.
    """
    cutoff = now or datetime.now(UTC)
    deleted_count = (
        session.query(UserSession)
        .filter(UserSession.expires_at <= cutoff)
        .delete(synchronize_session=False)
    )
    session.commit()

    if deleted_count > 0:
        logger.info(
            "Session purge: cutoff=%s, sessions_deleted=%s",
            cutoff.isoformat(),
            deleted_count,
        )
    return deleted_count
