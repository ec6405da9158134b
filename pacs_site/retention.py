"""
CLI entrypoint for the expired-session purge. Run from cron, e.g.:

  python -m pacs_site.retention

Or hourly: 0 * * * * cd /path/to/pacs-site && .venv/bin/python -m pacs_site.retention
"""

import logging
import sys

from pacs_site.core.config import get_settings
from pacs_site.core.database import SessionLocal
from pacs_site.core.logging_config import configure_logging
from pacs_site.services.retention import purge_expired_sessions

logger = logging.getLogger(__name__)


def main() -> int:
    """Delete expired admin sessions."""
    configure_logging(get_settings().LOG_LEVEL)
    db = SessionLocal()
    try:
        deleted = purge_expired_sessions(db)
        logger.info("Retention completed: sessions_deleted=%s", deleted)
        return 0
    except Exception as e:
        logger.exception("Retention job failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
