"""Core app configuration and database."""

from pacs_site.core.config import get_settings, settings
from pacs_site.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
