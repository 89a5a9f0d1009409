"""Database package."""

from uom_service.db.models import Base, Uom, UomStatus
from uom_service.db.session import DbSession, close_db, get_db_session, init_db

__all__ = [
    "DbSession",
    "get_db_session",
    "init_db",
    "close_db",
    "Base",
    "Uom",
    "UomStatus",
]
