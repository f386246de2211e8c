"""
Entity Store

Storage backends for students, bus routes, bookings and system settings.
``MemoryStorage`` is the default; ``SqlStorage`` persists the same records
through SQLAlchemy. Both honour the ``Storage`` interface in ``base.py``.
"""

from campus_bus.config import Settings
from .base import Storage
from .memory import MemoryStorage
from .sql import SqlStorage

def create_storage(settings: Settings) -> Storage:
    """Build the backend selected by ``STORAGE_BACKEND``"""
    if settings.STORAGE_BACKEND == "sql":
        from campus_bus.database import create_db_engine
        return SqlStorage(create_db_engine(settings.DATABASE_URL))
    return MemoryStorage()

__all__ = [
    "Storage",
    "MemoryStorage",
    "SqlStorage",
    "create_storage",
]
