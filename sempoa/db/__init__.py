"""
Database Module - Persistence for learner progress.

Components:
- models: SQLAlchemy table for serialized progress
- database: Engine and transactional session helpers
- progress_store: Store protocol and memory/JSON/SQL backends
"""

from sempoa.db.database import create_db_engine, init_db, session_scope
from sempoa.db.models import Base, ProgressRecord
from sempoa.db.progress_store import (
    InMemoryProgressStore,
    JsonFileProgressStore,
    ProgressStore,
    SqlProgressStore,
    create_store,
)

__all__ = [
    "Base",
    "ProgressRecord",
    "create_db_engine",
    "init_db",
    "session_scope",
    "ProgressStore",
    "InMemoryProgressStore",
    "JsonFileProgressStore",
    "SqlProgressStore",
    "create_store",
]
