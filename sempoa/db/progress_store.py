"""
Progress Stores.

Key-value persistence for UserProgress. Every store serializes with pydantic,
so a loaded value is always a fresh object and never aliases saved state.

Backends:
- InMemoryProgressStore: process-local dict (tests, throwaway sessions)
- JsonFileProgressStore: one JSON document mapping key -> progress
- SqlProgressStore: SQLAlchemy table `user_progress`

Invalid stored payloads raise pydantic.ValidationError from load().
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Protocol, runtime_checkable

from loguru import logger
from sqlalchemy import Engine

from sempoa.config import Settings, get_settings
from sempoa.db.database import create_db_engine, init_db, make_session_factory, session_scope
from sempoa.db.models import ProgressRecord
from sempoa.learning.models import UserProgress


@runtime_checkable
class ProgressStore(Protocol):
    """Key-value persistence for learner progress."""

    def load(self, key: str) -> UserProgress | None: ...

    def save(self, key: str, progress: UserProgress) -> None: ...


class InMemoryProgressStore:
    """Store progress as JSON strings in a dict."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def load(self, key: str) -> UserProgress | None:
        payload = self._data.get(key)
        if payload is None:
            return None
        return UserProgress.model_validate_json(payload)

    def save(self, key: str, progress: UserProgress) -> None:
        self._data[key] = progress.model_dump_json()

    def __contains__(self, key: str) -> bool:
        return key in self._data


class JsonFileProgressStore:
    """
    Store progress in a single JSON file.

    The document maps storage keys to serialized UserProgress objects, so
    several keys can share one file.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _read_document(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        document = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(document, dict):
            raise ValueError(f"Progress file {self.path} does not hold a JSON object")
        return document

    def load(self, key: str) -> UserProgress | None:
        entry = self._read_document().get(key)
        if entry is None:
            return None
        logger.debug(f"Loaded progress '{key}' from {self.path}")
        return UserProgress.model_validate(entry)

    def save(self, key: str, progress: UserProgress) -> None:
        try:
            document = self._read_document()
        except ValueError:
            logger.warning(f"Replacing unreadable progress file {self.path}")
            document = {}
        document[key] = progress.model_dump(mode="json")

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        logger.debug(f"Saved progress '{key}' to {self.path}")


class SqlProgressStore:
    """Store progress rows through SQLAlchemy."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self._sessions = make_session_factory(engine)
        init_db(engine)

    def load(self, key: str) -> UserProgress | None:
        with session_scope(self._sessions) as session:
            record = session.get(ProgressRecord, key)
            payload = record.payload if record is not None else None
        if payload is None:
            return None
        logger.debug(f"Loaded progress '{key}' from database")
        return UserProgress.model_validate_json(payload)

    def save(self, key: str, progress: UserProgress) -> None:
        payload = progress.model_dump_json()
        with session_scope(self._sessions) as session:
            record = session.get(ProgressRecord, key)
            if record is None:
                record = ProgressRecord(key=key)
                session.add(record)
            record.payload = payload
            record.total_score = progress.total_score
            record.current_level_id = progress.current_level_id
        logger.debug(f"Saved progress '{key}' to database")


def create_store(settings: Settings | None = None) -> ProgressStore:
    """Build the store selected by `storage_backend`."""
    settings = settings or get_settings()
    backend = settings.storage_backend
    if backend == "memory":
        return InMemoryProgressStore()
    if backend == "json":
        return JsonFileProgressStore(settings.get_json_path())
    return SqlProgressStore(create_db_engine(settings.get_database_url()))
