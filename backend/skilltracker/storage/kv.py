"""Key/value persistence of JSON documents.

Reads never fail the caller: a missing key, undecodable JSON or a database
error all resolve to the caller's default and are logged. Writes are
reported on failure but not retried or raised.
"""
import json
import logging
from typing import Any, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from skilltracker.models.kv_entry import KeyValueEntry

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str, default: Any) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...


def _decode(key: str, raw: str | None, default: Any) -> Any:
    if raw is None:
        return default
    try:
        return json.loads(raw)
    except (TypeError, ValueError) as e:
        logger.warning("Error reading key %r, using default: %s", key, e)
        return default


class SqlKeyValueStore:
    """Documents kept in the `kv_entries` table, one row per key."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, key: str, default: Any) -> Any:
        try:
            row = self.db.get(KeyValueEntry, key)
        except SQLAlchemyError:
            logger.exception("Error reading key %r from database", key)
            self.db.rollback()
            return default
        return _decode(key, row.value if row else None, default)

    def set(self, key: str, value: Any) -> None:
        try:
            payload = json.dumps(value)
        except (TypeError, ValueError):
            logger.exception("Error encoding value for key %r", key)
            return
        try:
            row = self.db.get(KeyValueEntry, key)
            if row is None:
                self.db.add(KeyValueEntry(key=key, value=payload))
            else:
                row.value = payload
            self.db.commit()
        except SQLAlchemyError:
            logger.exception("Error saving key %r to database", key)
            self.db.rollback()


class MemoryKeyValueStore:
    """Dict-backed store with the same contract, for tests and scratch use.

    Values are held as JSON text so corrupt entries behave as they would
    in the database.
    """

    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str, default: Any) -> Any:
        return _decode(key, self.data.get(key), default)

    def set(self, key: str, value: Any) -> None:
        try:
            self.data[key] = json.dumps(value)
        except (TypeError, ValueError):
            logger.exception("Error encoding value for key %r", key)
