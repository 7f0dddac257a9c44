from fastapi import Depends
from sqlalchemy.orm import Session

from skilltracker.db import get_db
from skilltracker.storage.execution_store import ExecutionStore
from skilltracker.storage.kv import SqlKeyValueStore


# Routes get the store injected; tests swap in a MemoryKeyValueStore
def get_store(db: Session = Depends(get_db)) -> ExecutionStore:
    return ExecutionStore(SqlKeyValueStore(db))
