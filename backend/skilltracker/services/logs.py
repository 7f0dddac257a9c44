"""Execution log mutations.

Two entry paths treat an existing (skill, day) log differently:
  - quick log adds one execution to today's log, creating it if needed;
  - detailed log refuses a second log for the same day.
Either way there is never more than one log per skill per day.
"""
import logging
from datetime import date

from skilltracker.core.date_utils import format_date
from skilltracker.schemas.log import Log
from skilltracker.services.skills import generate_id
from skilltracker.storage.execution_store import ExecutionStore

logger = logging.getLogger(__name__)


class DuplicateLogError(Exception):
    def __init__(self, skill_id: str, log_date: str):
        super().__init__(
            "Already logged this skill for this date. Edit or delete the existing log first."
        )
        self.skill_id = skill_id
        self.log_date = log_date


def list_logs(
    store: ExecutionStore,
    skill_id: str | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
    on_date: str | None = None,
) -> list[Log]:
    logs = store.get_logs()
    if skill_id is not None:
        logs = [log for log in logs if log.skill_id == skill_id]
    if start_date is not None:
        logs = [log for log in logs if log.date >= start_date]
    if end_date is not None:
        logs = [log for log in logs if log.date <= end_date]
    if on_date is not None:
        logs = [log for log in logs if log.date == on_date]
    return logs


def log_execution(store: ExecutionStore, skill_id: str, log_date: str, count: int) -> Log:
    logs = store.get_logs()
    if any(log.skill_id == skill_id and log.date == log_date for log in logs):
        raise DuplicateLogError(skill_id, log_date)
    log = Log(id=generate_id(), skill_id=skill_id, date=log_date, count=count)
    store.save_logs(logs + [log])
    logger.info("Logged %dx skill %s on %s", count, skill_id, log_date)
    return log


def quick_log(store: ExecutionStore, skill_id: str, today: date | None = None) -> Log:
    """One more execution for today."""
    log_date = format_date(today or date.today())
    logs = store.get_logs()
    for i, existing in enumerate(logs):
        if existing.skill_id == skill_id and existing.date == log_date:
            updated = existing.model_copy(update={"count": existing.count + 1})
            logs[i] = updated
            store.save_logs(logs)
            return updated

    log = Log(id=generate_id(), skill_id=skill_id, date=log_date, count=1)
    store.save_logs(logs + [log])
    return log


def add_or_update_log(store: ExecutionStore, log: Log) -> Log:
    logs = store.get_logs()
    for i, existing in enumerate(logs):
        if existing.id == log.id:
            logs[i] = log
            break
    else:
        logs.append(log)
    store.save_logs(logs)
    return log


def update_log_count(store: ExecutionStore, log_id: str, count: int) -> Log | None:
    logs = store.get_logs()
    for i, existing in enumerate(logs):
        if existing.id == log_id:
            logs[i] = existing.model_copy(update={"count": count})
            store.save_logs(logs)
            return logs[i]
    return None


def delete_log(store: ExecutionStore, log_id: str) -> bool:
    logs = store.get_logs()
    remaining = [log for log in logs if log.id != log_id]
    if len(remaining) == len(logs):
        return False
    store.save_logs(remaining)
    return True
