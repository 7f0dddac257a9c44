from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from skilltracker.api.deps import get_store
from skilltracker.core.date_utils import today_string
from skilltracker.core.validation import (
    validate_count,
    validate_log_date,
    validate_skill_selection,
)
from skilltracker.schemas.log import Log, LogCreate, LogUpdate, QuickLogCreate
from skilltracker.services import logs as log_service
from skilltracker.services.skills import get_skill
from skilltracker.storage.execution_store import ExecutionStore


router = APIRouter(prefix="/logs", tags=["logs"])


def _require_skill(store: ExecutionStore, raw_skill_id) -> str:
    try:
        skill_id = validate_skill_selection(raw_skill_id)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if not get_skill(store, skill_id):
        raise HTTPException(status_code=404, detail="Skill not found")
    return skill_id


def _date_param(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    try:
        return validate_log_date(value)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/", response_model=list[Log])
def list_logs(
    skill_id: Optional[str] = Query(None),
    start_date: Optional[str] = Query(None),
    end_date: Optional[str] = Query(None),
    on_date: Optional[str] = Query(None, alias="date"),
    store: ExecutionStore = Depends(get_store),
):
    """
    List logs, optionally filtered by skill, by [start_date, end_date]
    or by a single day:
      GET /logs?skill_id=...&start_date=2025-01-06&end_date=2025-01-12
    """
    return log_service.list_logs(
        store,
        skill_id=skill_id,
        start_date=_date_param(start_date),
        end_date=_date_param(end_date),
        on_date=_date_param(on_date),
    )


@router.post("/", response_model=Log)
def log_execution(payload: LogCreate, store: ExecutionStore = Depends(get_store)):
    """Detailed entry. A second log for the same skill and day is refused."""
    skill_id = _require_skill(store, payload.skill_id)
    try:
        count = validate_count(payload.count)
        log_date = validate_log_date(payload.date) if payload.date else today_string()
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    try:
        return log_service.log_execution(store, skill_id, log_date, count)
    except log_service.DuplicateLogError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/quick", response_model=Log)
def quick_log(payload: QuickLogCreate, store: ExecutionStore = Depends(get_store)):
    """One execution for today, added to today's log if there already is one."""
    skill_id = _require_skill(store, payload.skill_id)
    return log_service.quick_log(store, skill_id)


@router.put("/{log_id}", response_model=Log)
def update_log(log_id: str, payload: LogUpdate, store: ExecutionStore = Depends(get_store)):
    try:
        count = validate_count(payload.count)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    log = log_service.update_log_count(store, log_id, count)
    if not log:
        raise HTTPException(status_code=404, detail="Log not found")
    return log


@router.delete("/{log_id}")
def delete_log(log_id: str, store: ExecutionStore = Depends(get_store)):
    if not log_service.delete_log(store, log_id):
        raise HTTPException(status_code=404, detail="Log not found")
    return {"ok": True}
