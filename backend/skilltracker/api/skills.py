from fastapi import APIRouter, Depends, HTTPException

from skilltracker.api.deps import get_store
from skilltracker.core.validation import validate_skill_name, validate_weekly_goal
from skilltracker.schemas.skill import Skill, SkillUpsert
from skilltracker.services import skills as skill_service
from skilltracker.storage.execution_store import ExecutionStore


router = APIRouter(prefix="/skills", tags=["skills"])


def _validated(payload: SkillUpsert) -> tuple[str, int]:
    try:
        return validate_skill_name(payload.name), validate_weekly_goal(payload.weekly_goal)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/", response_model=list[Skill])
def list_skills(store: ExecutionStore = Depends(get_store)):
    # Storage order is creation order; no sorting
    return skill_service.list_skills(store)


@router.post("/", response_model=Skill)
def create_skill(payload: SkillUpsert, store: ExecutionStore = Depends(get_store)):
    name, goal = _validated(payload)
    return skill_service.create_skill(store, name, goal)


@router.get("/{skill_id}", response_model=Skill)
def get_skill(skill_id: str, store: ExecutionStore = Depends(get_store)):
    skill = skill_service.get_skill(store, skill_id)
    if not skill:
        raise HTTPException(status_code=404, detail="Skill not found")
    return skill


@router.put("/{skill_id}", response_model=Skill)
def update_skill(
    skill_id: str,
    payload: SkillUpsert,
    store: ExecutionStore = Depends(get_store),
):
    name, goal = _validated(payload)
    skill = skill_service.update_skill(store, skill_id, name, goal)
    if not skill:
        raise HTTPException(status_code=404, detail="Skill not found")
    return skill


@router.delete("/{skill_id}")
def delete_skill(skill_id: str, store: ExecutionStore = Depends(get_store)):
    """Delete a skill together with all of its logs."""
    removed = skill_service.delete_skill(store, skill_id)
    if removed is None:
        raise HTTPException(status_code=404, detail="Skill not found")
    return {"ok": True, "deleted_logs": removed}
