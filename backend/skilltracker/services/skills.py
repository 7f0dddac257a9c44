"""Skill CRUD over the execution store.

Every mutation re-reads the current collection right before writing it
back whole, keeping the window for lost updates as small as possible.
"""
import logging
import time
import uuid

from skilltracker.schemas.skill import Skill
from skilltracker.storage.execution_store import ExecutionStore

logger = logging.getLogger(__name__)


def generate_id() -> str:
    return uuid.uuid4().hex


def _now_ms() -> int:
    return int(time.time() * 1000)


def list_skills(store: ExecutionStore) -> list[Skill]:
    return store.get_skills()


def get_skill(store: ExecutionStore, skill_id: str) -> Skill | None:
    return next((s for s in store.get_skills() if s.id == skill_id), None)


def create_skill(store: ExecutionStore, name: str, weekly_goal: int) -> Skill:
    skills = store.get_skills()
    # creation stamps never go backwards, even if the wall clock does
    created_at = max([_now_ms()] + [s.created_at for s in skills])
    skill = Skill(id=generate_id(), name=name, weekly_goal=weekly_goal, created_at=created_at)
    store.save_skills(skills + [skill])
    logger.info("Created skill %s (%r, goal %d)", skill.id, skill.name, skill.weekly_goal)
    return skill


def update_skill(
    store: ExecutionStore, skill_id: str, name: str, weekly_goal: int
) -> Skill | None:
    """Replace name and goal in place; id, created_at and position are kept."""
    skills = store.get_skills()
    for i, existing in enumerate(skills):
        if existing.id == skill_id:
            updated = existing.model_copy(update={"name": name, "weekly_goal": weekly_goal})
            skills[i] = updated
            store.save_skills(skills)
            return updated
    return None


def save_skill(store: ExecutionStore, skill: Skill) -> Skill:
    """Add-or-update by id."""
    skills = store.get_skills()
    for i, existing in enumerate(skills):
        if existing.id == skill.id:
            skills[i] = skill
            break
    else:
        skills.append(skill)
    store.save_skills(skills)
    return skill


def delete_skill(store: ExecutionStore, skill_id: str) -> int | None:
    """Remove a skill and every log that references it.

    Returns the number of logs removed, or None if the skill was not found.
    """
    skills = store.get_skills()
    remaining = [s for s in skills if s.id != skill_id]
    if len(remaining) == len(skills):
        return None
    store.save_skills(remaining)

    logs = store.get_logs()
    kept_logs = [log for log in logs if log.skill_id != skill_id]
    store.save_logs(kept_logs)

    removed = len(logs) - len(kept_logs)
    logger.info("Deleted skill %s and %d log(s)", skill_id, removed)
    return removed
