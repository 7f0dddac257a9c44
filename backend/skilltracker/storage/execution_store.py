import logging
from typing import Any

from pydantic import BaseModel, ValidationError

from skilltracker.core.config import settings
from skilltracker.schemas.log import Log
from skilltracker.schemas.skill import Skill
from skilltracker.storage.kv import KeyValueStore

logger = logging.getLogger(__name__)


class ExecutionStore:
    """Skills and Logs, each persisted whole under one key.

    Collections keep insertion order. A collection that is not readable
    JSON comes back empty; entries that fail validation are skipped one by
    one so the rest survive the next save. Saving always replaces the full
    collection.
    """

    def __init__(
        self,
        kv: KeyValueStore,
        skills_key: str = settings.skills_key,
        logs_key: str = settings.logs_key,
    ):
        self.kv = kv
        self.skills_key = skills_key
        self.logs_key = logs_key

    def _load(self, key: str, model: type[BaseModel]) -> list:
        raw: Any = self.kv.get(key, [])
        if not isinstance(raw, list):
            logger.warning("Stored %r is not a list, ignoring it", key)
            return []
        items = []
        for i, entry in enumerate(raw):
            try:
                items.append(model.model_validate(entry))
            except ValidationError as e:
                logger.warning("Skipping invalid entry %d of %r: %s", i, key, e)
        return items

    def get_skills(self) -> list[Skill]:
        return self._load(self.skills_key, Skill)

    def save_skills(self, skills: list[Skill]) -> None:
        self.kv.set(self.skills_key, [s.model_dump(mode="json") for s in skills])

    def get_logs(self) -> list[Log]:
        return self._load(self.logs_key, Log)

    def save_logs(self, logs: list[Log]) -> None:
        self.kv.set(self.logs_key, [log.model_dump(mode="json") for log in logs])

    # Queries built on the primitives above

    def find_log(self, skill_id: str, date: str) -> Log | None:
        return next(
            (log for log in self.get_logs() if log.skill_id == skill_id and log.date == date),
            None,
        )

    def log_exists_for_date(self, skill_id: str, date: str) -> bool:
        return self.find_log(skill_id, date) is not None

    def get_logs_for_skill(self, skill_id: str) -> list[Log]:
        return [log for log in self.get_logs() if log.skill_id == skill_id]

    def get_logs_for_date(self, date: str) -> list[Log]:
        return [log for log in self.get_logs() if log.date == date]

    def get_logs_in_date_range(self, start_date: str, end_date: str) -> list[Log]:
        """Logs with start_date <= date <= end_date ('YYYY-MM-DD' compares as text)."""
        return [log for log in self.get_logs() if start_date <= log.date <= end_date]
