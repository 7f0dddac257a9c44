from typing import Union

from pydantic import BaseModel


class Log(BaseModel):
    """One dated execution record for a skill."""

    id: str
    skill_id: str
    date: str  # 'YYYY-MM-DD'
    count: int


class LogCreate(BaseModel):
    """Detailed entry: a chosen skill, day and count."""

    skill_id: str | None = None
    date: str | None = None  # defaults to today
    count: Union[int, float, str, None] = 1


class QuickLogCreate(BaseModel):
    skill_id: str | None = None


class LogUpdate(BaseModel):
    count: Union[int, float, str, None] = None
