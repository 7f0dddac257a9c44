from typing import Union

from pydantic import BaseModel


class Skill(BaseModel):
    """A tracked habit as stored.

    `weekly_goal` is unconstrained here; the 1..50 range is checked when a
    user submits the form, and stored data is trusted as-is.
    """

    id: str
    name: str
    weekly_goal: int
    created_at: int  # ms since epoch


class SkillUpsert(BaseModel):
    """Schema for creating or editing a skill.

    Fields are taken raw so the router can report form-style messages
    ("Weekly goal must be at least 1") instead of type errors.
    """

    name: str | None = None
    weekly_goal: Union[int, float, str, None] = None
