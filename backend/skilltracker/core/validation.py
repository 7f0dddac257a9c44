"""Input checks for skill and log submissions.

Each helper returns the cleaned value or raises ValueError carrying the
message shown to the user. Routers turn these into HTTP 422 responses.
Nothing below the API layer calls these; storage and the report engine
accept whatever is stored.
"""
import math
import re

from skilltracker.core.constants import MAX_WEEKLY_GOAL, MIN_LOG_COUNT, MIN_WEEKLY_GOAL
from skilltracker.core.date_utils import format_date, parse_date

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int(raw) -> int | None:
    """Leading integer of `raw`, or None when there is none.

    Mirrors form parsing: '3' -> 3, ' 12x' -> 12, 'abc' -> None.
    Floats are truncated; bools are not numbers here.
    """
    if isinstance(raw, bool) or raw is None:
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else None
    match = _LEADING_INT.match(str(raw))
    if not match:
        return None
    return int(match.group(1))


def validate_skill_name(raw) -> str:
    name = str(raw).strip() if raw is not None else ""
    if not name:
        raise ValueError("Skill name is required")
    return name


def validate_weekly_goal(raw) -> int:
    goal = parse_int(raw)
    if goal is None or goal < MIN_WEEKLY_GOAL:
        raise ValueError(f"Weekly goal must be at least {MIN_WEEKLY_GOAL}")
    if goal > MAX_WEEKLY_GOAL:
        raise ValueError(f"Weekly goal cannot exceed {MAX_WEEKLY_GOAL}")
    return goal


def validate_count(raw) -> int:
    count = parse_int(raw)
    if count is None or count < MIN_LOG_COUNT:
        raise ValueError(f"Count must be at least {MIN_LOG_COUNT}")
    return count


def validate_skill_selection(raw) -> str:
    skill_id = str(raw).strip() if raw is not None else ""
    if not skill_id:
        raise ValueError("Please select a skill")
    return skill_id


def validate_log_date(raw) -> str:
    """Canonical 'YYYY-MM-DD' for a submitted date string."""
    if not isinstance(raw, str):
        raise ValueError("Date must be YYYY-MM-DD")
    return format_date(parse_date(raw))
