from enum import Enum

from pydantic import BaseModel


class ProgressStatus(str, Enum):
    complete = "complete"
    on_track = "on-track"
    behind = "behind"


class DailyExecution(BaseModel):
    date: str
    day_name: str  # 'Mon' .. 'Sun'
    count: int


class SkillProgress(BaseModel):
    skill_id: str
    skill_name: str
    weekly_goal: int
    completed_count: int  # never capped
    progress_percentage: float  # capped at 100 for display
    is_complete: bool
    daily_breakdown: list[DailyExecution]


class WeeklyReport(BaseModel):
    week_range: str  # e.g. 'Dec 30 – Jan 5'
    start_date: str
    end_date: str
    skills: list[SkillProgress]
    overall_progress: float
    total_goal: int
    total_completed: int


class SkillProgressRead(SkillProgress):
    """Progress as returned to the frontend, with its pacing label."""

    status: ProgressStatus
    summary: str  # e.g. '3/5 (60%)'


class WeeklyReportRead(WeeklyReport):
    skills: list[SkillProgressRead]
