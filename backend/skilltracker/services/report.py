"""Weekly progress report.

Everything here is recomputed from the store on each call; nothing is
cached, so the report always reflects the current skills and logs.
"""
import math
from datetime import date

from skilltracker.core.constants import DAYS_PER_WEEK, PROGRESS_CAP
from skilltracker.core.date_utils import (
    current_week_range,
    days_elapsed_in_week,
    format_date,
    format_week_range,
    parse_date,
    short_day_name,
    week_dates,
)
from skilltracker.schemas.log import Log
from skilltracker.schemas.report import (
    DailyExecution,
    ProgressStatus,
    SkillProgress,
    WeeklyReport,
)
from skilltracker.schemas.skill import Skill
from skilltracker.storage.execution_store import ExecutionStore


def compute_skill_progress(
    skill: Skill, logs_for_week: list[Log], dates: list[str]
) -> SkillProgress:
    """Progress of one skill given the week's logs (all skills) and its 7 days.

    Counts are summed as stored; one log per day is assumed, not enforced.
    """
    skill_logs = [log for log in logs_for_week if log.skill_id == skill.id]
    completed = sum(log.count for log in skill_logs)

    raw_pct = completed * 100 / skill.weekly_goal if skill.weekly_goal > 0 else 0.0

    breakdown = []
    for d in dates:
        day_log = next((log for log in skill_logs if log.date == d), None)
        breakdown.append(
            DailyExecution(
                date=d,
                day_name=short_day_name(parse_date(d)),
                count=day_log.count if day_log else 0,
            )
        )

    return SkillProgress(
        skill_id=skill.id,
        skill_name=skill.name,
        weekly_goal=skill.weekly_goal,
        completed_count=completed,
        progress_percentage=min(raw_pct, PROGRESS_CAP),
        # uncapped count, so going past the goal still counts as complete
        is_complete=completed >= skill.weekly_goal,
        daily_breakdown=breakdown,
    )


def generate_weekly_report(store: ExecutionStore, today: date | None = None) -> WeeklyReport:
    """Report for the Monday-Sunday week containing `today` (default: now)."""
    start, end = current_week_range(today)
    start_str = format_date(start)
    end_str = format_date(end)

    skills = store.get_skills()
    week_logs = store.get_logs_in_date_range(start_str, end_str)
    dates = week_dates(start)

    progress = [compute_skill_progress(skill, week_logs, dates) for skill in skills]

    total_goal = sum(skill.weekly_goal for skill in skills)
    total_completed = sum(p.completed_count for p in progress)
    overall = (
        min(total_completed * 100 / total_goal, PROGRESS_CAP) if total_goal > 0 else 0.0
    )

    return WeeklyReport(
        week_range=format_week_range(start, end),
        start_date=start_str,
        end_date=end_str,
        skills=progress,
        overall_progress=overall,
        total_goal=total_goal,
        total_completed=total_completed,
    )


def progress_status(progress: SkillProgress, today: date | None = None) -> ProgressStatus:
    """Pace against an even spread of the goal over the week."""
    if progress.is_complete:
        return ProgressStatus.complete

    elapsed = days_elapsed_in_week(today or date.today())
    expected = elapsed * progress.weekly_goal / DAYS_PER_WEEK
    if progress.completed_count >= expected:
        return ProgressStatus.on_track
    return ProgressStatus.behind


def progress_summary(progress: SkillProgress) -> str:
    """Example: 3 of 5 done -> '3/5 (60%)'; halves round up, 5 of 8 -> '5/8 (63%)'"""
    return (
        f"{progress.completed_count}/{progress.weekly_goal} "
        f"({math.floor(progress.progress_percentage + 0.5)}%)"
    )
