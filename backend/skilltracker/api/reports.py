from fastapi import APIRouter, Depends

from skilltracker.api.deps import get_store
from skilltracker.schemas.report import SkillProgressRead, WeeklyReportRead
from skilltracker.services.report import (
    generate_weekly_report,
    progress_status,
    progress_summary,
)
from skilltracker.storage.execution_store import ExecutionStore


router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/weekly", response_model=WeeklyReportRead)
def weekly_report(store: ExecutionStore = Depends(get_store)):
    """Progress for the current Monday-Sunday week, computed fresh."""
    report = generate_weekly_report(store)
    skills = [
        SkillProgressRead(
            **p.model_dump(),
            status=progress_status(p),
            summary=progress_summary(p),
        )
        for p in report.skills
    ]
    return WeeklyReportRead(**report.model_dump(exclude={"skills"}), skills=skills)
