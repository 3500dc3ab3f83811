"""
Dashboard DTOs
"""

from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import Deadline, TimeEntry


class DeadlineSummary(BaseModel):
    id: str
    case_id: str
    title: str
    deadline_date: str
    is_fatal: bool

    @classmethod
    def from_entity(cls, deadline: Deadline) -> "DeadlineSummary":
        return cls(
            id=str(deadline.id),
            case_id=str(deadline.case_id),
            title=deadline.title,
            deadline_date=deadline.deadline_date.isoformat(),
            is_fatal=deadline.is_fatal,
        )


class RunningTimerSummary(BaseModel):
    id: str
    case_id: str
    started_at: str
    description: Optional[str] = None

    @classmethod
    def from_entity(cls, entry: TimeEntry) -> "RunningTimerSummary":
        return cls(
            id=str(entry.id),
            case_id=str(entry.case_id),
            started_at=entry.started_at.isoformat(),
            description=entry.description,
        )


class DashboardResponse(BaseModel):
    upcoming_deadlines: List[DeadlineSummary]
    running_timer: Optional[RunningTimerSummary] = None
