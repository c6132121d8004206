from datetime import date
from pydantic import BaseModel


class MemberMonthlyStats(BaseModel):
    total_tasks: int = 0
    total_work_time: int = 0
    completed_days: int = 0
    incomplete_days: int = 0
    total_working_days: int = 0
    completion_rate: int = 0


class MemberCompletionOut(BaseModel):
    member_id: int
    member_name: str
    account_id: str
    # None = week-end ou jour férié
    daily_completion: dict[date, bool | None]
    stats: MemberMonthlyStats


class MonthlyReportOut(BaseModel):
    year: int
    month: int
    total_active_members: int
    fully_completed_members: int
    total_completed_days: int
    total_working_days: int
    overall_completion_rate: int
    member_completion: list[MemberCompletionOut]
