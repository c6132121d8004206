#!/usr/bin/env python3
"""
Rapport mensuel de saisie des tâches par membre.

Une journée est complète quand le temps de travail cumulé atteint 480 minutes
(8 heures). Les week-ends et jours fériés ne comptent pas comme jours ouvrés.
"""

import calendar
import logging
import math
from collections import defaultdict
from datetime import date
from typing import Iterable, Optional
from sqlalchemy.orm import Session
from ..models.member import Member, Task, Holiday

DAILY_MINUTES_THRESHOLD = 480


def month_bounds(year: int, month: int) -> tuple[date, date]:
    if not 1 <= month <= 12:
        raise ValueError("invalid_month")
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def _rate(done: int, total: int) -> int:
    if total <= 0:
        return 0
    return int(math.floor(done / total * 100 + 0.5))


def compute_monthly_completion(
    year: int,
    month: int,
    members: Iterable,
    tasks: Iterable,
    holidays: Iterable[date],
) -> list[dict]:
    """Calcule la complétion journalière de chaque membre pour le mois donné.

    `members` expose member_id/name/account_id, `tasks` expose
    member_id/task_date/work_time (minutes).
    """
    start, end = month_bounds(year, month)
    holiday_dates = {d for d in holidays if start <= d <= end}

    minutes: dict[int, dict[date, int]] = defaultdict(lambda: defaultdict(int))
    task_counts: dict[int, int] = defaultdict(int)
    work_totals: dict[int, int] = defaultdict(int)
    for t in tasks:
        if not (start <= t.task_date <= end):
            continue
        wt = int(t.work_time or 0)
        minutes[t.member_id][t.task_date] += wt
        task_counts[t.member_id] += 1
        work_totals[t.member_id] += wt

    result = []
    for m in members:
        daily: dict[date, Optional[bool]] = {}
        completed = incomplete = working = 0
        for day in range(1, end.day + 1):
            d = date(year, month, day)
            if d.weekday() >= 5 or d in holiday_dates:
                daily[d] = None
                continue
            working += 1
            is_complete = minutes[m.member_id].get(d, 0) >= DAILY_MINUTES_THRESHOLD
            daily[d] = is_complete
            if is_complete:
                completed += 1
            else:
                incomplete += 1
        result.append(
            {
                "member_id": m.member_id,
                "member_name": m.name,
                "account_id": m.account_id,
                "daily_completion": daily,
                "stats": {
                    "total_tasks": task_counts.get(m.member_id, 0),
                    "total_work_time": work_totals.get(m.member_id, 0),
                    "completed_days": completed,
                    "incomplete_days": incomplete,
                    "total_working_days": working,
                    "completion_rate": _rate(completed, working),
                },
            }
        )
    return result


def summarize(year: int, month: int, member_completion: list[dict]) -> dict:
    total_completed = sum(m["stats"]["completed_days"] for m in member_completion)
    total_working = sum(m["stats"]["total_working_days"] for m in member_completion)
    return {
        "year": year,
        "month": month,
        "total_active_members": len(member_completion),
        "fully_completed_members": sum(
            1 for m in member_completion if m["stats"]["completion_rate"] == 100
        ),
        "total_completed_days": total_completed,
        "total_working_days": total_working,
        "overall_completion_rate": _rate(total_completed, total_working),
        "member_completion": member_completion,
    }


class ReportService:
    def _report_members(self, db: Session) -> list[Member]:
        return (
            db.query(Member)
            .filter(
                Member.is_active.is_(True),
                Member.requires_daily_report.is_(True),
                Member.role_id.is_not(None),
            )
            .order_by(Member.name)
            .all()
        )

    def _month_tasks(self, db: Session, start: date, end: date) -> list[Task]:
        return (
            db.query(Task)
            .filter(Task.task_date >= start, Task.task_date <= end)
            .order_by(Task.task_date, Task.task_id)
            .all()
        )

    def monthly_report(self, db: Session, year: int, month: int) -> dict:
        start, end = month_bounds(year, month)
        members = self._report_members(db)
        tasks = self._month_tasks(db, start, end)
        holidays = [
            h.holiday_date
            for h in db.query(Holiday)
            .filter(Holiday.holiday_date >= start, Holiday.holiday_date <= end)
            .all()
        ]
        completion = compute_monthly_completion(year, month, members, tasks, holidays)
        logging.info(
            "Rapport mensuel %04d-%02d: %d membre(s), %d tâche(s)",
            year,
            month,
            len(members),
            len(tasks),
        )
        return summarize(year, month, completion)

    def month_task_rows(self, db: Session, year: int, month: int) -> list[dict]:
        """Lignes de tâches du mois prêtes pour l'export CSV."""
        start, end = month_bounds(year, month)
        rows = []
        for t in self._month_tasks(db, start, end):
            rows.append(
                {
                    "task_date": t.task_date.isoformat(),
                    "member_name": t.member.name if t.member else "",
                    "task_name": t.task_name,
                    "task_detail": t.task_detail,
                    "work_time": t.work_time,
                    "start_time": t.start_time.isoformat() if t.start_time else "",
                    "end_time": t.end_time.isoformat() if t.end_time else "",
                    "project_name": t.project_name,
                    "service_name": t.service_name,
                    "cost_group_name": t.cost_group_name,
                    "platform_name": t.platform_name,
                    "task_url": t.task_url,
                    "created_at": t.created_at.isoformat() if t.created_at else "",
                }
            )
        return rows
