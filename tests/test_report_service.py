from datetime import date, timedelta
from types import SimpleNamespace

import pytest

from app.services.report_service import (
    ReportService,
    compute_monthly_completion,
    month_bounds,
    summarize,
)

# Mai 2024: 23 jours de semaine, dont 2 fériés (6 et 15)
HOLIDAYS = [date(2024, 5, 6), date(2024, 5, 15)]


def _member(member_id, name, account_id):
    return SimpleNamespace(member_id=member_id, name=name, account_id=account_id)


def _task(member_id, day, work_time):
    return SimpleNamespace(member_id=member_id, task_date=day, work_time=work_time)


def _working_days():
    d = date(2024, 5, 1)
    while d.month == 5:
        if d.weekday() < 5 and d not in HOLIDAYS:
            yield d
        d += timedelta(days=1)


def test_month_bounds():
    assert month_bounds(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_bounds(2023, 12) == (date(2023, 12, 1), date(2023, 12, 31))
    with pytest.raises(ValueError):
        month_bounds(2024, 13)


def test_compute_monthly_completion():
    members = [
        _member(1, "홍길동", "user1234"),
        _member(2, "John Doe", "bob9876"),
        _member(3, "김철수", "carol55"),
    ]
    tasks = [
        _task(1, date(2024, 5, 2), 300),
        _task(1, date(2024, 5, 2), 180),
        _task(1, date(2024, 5, 3), 479),
        _task(1, date(2024, 5, 4), 480),  # samedi
        _task(1, date(2024, 5, 6), 480),  # férié
        _task(1, date(2024, 6, 3), 480),  # hors du mois
    ]
    tasks += [_task(3, d, 480) for d in _working_days()]

    result = compute_monthly_completion(2024, 5, members, tasks, HOLIDAYS)
    first, second, third = result

    assert first["member_name"] == "홍길동"
    assert first["account_id"] == "user1234"
    assert first["stats"] == {
        "total_tasks": 5,
        "total_work_time": 1919,
        "completed_days": 1,
        "incomplete_days": 20,
        "total_working_days": 21,
        "completion_rate": 5,
    }
    daily = first["daily_completion"]
    assert len(daily) == 31
    assert daily[date(2024, 5, 2)] is True
    assert daily[date(2024, 5, 3)] is False
    assert daily[date(2024, 5, 4)] is None
    assert daily[date(2024, 5, 6)] is None

    assert second["stats"]["completed_days"] == 0
    assert second["stats"]["completion_rate"] == 0
    assert second["stats"]["total_tasks"] == 0

    assert third["stats"]["completed_days"] == 21
    assert third["stats"]["completion_rate"] == 100


def test_completion_rate_rounds_half_up():
    # 8 jours ouvrés (les autres jours de semaine sont fériés), 1 complet -> 12.5 -> 13
    members = [_member(1, "A", "aaa")]
    days = [date(2024, 2, d) for d in (1, 2, 5, 6, 7, 8, 9, 12)]
    holidays = [
        date(2024, 2, d)
        for d in range(13, 30)
        if date(2024, 2, d).weekday() < 5
    ]
    tasks = [_task(1, days[0], 480)]
    (row,) = compute_monthly_completion(2024, 2, members, tasks, holidays)
    assert row["stats"]["total_working_days"] == len(days)
    assert row["stats"]["completion_rate"] == 13


def test_summarize():
    completion = compute_monthly_completion(
        2024,
        5,
        [_member(1, "A", "aaa"), _member(2, "B", "bbb")],
        [_task(2, d, 480) for d in _working_days()],
        HOLIDAYS,
    )
    summary = summarize(2024, 5, completion)
    assert summary["total_active_members"] == 2
    assert summary["fully_completed_members"] == 1
    assert summary["total_completed_days"] == 21
    assert summary["total_working_days"] == 42
    assert summary["overall_completion_rate"] == 50


def _completion(completed, working):
    stats = {"completed_days": completed, "total_working_days": working, "completion_rate": 0}
    return {"stats": stats}


def test_summarize_rounds_rate_like_percentage_of_ratio():
    # 23 / 40 * 100 vaut 57.49999999999999 en flottant: arrondi à 57
    summary = summarize(2024, 5, [_completion(12, 20), _completion(11, 20)])
    assert summary["total_completed_days"] == 23
    assert summary["total_working_days"] == 40
    assert summary["overall_completion_rate"] == 57


def test_report_service_reads_database(db, members, may_2024_tasks):
    report = ReportService().monthly_report(db, 2024, 5)
    names = [m["member_name"] for m in report["member_completion"]]
    # Admin (pas de rapport requis) et membre inactif exclus; tri par nom
    assert names == sorted(["홍길동", "John Doe"])
    by_account = {m["account_id"]: m for m in report["member_completion"]}
    assert by_account["user1234"]["stats"]["completed_days"] == 1
    assert by_account["bob9876"]["stats"]["completed_days"] == 1
    # 23 jours de semaine - 1 férié (15 mai)
    assert by_account["bob9876"]["stats"]["total_working_days"] == 22
    assert by_account["bob9876"]["stats"]["total_tasks"] == 1


def test_month_task_rows(db, members, may_2024_tasks):
    rows = ReportService().month_task_rows(db, 2024, 5)
    assert [r["task_name"] for r in rows] == ["API 설계", "코드 리뷰, 배포", '"긴급" 장애 대응']
    assert rows[0]["member_name"] == "홍길동"
    assert rows[0]["task_date"] == "2024-05-02"
    assert rows[0]["project_name"] == "ERP"
