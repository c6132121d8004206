"""
Génération de fichiers CSV (UTF-8 avec BOM pour l'ouverture correcte du coréen dans Excel).
"""

import csv
import io
from datetime import date
from typing import Any, Callable, Iterable, Sequence

BOM = "\ufeff"

TASK_HEADERS = [
    "날짜",
    "팀원",
    "업무명",
    "업무 상세",
    "작업시간(분)",
    "시작시간",
    "종료시간",
    "프로젝트",
    "서비스",
    "비용그룹",
    "플랫폼",
    "관련 URL",
    "등록일시",
]

MONTHLY_SUMMARY_HEADERS = [
    "팀원",
    "계정ID",
    "총 업무 건수",
    "총 작업시간(분)",
    "완료일수",
    "미완료일수",
    "총 근무일수",
    "완료율(%)",
]


def _csv_row(values: Sequence[Any]) -> str:
    buf = io.StringIO()
    # Terminateur "\r\n": tout champ contenant \r ou \n est mis entre guillemets
    csv.writer(buf, lineterminator="\r\n").writerow(values)
    return buf.getvalue()[:-2]


def escape_csv_value(value: Any) -> str:
    if value is None or value == "":
        return ""
    return _csv_row([value])


def array_to_csv(headers: Sequence[Any], rows: Iterable[Sequence[Any]]) -> str:
    lines = [_csv_row(headers)]
    lines.extend(_csv_row(row) for row in rows)
    return "\n".join(lines)


def build_csv(
    data: Iterable[Any],
    headers: Sequence[str],
    row_mapper: Callable[[Any], Sequence[Any]],
) -> bytes:
    rows = [row_mapper(item) for item in data]
    return (BOM + array_to_csv(headers, rows)).encode("utf-8")


def _nested_name(item: dict, key: str) -> str:
    nested = item.get(key) or {}
    return nested.get("name") or ""


def _task_row(task: dict) -> list:
    return [
        task.get("task_date") or "",
        task.get("member_name") or _nested_name(task, "member"),
        task.get("task_name") or "",
        task.get("task_detail") or "",
        task.get("work_time") or 0,
        task.get("start_time") or "",
        task.get("end_time") or "",
        task.get("project_name") or _nested_name(task, "project"),
        task.get("service_name") or _nested_name(task, "service"),
        task.get("cost_group_name") or _nested_name(task, "cost_group"),
        task.get("platform_name") or _nested_name(task, "platform"),
        task.get("task_url") or "",
        task.get("created_at") or "",
    ]


def _summary_row(item: dict) -> list:
    stats = item.get("stats") or {}
    return [
        item.get("member_name") or "",
        item.get("account_id") or "",
        stats.get("total_tasks") or 0,
        stats.get("total_work_time") or 0,
        stats.get("completed_days") or 0,
        stats.get("incomplete_days") or 0,
        stats.get("total_working_days") or 0,
        stats.get("completion_rate") or 0,
    ]


def build_tasks_csv(tasks: Iterable[dict]) -> bytes:
    return build_csv(tasks, TASK_HEADERS, _task_row)


def build_monthly_summary_csv(summary: Iterable[dict]) -> bytes:
    return build_csv(summary, MONTHLY_SUMMARY_HEADERS, _summary_row)


def monthly_summary_filename(year: int, month: int, today: date | None = None) -> str:
    today = today or date.today()
    return f"월별집계_{year}년{month}월_{today.isoformat()}.csv"


def tasks_filename(year: int, month: int, today: date | None = None) -> str:
    today = today or date.today()
    return f"팀업무상세_{year}년{month}월_{today.isoformat()}.csv"
