from datetime import date
from urllib.parse import quote
from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session
from ..utils.database import get_db
from ..utils.auth_dep import require_admin
from ..utils.csv_export import (
    build_monthly_summary_csv,
    build_tasks_csv,
    monthly_summary_filename,
    tasks_filename,
)
from ..models.member import Member
from ..services.report_service import ReportService
from ..schemas.report import MonthlyReportOut

router = APIRouter()
service = ReportService()


def _default_year() -> int:
    return date.today().year


def _default_month() -> int:
    return date.today().month


def _csv_response(content: bytes, filename: str) -> Response:
    # Nom de fichier non ASCII: encodage RFC 5987
    disposition = f"attachment; filename*=UTF-8''{quote(filename)}"
    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": disposition},
    )


def _period(year: int | None, month: int | None) -> tuple[int, int]:
    return (year or _default_year(), month or _default_month())


@router.get("/monthly", response_model=MonthlyReportOut)
def monthly_report(
    _: Member = Depends(require_admin),
    db: Session = Depends(get_db),
    year: int | None = Query(None, ge=2000, le=9999),
    month: int | None = Query(None, ge=1, le=12),
):
    y, m = _period(year, month)
    return service.monthly_report(db, y, m)


@router.get("/monthly.csv")
def monthly_report_csv(
    _: Member = Depends(require_admin),
    db: Session = Depends(get_db),
    year: int | None = Query(None, ge=2000, le=9999),
    month: int | None = Query(None, ge=1, le=12),
):
    y, m = _period(year, month)
    report = service.monthly_report(db, y, m)
    content = build_monthly_summary_csv(report["member_completion"])
    return _csv_response(content, monthly_summary_filename(y, m))


@router.get("/tasks.csv")
def tasks_csv(
    _: Member = Depends(require_admin),
    db: Session = Depends(get_db),
    year: int | None = Query(None, ge=2000, le=9999),
    month: int | None = Query(None, ge=1, le=12),
):
    y, m = _period(year, month)
    rows = service.month_task_rows(db, y, m)
    return _csv_response(build_tasks_csv(rows), tasks_filename(y, m))
