from datetime import date, datetime
from typing import Optional
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String, Text, Date, DateTime, Boolean, Integer, ForeignKey
from ..utils.database import Base


class Role(Base):
    __tablename__ = "roles"

    role_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True)
    description: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    # Les rôles administrateur voient les données personnelles non masquées
    is_admin: Mapped[bool] = mapped_column(Boolean, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    members: Mapped[list["Member"]] = relationship(back_populates="role")


class Member(Base):
    __tablename__ = "members"

    member_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    account_id: Mapped[str] = mapped_column(String(15), unique=True, index=True)
    name: Mapped[str] = mapped_column(String(20), index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True)
    mobile: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    dept_path: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    password_hash: Mapped[str] = mapped_column(String(255))
    role_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("roles.role_id"), nullable=True, index=True
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, index=True)
    # Seuls ces membres sont comptés dans le rapport mensuel
    requires_daily_report: Mapped[bool] = mapped_column(Boolean, default=True)
    last_login_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    role: Mapped[Optional[Role]] = relationship(back_populates="members")
    tasks: Mapped[list["Task"]] = relationship(
        back_populates="member", cascade="all, delete-orphan"
    )

    @property
    def is_admin(self) -> bool:
        return bool(self.role and self.role.is_admin)


class Task(Base):
    __tablename__ = "tasks"

    task_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    member_id: Mapped[int] = mapped_column(
        ForeignKey("members.member_id"), index=True
    )
    task_date: Mapped[date] = mapped_column(Date, index=True)
    task_type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    task_name: Mapped[str] = mapped_column(String(255))
    task_detail: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    task_url: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    # Temps de travail en minutes
    work_time: Mapped[int] = mapped_column(Integer, default=0)
    project_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    service_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    cost_group_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    platform_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    start_time: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    end_time: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    member: Mapped[Member] = relationship(back_populates="tasks")


class Holiday(Base):
    __tablename__ = "holidays"

    holiday_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255))
    holiday_date: Mapped[date] = mapped_column(Date, unique=True)
