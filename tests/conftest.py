import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ["AUTO_CREATE_TABLES"] = "false"

from datetime import date  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.main import app  # noqa: E402
from app.models.member import Holiday, Member, Role, Task  # noqa: E402
from app.utils.database import Base, get_db  # noqa: E402
from app.utils.security import create_access_token, hash_password  # noqa: E402

PASSWORD = "s3cret-pass"


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture
def db(engine):
    Session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    session = Session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(engine):
    Session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    def _get_db():
        s = Session()
        try:
            yield s
        finally:
            s.close()

    app.dependency_overrides[get_db] = _get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def members(db):
    admin_role = Role(name="관리자", is_admin=True)
    user_role = Role(name="팀원", is_admin=False)
    db.add_all([admin_role, user_role])
    db.flush()

    pwd = hash_password(PASSWORD)
    admin = Member(
        account_id="admin01",
        name="관리자",
        email="admin@example.com",
        password_hash=pwd,
        role_id=admin_role.role_id,
        requires_daily_report=False,
    )
    alice = Member(
        account_id="user1234",
        name="홍길동",
        email="user@example.com",
        mobile="010-1234-5678",
        dept_path="개발/백엔드",
        password_hash=pwd,
        role_id=user_role.role_id,
    )
    bob = Member(
        account_id="bob9876",
        name="John Doe",
        email="bob@example.com",
        mobile="02-1234-5678",
        password_hash=pwd,
        role_id=user_role.role_id,
    )
    carol = Member(
        account_id="carol55",
        name="김철수",
        email="carol@example.com",
        password_hash=pwd,
        role_id=user_role.role_id,
        is_active=False,
    )
    db.add_all([admin, alice, bob, carol])
    db.commit()
    return {"admin": admin, "alice": alice, "bob": bob, "carol": carol}


@pytest.fixture
def may_2024_tasks(db, members):
    alice, bob = members["alice"], members["bob"]
    db.add_all(
        [
            Task(member_id=alice.member_id, task_date=date(2024, 5, 2), task_name="API 설계", work_time=300, project_name="ERP"),
            Task(member_id=alice.member_id, task_date=date(2024, 5, 2), task_name="코드 리뷰, 배포", work_time=180),
            Task(member_id=bob.member_id, task_date=date(2024, 5, 3), task_name='"긴급" 장애 대응', work_time=480),
            Task(member_id=bob.member_id, task_date=date(2024, 6, 3), task_name="다음 달", work_time=480),
            Holiday(name="부처님오신날", holiday_date=date(2024, 5, 15)),
        ]
    )
    db.commit()


@pytest.fixture
def auth_header():
    def _header(member: Member) -> dict:
        token = create_access_token(str(member.member_id))
        return {"Authorization": f"Bearer {token}"}

    return _header
