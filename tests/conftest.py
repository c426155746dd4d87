"""테스트 인프라 — 테스트 DB 엔진, 세션, httpx 클라이언트 픽스처.

Test infrastructure — Test database engine, session, and httpx client fixtures.
Uses in-memory SQLite (aiosqlite) unless TEST_DATABASE_URL points elsewhere.
The schema is created for every test and dropped afterwards.
"""

import os
from collections.abc import AsyncGenerator
from datetime import timedelta
from decimal import Decimal

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from backoffice.config import settings
from backoffice.database import Base, get_db
from backoffice.main import app
from backoffice.models import *  # noqa: F401,F403 — register all models with metadata
from backoffice.models.enums import AccountStatus, EmployeeRole, OrderStatus
from backoffice.services.session_service import session_service
from backoffice.utils.clock import utc_now
from backoffice.utils.password import hash_password

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 매 테스트마다 스키마를 생성/삭제합니다."""
    if TEST_DATABASE_URL.startswith("sqlite"):
        eng = create_async_engine(
            TEST_DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        eng = create_async_engine(TEST_DATABASE_URL, pool_pre_ping=True)

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
async def make_employee(
    db: AsyncSession,
    store,
    account: str,
    password: str = "password123!",
    role: EmployeeRole = EmployeeRole.STAFF,
    status: AccountStatus = AccountStatus.ACTIVE,
    login_failure_count: int = 0,
):
    """테스트 직원을 생성합니다."""
    from backoffice.models.employee import Employee
    employee = Employee(
        account=account,
        username=f"{account.capitalize()} Kim",
        email=f"{account}@eatfast.test",
        password_hash=hash_password(password),
        role=role,
        status=status,
        login_failure_count=login_failure_count,
        store_id=store.id,
    )
    db.add(employee)
    await db.commit()
    await db.refresh(employee)
    return employee


@pytest_asyncio.fixture
async def store(db: AsyncSession):
    """테스트 매장을 생성합니다."""
    from backoffice.models.store import Store
    s = Store(name="Test Store", address="123 Test St")
    db.add(s)
    await db.commit()
    await db.refresh(s)
    return s


@pytest_asyncio.fixture
async def other_store(db: AsyncSession):
    """두 번째 매장을 생성합니다."""
    from backoffice.models.store import Store
    s = Store(name="Other Store", address="456 Other Ave")
    db.add(s)
    await db.commit()
    await db.refresh(s)
    return s


@pytest_asyncio.fixture
async def admin(db: AsyncSession, store):
    """본사 관리자를 생성합니다."""
    return await make_employee(
        db, store, "admin", "admin123!", role=EmployeeRole.HEADQUARTERS_ADMIN
    )


@pytest_asyncio.fixture
async def manager(db: AsyncSession, store):
    """매장 매니저를 생성합니다."""
    return await make_employee(db, store, "manager", "manager123!", role=EmployeeRole.MANAGER)


@pytest_asyncio.fixture
async def staff(db: AsyncSession, store):
    """매장 직원을 생성합니다."""
    return await make_employee(db, store, "staff", "staff123!")


@pytest_asyncio.fixture
async def disabled_employee(db: AsyncSession, store):
    """관리자가 비활성화한 직원 (실패 횟수 0)."""
    return await make_employee(db, store, "disabled", status=AccountStatus.INACTIVE)


@pytest_asyncio.fixture
async def locked_employee(db: AsyncSession, store):
    """로그인 실패 초과로 잠긴 직원."""
    return await make_employee(
        db,
        store,
        "locked",
        status=AccountStatus.INACTIVE,
        login_failure_count=settings.MAX_LOGIN_ATTEMPTS,
    )


@pytest_asyncio.fixture
async def member(db: AsyncSession):
    """테스트 회원을 생성합니다."""
    from backoffice.models.member import Member
    m = Member(account="member1", username="Member One", email="member1@eatfast.test")
    db.add(m)
    await db.commit()
    await db.refresh(m)
    return m


@pytest_asyncio.fixture
async def orders(db: AsyncSession, member, store):
    """완료 주문 1건(리뷰 1개, 미리뷰 2개)과 준비 중 주문 1건을 생성합니다.

    Returns:
        dict: {"completed": OrderList, "preparing": OrderList}
    """
    from backoffice.models.order import OrderList, OrderListInfo
    now = utc_now()
    completed = OrderList(
        member_id=member.id,
        store_id=store.id,
        order_date=now - timedelta(days=2),
        order_status=OrderStatus.COMPLETED,
        total_amount=Decimal("470.00"),
    )
    preparing = OrderList(
        member_id=member.id,
        store_id=store.id,
        order_date=now - timedelta(hours=1),
        order_status=OrderStatus.PREPARING,
        total_amount=Decimal("120.00"),
    )
    db.add_all([completed, preparing])
    await db.flush()

    db.add_all([
        OrderListInfo(order_list_id=completed.id, meal_name="Bulgogi Burger",
                      meal_price=Decimal("150.00"), quantity=1, review_stars=5),
        OrderListInfo(order_list_id=completed.id, meal_name="Kimchi Fries",
                      meal_price=Decimal("80.00"), quantity=2, review_stars=0),
        OrderListInfo(order_list_id=completed.id, meal_name="Iced Tea",
                      meal_price=Decimal("80.00"), quantity=2, review_stars=None,
                      meal_customization="less ice"),
        OrderListInfo(order_list_id=preparing.id, meal_name="Bibimbap",
                      meal_price=Decimal("120.00"), quantity=1, review_stars=0),
    ])
    await db.commit()
    return {"completed": completed, "preparing": preparing}


async def sign_in(client: AsyncClient, db: AsyncSession, employee) -> str:
    """직원 세션을 생성하고 클라이언트 쿠키에 설정합니다."""
    current = await session_service.create_session(db, employee)
    await db.commit()
    client.cookies.set(settings.SESSION_COOKIE_NAME, current.token)
    return current.token
