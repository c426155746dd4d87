"""초기 데이터 시드 스크립트 — 데모 매장과 본사 관리자 계정 생성.

Seed script — Creates a demo store and the headquarters admin account.
Run this script once to bootstrap the database.

Usage:
    python -m backoffice.seed

Creates:
    - 1개 매장: "EatFast Main Store" (1 store)
    - 1개 본사 관리자 계정: admin / admin123 (1 HEADQUARTERS_ADMIN employee)
    - 1개 매장 매니저 계정: manager / manager123 (1 MANAGER employee)
"""

import asyncio
import logging

from sqlalchemy import select

from backoffice.database import Base, async_session, engine
from backoffice.models import Employee, Store
from backoffice.models.enums import AccountStatus, EmployeeRole
from backoffice.utils.password import hash_password

logger = logging.getLogger(__name__)


async def seed() -> None:
    """데이터베이스를 초기 데이터로 시드합니다.

    Create tables if needed, then insert the demo store and accounts.
    Idempotent: 이미 시드된 경우 건너뜁니다 (Skips if already seeded).
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        result = await db.execute(select(Store).limit(1))
        if result.scalar_one_or_none():
            logger.info("Already seeded. Skipping.")
            return

        store: Store = Store(name="EatFast Main Store", address="1 Main Street", phone="02-0000-0000")
        db.add(store)
        await db.flush()  # flush로 store.id 생성 (Flush to generate store.id)

        db.add_all([
            Employee(
                account="admin",
                username="System Admin",
                email="admin@eatfast.example.com",
                password_hash=hash_password("admin123"),
                role=EmployeeRole.HEADQUARTERS_ADMIN,
                status=AccountStatus.ACTIVE,
                store_id=store.id,
            ),
            Employee(
                account="manager",
                username="Store Manager",
                email="manager@eatfast.example.com",
                password_hash=hash_password("manager123"),
                role=EmployeeRole.MANAGER,
                status=AccountStatus.ACTIVE,
                store_id=store.id,
            ),
        ])

        await db.commit()
        logger.info("Seeded: store=%s, accounts admin/admin123 and manager/manager123", store.id)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(seed())
