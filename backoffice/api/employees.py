"""직원 라우터 — 로그인 직원 정보 및 계정 잠금 해제 API.

Employee Router — Current employee profile and account unlock.
Unlock is restricted to headquarters admins.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.api.deps import get_current_session, require_headquarters_admin
from backoffice.database import get_db
from backoffice.models.employee import Employee
from backoffice.models.session import EmployeeSession
from backoffice.repositories.employee_repository import employee_repository
from backoffice.schemas.employee import EmployeeDTO
from backoffice.services.employee_auth_service import employee_auth_service
from backoffice.utils.exceptions import UnauthorizedError

router: APIRouter = APIRouter()


@router.get("/me", response_model=EmployeeDTO)
async def get_me(
    db: Annotated[AsyncSession, Depends(get_db)],
    current: Annotated[EmployeeSession, Depends(get_current_session)],
) -> EmployeeDTO:
    """로그인한 직원 정보를 조회합니다.

    Get the signed-in employee.
    """
    employee: Employee | None = await employee_repository.get_by_account(
        db, current.employee_account
    )
    if employee is None:
        raise UnauthorizedError("Employee no longer exists")
    return employee_auth_service.convert_to_dto(employee)


@router.post("/{employee_id}/unlock", response_model=EmployeeDTO)
async def unlock_employee(
    employee_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current: Annotated[EmployeeSession, Depends(require_headquarters_admin)],
) -> EmployeeDTO:
    """잠긴 계정을 해제합니다. 본사 관리자만 가능.

    Reactivate a locked or disabled account and clear its failure counter.
    Headquarters admins only.
    """
    employee: Employee = await employee_auth_service.unlock_account(db, employee_id)
    await db.commit()
    return employee_auth_service.convert_to_dto(employee)
