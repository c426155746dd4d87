"""비밀번호 재설정 테스트 — 임시 비밀번호 발급 및 메일 발송.

Forgot-password tests — Temporary password generation and email delivery.
The SMTP call is replaced with a recorder.
"""

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.services import employee_service as employee_service_module
from backoffice.services.employee_service import employee_service
from backoffice.utils.exceptions import BadRequestError
from backoffice.utils.password import generate_random_password, verify_password
from tests.conftest import sign_in

FORGOT = "/employee/forgot-password"


@pytest.fixture
def sent_emails(monkeypatch) -> list[dict]:
    """발송된 메일을 기록합니다 (Record emails instead of sending them)."""
    sent: list[dict] = []

    async def _fake_send(to: str, name: str, new_password: str) -> None:
        sent.append({"to": to, "name": name, "password": new_password})

    monkeypatch.setattr(employee_service_module, "send_password_reset_email", _fake_send)
    return sent


@pytest.fixture
def failing_email(monkeypatch) -> None:
    """메일 발송 실패를 흉내냅니다 (Make email delivery fail)."""
    async def _broken_send(to: str, name: str, new_password: str) -> None:
        raise ConnectionError("SMTP unavailable")

    monkeypatch.setattr(employee_service_module, "send_password_reset_email", _broken_send)


class TestForgotPasswordService:
    """비밀번호 재설정 서비스 테스트."""

    async def test_reset_by_account(self, db: AsyncSession, staff, sent_emails):
        """계정으로 재설정 → 새 비밀번호 저장, 실패 횟수 초기화, 메일 발송."""
        staff.login_failure_count = 3
        await db.commit()

        result = await employee_service.process_forgot_password(db, "staff")
        await db.commit()

        assert result.success is True
        assert len(sent_emails) == 1
        assert sent_emails[0]["to"] == staff.email
        new_password = sent_emails[0]["password"]
        assert len(new_password) == 8

        await db.refresh(staff)
        assert verify_password(new_password, staff.password_hash)
        assert not verify_password("staff123!", staff.password_hash)
        assert staff.login_failure_count == 0

    async def test_reset_by_email(self, db: AsyncSession, staff, sent_emails):
        """이메일로도 재설정 가능."""
        result = await employee_service.process_forgot_password(db, staff.email)
        assert result.success is True
        assert sent_emails[0]["name"] == staff.username

    async def test_reset_drops_existing_sessions(
        self, client: AsyncClient, db: AsyncSession, staff, sent_emails
    ):
        """재설정 시 기존 로그인 세션 삭제."""
        await sign_in(client, db, staff)
        await employee_service.process_forgot_password(db, "staff")
        await db.commit()

        res = await client.get("/api/v1/employees/me")
        assert res.status_code == 401

    async def test_unknown_account(self, db: AsyncSession, sent_emails):
        """존재하지 않는 계정 → 실패 결과."""
        result = await employee_service.process_forgot_password(db, "nobody")
        assert result.success is False
        assert sent_emails == []

    async def test_inactive_account(self, db: AsyncSession, locked_employee, sent_emails):
        """비활성 계정 → 실패 결과, 비밀번호 유지."""
        old_hash = locked_employee.password_hash
        result = await employee_service.process_forgot_password(db, "locked")
        assert result.success is False
        assert "contact the system administrator" in result.message
        assert sent_emails == []
        await db.refresh(locked_employee)
        assert locked_employee.password_hash == old_hash

    async def test_blank_input(self, db: AsyncSession):
        """빈 입력 → 400."""
        with pytest.raises(BadRequestError):
            await employee_service.process_forgot_password(db, "   ")


class TestForgotPasswordPage:
    """비밀번호 재설정 화면 테스트."""

    async def test_form_renders(self, client: AsyncClient):
        """재설정 폼 표시."""
        res = await client.get(FORGOT)
        assert res.status_code == 200
        assert 'name="accountOrEmail"' in res.text

    async def test_success_message(self, client: AsyncClient, staff, sent_emails):
        """성공 → 안내 메시지 표시."""
        res = await client.post(FORGOT, data={"accountOrEmail": "staff"})
        assert res.status_code == 200
        assert "A new password has been sent" in res.text
        assert len(sent_emails) == 1

    async def test_blank_input_rerenders(self, client: AsyncClient, sent_emails):
        """빈 입력 → 검증 메시지."""
        res = await client.post(FORGOT, data={"accountOrEmail": " "})
        assert "Please enter your account or email" in res.text
        assert sent_emails == []

    async def test_unknown_account_message(self, client: AsyncClient, sent_emails):
        """존재하지 않는 계정 → 실패 메시지, 입력값 유지."""
        res = await client.post(FORGOT, data={"accountOrEmail": "nobody"})
        assert "No employee found with that account or email" in res.text
        assert 'value="nobody"' in res.text

    async def test_email_failure_keeps_old_password(
        self, client: AsyncClient, db: AsyncSession, staff, failing_email
    ):
        """메일 발송 실패 → 실패 메시지, 기존 비밀번호 유지."""
        res = await client.post(FORGOT, data={"accountOrEmail": "staff"})
        assert "We could not send the email right now" in res.text

        await db.refresh(staff)
        assert verify_password("staff123!", staff.password_hash)


def test_generated_password_shape():
    """생성 비밀번호 — 길이, 영문자와 숫자 포함."""
    for _ in range(50):
        password = generate_random_password(8)
        assert len(password) == 8
        assert any(c.isalpha() for c in password)
        assert any(c.isdigit() for c in password)
