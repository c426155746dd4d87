"""직원 로그인 화면 테스트 — 로그인, 실패 횟수, 잠금, 로그아웃, 세션 만료.

Employee sign-in view tests — Sign-in, failure counter, lockout, sign-out,
session timeout and return-URL handling.
"""

from datetime import timedelta
from urllib.parse import unquote

from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.config import settings
from backoffice.models.enums import AccountStatus
from backoffice.repositories.session_repository import session_repository
from backoffice.services.employee_auth_service import employee_auth_service
from backoffice.services.employee_service import employee_service
from backoffice.utils.clock import utc_now
from backoffice.views.employee_login import safe_return_url
from tests.conftest import sign_in

LOGIN = "/employee/login"


async def _post_login(client: AsyncClient, account: str, password: str, return_url: str = ""):
    return await client.post(LOGIN, data={
        "account": account,
        "password": password,
        "returnUrl": return_url,
    })


# ===== Login page =====

class TestLoginPage:
    """로그인 화면 표시 테스트."""

    async def test_login_page_renders_form_and_lists(
        self, client: AsyncClient, staff, locked_employee
    ):
        """로그인 폼과 활성/비활성 직원 목록 표시."""
        res = await client.get(LOGIN)
        assert res.status_code == 200
        assert 'name="account"' in res.text
        assert "Active employees (1)" in res.text
        assert "Inactive employees (1)" in res.text
        assert "locked" in res.text

    async def test_timeout_default_message(self, client: AsyncClient):
        """timeout=true 기본 메시지."""
        res = await client.get(LOGIN, params={"timeout": "true"})
        assert "You were signed out automatically, please sign in again" in res.text

    async def test_timeout_custom_message(self, client: AsyncClient):
        """timeout=true 와 message 전달 시 해당 메시지 표시."""
        res = await client.get(LOGIN, params={"timeout": "true", "message": "Session ended"})
        assert "Session ended" in res.text

    async def test_return_url_kept_as_hidden_field(self, client: AsyncClient):
        """returnUrl은 hidden 필드로 유지."""
        res = await client.get(LOGIN, params={"returnUrl": "/employee/select_page"})
        assert 'name="returnUrl" value="/employee/select_page"' in res.text

    async def test_logout_success_redirects_once(self, client: AsyncClient):
        """logout=success → 플래시 설정 후 shown=true로 리다이렉트."""
        res = await client.get(LOGIN, params={"logout": "success"})
        assert res.status_code == 303
        assert res.headers["location"] == "/employee/login?shown=true"
        assert unquote(res.cookies["flash_success"]) == "Signed out successfully"

        shown = await client.get(
            LOGIN,
            params={"logout": "success", "shown": "true"},
            cookies={"flash_success": res.cookies["flash_success"]},
        )
        assert shown.status_code == 200
        assert "Signed out successfully" in shown.text


# ===== Login =====

class TestLogin:
    """로그인 처리 테스트."""

    async def test_login_success_redirects_to_home(self, client: AsyncClient, db: AsyncSession, staff):
        """로그인 성공 → 세션 쿠키 설정 후 홈으로 리다이렉트."""
        res = await _post_login(client, "staff", "staff123!")
        assert res.status_code == 303
        assert res.headers["location"] == "/employee/select_page?welcome=true"

        token = res.cookies[settings.SESSION_COOKIE_NAME]
        current = await session_repository.get_by_token(db, token)
        assert current is not None
        assert current.employee_account == "staff"
        assert current.employee_name == staff.username
        assert current.store_id == staff.store_id
        assert current.max_inactive_seconds == settings.SESSION_MAX_INACTIVE_SECONDS
        assert unquote(res.cookies["flash_success"]) == f"Welcome back, {staff.username}!"

    async def test_session_cookie_has_no_fixed_lifetime(self, client: AsyncClient, staff):
        """세션 쿠키는 브라우저 세션 쿠키 — Max-Age/Expires 없음."""
        res = await _post_login(client, "staff", "staff123!")
        session_cookies = [
            header for header in res.headers.get_list("set-cookie")
            if header.startswith(f"{settings.SESSION_COOKIE_NAME}=")
        ]
        assert len(session_cookies) == 1
        assert "max-age" not in session_cookies[0].lower()
        assert "expires" not in session_cookies[0].lower()
        assert "httponly" in session_cookies[0].lower()

    async def test_unexpected_error_shows_system_message(
        self, client: AsyncClient, staff, monkeypatch
    ):
        """예기치 않은 예외 → 일반 시스템 오류 문구로 재표시."""
        async def _boom(db, account, password):
            raise RuntimeError("database went away")

        monkeypatch.setattr(employee_auth_service, "authenticate", _boom)
        res = await _post_login(client, "staff", "staff123!")
        assert res.status_code == 200
        assert "System error, please try again later" in res.text
        assert "database went away" not in res.text
        assert settings.SESSION_COOKIE_NAME not in res.cookies

    async def test_employee_list_error_shown_on_page(self, client: AsyncClient, monkeypatch):
        """직원 목록 조회 실패 → 로그인 화면에 오류 문구 표시."""
        async def _boom(db):
            raise RuntimeError("list query failed")

        monkeypatch.setattr(employee_service, "find_all_active_employees", _boom)
        res = await client.get(LOGIN)
        assert res.status_code == 200
        assert 'name="account"' in res.text
        assert "Unable to load the employee list" in res.text

    async def test_login_success_resets_counter(self, client: AsyncClient, db: AsyncSession, store):
        """로그인 성공 시 실패 횟수 초기화 및 마지막 로그인 기록."""
        from tests.conftest import make_employee
        employee = await make_employee(db, store, "retry", "right-pass1", login_failure_count=5)

        res = await _post_login(client, "retry", "right-pass1")
        assert res.status_code == 303

        await db.refresh(employee)
        assert employee.login_failure_count == 0
        assert employee.last_login_at is not None

    async def test_login_honours_local_return_url(self, client: AsyncClient, staff):
        """로컬 returnUrl로 리다이렉트."""
        res = await _post_login(client, "staff", "staff123!", "/employee/select_page?tab=2")
        assert res.headers["location"] == "/employee/select_page?tab=2"

    async def test_login_ignores_unsafe_return_url(self, client: AsyncClient, staff):
        """외부 URL 또는 login 포함 URL은 무시."""
        for url in ("https://evil.example.com/", "//evil.example.com", "/employee/login?x=1"):
            res = await _post_login(client, "staff", "staff123!", url)
            assert res.headers["location"] == "/employee/select_page?welcome=true"

    async def test_unknown_account(self, client: AsyncClient, staff):
        """존재하지 않는 계정 → 일반 오류 메시지, 남은 횟수 없음."""
        res = await _post_login(client, "ghost", "whatever")
        assert res.status_code == 200
        assert "Invalid account or password" in res.text
        assert "Remaining attempts" not in res.text

    async def test_wrong_password_shows_remaining_attempts(
        self, client: AsyncClient, db: AsyncSession, staff
    ):
        """비밀번호 오류 → 실패 횟수 증가 및 남은 횟수 표시."""
        res = await _post_login(client, "staff", "wrong")
        assert res.status_code == 200
        assert f"Remaining attempts: {settings.MAX_LOGIN_ATTEMPTS - 1} / {settings.MAX_LOGIN_ATTEMPTS}" in res.text
        assert 'value="staff"' in res.text

        await db.refresh(staff)
        assert staff.login_failure_count == 1
        assert staff.status == AccountStatus.ACTIVE

    async def test_lockout_after_max_failures(self, client: AsyncClient, db: AsyncSession, staff):
        """최대 실패 횟수 도달 시 계정 잠금."""
        for _ in range(settings.MAX_LOGIN_ATTEMPTS - 1):
            res = await _post_login(client, "staff", "wrong")
            assert "disabled after too many failed" not in res.text

        res = await _post_login(client, "staff", "wrong")
        assert "disabled after too many failed sign-in attempts" in res.text
        assert 'data-locked="true"' in res.text

        await db.refresh(staff)
        assert staff.status == AccountStatus.INACTIVE
        assert staff.login_failure_count == settings.MAX_LOGIN_ATTEMPTS

        # 잠긴 뒤에는 올바른 비밀번호도 거부, 횟수 증가 없음
        res = await _post_login(client, "staff", "staff123!")
        assert res.status_code == 200
        assert "disabled after too many failed sign-in attempts" in res.text
        await db.refresh(staff)
        assert staff.login_failure_count == settings.MAX_LOGIN_ATTEMPTS

    async def test_disabled_account(self, client: AsyncClient, db: AsyncSession, disabled_employee):
        """관리자가 비활성화한 계정 → 비활성 안내, 횟수 증가 없음."""
        res = await _post_login(client, "disabled", "password123!")
        assert "Your account has been disabled. Please contact the system administrator." in res.text
        assert 'data-locked="true"' not in res.text

        await _post_login(client, "disabled", "wrong")
        await db.refresh(disabled_employee)
        assert disabled_employee.login_failure_count == 0

    async def test_blank_fields_rerender_with_messages(self, client: AsyncClient):
        """빈 입력 → 검증 메시지와 함께 다시 표시."""
        res = await _post_login(client, "  ", "")
        assert res.status_code == 200
        assert "Please enter your account" in res.text
        assert "Please enter your password" in res.text

    async def test_account_too_long(self, client: AsyncClient):
        """계정 50자 초과 → 검증 메시지."""
        res = await _post_login(client, "a" * 51, "pw")
        assert "Account must be at most 50 characters" in res.text


# ===== Logout / home =====

class TestLogoutAndHome:
    """로그아웃 및 백오피스 홈 테스트."""

    async def test_logout_destroys_session(self, client: AsyncClient, db: AsyncSession, staff):
        """로그아웃 → 세션 삭제, 쿠키 제거, 로그인 화면으로 이동."""
        token = await sign_in(client, db, staff)

        res = await client.get("/employee/logout")
        assert res.status_code == 303
        assert res.headers["location"] == "/employee/login?logout=success"
        assert await session_repository.get_by_token(db, token) is None

    async def test_home_requires_session(self, client: AsyncClient):
        """세션 없이 홈 접근 → timeout 로그인 화면으로 이동."""
        res = await client.get("/employee/select_page", params={"welcome": "true"})
        assert res.status_code == 303
        location = res.headers["location"]
        assert location.startswith("/employee/login?timeout=true&returnUrl=")
        assert unquote(location.split("returnUrl=")[1]) == "/employee/select_page?welcome=true"

    async def test_home_with_session(self, client: AsyncClient, db: AsyncSession, manager):
        """로그인 세션으로 홈 표시."""
        await sign_in(client, db, manager)
        res = await client.get("/employee/select_page")
        assert res.status_code == 200
        assert manager.username in res.text
        assert "Store manager" in res.text

    async def test_home_after_inactivity_timeout(self, client: AsyncClient, db: AsyncSession, staff):
        """비활성 시간 초과 세션 → 삭제 후 로그인 화면으로 이동."""
        token = await sign_in(client, db, staff)
        current = await session_repository.get_by_token(db, token)
        current.last_accessed_at = utc_now() - timedelta(
            seconds=settings.SESSION_MAX_INACTIVE_SECONDS + 60
        )
        await db.commit()

        res = await client.get("/employee/select_page")
        assert res.status_code == 303
        assert "timeout=true" in res.headers["location"]
        assert await session_repository.get_by_token(db, token) is None

    async def test_active_session_outlives_login_window(
        self, client: AsyncClient, db: AsyncSession, staff
    ):
        """로그인 후 4시간이 지나도 최근 접근이 있으면 세션 유지."""
        token = await sign_in(client, db, staff)
        current = await session_repository.get_by_token(db, token)
        current.login_time = utc_now() - timedelta(
            seconds=settings.SESSION_MAX_INACTIVE_SECONDS + 3600
        )
        current.last_accessed_at = utc_now() - timedelta(minutes=5)
        await db.commit()

        res = await client.get("/employee/select_page")
        assert res.status_code == 200
        res = await client.get("/api/v1/employees/me")
        assert res.status_code == 200


# ===== Return URL rules =====

def test_safe_return_url_rules():
    """returnUrl 허용 규칙."""
    assert safe_return_url("/api/v1/employees/me") == "/api/v1/employees/me"
    assert safe_return_url("") is None
    assert safe_return_url(None) is None
    assert safe_return_url("/employee/LOGIN") is None
    assert safe_return_url("http://evil.example.com") is None
    assert safe_return_url("//evil.example.com") is None
    assert safe_return_url("/\\evil.example.com") is None
