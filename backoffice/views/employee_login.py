"""직원 로그인 화면 라우터 — 로그인, 로그아웃, 비밀번호 재설정.

Employee sign-in view router — HTML form endpoints for sign-in, sign-out,
forgot-password and the back-office home page.

Flash messages survive exactly one redirect: they are stored URL-quoted in
short-lived cookies and removed by the page that displays them.
"""

import logging
from typing import Annotated
from urllib.parse import quote, unquote

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.config import settings
from backoffice.database import get_db
from backoffice.models.session import EmployeeSession
from backoffice.schemas.employee import (
    EmployeeDTO,
    EmployeeLoginRequest,
    ForgotPasswordRequest,
    ForgotPasswordResult,
)
from backoffice.services.employee_auth_service import employee_auth_service
from backoffice.services.employee_service import employee_service
from backoffice.services.session_service import session_service
from backoffice.utils.exceptions import AccountLockedError, InvalidCredentialsError, LoginError
from backoffice.views.templates import (
    render_forgot_password,
    render_login,
    render_messages,
    render_select_page,
)

logger = logging.getLogger(__name__)

router: APIRouter = APIRouter()

LOGIN_PATH = "/employee/login"
HOME_PATH = "/employee/select_page?welcome=true"
FLASH_SUCCESS = "flash_success"
FLASH_ERROR = "flash_error"
DEFAULT_TIMEOUT_MESSAGE = "You were signed out automatically, please sign in again"
SYSTEM_ERROR_MESSAGE = "System error, please try again later"


# === 플래시 메시지 (Flash messages) ===

def _set_flash(response: Response, key: str, message: str) -> None:
    response.set_cookie(key, quote(message), max_age=60, httponly=True, samesite="lax")


def _pop_flash(request: Request, key: str) -> str | None:
    value: str | None = request.cookies.get(key)
    return unquote(value) if value else None


def _clear_flash(request: Request, response: Response) -> None:
    for key in (FLASH_SUCCESS, FLASH_ERROR):
        if key in request.cookies:
            response.delete_cookie(key)


def _validation_messages(exc: ValidationError) -> list[str]:
    """Pydantic 오류를 화면 메시지로 변환 (Turn a ValidationError into page messages)."""
    messages: list[str] = []
    for error in exc.errors():
        message: str = error["msg"]
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        elif error["type"] == "string_too_long":
            field: str = str(error["loc"][-1]).replace("_", " ").capitalize()
            message = f"{field} must be at most {error['ctx']['max_length']} characters"
        messages.append(message)
    return messages


def safe_return_url(return_url: str | None) -> str | None:
    """로그인 후 이동할 내부 경로만 허용합니다.

    Accept a post-sign-in redirect target only when it is a non-empty local
    path that does not point back at a login page.
    """
    if not return_url or not return_url.strip():
        return None
    url: str = return_url.strip()
    if "login" in url.lower():
        return None
    if not url.startswith("/") or url.startswith("//") or "\\" in url:
        return None
    return url


async def _employee_lists(
    db: AsyncSession,
) -> tuple[list[EmployeeDTO], list[EmployeeDTO], str | None]:
    """로그인 화면 보조 목록 — 실패 시 오류 문구를 반환 (Helper lists, or an error text)."""
    try:
        active: list[EmployeeDTO] = await employee_service.find_all_active_employees(db)
        inactive: list[EmployeeDTO] = await employee_service.find_all_inactive_employees(db)
    except Exception as exc:
        logger.exception("Failed to load employee lists for the login page")
        return [], [], f"Unable to load the employee list: {exc}"
    return active, inactive, None


async def _login_page(
    db: AsyncSession,
    *,
    account: str = "",
    return_url: str = "",
    messages: str = "",
    locked: bool = False,
) -> HTMLResponse:
    active, inactive, list_error = await _employee_lists(db)
    return render_login(
        account=account,
        return_url=return_url,
        messages=messages,
        locked=locked,
        active=active,
        inactive=inactive,
        list_error=list_error,
    )


# === 로그인 (Sign in) ===

@router.get("/login", response_class=HTMLResponse)
async def login_page(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db)],
    logout: str | None = None,
    shown: str | None = None,
    timeout: str | None = None,
    message: str | None = None,
    returnUrl: str | None = None,
) -> Response:
    """로그인 화면을 표시합니다.

    Show the sign-in page. ``logout=success`` is turned into a one-shot flash
    and redirected to ``?shown=true`` so a refresh does not repeat it;
    ``timeout=true`` shows the automatic sign-out banner.
    """
    if logout == "success" and shown != "true":
        redirect = RedirectResponse(f"{LOGIN_PATH}?shown=true", status_code=303)
        _set_flash(redirect, FLASH_SUCCESS, "Signed out successfully")
        return redirect

    error: str | None = _pop_flash(request, FLASH_ERROR)
    if timeout == "true":
        error = unquote(message) if message else DEFAULT_TIMEOUT_MESSAGE

    response: HTMLResponse = await _login_page(
        db,
        return_url=returnUrl or "",
        messages=render_messages(success=_pop_flash(request, FLASH_SUCCESS), error=error),
    )
    _clear_flash(request, response)
    return response


@router.post("/login", response_class=HTMLResponse)
async def login(
    db: Annotated[AsyncSession, Depends(get_db)],
    account: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
    returnUrl: Annotated[str, Form()] = "",
) -> Response:
    """로그인을 처리합니다.

    Process the sign-in form. Failures re-render the page with the reason;
    success creates the session cookie and redirects.
    """
    try:
        form = EmployeeLoginRequest(account=account, password=password)
    except ValidationError as exc:
        return await _login_page(
            db,
            account=account,
            return_url=returnUrl,
            messages=render_messages(errors=_validation_messages(exc)),
        )

    try:
        employee = await employee_auth_service.authenticate(db, form.account, form.password)
        current: EmployeeSession = await session_service.create_session(db, employee)
        await db.commit()
    except LoginError as exc:
        # 실패 횟수/잠금 상태를 저장 — Persist the failure counter and lock
        await db.commit()
        warning: str | None = None
        if isinstance(exc, InvalidCredentialsError) and exc.remaining_attempts is not None:
            warning = (
                f"Remaining attempts: {exc.remaining_attempts} / {exc.max_attempts}"
            )
        return await _login_page(
            db,
            account=form.account,
            return_url=returnUrl,
            messages=render_messages(error=exc.message, warning=warning),
            locked=isinstance(exc, AccountLockedError),
        )
    except Exception:
        await db.rollback()
        logger.exception("Unexpected error while signing in %s", form.account)
        return await _login_page(
            db,
            account=form.account,
            return_url=returnUrl,
            messages=render_messages(error=SYSTEM_ERROR_MESSAGE),
        )

    target: str = safe_return_url(returnUrl) or HOME_PATH
    response = RedirectResponse(target, status_code=303)
    # 브라우저 세션 쿠키 — 비활성 만료는 서버 세션이 판단
    # Browser-session cookie; inactivity expiry is decided by the stored session
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        current.token,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )
    _set_flash(response, FLASH_SUCCESS, f"Welcome back, {employee.username}!")
    return response


# === 로그아웃 (Sign out) ===

@router.get("/logout")
async def logout(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Response:
    """로그아웃 — 세션을 삭제하고 로그인 화면으로 이동합니다.

    Destroy the session, clear the cookie and go back to the sign-in page.
    """
    token: str | None = request.cookies.get(settings.SESSION_COOKIE_NAME)
    current: EmployeeSession | None = await session_service.invalidate(db, token)
    await db.commit()
    if current is not None:
        logger.info("Employee %s (%s) signed out", current.employee_name, current.employee_account)

    response = RedirectResponse(f"{LOGIN_PATH}?logout=success", status_code=303)
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    _set_flash(response, FLASH_SUCCESS, "You have signed out")
    return response


# === 비밀번호 재설정 (Forgot password) ===

@router.get("/forgot-password", response_class=HTMLResponse)
async def forgot_password_page() -> HTMLResponse:
    """비밀번호 재설정 화면 (Forgot-password form)."""
    return render_forgot_password()


@router.post("/forgot-password", response_class=HTMLResponse)
async def forgot_password(
    db: Annotated[AsyncSession, Depends(get_db)],
    accountOrEmail: Annotated[str, Form()] = "",
) -> HTMLResponse:
    """비밀번호 재설정을 처리합니다.

    Reset the password and email it. The new password is only kept when
    the email was sent.
    """
    try:
        form = ForgotPasswordRequest(account_or_email=accountOrEmail)
    except ValidationError as exc:
        return render_forgot_password(
            account_or_email=accountOrEmail,
            messages=render_messages(errors=_validation_messages(exc)),
        )

    try:
        result: ForgotPasswordResult = await employee_service.process_forgot_password(
            db, form.account_or_email
        )
        if result.success:
            await db.commit()
        else:
            await db.rollback()
    except Exception:
        await db.rollback()
        logger.exception("Unexpected error during password reset for %s", form.account_or_email)
        return render_forgot_password(
            account_or_email=form.account_or_email,
            messages=render_messages(error=SYSTEM_ERROR_MESSAGE),
        )

    if result.success:
        return render_forgot_password(messages=render_messages(success=result.message))
    return render_forgot_password(
        account_or_email=form.account_or_email,
        messages=render_messages(error=result.message),
    )


# === 백오피스 홈 (Back-office home) ===

@router.get("/select_page", response_class=HTMLResponse)
async def select_page(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Response:
    """백오피스 홈 — 로그인 세션이 없으면 로그인 화면으로 이동합니다.

    Back-office home. Without a live session the browser is sent to the
    sign-in page with ``timeout=true`` and the current path as returnUrl.
    """
    token: str | None = request.cookies.get(settings.SESSION_COOKIE_NAME)
    current: EmployeeSession | None = await session_service.get_active_session(db, token)
    await db.commit()

    if current is None:
        path: str = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"
        response = RedirectResponse(
            f"{LOGIN_PATH}?timeout=true&returnUrl={quote(path, safe='')}",
            status_code=303,
        )
        response.delete_cookie(settings.SESSION_COOKIE_NAME)
        return response

    response = render_select_page(
        current,
        messages=render_messages(
            success=_pop_flash(request, FLASH_SUCCESS),
            error=_pop_flash(request, FLASH_ERROR),
        ),
    )
    _clear_flash(request, response)
    return response
