"""직원 로그인 화면 HTML 템플릿.

HTML templates for the employee sign-in pages. Placeholders ``{{NAME}}`` are
filled with ``str.replace``; every dynamic value is escaped before insertion.
"""

from html import escape

from fastapi.responses import HTMLResponse

from backoffice.config import settings
from backoffice.models.enums import EmployeeRole
from backoffice.models.session import EmployeeSession
from backoffice.schemas.employee import EmployeeDTO

PAGE_HTML = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{{TITLE}} - {{APP_NAME}}</title>
<style>
body{font-family:system-ui,sans-serif;background:#111;color:#eee;display:flex;justify-content:center;align-items:flex-start;min-height:100vh;margin:0;padding:40px 0}
.card{background:#1a1a2e;border:1px solid #333;border-radius:12px;padding:40px;width:420px}
h2{text-align:center;margin:0 0 24px}
h3{font-size:14px;color:#aaa;margin:24px 0 8px}
label{display:block;font-size:13px;color:#aaa;margin-bottom:4px}
input{width:100%;padding:10px;border:1px solid #333;border-radius:6px;background:#111;color:#eee;font-size:14px;box-sizing:border-box;margin-bottom:16px}
input:focus{outline:none;border-color:#e17055}
button{width:100%;padding:12px;border:none;border-radius:6px;background:#e17055;color:#fff;font-size:14px;font-weight:bold;cursor:pointer}
button:hover{background:#f0806a}
a{color:#fab1a0}
table{width:100%;border-collapse:collapse;font-size:12px}
td,th{padding:4px;border-bottom:1px solid #333;text-align:left}
.msg{padding:10px;border-radius:6px;font-size:13px;margin-bottom:16px;text-align:center}
.err{background:#ff6b6b22;color:#ff6b6b}
.ok{background:#00b89422;color:#00b894}
.warn{background:#fdcb6e22;color:#fdcb6e}
.links{text-align:center;font-size:13px;margin-top:16px}
</style>
</head>
<body>
<div class="card">
<h2>{{TITLE}}</h2>
{{BODY}}
</div>
</body>
</html>"""

LOGIN_BODY = """{{MESSAGES}}
<form method="post" action="/employee/login"{{LOCKED}}>
<input type="hidden" name="returnUrl" value="{{RETURN_URL}}">
<label>Account</label>
<input name="account" maxlength="50" value="{{ACCOUNT}}" placeholder="account">
<label>Password</label>
<input name="password" type="password" placeholder="password">
<button type="submit">Sign in</button>
</form>
<div class="links"><a href="/employee/forgot-password">Forgot your password?</a></div>
{{EMPLOYEE_LISTS}}"""

FORGOT_PASSWORD_BODY = """{{MESSAGES}}
<form method="post" action="/employee/forgot-password">
<label>Account or email</label>
<input name="accountOrEmail" maxlength="100" value="{{ACCOUNT_OR_EMAIL}}" placeholder="account or email">
<button type="submit">Send a new password</button>
</form>
<div class="links"><a href="/employee/login">Back to sign in</a></div>"""

SELECT_PAGE_BODY = """{{MESSAGES}}
<table>
<tr><th>Employee</th><td>{{NAME}} ({{ACCOUNT}})</td></tr>
<tr><th>Role</th><td>{{ROLE}}</td></tr>
<tr><th>Store</th><td>{{STORE_ID}}</td></tr>
<tr><th>Signed in at</th><td>{{LOGIN_TIME}}</td></tr>
</table>
<div class="links">
<a href="/api/v1/announcements/active">Active announcements</a> |
<a href="/api/v1/employees/me">My account</a> |
<a href="/employee/logout">Sign out</a>
</div>"""

_ROLE_LABELS: dict[EmployeeRole, str] = {
    EmployeeRole.HEADQUARTERS_ADMIN: "Headquarters admin",
    EmployeeRole.MANAGER: "Store manager",
    EmployeeRole.STAFF: "Staff",
}


def _page(title: str, body: str, status_code: int = 200) -> HTMLResponse:
    html: str = (
        PAGE_HTML.replace("{{TITLE}}", escape(title))
        .replace("{{APP_NAME}}", escape(settings.APP_NAME))
        .replace("{{BODY}}", body)
    )
    return HTMLResponse(html, status_code=status_code)


def render_messages(
    success: str | None = None,
    error: str | None = None,
    warning: str | None = None,
    errors: list[str] | None = None,
) -> str:
    """배너 메시지 HTML을 생성합니다 (Banner HTML for flash and validation messages)."""
    parts: list[str] = []
    if success:
        parts.append(f'<div class="msg ok">{escape(success)}</div>')
    if error:
        parts.append(f'<div class="msg err">{escape(error)}</div>')
    if warning:
        parts.append(f'<div class="msg warn">{escape(warning)}</div>')
    for message in errors or []:
        parts.append(f'<div class="msg err">{escape(message)}</div>')
    return "\n".join(parts)


def _employee_table(title: str, employees: list[EmployeeDTO]) -> str:
    rows: str = "".join(
        f"<tr><td>{escape(e.account)}</td><td>{escape(e.username)}</td>"
        f"<td>{escape(_ROLE_LABELS.get(e.role, e.role.value))}</td>"
        f"<td>{e.login_failure_count}</td></tr>"
        for e in employees
    )
    return (
        f"<h3>{escape(title)} ({len(employees)})</h3>"
        "<table><tr><th>Account</th><th>Name</th><th>Role</th><th>Failures</th></tr>"
        f"{rows}</table>"
    )


def render_login(
    *,
    account: str = "",
    return_url: str = "",
    messages: str = "",
    locked: bool = False,
    active: list[EmployeeDTO] | None = None,
    inactive: list[EmployeeDTO] | None = None,
    list_error: str | None = None,
) -> HTMLResponse:
    """로그인 화면을 렌더링합니다.

    Render the sign-in page. ``locked`` marks the form so the page can show
    the account as locked; the helper lists show active and inactive
    employees, or ``list_error`` when they could not be loaded.
    """
    if list_error:
        lists: str = f'<h3>Employees</h3><div class="msg err">{escape(list_error)}</div>'
    else:
        lists = _employee_table("Active employees", active or []) + _employee_table(
            "Inactive employees", inactive or []
        )

    body: str = (
        LOGIN_BODY.replace("{{MESSAGES}}", messages)
        .replace("{{LOCKED}}", ' data-locked="true"' if locked else "")
        .replace("{{RETURN_URL}}", escape(return_url))
        .replace("{{ACCOUNT}}", escape(account))
        .replace("{{EMPLOYEE_LISTS}}", lists)
    )
    return _page("Employee sign in", body)


def render_forgot_password(
    *,
    account_or_email: str = "",
    messages: str = "",
) -> HTMLResponse:
    """비밀번호 재설정 화면을 렌더링합니다 (Render the forgot-password page)."""
    body: str = FORGOT_PASSWORD_BODY.replace("{{MESSAGES}}", messages).replace(
        "{{ACCOUNT_OR_EMAIL}}", escape(account_or_email)
    )
    return _page("Forgot password", body)


def render_select_page(current: EmployeeSession, messages: str = "") -> HTMLResponse:
    """백오피스 홈 화면을 렌더링합니다 (Render the back-office home page)."""
    body: str = (
        SELECT_PAGE_BODY.replace("{{MESSAGES}}", messages)
        .replace("{{NAME}}", escape(current.employee_name))
        .replace("{{ACCOUNT}}", escape(current.employee_account))
        .replace("{{ROLE}}", escape(_ROLE_LABELS.get(current.employee_role, str(current.employee_role))))
        .replace("{{STORE_ID}}", escape(str(current.store_id)))
        .replace("{{LOGIN_TIME}}", escape(current.login_time.strftime("%Y-%m-%d %H:%M")))
    )
    return _page("Back-office", body)
