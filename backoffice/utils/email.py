"""이메일 발송 유틸리티 — SMTP (aiosmtplib).

SMTP 설정은 config.py의 SMTP_* 환경 변수로 관리.
"""

from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from html import escape

import aiosmtplib

from backoffice.config import settings


async def send_email(
    to: str,
    subject: str,
    html: str,
    text: str | None = None,
) -> None:
    """이메일 발송.

    Args:
        to: 수신자 이메일 주소
        subject: 제목
        html: HTML 본문
        text: 플레인텍스트 본문 (없으면 생략)
    """
    msg = MIMEMultipart("alternative")
    msg["Subject"] = subject
    msg["From"] = f"{settings.SMTP_FROM_NAME} <{settings.SMTP_FROM_EMAIL}>"
    msg["To"] = to

    if text:
        msg.attach(MIMEText(text, "plain", "utf-8"))
    msg.attach(MIMEText(html, "html", "utf-8"))

    await aiosmtplib.send(
        msg,
        hostname=settings.SMTP_HOST,
        port=settings.SMTP_PORT,
        username=settings.SMTP_USER,
        password=settings.SMTP_PASSWORD,
        start_tls=True,
    )


async def send_password_reset_email(to: str, name: str, new_password: str) -> None:
    """새 임시 비밀번호 안내 메일 발송.

    Send the temporary password generated by the forgot-password flow.
    """
    html = (
        f"<p>Hello {escape(name)},</p>"
        f"<p>Your EatFast back-office password has been reset.</p>"
        f"<p>Temporary password: <strong>{escape(new_password)}</strong></p>"
        f"<p>Please sign in and change it as soon as possible.</p>"
    )
    text = (
        f"Hello {name},\n\n"
        f"Your EatFast back-office password has been reset.\n"
        f"Temporary password: {new_password}\n\n"
        f"Please sign in and change it as soon as possible.\n"
    )
    await send_email(to, "[EatFast] Password reset", html, text)
