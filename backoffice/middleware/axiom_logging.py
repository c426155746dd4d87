"""Axiom 요청 로깅 미들웨어.

Axiom request logging middleware.
Sends one structured event per request (method, path, parameters, body,
status, duration, error reason) to an Axiom dataset. Sensitive fields such as
passwords, session tokens and secrets are masked in JSON and form bodies.
When Axiom is not configured the middleware passes requests through.
"""

import json
import logging
import re
import time
from typing import Any
from urllib.parse import parse_qsl

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from backoffice.config import settings

logger = logging.getLogger(__name__)

# 마스킹 대상 필드 패턴 — Fields to mask in bodies and query strings
_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|session|authorization|api_key|apikey|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

_MAX_BODY_CHARS = 2000
_MAX_ERROR_CHARS = 500


def _mask(data: Any, depth: int = 0) -> Any:
    """민감 필드 재귀 마스킹 — Recursively mask sensitive keys in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(str(k)) else _mask(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [_mask(item, depth + 1) for item in data[:20]]
    if isinstance(data, str) and len(data) > _MAX_BODY_CHARS:
        return data[:_MAX_BODY_CHARS] + "...(truncated)"
    return data


def _parse_body(content_type: str, body: bytes) -> Any:
    """요청 본문 파싱 — JSON 또는 폼 본문을 마스킹된 dict로 변환.

    Parse a JSON or urlencoded form body into a masked structure.
    """
    if not body:
        return None
    try:
        if content_type.startswith("application/x-www-form-urlencoded"):
            return _mask(dict(parse_qsl(body.decode("utf-8"), keep_blank_values=True)))
        if content_type.startswith("application/json"):
            return _mask(json.loads(body))
    except (json.JSONDecodeError, UnicodeDecodeError):
        return "(unparseable body)"
    return f"({content_type or 'unknown'} body, {len(body)} bytes)"


def _error_detail(body: bytes) -> str:
    """오류 응답 본문에서 사유 추출 (Error reason from a JSON or text response body)."""
    try:
        data = json.loads(body)
        detail = data.get("detail", data) if isinstance(data, dict) else data
        text = detail if isinstance(detail, str) else json.dumps(detail, default=str)
    except (json.JSONDecodeError, UnicodeDecodeError):
        text = body.decode("utf-8", errors="replace")
    if len(text) > _MAX_ERROR_CHARS:
        text = text[:_MAX_ERROR_CHARS] + "..."
    return text


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 요청/응답을 Axiom에 로깅하는 미들웨어.

    Middleware that logs every request and response to Axiom.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET

        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in _SKIP_PATHS or self._client is None:
            return await call_next(request)

        start_time = time.time()
        event: dict[str, Any] = {
            "method": request.method,
            "path": request.url.path,
            "client": request.client.host if request.client else None,
            "signed_in": settings.SESSION_COOKIE_NAME in request.cookies,
        }
        if request.query_params:
            event["query_params"] = _mask(dict(request.query_params))

        if request.method in ("POST", "PUT", "PATCH"):
            body = _parse_body(request.headers.get("content-type", ""), await request.body())
            if body is not None:
                event["request_body"] = body

        status_code: int = 500
        try:
            response = await call_next(request)
            status_code = response.status_code

            if status_code >= 400:
                resp_body = b""
                async for chunk in response.body_iterator:
                    resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                event["error"] = _error_detail(resp_body)

                # 소비한 body를 다시 응답으로 반환 — Re-wrap the consumed body
                response = Response(
                    content=resp_body,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
            elif 300 <= status_code < 400:
                event["redirect_to"] = response.headers.get("location")
        except Exception as exc:
            event["error"] = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            event["status_code"] = status_code
            event["duration_ms"] = round((time.time() - start_time) * 1000, 2)
            try:
                self._client.ingest_events(self._dataset, [event])
            except Exception:
                logger.warning("Failed to ship request log to Axiom", exc_info=True)

        return response
