"""FastAPI 애플리케이션 엔트리포인트 — 로깅, 미들웨어 및 라우터 등록.

FastAPI application entry point — Logging, middleware and router registration.
Mounts the employee sign-in pages under ``/employee`` and the JSON API
under ``/api/v1``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, Response

from backoffice.config import settings
from backoffice.middleware.axiom_logging import AxiomLoggingMiddleware

# 루트 로거 설정 — Root logger configuration (business events go through module loggers)
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Axiom API 로깅 미들웨어 — Axiom request/response logging
# CORS보다 먼저 등록하여 모든 요청을 캡처 (Registered before CORS to capture all requests)
app.add_middleware(AxiomLoggingMiddleware)

# CORS 미들웨어 — 세션 쿠키 전달을 위해 출처를 명시 (Explicit origins so cookies are allowed)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> Response:
    """처리되지 않은 예외 — 로그를 남기고 일반 오류 응답을 반환합니다.

    Log unexpected errors; API routes get a JSON 500, pages a short HTML 500.
    """
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    if request.url.path.startswith("/api/"):
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})
    return HTMLResponse("<p>System error, please try again later</p>", status_code=500)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "ok"}


# ---------------------------------------------------------------------------
# 라우터 등록 — Router registration
# ---------------------------------------------------------------------------
# employee_login_router: 로그인/로그아웃/비밀번호 재설정 화면 (HTML pages)
# api_router: 세션 인증이 필요한 JSON API (Session-protected JSON API)
from backoffice.api import api_router  # noqa: E402
from backoffice.views.employee_login import router as employee_login_router  # noqa: E402

app.include_router(employee_login_router, prefix="/employee", tags=["Employee Login"])
app.include_router(api_router, prefix="/api/v1")
