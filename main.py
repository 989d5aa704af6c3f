"""main: FastAPI 애플리케이션의 메인 진입점.

애플리케이션 설정, 미들웨어 구성, 라우터 등록, 전역 예외 핸들러를 설정합니다.
"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware
from mangum import Mangum

from routers.policy_router import policy_router
from middleware import TimingMiddleware, LoggingMiddleware, RateLimitMiddleware
from middleware.exception_handler import (
    global_exception_handler,
    request_validation_exception_handler,
)
from core.config import settings


logger = logging.getLogger("api")

app = FastAPI(
    title="Password Policy API",
    description="비밀번호 정책 검증/수정/생성 API 서버",
    version="1.0.0",
)

# 각 요청에 타임스탬프를 주입하여 request.state에서 접근 가능하게 함
app.add_middleware(TimingMiddleware)

app.add_middleware(LoggingMiddleware)

# 검증/수정 엔드포인트 남용 방지를 위한 IP 기반 요청 속도 제한
app.add_middleware(RateLimitMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

# 리버스 프록시 뒤에서 X-Forwarded-For를 신뢰할 프록시 (명시적 IP만 허용)
_proxy_trusted_hosts = list(settings.TRUSTED_PROXIES) if settings.TRUSTED_PROXIES else ["127.0.0.1", "::1"]
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts=_proxy_trusted_hosts)

app.include_router(policy_router)


@app.get("/health", status_code=200)
async def health_check():
    """서버 상태 확인."""
    return {"status": "ok"}


app.add_exception_handler(Exception, global_exception_handler)
app.add_exception_handler(RequestValidationError, request_validation_exception_handler)  # type: ignore[arg-type]

# AWS 핸들러 설정
handler = Mangum(app)
