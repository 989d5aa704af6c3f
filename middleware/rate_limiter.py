"""rate_limiter: API 요청 속도 제한 미들웨어.

비밀번호 검증/수정 엔드포인트 남용을 막기 위한 IP 기반 Rate Limiting을 제공합니다.

- 슬라이딩 윈도우 방식 (IP별 요청 시각 목록)
- 최대 추적 IP 수 제한 (오래된 IP 일괄 제거)
- X-Forwarded-For 검증 및 신뢰 프록시 처리
"""

from collections import defaultdict
from datetime import datetime, timedelta
from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
import asyncio
import ipaddress
import logging
import os

from core.config import settings

logger = logging.getLogger(__name__)


def is_valid_ip(ip_str: str) -> bool:
    """IPv4/IPv6 주소 형식인지 확인합니다."""
    try:
        ipaddress.ip_address(ip_str)
        return True
    except ValueError:
        return False


class RateLimiter:
    """메모리 기반 Rate Limiter.

    IP 주소별로 윈도우 내 요청 시각을 추적합니다.
    추적 IP 수가 상한에 도달하면 마지막 요청이 가장 오래된 IP부터 10%를 일괄 제거합니다.
    """

    def __init__(self, max_tracked_ips: int | None = None):
        """RateLimiter 초기화.

        Args:
            max_tracked_ips: 최대 추적 IP 수 (기본: settings.RATE_LIMIT_MAX_IPS).
        """
        self._requests: dict[str, list[datetime]] = defaultdict(list)
        self._lock = asyncio.Lock()
        self.max_tracked_ips = (
            max_tracked_ips if max_tracked_ips is not None else settings.RATE_LIMIT_MAX_IPS
        )

    def _evict_oldest(self) -> None:
        eviction_count = max(1, self.max_tracked_ips // 10)
        oldest_first = sorted(
            self._requests,
            key=lambda ip: self._requests[ip][-1] if self._requests[ip] else datetime.min,
        )
        for ip in oldest_first[:eviction_count]:
            del self._requests[ip]

        logger.warning(
            f"Rate Limiter 배치 제거: {eviction_count}개 IP 제거 "
            f"(남은 IP: {len(self._requests)}개)"
        )

    async def is_rate_limited(
        self, ip: str, max_requests: int, window_seconds: int
    ) -> tuple[bool, int]:
        """요청이 속도 제한에 걸리는지 확인하고, 허용되면 요청을 기록합니다.

        Args:
            ip: 클라이언트 IP 주소.
            max_requests: 윈도우 내 최대 요청 수.
            window_seconds: 시간 윈도우 (초).

        Returns:
            (제한 여부, 남은 요청 수) 튜플.
        """
        async with self._lock:
            if ip not in self._requests and len(self._requests) >= self.max_tracked_ips:
                self._evict_oldest()

            now = datetime.now()
            window_start = now - timedelta(seconds=window_seconds)
            recent = [t for t in self._requests[ip] if t > window_start]
            self._requests[ip] = recent

            # 식별 불가 IP는 모두 같은 키를 공유하므로 엄격하게 제한
            if ip in ("unknown", "0.0.0.0", ""):
                max_requests = min(max_requests, 10)

            if len(recent) >= max_requests:
                return True, 0

            recent.append(now)
            return False, max_requests - len(recent)


# 전역 Rate Limiter 인스턴스
_rate_limiter = RateLimiter()


# 엔드포인트별 Rate Limit 설정 (POST만 적용)
RATE_LIMIT_CONFIG = {
    "/v1/passwords/fix": {"max_requests": 30, "window_seconds": 60},
    "/v1/passwords/validation": {"max_requests": 60, "window_seconds": 60},
}

# 기본 Rate Limit (설정되지 않은 엔드포인트)
DEFAULT_RATE_LIMIT = {"max_requests": 100, "window_seconds": 60}


def get_client_ip(request: Request) -> str:
    """클라이언트 IP를 추출합니다.

    처리 순서:
    1. X-Forwarded-For 헤더 (신뢰 프록시가 설정되면 오른쪽부터 프록시 제거)
    2. X-Real-IP 헤더
    3. 직접 연결된 클라이언트 IP

    Args:
        request: FastAPI Request 객체.

    Returns:
        클라이언트 IP 주소. 추출 실패 시 "unknown".
    """
    x_forwarded_for = request.headers.get("X-Forwarded-For")
    if x_forwarded_for:
        ips = [ip.strip() for ip in x_forwarded_for.split(",")]
        ips = [ip for ip in ips if ip and is_valid_ip(ip)]

        if ips:
            trusted_proxies = settings.TRUSTED_PROXIES
            if trusted_proxies:
                for ip in reversed(ips):
                    if ip not in trusted_proxies:
                        return ip
            return ips[0]

        logger.warning(f"X-Forwarded-For 헤더에 유효한 IP 없음: {x_forwarded_for}")
    else:
        x_real_ip = request.headers.get("X-Real-IP")
        if x_real_ip:
            return x_real_ip.strip()

    if request.client and request.client.host:
        return request.client.host

    logger.warning("클라이언트 IP 추출 실패, 'unknown' 반환")
    return "unknown"


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Rate Limiting 미들웨어.

    IP 기반으로 API 요청 속도를 제한합니다.
    """

    async def dispatch(self, request: Request, call_next):
        # 테스트 환경, GET/OPTIONS 요청, Health check는 제한하지 않음
        if (
            os.environ.get("TESTING") == "true"
            or request.method in ("GET", "OPTIONS")
            or request.url.path == "/health"
        ):
            return await call_next(request)

        config = RATE_LIMIT_CONFIG.get(request.url.path, DEFAULT_RATE_LIMIT)

        is_limited, remaining = await _rate_limiter.is_rate_limited(
            ip=get_client_ip(request),
            max_requests=config["max_requests"],
            window_seconds=config["window_seconds"],
        )

        if is_limited:
            return JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content={
                    "error": "too_many_requests",
                    "message": "요청이 너무 많습니다. 잠시 후 다시 시도해주세요.",
                    "retry_after_seconds": config["window_seconds"],
                },
                headers={
                    "Retry-After": str(config["window_seconds"]),
                    "X-RateLimit-Limit": str(config["max_requests"]),
                    "X-RateLimit-Remaining": "0",
                },
            )

        response = await call_next(request)

        response.headers["X-RateLimit-Limit"] = str(config["max_requests"])
        response.headers["X-RateLimit-Remaining"] = str(remaining)

        return response
