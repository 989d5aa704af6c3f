# request_context: 요청 컨텍스트 의존성
# TimingMiddleware가 기록한 요청 시각에 대한 접근을 제공합니다.

from datetime import datetime, timezone
from fastapi import Request

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def get_request_time(request: Request) -> datetime:
    """
    요청 시각을 datetime 객체로 반환

    미들웨어가 설정되지 않은 경우(단위 테스트 등) 현재 UTC 시간을 반환
    """
    request_time = getattr(request.state, "request_time", None)
    if isinstance(request_time, datetime):
        return request_time
    return datetime.now(timezone.utc)


def get_request_timestamp(request: Request) -> str:
    """요청 시각을 ISO 8601 형식의 문자열로 반환"""
    return get_request_time(request).strftime(TIMESTAMP_FORMAT)
