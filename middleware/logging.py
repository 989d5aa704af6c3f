# logging: 요청/응답 로깅 미들웨어
# 비밀번호 API 요청의 메소드, 경로, 상태 코드, 처리 시간을 기록한다.

import logging
import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger("api")
logger.setLevel(logging.INFO)

if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(handler)

# 로드밸런서가 주기적으로 호출하는 경로는 기록하지 않음
SKIP_LOG_PATHS = frozenset({"/health"})


def describe_request(request: Request) -> str:
    """로그에 남길 요청 설명을 만듭니다.

    쿼리 문자열과 본문은 비밀번호나 생성 옵션을 담을 수 있으므로 경로만 사용합니다.
    """
    return f"{request.method} {request.url.path}"


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    요청/응답 로깅 미들웨어

    request.body()를 읽지 않으므로 비밀번호가 로그에 남지 않는다.
    """

    async def dispatch(self, request: Request, call_next):
        if request.url.path in SKIP_LOG_PATHS:
            return await call_next(request)

        description = describe_request(request)
        started = time.perf_counter()
        logger.info(f"-> {description}")

        response = await call_next(request)

        elapsed = time.perf_counter() - started
        log = logger.warning if response.status_code >= 400 else logger.info
        log(f"<- {description} - Status: {response.status_code} - Time: {elapsed:.3f}s")

        return response
