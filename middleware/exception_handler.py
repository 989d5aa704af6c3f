"""exception_handler: 전역 예외 처리 핸들러 모듈.

처리되지 않은 예외와 요청 유효성 검사 실패를 일관된 형식의 응답으로 변환합니다.
"""

import uuid
import logging
import traceback
from logging.handlers import RotatingFileHandler
from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from dependencies.request_context import get_request_timestamp


logger = logging.getLogger("api")

# 에러 전용 파일 로거 설정
error_logger = logging.getLogger("api.error")
error_logger.setLevel(logging.ERROR)

# RotatingFileHandler: 10MB 단위로 로테이션, 최대 5개 백업 파일
if not error_logger.handlers:
    error_file_handler = RotatingFileHandler(
        "server_error.log",
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding="utf-8",
        delay=True,
    )
    error_file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    )
    error_logger.addHandler(error_file_handler)

REDACTED = "<redacted>"


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """전역 예외 처리 핸들러.

    모든 예외를 잡아서 일관된 형식의 500 에러 응답을 반환합니다.
    프로덕션 환경(DEBUG=False)에서는 상세 에러 정보를 숨깁니다.

    Args:
        request: FastAPI Request 객체.
        exc: 발생한 예외.

    Returns:
        500 에러 JSON 응답.
    """
    from core.config import settings

    tracking_id = str(uuid.uuid4())
    timestamp = get_request_timestamp(request)

    logger.error(f"[{tracking_id}] Unhandled exception: {exc}")
    error_logger.error(
        f"[{tracking_id}] Unhandled exception: {exc}\n{traceback.format_exc()}"
    )

    content = {
        "trackingID": tracking_id,
        "error": "Internal Server Error",
        "timestamp": timestamp,
    }

    # DEBUG 모드에서만 상세 정보 포함
    if settings.DEBUG:
        content["detail"] = str(exc)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=content,
    )


def sanitize_validation_errors(errors: list[dict]) -> list[dict]:
    """유효성 검사 오류에서 입력값을 제거합니다.

    입력값은 비밀번호일 수 있으므로 응답에 되돌려 보내지 않습니다.
    ctx 안의 예외 객체는 문자열로 변환합니다.

    Args:
        errors: RequestValidationError.errors() 결과.

    Returns:
        입력값이 가려진 오류 목록 (원본은 변경하지 않음).
    """
    sanitized = []
    for error in errors:
        error_copy = dict(error)
        if "input" in error_copy:
            error_copy["input"] = REDACTED
        if isinstance(error_copy.get("ctx"), dict):
            error_copy["ctx"] = {
                k: v if isinstance(v, (str, int, float, bool)) else str(v)
                for k, v in error_copy["ctx"].items()
            }
        sanitized.append(error_copy)
    return sanitized


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """요청 데이터 유효성 검사 예외 처리 핸들러.

    Pydantic 유효성 검사 실패 시 호출됩니다.

    Args:
        request: FastAPI Request 객체.
        exc: 발생한 Validation 예외.

    Returns:
        422 Unprocessable Entity 에러 JSON 응답.
    """
    timestamp = get_request_timestamp(request)

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        content={
            "detail": jsonable_encoder(sanitize_validation_errors(exc.errors())),
            "timestamp": timestamp,
        },
    )
