"""policy_controller: 비밀번호 정책 관련 컨트롤러 모듈.

비밀번호 검증, 수정, 생성 및 정책 조회 요청을 처리합니다.
엔진 결과는 항상 200 응답으로 반환되며, 호출자는 valid 값을 확인해야 합니다.
"""

import logging

from fastapi import Request

from core.config import settings
from dependencies.request_context import get_request_timestamp
from models.policy_models import CHAR_CLASSES
from schemas.common import create_response
from schemas.policy_schemas import FixPasswordRequest, ValidatePasswordRequest
from services import fixer_service, generator_service, validator_service
from utils.exceptions import bad_request_error

logger = logging.getLogger("api")


async def validate_password(
    password_data: ValidatePasswordRequest, request: Request
) -> dict:
    """비밀번호를 정책 규칙으로 검증합니다."""
    timestamp = get_request_timestamp(request)

    result = validator_service.validate(password_data.password)

    return create_response(
        "PASSWORD_VALIDATED",
        "비밀번호 검증이 완료되었습니다.",
        data=result.to_dict(),
        timestamp=timestamp,
    )


async def fix_password(password_data: FixPasswordRequest, request: Request) -> dict:
    """비밀번호를 최소 변경으로 수정합니다.

    Raises:
        HTTPException: 비밀번호가 비어 있는 경우 400 Bad Request.
    """
    timestamp = get_request_timestamp(request)

    if not password_data.password:
        raise bad_request_error(
            "empty_password", timestamp, "수정할 비밀번호를 입력해주세요."
        )

    result = fixer_service.fix(password_data.password)

    if not result.valid:
        logger.warning(
            f"비밀번호 수정 불완전: length={len(result.original)}, changes={len(result.changes)}"
        )
        return create_response(
            "PASSWORD_FIX_INCOMPLETE",
            "비밀번호를 정책에 맞게 수정하지 못했습니다.",
            data=result.to_dict(),
            timestamp=timestamp,
        )

    return create_response(
        "PASSWORD_FIXED",
        "비밀번호 수정이 완료되었습니다.",
        data=result.to_dict(),
        timestamp=timestamp,
    )


async def generate_password(length: int | None, request: Request) -> dict:
    """정책을 충족하는 비밀번호를 생성합니다.

    범위를 벗어난 길이는 에러 없이 [8, 40]으로 보정됩니다.
    """
    timestamp = get_request_timestamp(request)

    if length is None:
        length = settings.DEFAULT_GENERATE_LENGTH

    result = generator_service.generate(length)

    if not result.valid:
        logger.error(f"비밀번호 생성 실패: requested_length={length}")
        return create_response(
            "PASSWORD_GENERATION_FAILED",
            "비밀번호 생성에 실패했습니다. 다시 시도해주세요.",
            data=result.to_dict(),
            timestamp=timestamp,
        )

    return create_response(
        "PASSWORD_GENERATED",
        "비밀번호가 생성되었습니다.",
        data=result.to_dict(),
        timestamp=timestamp,
    )


async def get_policy(request: Request) -> dict:
    """비밀번호 정책 규칙과 문자 클래스를 조회합니다."""
    timestamp = get_request_timestamp(request)

    return create_response(
        "POLICY_RETRIEVED",
        "비밀번호 정책 조회에 성공했습니다.",
        data={
            "rules": [
                {"id": rule.id, "name": rule.name, "description": rule.description}
                for rule in validator_service.POLICY_RULES
            ],
            "char_classes": {cls.value: chars for cls, chars in CHAR_CLASSES.items()},
            "generate_length": {
                "min": generator_service.MIN_GENERATE_LENGTH,
                "max": generator_service.MAX_GENERATE_LENGTH,
                "default": settings.DEFAULT_GENERATE_LENGTH,
            },
        },
        timestamp=timestamp,
    )
