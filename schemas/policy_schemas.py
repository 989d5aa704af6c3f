"""policy_schemas: 비밀번호 정책 API 관련 Pydantic 모델 모듈.

검증, 수정 요청 스키마를 정의합니다.
"""

from pydantic import BaseModel, Field, field_validator

from core.config import settings


def _validate_input_length(v: str) -> str:
    """입력 비밀번호 길이 상한을 검증합니다.

    Args:
        v: 입력된 비밀번호.

    Returns:
        검증된 비밀번호.

    Raises:
        ValueError: 최대 입력 길이를 초과한 경우.
    """
    if len(v) > settings.MAX_PASSWORD_INPUT_LENGTH:
        raise ValueError(
            f"비밀번호는 {settings.MAX_PASSWORD_INPUT_LENGTH}자 이하여야 합니다."
        )
    return v


class ValidatePasswordRequest(BaseModel):
    """비밀번호 검증 요청 모델.

    Attributes:
        password: 검증할 비밀번호 (빈 문자열 허용).
    """

    password: str = Field(..., description="검증할 비밀번호")

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, v: str) -> str:
        return _validate_input_length(v)


class FixPasswordRequest(BaseModel):
    """비밀번호 수정 요청 모델.

    빈 문자열은 컨트롤러에서 400 에러로 처리합니다.
    """

    password: str = Field(..., description="수정할 비밀번호")

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, v: str) -> str:
        return _validate_input_length(v)
