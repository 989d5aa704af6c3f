"""policy_router: 비밀번호 정책 관련 라우터 모듈.

비밀번호 검증, 수정, 생성, 정책 조회 엔드포인트를 제공합니다.
"""

from fastapi import APIRouter, Query, Request, status
from controllers import policy_controller
from schemas.policy_schemas import FixPasswordRequest, ValidatePasswordRequest


policy_router = APIRouter(prefix="/v1/passwords", tags=["passwords"])
"""비밀번호 정책 관련 라우터 인스턴스."""


@policy_router.post("/validation", status_code=status.HTTP_200_OK)
async def validate_password(
    password_data: ValidatePasswordRequest, request: Request
) -> dict:
    """비밀번호를 6개 정책 규칙으로 검증합니다.

    Returns:
        전체 통과 여부와 규칙별 결과를 담은 응답.
    """
    return await policy_controller.validate_password(password_data, request)


@policy_router.post("/fix", status_code=status.HTTP_200_OK)
async def fix_password(password_data: FixPasswordRequest, request: Request) -> dict:
    """비밀번호를 최소 변경으로 정책에 맞게 수정합니다.

    Returns:
        원본, 수정본, 변경 목록, 유효성을 담은 응답.
    """
    return await policy_controller.fix_password(password_data, request)


@policy_router.get("/generate", status_code=status.HTTP_200_OK)
async def generate_password(
    request: Request,
    length: int | None = Query(None, description="비밀번호 길이 (8~40으로 보정)"),
) -> dict:
    """정책을 충족하는 새 비밀번호를 생성합니다."""
    return await policy_controller.generate_password(length, request)


@policy_router.get("/policy", status_code=status.HTTP_200_OK)
async def get_policy(request: Request) -> dict:
    """비밀번호 정책 규칙과 허용 문자 집합을 조회합니다."""
    return await policy_controller.get_policy(request)
