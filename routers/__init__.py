"""routers: FastAPI 라우터 패키지.

비밀번호 정책 API 엔드포인트를 정의하는 라우터 모듈을 제공합니다.
"""

from .policy_router import policy_router

__all__ = [
    "policy_router",
]
