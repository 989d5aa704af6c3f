"""services: 비밀번호 정책 엔진 패키지.

검증, 생성, 수정 세 가지 진입점을 제공합니다.

Modules:
    validator_service: 문자 분류 및 6개 정책 규칙 검증
    generator_service: 정책을 충족하는 비밀번호 생성
    fixer_service: 최소 변경 비밀번호 수정
"""

from .validator_service import validate, classify_char, count_chars, POLICY_RULES
from .generator_service import generate, clamp_length
from .fixer_service import fix

__all__ = [
    "validate",
    "classify_char",
    "count_chars",
    "POLICY_RULES",
    "generate",
    "clamp_length",
    "fix",
]
