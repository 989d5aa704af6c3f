"""models: 비밀번호 정책 데이터 클래스 패키지.

문자 클래스, 문자 집합 상수, 정책 규칙 및 검증/수정/생성 결과 데이터 클래스를 제공합니다.
"""

from .policy_models import (
    CharacterClass,
    UPPERCASE,
    LOWERCASE,
    DIGITS,
    SPECIAL_CHARS,
    ALL_CHARS,
    CHAR_CLASSES,
    REQUIRED_CLASSES,
    MIN_LENGTH,
    MAX_REPEAT,
    PolicyRule,
    Violator,
    RuleResult,
    ValidationResult,
    Change,
    FixResult,
    GenerateResult,
)

__all__ = [
    # 문자 클래스 및 상수
    "CharacterClass",
    "UPPERCASE",
    "LOWERCASE",
    "DIGITS",
    "SPECIAL_CHARS",
    "ALL_CHARS",
    "CHAR_CLASSES",
    "REQUIRED_CLASSES",
    "MIN_LENGTH",
    "MAX_REPEAT",
    # 정책 규칙
    "PolicyRule",
    # 결과 데이터 클래스
    "Violator",
    "RuleResult",
    "ValidationResult",
    "Change",
    "FixResult",
    "GenerateResult",
]
