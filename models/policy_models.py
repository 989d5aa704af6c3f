"""policy_models: 비밀번호 정책 데이터 모델 모듈.

문자 클래스, 클래스별 문자 집합, 정책 규칙 및 검증/수정/생성 결과 데이터 클래스를 정의합니다.
모든 값은 프로세스 시작 시 한 번 정의되는 불변 데이터입니다.
"""

import string
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable


class CharacterClass(str, Enum):
    """단일 문자의 문자 클래스."""

    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    DIGIT = "digit"
    SPECIAL = "special"
    UNKNOWN = "unknown"


UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
DIGITS = string.digits
SPECIAL_CHARS = "#?!@$%^&*-"

# 필수 문자 클래스 (규칙 2~5 검사 순서와 동일)
REQUIRED_CLASSES: tuple[CharacterClass, ...] = (
    CharacterClass.UPPERCASE,
    CharacterClass.LOWERCASE,
    CharacterClass.DIGIT,
    CharacterClass.SPECIAL,
)

CHAR_CLASSES: MappingProxyType = MappingProxyType(
    {
        CharacterClass.UPPERCASE: UPPERCASE,
        CharacterClass.LOWERCASE: LOWERCASE,
        CharacterClass.DIGIT: DIGITS,
        CharacterClass.SPECIAL: SPECIAL_CHARS,
    }
)
"""필수 문자 클래스별 허용 문자 집합 (읽기 전용)."""

ALL_CHARS = UPPERCASE + LOWERCASE + DIGITS + SPECIAL_CHARS
"""허용되는 전체 문자 풀 (대문자 + 소문자 + 숫자 + 특수문자, 72자)."""

MIN_LENGTH = 8
MAX_REPEAT = 2


@dataclass(frozen=True)
class PolicyRule:
    """비밀번호 정책 규칙.

    Attributes:
        id: 규칙 번호 (1~6).
        name: 규칙 식별자 (예: 'minLength').
        description: 사용자에게 표시할 규칙 설명.
        predicate: 비밀번호를 받아 규칙 충족 여부를 반환하는 함수.
    """

    id: int
    name: str
    description: str
    predicate: Callable[[str], bool] = field(repr=False, compare=False)


@dataclass(frozen=True)
class Violator:
    """반복 제한(규칙 6)을 초과한 문자."""

    char: str
    count: int

    def __str__(self) -> str:
        return f"'{self.char}' appears {self.count}x"


@dataclass(frozen=True)
class RuleResult:
    """단일 규칙의 검증 결과.

    Attributes:
        id: 규칙 번호.
        name: 규칙 식별자.
        description: 규칙 설명.
        passed: 규칙 충족 여부.
        violators: 규칙 6 위반 문자 목록 (다른 규칙은 항상 빈 튜플).
    """

    id: int
    name: str
    description: str
    passed: bool
    violators: tuple[Violator, ...] = ()

    @property
    def detail(self) -> str | None:
        """위반 상세 정보 (표시용). 위반 문자가 없으면 None."""
        if not self.violators:
            return None
        return ", ".join(str(v) for v in self.violators)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "pass": self.passed,
            "detail": self.detail,
            "violators": [
                {"char": v.char, "count": v.count} for v in self.violators
            ],
        }


@dataclass(frozen=True)
class ValidationResult:
    """비밀번호 검증 결과.

    Attributes:
        overall: 모든 규칙 충족 여부.
        rules: 규칙별 결과 (규칙 번호 1~6 순서 고정).
    """

    overall: bool
    rules: tuple[RuleResult, ...]

    def rule(self, rule_id: int) -> RuleResult:
        """규칙 번호로 결과를 조회합니다.

        Raises:
            KeyError: 존재하지 않는 규칙 번호인 경우.
        """
        for result in self.rules:
            if result.id == rule_id:
                return result
        raise KeyError(rule_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "overall": self.overall,
            "rules": [r.to_dict() for r in self.rules],
        }


@dataclass(frozen=True)
class Change:
    """수정 과정에서 발생한 단일 문자 변경.

    removed가 빈 문자열이면 치환이 아니라 끝에 추가(append)된 것을 의미하며,
    이때 index는 추가 직전의 문자열 길이와 같습니다.
    """

    index: int
    removed: str
    inserted: str

    @property
    def is_append(self) -> bool:
        return self.removed == ""

    def to_dict(self) -> dict[str, Any]:
        return {"index": self.index, "from": self.removed, "to": self.inserted}


@dataclass(frozen=True)
class FixResult:
    """비밀번호 수정 결과.

    Attributes:
        original: 입력 비밀번호.
        fixed: 수정된 비밀번호.
        changes: 적용된 변경 목록 (적용 순서).
        valid: 수정된 비밀번호의 재검증 결과.
    """

    original: str
    fixed: str
    changes: tuple[Change, ...]
    valid: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "original": self.original,
            "fixed": self.fixed,
            "changes": [c.to_dict() for c in self.changes],
            "valid": self.valid,
        }


@dataclass(frozen=True)
class GenerateResult:
    """비밀번호 생성 결과."""

    password: str
    valid: bool

    def to_dict(self) -> dict[str, Any]:
        return {"password": self.password, "length": len(self.password), "valid": self.valid}
