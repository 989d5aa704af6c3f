"""validator_service: 비밀번호 정책 검증 서비스.

문자 분류와 6개 정책 규칙 평가를 담당합니다.
"""

from collections import Counter

from models.policy_models import (
    CharacterClass,
    MAX_REPEAT,
    MIN_LENGTH,
    PolicyRule,
    RuleResult,
    SPECIAL_CHARS,
    ValidationResult,
    Violator,
)


def classify_char(ch: str) -> CharacterClass:
    """단일 문자의 문자 클래스를 반환합니다.

    str.isupper() 등은 유니코드 전체를 대상으로 하므로 ASCII 범위 비교를 사용합니다.
    """
    if "A" <= ch <= "Z":
        return CharacterClass.UPPERCASE
    if "a" <= ch <= "z":
        return CharacterClass.LOWERCASE
    if "0" <= ch <= "9":
        return CharacterClass.DIGIT
    if ch in SPECIAL_CHARS:
        return CharacterClass.SPECIAL
    return CharacterClass.UNKNOWN


def count_chars(password: str) -> Counter:
    """문자별 출현 횟수를 셉니다 (대소문자 구분)."""
    return Counter(password)


def find_violators(counts: Counter) -> list[Violator]:
    """반복 제한을 초과한 문자를 첫 출현 순서대로 반환합니다."""
    return [Violator(ch, n) for ch, n in counts.items() if n > MAX_REPEAT]


def _has_class(password: str, char_class: CharacterClass) -> bool:
    return any(classify_char(ch) is char_class for ch in password)


POLICY_RULES: tuple[PolicyRule, ...] = (
    PolicyRule(
        1,
        "minLength",
        f"At least {MIN_LENGTH} characters",
        lambda pw: len(pw) >= MIN_LENGTH,
    ),
    PolicyRule(
        2,
        "uppercase",
        "At least 1 uppercase letter",
        lambda pw: _has_class(pw, CharacterClass.UPPERCASE),
    ),
    PolicyRule(
        3,
        "lowercase",
        "At least 1 lowercase letter",
        lambda pw: _has_class(pw, CharacterClass.LOWERCASE),
    ),
    PolicyRule(
        4,
        "special",
        f"At least 1 special character ({SPECIAL_CHARS})",
        lambda pw: _has_class(pw, CharacterClass.SPECIAL),
    ),
    PolicyRule(
        5,
        "digit",
        "At least 1 digit",
        lambda pw: _has_class(pw, CharacterClass.DIGIT),
    ),
    PolicyRule(
        6,
        "maxRepeat",
        f"No character appears more than {MAX_REPEAT} times",
        lambda pw: not find_violators(count_chars(pw)),
    ),
)
"""고정된 비밀번호 정책 규칙 (규칙 번호 순)."""

_REPEAT_RULE_ID = 6


def validate(password: str) -> ValidationResult:
    """비밀번호를 6개 정책 규칙으로 검증합니다.

    모든 입력에 대해 예외 없이 결과를 반환합니다.

    Args:
        password: 검증할 비밀번호 (빈 문자열 허용).

    Returns:
        전체 통과 여부와 규칙별 결과를 담은 ValidationResult.
    """
    # 규칙 6은 한 번의 집계 결과로 통과 여부와 상세 정보를 함께 계산
    violators = tuple(find_violators(count_chars(password)))

    results = []
    for rule in POLICY_RULES:
        if rule.id == _REPEAT_RULE_ID:
            results.append(
                RuleResult(
                    rule.id,
                    rule.name,
                    rule.description,
                    passed=not violators,
                    violators=violators,
                )
            )
        else:
            results.append(
                RuleResult(rule.id, rule.name, rule.description, rule.predicate(password))
            )

    return ValidationResult(
        overall=all(r.passed for r in results),
        rules=tuple(results),
    )
