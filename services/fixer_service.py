"""fixer_service: 비밀번호 최소 수정 서비스.

정책을 위반한 비밀번호를 가능한 적은 문자 치환으로 정책에 맞게 수정합니다.

한 번의 시도는 다음 순서로 진행됩니다.
1. 반복 제한 위반 해소 (규칙 6): 초과분만큼 오른쪽 끝의 출현 위치를 치환
2. 누락된 문자 클래스 보충 (규칙 2~5)
3. 최소 길이 보충 (규칙 1): 끝에 문자 추가
4. 남은 허용 외 문자(unknown) 치환

문자별 출현 횟수(Counter)는 모든 치환과 함께 즉시 갱신되어 항상 현재 작업 문자열을 반영합니다.
"""

import logging
from collections import Counter

from models.policy_models import (
    ALL_CHARS,
    CHAR_CLASSES,
    Change,
    CharacterClass,
    FixResult,
    MAX_REPEAT,
    MIN_LENGTH,
    REQUIRED_CLASSES,
)
from services.validator_service import classify_char, count_chars, validate
from utils.secure_random import pick_available

logger = logging.getLogger(__name__)

_MAX_ATTEMPTS = 3


def _replace_at(
    chars: list[str],
    counts: Counter,
    changes: list[Change],
    index: int,
    replacement: str,
) -> None:
    old = chars[index]
    changes.append(Change(index=index, removed=old, inserted=replacement))
    chars[index] = replacement
    counts[old] -= 1
    if counts[old] <= 0:
        del counts[old]
    counts[replacement] += 1


def _append(
    chars: list[str],
    counts: Counter,
    changes: list[Change],
    ch: str,
) -> None:
    changes.append(Change(index=len(chars), removed="", inserted=ch))
    chars.append(ch)
    counts[ch] += 1


def _pick_same_class_or_any(ch: str, counts: Counter) -> str | None:
    char_class = classify_char(ch)
    replacement = None
    if char_class is not CharacterClass.UNKNOWN:
        replacement = pick_available(CHAR_CLASSES[char_class], counts)
    if replacement is None:
        replacement = pick_available(ALL_CHARS, counts)
    return replacement


def _fix_repeats(chars: list[str], counts: Counter, changes: list[Change]) -> None:
    """반복 제한을 초과한 문자의 오른쪽 끝 출현분을 치환합니다."""
    # 위반 문자 목록은 치환 전에 확정
    violators = [(ch, n - MAX_REPEAT) for ch, n in counts.items() if n > MAX_REPEAT]

    for ch, excess in violators:
        indices = [i for i in range(len(chars) - 1, -1, -1) if chars[i] == ch]

        replaced = 0
        for index in indices:
            if replaced >= excess:
                break
            replacement = _pick_same_class_or_any(ch, counts)
            if replacement is None:
                continue
            _replace_at(chars, counts, changes, index, replacement)
            replaced += 1


def _class_counts(chars: list[str]) -> Counter:
    return Counter(
        cls for cls in map(classify_char, chars) if cls is not CharacterClass.UNKNOWN
    )


def _find_donor_index(chars: list[str], target: CharacterClass) -> int:
    """누락 클래스 문자를 넣을 위치를 고릅니다.

    뒤에서부터 탐색하며 unknown 문자를 최우선으로, 그다음 대표 문자가 가장 많은(2개 이상)
    클래스의 위치를 선택합니다. 적절한 위치가 없으면 마지막 위치를 반환합니다.
    """
    class_counts = _class_counts(chars)

    best_index = -1
    best_surplus = 0
    for i in range(len(chars) - 1, -1, -1):
        cls = classify_char(chars[i])
        if cls is target:
            continue
        if cls is CharacterClass.UNKNOWN:
            best_index = i
            break
        surplus = class_counts[cls]
        if surplus > 1 and surplus > best_surplus:
            best_surplus = surplus
            best_index = i

    if best_index == -1:
        best_index = len(chars) - 1
    return best_index


def _fix_missing_classes(chars: list[str], counts: Counter, changes: list[Change]) -> None:
    """누락된 필수 문자 클래스를 기존 위치 치환으로 보충합니다."""
    for char_class in REQUIRED_CLASSES:
        if any(classify_char(ch) is char_class for ch in chars):
            continue

        replacement = pick_available(CHAR_CLASSES[char_class], counts)
        if replacement is None:
            continue

        # 빈 문자열은 치환할 위치가 없으므로 추가
        if not chars:
            _append(chars, counts, changes, replacement)
            continue

        index = _find_donor_index(chars, char_class)
        _replace_at(chars, counts, changes, index, replacement)


def _fix_length(chars: list[str], counts: Counter, changes: list[Change]) -> None:
    while len(chars) < MIN_LENGTH:
        ch = pick_available(ALL_CHARS, counts)
        if ch is None:
            break
        _append(chars, counts, changes, ch)


def _fix_unknowns(chars: list[str], counts: Counter, changes: list[Change]) -> None:
    for i in range(len(chars)):
        if classify_char(chars[i]) is not CharacterClass.UNKNOWN:
            continue
        replacement = pick_available(ALL_CHARS, counts)
        if replacement is not None:
            _replace_at(chars, counts, changes, i, replacement)


def _try_fix(password: str) -> FixResult:
    chars = list(password)
    counts = count_chars(password)
    changes: list[Change] = []

    _fix_repeats(chars, counts, changes)
    _fix_missing_classes(chars, counts, changes)
    _fix_length(chars, counts, changes)
    _fix_unknowns(chars, counts, changes)

    fixed = "".join(chars)
    return FixResult(
        original=password,
        fixed=fixed,
        changes=tuple(changes),
        valid=validate(fixed).overall,
    )


def fix(password: str) -> FixResult:
    """비밀번호를 최소한의 변경으로 정책에 맞게 수정합니다.

    최대 3회 시도하여 첫 번째로 유효한 결과를 반환합니다. 모두 실패하면 마지막 시도의
    결과를 그대로 반환하므로 호출자는 반드시 valid 값을 확인해야 합니다.

    Args:
        password: 수정할 비밀번호 (빈 문자열 및 허용 외 문자 포함 가능).

    Returns:
        원본, 수정본, 변경 목록, 유효성을 담은 FixResult.
    """
    result = None
    for attempt in range(1, _MAX_ATTEMPTS + 1):
        result = _try_fix(password)
        if result.valid:
            logger.debug(
                f"비밀번호 수정 성공: changes={len(result.changes)}, attempt={attempt}"
            )
            return result

    logger.warning(
        f"비밀번호 수정 실패: {_MAX_ATTEMPTS}회 시도 후에도 정책 미충족 (length={len(password)})"
    )
    return result
