"""generator_service: 정책을 충족하는 비밀번호 생성 서비스.

각 필수 문자 클래스에서 최소 1개씩 보장한 뒤 전체 풀에서 나머지를 채우고,
Fisher-Yates 셔플로 섞어 재검증합니다.
"""

import logging
from collections import Counter

from models.policy_models import (
    ALL_CHARS,
    CHAR_CLASSES,
    GenerateResult,
    MAX_REPEAT,
    REQUIRED_CLASSES,
)
from services.validator_service import validate
from utils.secure_random import random_char, shuffle

logger = logging.getLogger(__name__)

MIN_GENERATE_LENGTH = 8
MAX_GENERATE_LENGTH = 40
DEFAULT_GENERATE_LENGTH = 24

_MAX_ATTEMPTS = 10
_MAX_DRAWS_PER_SLOT = 100


def clamp_length(length: int) -> int:
    """생성 길이를 정수로 변환한 뒤 [8, 40] 범위로 보정합니다."""
    return max(MIN_GENERATE_LENGTH, min(MAX_GENERATE_LENGTH, int(length)))


def _draw_char(counts: Counter) -> str | None:
    for _ in range(_MAX_DRAWS_PER_SLOT):
        ch = random_char(ALL_CHARS)
        if counts[ch] < MAX_REPEAT:
            return ch

    # 폴백: 풀에서 여유가 있는 첫 문자
    for ch in ALL_CHARS:
        if counts[ch] < MAX_REPEAT:
            return ch
    return None


def _build_candidate(length: int) -> str:
    chars: list[str] = []
    counts: Counter = Counter()

    def add_char(ch: str) -> None:
        chars.append(ch)
        counts[ch] += 1

    for char_class in REQUIRED_CLASSES:
        add_char(random_char(CHAR_CLASSES[char_class]))

    while len(chars) < length:
        ch = _draw_char(counts)
        if ch is None:
            break
        add_char(ch)

    shuffle(chars)
    return "".join(chars)


def generate(length: int = DEFAULT_GENERATE_LENGTH) -> GenerateResult:
    """정책을 충족하는 비밀번호를 생성합니다.

    범위를 벗어난 길이는 오류 없이 경계값으로 보정됩니다.
    최대 10회 시도 후에도 실패하면 빈 비밀번호와 valid=False를 반환합니다.

    Args:
        length: 원하는 비밀번호 길이 (기본 24, [8, 40]으로 보정).

    Returns:
        생성된 비밀번호와 검증 결과를 담은 GenerateResult.
    """
    length = clamp_length(length)

    for attempt in range(1, _MAX_ATTEMPTS + 1):
        password = _build_candidate(length)
        if validate(password).overall:
            logger.debug(f"비밀번호 생성 성공: length={length}, attempt={attempt}")
            return GenerateResult(password=password, valid=True)

    logger.warning(f"비밀번호 생성 실패: {_MAX_ATTEMPTS}회 시도 모두 정책 미충족 (length={length})")
    return GenerateResult(password="", valid=False)


