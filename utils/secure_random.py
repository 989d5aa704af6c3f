"""secure_random: 암호학적으로 안전한 난수 유틸리티.

secrets 모듈(OS CSPRNG)을 사용합니다. secrets.randbelow는 거부 샘플링(rejection sampling)으로
구현되어 있어 모듈로 편향이 없습니다.
"""

import secrets
from collections.abc import Mapping, MutableSequence

from models.policy_models import MAX_REPEAT


def secure_random_int(upper: int) -> int:
    """[0, upper) 범위의 균등 난수를 반환합니다.

    Args:
        upper: 상한 (배타적, 1 이상).

    Returns:
        0 이상 upper 미만의 정수.
    """
    return secrets.randbelow(upper)


def random_char(chars: str) -> str:
    """문자열에서 임의의 문자 하나를 균등하게 선택합니다."""
    return chars[secure_random_int(len(chars))]


def shuffle(items: MutableSequence) -> None:
    """Fisher-Yates 셔플 (제자리 변경)."""
    for i in range(len(items) - 1, 0, -1):
        j = secure_random_int(i + 1)
        items[i], items[j] = items[j], items[i]


def pick_available(pool: str, counts: Mapping[str, int]) -> str | None:
    """풀에서 반복 제한에 아직 여유가 있는 문자 하나를 균등하게 선택합니다.

    Args:
        pool: 후보 문자 집합.
        counts: 현재 작업 문자열의 문자별 출현 횟수.

    Returns:
        출현 횟수가 MAX_REPEAT 미만인 후보 중 임의의 문자. 후보가 없으면 None.
    """
    candidates = [ch for ch in pool if counts.get(ch, 0) < MAX_REPEAT]
    if not candidates:
        return None
    return candidates[secure_random_int(len(candidates))]
