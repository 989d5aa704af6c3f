"""test_secure_random: 난수 유틸리티 단위 테스트."""

from collections import Counter

from models.policy_models import DIGITS
from utils.secure_random import pick_available, random_char, secure_random_int, shuffle


def test_secure_random_int_range():
    values = {secure_random_int(5) for _ in range(500)}
    assert values == {0, 1, 2, 3, 4}


def test_random_char_from_pool():
    for _ in range(100):
        assert random_char("xyz") in "xyz"


def test_shuffle_preserves_elements():
    items = list("abcdefghij")
    shuffle(items)
    assert sorted(items) == list("abcdefghij")


def test_shuffle_handles_short_sequences():
    empty: list[str] = []
    single = ["a"]
    shuffle(empty)
    shuffle(single)
    assert empty == []
    assert single == ["a"]


def test_pick_available_skips_exhausted_chars():
    counts = Counter({ch: 2 for ch in DIGITS if ch != "7"})
    for _ in range(50):
        assert pick_available(DIGITS, counts) == "7"


def test_pick_available_allows_single_occurrence():
    assert pick_available("q", Counter({"q": 1})) == "q"


def test_pick_available_returns_none_when_exhausted():
    counts = Counter({ch: 2 for ch in DIGITS})
    assert pick_available(DIGITS, counts) is None
    assert pick_available("", Counter()) is None
