"""test_fixer: 비밀번호 수정 서비스 단위 테스트."""

from collections import Counter
from unittest.mock import MagicMock, patch

import pytest
from models.policy_models import ALL_CHARS, Change, CharacterClass
from services.fixer_service import fix
from services.validator_service import classify_char, validate


def assert_sound(result):
    """수정 결과가 기본 속성을 만족하는지 확인합니다."""
    assert validate(result.fixed).overall == result.valid
    assert len(result.fixed) >= 8
    assert max(Counter(result.fixed).values()) <= 2
    assert set(result.fixed) <= set(ALL_CHARS)


class TestAlreadyValid:
    """이미 정책을 충족하는 비밀번호 테스트."""

    @pytest.mark.parametrize("password", ["Abcdef1#", "Xy1#abcdAB", "aA1-bB2?cC3!"])
    def test_no_changes(self, password):
        result = fix(password)
        assert result.valid is True
        assert result.changes == ()
        assert result.fixed == password
        assert result.original == password

    def test_valid_password_with_unknown_chars_is_still_cleaned(self):
        # 허용 외 문자는 규칙 위반이 아니지만 출력에는 남기지 않음
        assert validate("Abcdef1# ").overall is True

        result = fix("Abcdef1# ")

        assert result.valid is True
        assert len(result.changes) == 1
        assert result.changes[0].index == 8
        assert result.changes[0].removed == " "
        assert result.fixed[:8] == "Abcdef1#"
        assert classify_char(result.fixed[8]) is not CharacterClass.UNKNOWN

    def test_generated_passwords_are_untouched(self):
        from services.generator_service import generate

        for _ in range(20):
            password = generate(16).password
            assert fix(password).fixed == password


class TestRepeatLimit:
    """반복 제한(규칙 6) 수정 테스트."""

    def test_basic_repetition(self):
        result = fix("AAAdef1#")
        assert result.valid is True
        assert len(result.fixed) == 8
        assert result.fixed.count("A") <= 2
        assert len(result.changes) >= 1

    def test_rightmost_occurrence_replaced(self):
        result = fix("AAAdef1#")
        assert len(result.changes) == 1
        change = result.changes[0]
        assert change.index == 2
        assert change.removed == "A"
        assert result.fixed[:2] == "AA"

    @pytest.mark.parametrize(
        "password, char_class",
        [
            ("AAABcde1#", CharacterClass.UPPERCASE),
            ("aaaBCDE1#", CharacterClass.LOWERCASE),
            ("111Abcd!x", CharacterClass.DIGIT),
            ("###Abcd1x", CharacterClass.SPECIAL),
        ],
    )
    def test_same_class_substitution(self, password, char_class):
        result = fix(password)
        assert result.valid is True
        for change in result.changes:
            if classify_char(change.removed) is char_class:
                assert classify_char(change.inserted) is char_class

    def test_exhausted_class_falls_back_to_any_class(self):
        # 숫자 10종이 모두 2회씩 사용되어 같은 클래스 대체 문자가 없음
        result = fix("00112233445566778899" + "9" + "Ab#")

        assert result.valid is True
        assert len(result.changes) == 1
        change = result.changes[0]
        assert (change.index, change.removed) == (20, "9")
        assert classify_char(change.inserted) is not CharacterClass.DIGIT
        assert classify_char(change.inserted) is not CharacterClass.UNKNOWN

    def test_multiple_violators(self):
        result = fix("AAAaaa1#")
        assert result.valid is True
        assert max(Counter(result.fixed).values()) <= 2

    def test_single_excess_needs_single_change(self):
        result = fix("AAbAde1#")
        assert result.valid is True
        assert len([c for c in result.changes if c.removed == "A"]) == 1

    def test_excess_replaced_from_the_end(self):
        result = fix("aaaaaXy1#")
        replaced = [c.index for c in result.changes if c.removed == "a"]
        assert replaced == [4, 3, 2]
        assert result.fixed.startswith("aa")

    @pytest.mark.parametrize("ch", list(ALL_CHARS))
    def test_known_bad_passwords(self, ch):
        result = fix(ch * 4 + "Xy1#abcd")
        assert result.valid is True
        assert len(result.fixed) == 12


class TestMissingClasses:
    """누락된 문자 클래스(규칙 2~5) 수정 테스트."""

    def test_all_lowercase(self):
        result = fix("abcabcab")
        assert result.valid is True
        assert len(result.fixed) == 8
        assert any(classify_char(c) is CharacterClass.UPPERCASE for c in result.fixed)
        assert any(classify_char(c) is CharacterClass.SPECIAL for c in result.fixed)

    def test_donor_is_largest_surplus_class_from_the_end(self):
        result = fix("abcdefg1")
        assert result.valid is True
        assert [c.index for c in result.changes] == [6, 5]
        assert result.changes[0].removed == "g"
        assert classify_char(result.changes[0].inserted) is CharacterClass.UPPERCASE
        assert result.changes[1].removed == "f"
        assert classify_char(result.changes[1].inserted) is CharacterClass.SPECIAL
        assert result.fixed[:5] == "abcde"
        assert result.fixed[7] == "1"

    def test_unknown_position_preferred(self):
        result = fix("abc def1")
        assert result.valid is True
        assert result.changes[0] == Change(3, " ", result.changes[0].inserted)
        assert classify_char(result.changes[0].inserted) is CharacterClass.UPPERCASE
        assert result.changes[1].index == 6
        assert classify_char(result.changes[1].inserted) is CharacterClass.SPECIAL

    def test_last_position_without_surplus(self):
        result = fix("A1#")
        first, second = result.changes[0], result.changes[1]
        assert (first.index, first.removed) == (2, "#")
        assert classify_char(first.inserted) is CharacterClass.LOWERCASE
        assert (second.index, second.removed) == (2, first.inserted)
        assert classify_char(second.inserted) is CharacterClass.SPECIAL
        assert [c.index for c in result.changes[2:]] == [3, 4, 5, 6, 7]
        assert all(c.is_append for c in result.changes[2:])


class TestLengthAndUnknowns:
    """최소 길이(규칙 1) 및 허용 외 문자 수정 테스트."""

    def test_short_password_padded(self):
        result = fix("Ab1#")
        assert result.valid is True
        assert len(result.fixed) == 8
        assert result.fixed.startswith("Ab1#")
        appended = result.changes
        assert [c.index for c in appended] == [4, 5, 6, 7]
        assert all(c.removed == "" for c in appended)

    def test_empty_password(self):
        result = fix("")
        assert len(result.fixed) == 8
        assert result.changes[0].index == 0
        assert result.changes[0].is_append
        assert_sound(result)

    def test_unknown_chars_replaced(self):
        result = fix("Ab1#~xyz")
        assert result.valid is True
        assert result.changes == (Change(4, "~", result.fixed[4]),)
        assert all(classify_char(c) is not CharacterClass.UNKNOWN for c in result.fixed)

    def test_repeated_unknown_chars(self):
        result = fix("Ab1#    ")
        assert result.valid is True
        assert " " not in result.fixed
        assert result.fixed.startswith("Ab1#")


class TestProperties:
    """임의 입력에 대한 속성 테스트."""

    def test_soundness_and_invariants(self, arbitrary_passwords):
        for password in arbitrary_passwords:
            result = fix(password)
            assert result.original == password
            assert_sound(result)

    def test_changes_replay_to_fixed(self, arbitrary_passwords):
        for password in arbitrary_passwords:
            result = fix(password)
            chars = list(password)
            for change in result.changes:
                if change.is_append:
                    assert change.index == len(chars)
                    chars.append(change.inserted)
                else:
                    assert chars[change.index] == change.removed
                    chars[change.index] = change.inserted
            assert "".join(chars) == result.fixed

    def test_idempotent_on_fixed_output(self, arbitrary_passwords):
        for password in arbitrary_passwords:
            result = fix(password)
            if result.valid:
                again = fix(result.fixed)
                assert again.changes == ()
                assert again.fixed == result.fixed


class TestRetries:
    """재시도 동작 테스트."""

    @patch("services.fixer_service.validate")
    def test_returns_last_attempt_after_three_failures(self, mock_validate):
        mock_validate.return_value = MagicMock(overall=False)

        result = fix("abc")

        assert result.valid is False
        assert mock_validate.call_count == 3
        assert len(result.fixed) == 8

    def test_to_dict(self):
        data = fix("AAAdef1#").to_dict()
        assert data["original"] == "AAAdef1#"
        assert data["valid"] is True
        assert data["changes"][0]["index"] == 2
        assert data["changes"][0]["from"] == "A"
