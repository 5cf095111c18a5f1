import math

import pytest

from engine import strength
from engine.strength import (
    Composition,
    EvaluationResult,
    StrengthLevel,
    analyze_composition,
    estimate_entropy,
    evaluate,
    score_password,
)


def test_empty_and_none():
    assert evaluate("") == EvaluationResult(StrengthLevel.EMPTY, 0.0, 0)
    assert evaluate(None) == EvaluationResult(StrengthLevel.EMPTY, 0.0, 0)
    assert estimate_entropy("") == 0.0
    assert estimate_entropy(None) == 0.0


def test_levels_are_ordered():
    assert (StrengthLevel.EMPTY < StrengthLevel.WEAK < StrengthLevel.MEDIUM
            < StrengthLevel.STRONG < StrengthLevel.VERY_STRONG)


def test_alphabet_run_is_weak():
    # -5 length, +5 lower, -5 single type, -7 "abc"
    result = evaluate("abcdefgh")
    assert result.level == StrengthLevel.WEAK
    assert result.score == -12
    assert result.entropy_bits == pytest.approx(8 * math.log2(26))


def test_mixed_password_without_patterns_is_very_strong():
    # +10 length, +33 presence, +18 four types, no penalties
    result = evaluate("Tr7$mK9!Lp2")
    assert result.score == 61
    assert result.level == StrengthLevel.VERY_STRONG
    assert result.entropy_bits == pytest.approx(11 * math.log2(85))


def test_short_password_is_weak_but_still_scored():
    result = evaluate("Ab1!")
    assert result.level == StrengthLevel.WEAK
    assert result.score == 51
    assert result.entropy_bits == pytest.approx(4 * math.log2(85))


def test_unrecognized_characters_only():
    result = evaluate("ééééééééé")
    assert result.level == StrengthLevel.WEAK
    assert result.entropy_bits == 0.0
    # -5 length, -6 run, -18 overuse (9 - 9 // 3 = 6, times 3)
    assert result.score == -29


def test_unrecognized_characters_count_toward_length():
    assert estimate_entropy("abc def") == pytest.approx(7 * math.log2(26))


def test_single_digit_has_positive_entropy():
    assert estimate_entropy("7") == pytest.approx(math.log2(10))
    assert estimate_entropy("7") > 0


def test_entropy_scales_linearly_with_length():
    s = "Tr7$mK9!Lp2"
    assert estimate_entropy(s + s) / estimate_entropy(s) == pytest.approx(2.0)


def test_digits_only_is_weak():
    result = evaluate("80418296")
    assert result.level == StrengthLevel.WEAK
    assert result.entropy_bits == pytest.approx(8 * math.log2(10))


def test_strong_without_symbols():
    # +10 length, +21 presence, +12 three types
    result = evaluate("Sunshine2024")
    assert result.score == 43
    assert result.level == StrengthLevel.STRONG


def test_weak_word_drops_to_medium():
    # +10 length, +13 presence, +7 two types, -12 "password"
    result = evaluate("password12")
    assert result.score == 18
    assert result.level == StrengthLevel.MEDIUM


def test_weak_word_is_case_insensitive():
    assert score_password("ADMINx9!Qr") == 61 - 12


def test_capitalized_weak_word():
    # -5 length, +21 presence, +12 three types, -12 "password"
    result = evaluate("Password1")
    assert result.score == 16
    assert result.level == StrengthLevel.MEDIUM


def test_only_one_sequence_penalty_applies():
    # both "abc" and "123" are present, only -7 is taken
    assert score_password("abc123XYZ!") == 61 - 7


def test_numeric_sequence_penalty():
    assert score_password("Zq!987Wm#k") == 61 - 7


def test_keyboard_row_is_case_insensitive():
    assert score_password("ZXCv5!Lm9?") == 61 - 7


def test_repeat_run_penalty_applies_once():
    # three runs of three, only the first one counts
    result = evaluate("aaaBBB111!!!")
    assert result.score == 61 - 6
    assert result.level == StrengthLevel.VERY_STRONG


def test_overuse_penalty_applies_to_every_offender():
    # +10 length, +21 presence, +12 three types = 43
    # -6 run, -3 for "a" (4 > 10 // 3), -3 for "1"
    result = evaluate("aaaa1111Bx")
    assert result.score == 31
    assert result.level == StrengthLevel.STRONG


def test_overuse_penalty_skipped_for_short_input():
    # length 5: no overuse penalty even though "a" is 100% of it
    # 0 length, +5 lower, 0 types bonus (length < 8), -6 run
    assert score_password("aaaaa") == -1


@pytest.mark.parametrize("length, expected", [
    (0, 0), (7, 0), (8, -5), (9, -5), (10, 10), (12, 10),
    (13, 15), (15, 15), (16, 20), (20, 20), (21, 25), (64, 25),
])
def test_length_brackets(length, expected):
    assert strength._length_score(length) == expected


@pytest.mark.parametrize("types_count, length, expected", [
    (0, 10, 0), (1, 7, 0), (1, 8, -5), (2, 8, 7), (3, 8, 12), (4, 8, 18),
])
def test_types_bonus(types_count, length, expected):
    assert strength._types_bonus(types_count, length) == expected


@pytest.mark.parametrize("types_count, score, expected", [
    (4, 45, StrengthLevel.VERY_STRONG),
    (4, 44, StrengthLevel.STRONG),
    (3, 100, StrengthLevel.STRONG),
    (3, 29, StrengthLevel.MEDIUM),
    (2, 100, StrengthLevel.MEDIUM),
    (2, 14, StrengthLevel.WEAK),
    (1, 100, StrengthLevel.WEAK),
])
def test_categorization_thresholds(types_count, score, expected):
    assert strength._categorize(types_count, score) == expected


def test_evaluate_is_deterministic():
    for pw in ("Tr7$mK9!Lp2", "password12", "x", "aaaa1111Bx"):
        assert evaluate(pw) == evaluate(pw)


def test_non_empty_input_is_never_empty_level():
    for pw in ("a", " ", "é", "12345678", "Tr7$mK9!Lp2"):
        assert evaluate(pw).level != StrengthLevel.EMPTY


def test_analyze_composition():
    comp = analyze_composition("aB3$ é")
    assert comp == Composition(True, True, True, True)
    assert comp.types_count == 4
    assert comp.charset_size == 85

    comp = analyze_composition("hello~")  # "~" is not in the symbol set
    assert comp == Composition(has_lowercase=True)
    assert comp.types_count == 1
    assert comp.charset_size == 26

    assert analyze_composition(None).types_count == 0


def test_evaluate_scans_the_password_once(monkeypatch):
    scans = []
    real = strength.analyze_composition

    def counting(password):
        scans.append(password)
        return real(password)

    monkeypatch.setattr(strength, "analyze_composition", counting)
    result = evaluate("Tr7$mK9!Lp2")

    assert scans == ["Tr7$mK9!Lp2"]
    assert result == EvaluationResult(StrengthLevel.VERY_STRONG, 11 * math.log2(85), 61)
    assert result.entropy_bits == estimate_entropy("Tr7$mK9!Lp2")
    assert result.score == score_password("Tr7$mK9!Lp2")
