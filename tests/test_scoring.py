import pytest

from letter_racer.scoring import (
    GOOD_ACCURACY,
    GOOD_EFFICIENCY,
    KEEP_PRACTICING,
    PERFECT,
    classify,
    feedback,
    is_perfect,
    level_from_word_length,
    score,
    word_length_from_level,
)


def test_classify():
    assert classify(0, 0).is_perfect is True
    stats = classify(2, 1)
    assert (stats.error_count, stats.missed_letters, stats.is_perfect) == (2, 1, False)
    assert is_perfect(0, 1) is False


@pytest.mark.parametrize(
    "errors, misses, kind",
    [
        (0, 0, PERFECT),
        (0, 2, GOOD_ACCURACY),
        (3, 0, GOOD_EFFICIENCY),
        (1, 1, KEEP_PRACTICING),
    ],
)
def test_feedback_kinds(errors, misses, kind):
    result = feedback(classify(errors, misses))
    assert result.kind == kind
    assert result.message


def test_levels():
    assert level_from_word_length(3) == 1
    assert level_from_word_length(10) == 8
    assert word_length_from_level(5) == 7
    for n in range(3, 20):
        assert word_length_from_level(level_from_word_length(n)) == n


def test_score():
    assert score(3, 12) == 25
    assert score(5, 5) == 100
    assert score(0, 0) == 0
    assert score(2, 10) == 20


def test_score_is_clamped():
    assert score(5, 2) == 100
    assert score(-1, 4) == 0
