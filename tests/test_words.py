import random

from letter_racer.words import (
    CORPUS,
    available_lengths,
    build_pool,
    closest_length,
    max_word_length,
    select_word,
    word_counts,
)


def test_build_pool_groups_by_length_and_skips_phrases():
    pool = build_pool(["bók", "sól", "vatn", "gott veður", ""])
    assert pool == {3: ["bók", "sól"], 4: ["vatn"]}


def test_bundled_corpus_has_three_letter_words():
    pool = build_pool(CORPUS)
    assert "bók" in pool[3]
    assert all(" " not in w for words in pool.values() for w in words)


def test_select_prefers_unused_words():
    pool = {3: ["bók", "sól", "ský"]}
    rng = random.Random(0)
    for _ in range(20):
        assert select_word(pool, 3, {"bók", "sól"}, rng) == "ský"


def test_select_falls_back_to_repeats():
    pool = {3: ["bók", "sól"]}
    rng = random.Random(0)
    picks = {select_word(pool, 3, {"bók", "sól"}, rng) for _ in range(30)}
    assert picks == {"bók", "sól"}


def test_select_missing_length_returns_none():
    assert select_word({3: ["bók"]}, 7) is None
    assert select_word({3: []}, 3) is None


def test_available_and_max_lengths():
    pool = build_pool(["vatn", "bók", "hestur"])
    assert available_lengths(pool) == [3, 4, 6]
    assert max_word_length(pool) == 6
    assert max_word_length({}) == 3


def test_closest_length():
    pool = {3: ["bók"], 6: ["hestur"], 9: ["höfuðborg"]}
    assert closest_length(pool, 6) == 6
    assert closest_length(pool, 8) == 9
    assert closest_length(pool, 20) == 9
    # 3 and 9 are both 3 away from 6 in {3, 9}: shorter wins
    assert closest_length({3: ["bók"], 9: ["höfuðborg"]}, 6) == 3
    assert closest_length({}, 5) == 5


def test_word_counts():
    assert word_counts({3: ["bók", "sól"], 4: ["vatn"]}) == {3: 2, 4: 1}
