from __future__ import annotations

from dataclasses import dataclass

# Level 1 is the 3-letter word tier.
STARTING_WORD_LENGTH = 3

PERFECT = "perfect"
GOOD_ACCURACY = "good-accuracy"
GOOD_EFFICIENCY = "good-efficiency"
KEEP_PRACTICING = "keep-practicing"


@dataclass(frozen=True)
class PerformanceStats:
    error_count: int
    missed_letters: int
    is_perfect: bool


@dataclass(frozen=True)
class Feedback:
    message: str
    kind: str


def is_perfect(error_count: int, missed_letters: int) -> bool:
    return error_count == 0 and missed_letters == 0


def classify(error_count: int, missed_letters: int) -> PerformanceStats:
    return PerformanceStats(
        error_count=error_count,
        missed_letters=missed_letters,
        is_perfect=is_perfect(error_count, missed_letters),
    )


def feedback(stats: PerformanceStats) -> Feedback:
    if stats.is_perfect:
        return Feedback("No errors and every letter caught first time!", PERFECT)
    if stats.error_count == 0 and stats.missed_letters > 0:
        return Feedback("Great accuracy! Try to catch letters sooner next time.", GOOD_ACCURACY)
    if stats.error_count > 0 and stats.missed_letters == 0:
        return Feedback("Perfect efficiency! Focus on cutting down wrong keys.", GOOD_EFFICIENCY)
    return Feedback("Keep practicing to reach a perfect round!", KEEP_PRACTICING)


# ---------------------------
# Levels and session score
# ---------------------------

def level_from_word_length(word_length: int) -> int:
    return word_length - STARTING_WORD_LENGTH + 1


def word_length_from_level(level: int) -> int:
    return level + STARTING_WORD_LENGTH - 1


def score(level: int, words_completed: int) -> float:
    """
    Efficiency score: levels reached per word completed, as a percentage.
    Upgrading on every word keeps it at 100.
    """
    if words_completed == 0 or level < 0:
        return 0.0
    value = level / words_completed * 100.0
    return max(0.0, min(100.0, value))
