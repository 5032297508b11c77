from __future__ import annotations

from dataclasses import dataclass, replace
from typing import FrozenSet, Tuple

from .scoring import PerformanceStats

UPGRADE = "upgrade"
STAY = "stay"
DOWNGRADE = "downgrade"

# perfect rounds in a row needed before the word length grows
PERFECT_STREAK_REQUIRED = 1


@dataclass(frozen=True)
class DifficultyState:
    current_word_length: int
    min_word_length: int
    max_word_length: int
    completed_words: int = 0
    used_words: FrozenSet[str] = frozenset()
    consecutive_perfect: int = 0


@dataclass(frozen=True)
class ProgressionResult:
    new_word_length: int
    progression_type: str
    message: str
    consecutive_perfect: int


def should_upgrade(stats: PerformanceStats) -> bool:
    return stats.error_count == 0 and stats.missed_letters == 0


def should_downgrade(stats: PerformanceStats) -> bool:
    return stats.error_count > 0 and stats.missed_letters > 0


def should_stay(stats: PerformanceStats) -> bool:
    return not should_upgrade(stats) and not should_downgrade(stats)


def create_difficulty_state(starting_length: int, max_length: int) -> DifficultyState:
    return DifficultyState(
        current_word_length=starting_length,
        min_word_length=starting_length,
        max_word_length=max(starting_length, max_length),
    )


def _level(word_length: int, min_word_length: int) -> int:
    return word_length - min_word_length + 1


def next_word_length(
    current: int,
    stats: PerformanceStats,
    min_word_length: int,
    max_word_length: int,
    consecutive_perfect: int,
) -> ProgressionResult:
    if should_upgrade(stats):
        streak = consecutive_perfect + 1
        if streak < PERFECT_STREAK_REQUIRED:
            return ProgressionResult(
                new_word_length=current,
                progression_type=STAY,
                message=f"★ Perfect! ({streak}/{PERFECT_STREAK_REQUIRED} to level up)",
                consecutive_perfect=streak,
            )
        new_length = min(current + 1, max_word_length)
        if new_length == max_word_length:
            message = "★ Brilliant! You're at the top level!"
        else:
            message = f"★ Perfect! Moving you up to level {_level(new_length, min_word_length)}!"
        return ProgressionResult(new_length, UPGRADE, message, 0)

    if should_downgrade(stats):
        new_length = max(current - 1, min_word_length)
        if new_length == min_word_length:
            message = "○ Let's try again at this level"
        else:
            message = f"○ Let's practice at level {_level(new_length, min_word_length)}"
        return ProgressionResult(new_length, DOWNGRADE, message, 0)

    return ProgressionResult(current, STAY, "◐ Good! Let's go again at the same level", 0)


def update_difficulty(
    state: DifficultyState,
    completed_word: str,
    stats: PerformanceStats,
) -> Tuple[DifficultyState, ProgressionResult]:
    progression = next_word_length(
        state.current_word_length,
        stats,
        state.min_word_length,
        state.max_word_length,
        state.consecutive_perfect,
    )
    new_state = replace(
        state,
        current_word_length=progression.new_word_length,
        completed_words=state.completed_words + 1,
        used_words=state.used_words | {completed_word},
        consecutive_perfect=progression.consecutive_perfect,
    )
    return new_state, progression
