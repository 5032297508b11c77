from __future__ import annotations

from typing import List

from .board import Board, GameState
from .scoring import Feedback, PerformanceStats

TITLE = "▓▒░ LETTER RACER ░▒▓"
CATCH_MARKER = "▶"
CAUGHT_MARKER = "✓"


def format_board(board: Board, catch_index: int) -> List[str]:
    """Rows above the catch line, then the catch line itself. Rows below it are not drawn."""
    lines: List[str] = []
    for slot in board[:catch_index]:
        lines.append(slot.character if slot is not None else "")
    slot = board[catch_index]
    if slot is None:
        lines.append(CATCH_MARKER)
    elif slot.caught:
        lines.append(f"{CAUGHT_MARKER}{slot.character}")
    else:
        lines.append(f"{CATCH_MARKER}{slot.character}")
    return lines


def format_progress(typed_progress: str, target: str) -> str:
    return f"[{typed_progress}]{target[len(typed_progress):]}"


def format_stats(error_count: int, missed_letters: int) -> str:
    return f"Errors: {error_count}  Missed: {missed_letters}"


def format_header(target: str, level: int, completed_words: int, score: float) -> str:
    return (
        f"LEVEL {level} ({len(target)}-letter word)  "
        f"Words done: {completed_words}  Score: {score:.1f}"
    )


def game_screen(
    state: GameState,
    target: str,
    level: int,
    completed_words: int,
    score: float,
    feedback: str,
    catch_index: int,
) -> List[str]:
    lines = [TITLE, "", format_header(target, level, completed_words, score), ""]
    lines.extend(format_board(state.board, catch_index))
    lines.append("")
    lines.append(format_progress(state.typed_progress, target))
    lines.append(format_stats(state.error_count, state.missed_letters))
    if feedback:
        lines.append("")
        lines.append(feedback)
    return lines


def completion_screen(
    target: str,
    level: int,
    completed_words: int,
    score: float,
    stats: PerformanceStats,
    feedback: Feedback,
    progression_message: str,
) -> List[str]:
    lines = [
        TITLE,
        "",
        f"★ WELL DONE! You finished the word: {target}",
        f"Level {level}  Words done: {completed_words}  Score: {score:.1f}",
        "",
        "▓▒░ STATS ░▒▓",
        "",
    ]
    if stats.is_perfect:
        lines.append("★ PERFECT! ★")
        lines.append(feedback.message)
    else:
        lines.append(f"Errors (wrong keys): {stats.error_count}")
        lines.append(f"Missed letters: {stats.missed_letters}")
        lines.append("")
        lines.append(feedback.message)
    if progression_message:
        lines.append("")
        lines.append(progression_message)
    lines.append("")
    lines.append("Keep going? (y/n)")
    return lines


def goodbye_screen(completed_words: int, score: float) -> List[str]:
    return [
        TITLE,
        "",
        "Thanks for playing!",
        f"Words done: {completed_words}  Score: {score:.1f}",
    ]
