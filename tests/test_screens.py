from conftest import state_with_catch

from letter_racer.board import CATCH_LINE_INDEX, advance_tick
from letter_racer.scoring import classify, feedback
from letter_racer.screens import (
    CATCH_MARKER,
    CAUGHT_MARKER,
    TITLE,
    completion_screen,
    format_board,
    format_progress,
    format_stats,
    game_screen,
    goodbye_screen,
)


def test_board_stops_at_catch_line():
    lines = format_board(state_with_catch(None).board, CATCH_LINE_INDEX)
    assert len(lines) == CATCH_LINE_INDEX + 1
    assert lines[-1] == CATCH_MARKER
    assert all(line == "" for line in lines[:-1])


def test_board_shows_stream_and_catch_letter():
    state = advance_tick(state_with_catch("b"), "x", "bók")
    lines = format_board(state.board, CATCH_LINE_INDEX)
    assert lines[0] == "x"
    # "b" scrolled past the line, so the catch line is empty again
    assert lines[-1] == CATCH_MARKER

    lines = format_board(state_with_catch("b").board, CATCH_LINE_INDEX)
    assert lines[-1] == f"{CATCH_MARKER}b"
    lines = format_board(state_with_catch("b", caught=True).board, CATCH_LINE_INDEX)
    assert lines[-1] == f"{CAUGHT_MARKER}b"


def test_progress_and_stats():
    assert format_progress("bó", "bók") == "[bó]k"
    assert format_progress("", "bók") == "[]bók"
    assert format_stats(2, 1) == "Errors: 2  Missed: 1"


def test_game_screen():
    state = state_with_catch("b", progress="", error_count=1)
    lines = game_screen(state, "bók", 1, 0, 0.0, "✗ Miss!", CATCH_LINE_INDEX)
    assert lines[0] == TITLE
    assert "LEVEL 1 (3-letter word)" in lines[2]
    assert "[]bók" in lines
    assert "Errors: 1  Missed: 0" in lines
    assert lines[-1] == "✗ Miss!"


def test_game_screen_without_feedback_ends_with_stats():
    lines = game_screen(state_with_catch(None), "bók", 1, 0, 0.0, "", CATCH_LINE_INDEX)
    assert lines[-1].startswith("Errors:")


def test_completion_screen_perfect():
    stats = classify(0, 0)
    lines = completion_screen("bók", 2, 1, 100.0, stats, feedback(stats), "★ Perfect!")
    assert "★ PERFECT! ★" in lines
    assert "★ Perfect!" in lines
    assert lines[-1] == "Keep going? (y/n)"


def test_completion_screen_with_mistakes_and_no_progression():
    stats = classify(2, 1)
    lines = completion_screen("bók", 1, 3, 33.3, stats, feedback(stats), "")
    assert "Errors (wrong keys): 2" in lines
    assert "Missed letters: 1" in lines
    assert "Score: 33.3" in lines[3]


def test_goodbye_screen():
    lines = goodbye_screen(4, 50.0)
    assert "Thanks for playing!" in lines
    assert lines[-1] == "Words done: 4  Score: 50.0"
