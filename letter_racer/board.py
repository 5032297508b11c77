from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple


# ---------------------------
# Board geometry
# ---------------------------

BOARD_SIZE = 16
CATCH_LINE_INDEX = 13


@dataclass(frozen=True)
class Slot:
    character: str
    caught: bool = False


Board = Tuple[Optional[Slot], ...]


@dataclass(frozen=True)
class GameState:
    """
    One round's snapshot. Every tick or keypress produces a new instance;
    `typed_progress` is always a prefix of the round's target.
    """
    board: Board
    typed_progress: str = ""
    error_count: int = 0
    missed_letters: int = 0
    catch_count: int = 0
    tick_count: int = 0


def create_initial_state() -> GameState:
    return GameState(board=(None,) * BOARD_SIZE)


def next_expected(state: GameState, target: str) -> Optional[str]:
    """The character the player needs next, or None once the word is done."""
    idx = len(state.typed_progress)
    if idx >= len(target):
        return None
    return target[idx]


def slot_at_catch_line(state: GameState) -> Optional[Slot]:
    slot = state.board[CATCH_LINE_INDEX]
    # filler blanks are gaps, not letters
    if slot is None or not slot.character.strip():
        return None
    return slot


# ---------------------------
# Tick
# ---------------------------

def advance_tick(state: GameState, spawned_char: str, target: str) -> GameState:
    missed = state.missed_letters

    # last chance for the letter sitting on the catch line
    slot = slot_at_catch_line(state)
    expected = next_expected(state, target)
    if slot is not None and expected is not None:
        if slot.character.lower() == expected.lower() and not slot.caught:
            missed += 1

    board = (Slot(spawned_char, False),) + state.board[:-1]
    return replace(
        state,
        board=board,
        missed_letters=missed,
        tick_count=state.tick_count + 1,
    )


def tick_sound(tick_count: int) -> str:
    return "tick2" if tick_count % 2 == 0 else "tick1"
