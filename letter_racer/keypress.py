from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from .board import CATCH_LINE_INDEX, GameState, Slot, next_expected

SUCCESS = "success"
ERROR = "error"
MISS = "miss"
EMPTY = "empty"

# success cues form a rising ladder success0 .. success29
SUCCESS_CUE_CAP = 29


@dataclass(frozen=True)
class KeypressResult:
    state: GameState
    feedback_kind: str
    message: str
    is_complete: bool = False
    sound_cue: Optional[str] = None


def resolve(pressed_char: str, state: GameState, target: str) -> KeypressResult:
    """
    Classify one keystroke against the catch-line slot.

    - empty: nothing on the catch line, nothing changes
    - success: key matches the slot AND the slot holds the next needed letter
    - error: key matches the slot but the slot is not the needed letter
    - miss: key does not match the slot at all
    """
    # blank filler is still a slot; only a missing one is empty
    slot = state.board[CATCH_LINE_INDEX]
    if slot is None:
        return KeypressResult(
            state=state,
            feedback_kind=EMPTY,
            message="✗ No letter on the catch line!",
        )

    pressed = pressed_char.lower()
    letter = slot.character
    expected = next_expected(state, target)

    if pressed == letter.lower() and expected is not None and letter.lower() == expected.lower():
        board = list(state.board)
        board[CATCH_LINE_INDEX] = Slot(letter, True)
        # append the target's own character so progress stays a true prefix
        progress = state.typed_progress + expected
        cue = f"success{min(state.catch_count, SUCCESS_CUE_CAP)}"
        return KeypressResult(
            state=replace(
                state,
                board=tuple(board),
                typed_progress=progress,
                catch_count=state.catch_count + 1,
            ),
            feedback_kind=SUCCESS,
            message=f"★ Caught '{letter}'! Great!",
            is_complete=progress == target,
            sound_cue=cue,
        )

    errored = replace(state, error_count=state.error_count + 1)

    if pressed == letter.lower():
        need = expected if expected is not None else "nothing"
        return KeypressResult(
            state=errored,
            feedback_kind=ERROR,
            message=f"✗ Wrong letter! Need '{need}', got '{letter}'",
            sound_cue="error",
        )

    return KeypressResult(
        state=errored,
        feedback_kind=MISS,
        message=f"✗ Miss! Pressed '{pressed_char}' but the line shows '{letter}'",
        sound_cue="error",
    )
