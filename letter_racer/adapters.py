from __future__ import annotations

import logging
from typing import Callable, Optional, Tuple

from .board import GameState, next_expected, slot_at_catch_line
from .session import Scheduler, Timer

logger = logging.getLogger(__name__)

FILTERED_KEYS = {"enter", "return", "escape"}
INTERRUPT_KEY = "ctrl+c"


# ---------------------------
# Input
# ---------------------------

class KeyboardInput:
    """
    Key events from the terminal, filtered down to single characters.
    Ctrl+C never reaches the game; it goes to `on_interrupt` instead.
    """

    def __init__(self, on_interrupt: Optional[Callable[[], None]] = None) -> None:
        self.on_interrupt = on_interrupt
        self._callback: Optional[Callable[[str], None]] = None

    def attach(self, callback: Callable[[str], None]) -> None:
        self._callback = callback

    def detach(self) -> None:
        self._callback = None

    def feed(self, key: str, character: Optional[str]) -> bool:
        """Returns True when the event was consumed."""
        if key == INTERRUPT_KEY:
            if self.on_interrupt is not None:
                self.on_interrupt()
            return True
        if key in FILTERED_KEYS:
            return False
        if not character or len(character) != 1 or not character.isprintable():
            return False
        if self._callback is None:
            return False
        self._callback(character)
        return True


StateAccessor = Callable[[], Tuple[GameState, str]]


class AutoTypeInput:
    """Demo input: presses the catch-line letter whenever it is the one needed."""

    def __init__(self, scheduler: Scheduler, interval: float) -> None:
        self.scheduler = scheduler
        self.interval = interval
        self._callback: Optional[Callable[[str], None]] = None
        self._accessor: Optional[StateAccessor] = None
        self._timer: Optional[Timer] = None

    def bind(self, accessor: StateAccessor) -> None:
        self._accessor = accessor

    def attach(self, callback: Callable[[str], None]) -> None:
        self._callback = callback
        if self._timer is None:
            self._timer = self.scheduler.set_interval(self.interval, self.poll)

    def detach(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None
        self._callback = None

    def poll(self) -> None:
        if self._callback is None or self._accessor is None:
            return
        state, target = self._accessor()
        slot = slot_at_catch_line(state)
        expected = next_expected(state, target)
        if slot is None or expected is None:
            return
        if slot.character.lower() == expected.lower():
            self._callback(slot.character)


# ---------------------------
# Sound
# ---------------------------

BELL_CUES = {"error", "victory"}


class BellSound:
    """
    Terminal bell for the cues worth interrupting the player for.
    Ticks and the success ladder stay silent in a plain terminal.
    """

    def __init__(self, bell: Callable[[], None], enabled: bool = True) -> None:
        self.bell = bell
        self.enabled = enabled

    def play(self, cue: str) -> None:
        if not self.enabled or cue not in BELL_CUES:
            return
        try:
            self.bell()
        except Exception:
            # sound is optional
            logger.debug("Bell failed for %s", cue, exc_info=True)

    def toggle_mute(self) -> bool:
        self.enabled = not self.enabled
        return self.enabled


class SilentSound:
    def play(self, cue: str) -> None:
        pass

    def toggle_mute(self) -> bool:
        return False
