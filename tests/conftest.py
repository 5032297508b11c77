from __future__ import annotations

import random
from typing import Callable, List, Optional

import pytest

from letter_racer.board import BOARD_SIZE, CATCH_LINE_INDEX, GameState, Slot


def state_with_catch(
    character: Optional[str],
    caught: bool = False,
    progress: str = "",
    **counters: int,
) -> GameState:
    board: List[Optional[Slot]] = [None] * BOARD_SIZE
    if character is not None:
        board[CATCH_LINE_INDEX] = Slot(character, caught)
    return GameState(board=tuple(board), typed_progress=progress, **counters)


class FakeTimer:
    def __init__(self, delay: float, callback: Callable[[], None], repeat: bool) -> None:
        self.delay = delay
        self.callback = callback
        self.repeat = repeat
        self.stopped = False

    def stop(self) -> None:
        self.stopped = True


class FakeScheduler:
    """Timers that only fire when a test says so."""

    def __init__(self) -> None:
        self.timers: List[FakeTimer] = []

    def set_interval(self, interval: float, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(interval, callback, repeat=True)
        self.timers.append(timer)
        return timer

    def set_timer(self, delay: float, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(delay, callback, repeat=False)
        self.timers.append(timer)
        return timer

    def active(self, repeat: Optional[bool] = None) -> List[FakeTimer]:
        return [
            t for t in self.timers
            if not t.stopped and (repeat is None or t.repeat == repeat)
        ]

    def fire_intervals(self, times: int = 1) -> None:
        for _ in range(times):
            for timer in self.active(repeat=True):
                timer.callback()

    def fire_timers(self) -> None:
        for timer in self.active(repeat=False):
            timer.stopped = True
            timer.callback()


class FakeInput:
    def __init__(self) -> None:
        self.callback: Optional[Callable[[str], None]] = None
        self.attach_count = 0
        self.detach_count = 0

    def attach(self, callback: Callable[[str], None]) -> None:
        self.callback = callback
        self.attach_count += 1

    def detach(self) -> None:
        self.callback = None
        self.detach_count += 1

    def press(self, ch: str) -> None:
        assert self.callback is not None
        self.callback(ch)


class RecordingRenderer:
    def __init__(self) -> None:
        self.frames: List[List[str]] = []
        self.clears = 0

    def clear(self) -> None:
        self.clears += 1

    def render(self, lines: List[str]) -> None:
        self.frames.append(list(lines))

    def get_dimensions(self):
        return 80, 24

    @property
    def last(self) -> List[str]:
        return self.frames[-1]


class RecordingSound:
    def __init__(self) -> None:
        self.cues: List[str] = []

    def play(self, cue: str) -> None:
        self.cues.append(cue)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def fake_input() -> FakeInput:
    return FakeInput()


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def sound() -> RecordingSound:
    return RecordingSound()
