from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional, Protocol, Tuple

from .bag import BLANK, draw, generate_bag
from .board import CATCH_LINE_INDEX, GameState, advance_tick, create_initial_state, tick_sound
from .config import SessionConfig
from .difficulty import DifficultyState, create_difficulty_state, update_difficulty
from .keypress import SUCCESS, resolve
from .screens import completion_screen, game_screen, goodbye_screen
from .scoring import classify, feedback, level_from_word_length, score as efficiency_score
from .words import WordPool, closest_length, max_word_length, select_word, word_counts

logger = logging.getLogger(__name__)

IDLE = "idle"
RUNNING = "running"
AWAITING_CONTINUE = "awaiting-continue"
STOPPED = "stopped"

# lets the completion cue finish before the next round resets the board
ROUND_DELAY = 1.0


# ---------------------------
# Collaborators
# ---------------------------

class Timer(Protocol):
    def stop(self) -> None: ...


class Scheduler(Protocol):
    def set_interval(self, interval: float, callback: Callable[[], None]) -> Timer: ...

    def set_timer(self, delay: float, callback: Callable[[], None]) -> Timer: ...


class InputSource(Protocol):
    def attach(self, callback: Callable[[str], None]) -> None: ...

    def detach(self) -> None: ...


class Renderer(Protocol):
    def clear(self) -> None: ...

    def render(self, lines: List[str]) -> None: ...

    def get_dimensions(self) -> Tuple[int, int]: ...


class SoundPlayer(Protocol):
    def play(self, cue: str) -> None: ...


# ---------------------------
# Session
# ---------------------------

class Session:
    """
    Scheduler state machine around the pure engine.

    idle -> running <-> awaiting-continue -> stopped

    Ticks and keys are only acted on in the phases that own them, so a late
    timer callback or a stray key after stop() is a no-op.
    """

    def __init__(
        self,
        pool: WordPool,
        config: SessionConfig,
        scheduler: Scheduler,
        input_source: InputSource,
        renderer: Renderer,
        sound: SoundPlayer,
        rng: Optional[random.Random] = None,
        on_exit: Optional[Callable[[], None]] = None,
    ) -> None:
        self.pool = pool
        self.config = config
        self.scheduler = scheduler
        self.input_source = input_source
        self.renderer = renderer
        self.sound = sound
        self.rng = rng or random.Random()
        self.on_exit = on_exit
        logger.debug("Word pool by length: %s", word_counts(pool))

        start = config.starting_word_length
        ceiling = max_word_length(pool) if config.adaptive_difficulty else start
        self.difficulty: DifficultyState = create_difficulty_state(start, ceiling)

        self.state: GameState = create_initial_state()
        self.target = ""
        self.bag: List[str] = [BLANK]
        self.feedback = ""
        self.phase = IDLE

        self._ticker: Optional[Timer] = None
        self._round_timer: Optional[Timer] = None
        self._duration_timer: Optional[Timer] = None
        self._continue_by_key = False

    # -- derived values --

    @property
    def level(self) -> int:
        return level_from_word_length(self.difficulty.current_word_length)

    @property
    def score(self) -> float:
        return efficiency_score(self.level, self.difficulty.completed_words)

    def snapshot(self) -> Tuple[GameState, str]:
        return self.state, self.target

    # -- lifecycle --

    def start(self) -> None:
        if self.phase != IDLE:
            return
        self._begin_round()
        self.input_source.attach(self.key)
        if self.config.duration:
            self._duration_timer = self.scheduler.set_timer(self.config.duration, self._expire)

    def stop(self) -> None:
        if self.phase == STOPPED:
            return
        self.phase = STOPPED
        self._stop_ticker()
        for timer in (self._round_timer, self._duration_timer):
            if timer is not None:
                timer.stop()
        self._round_timer = None
        self._duration_timer = None
        self.input_source.detach()
        logger.info(
            "Session stopped: %d words, level %d, score %.1f",
            self.difficulty.completed_words,
            self.level,
            self.score,
        )

    def _expire(self) -> None:
        self._duration_timer = None
        self._finish()

    def _finish(self) -> None:
        self.stop()
        self._render(goodbye_screen(self.difficulty.completed_words, self.score))
        if self.on_exit is not None:
            self.on_exit()

    # -- events --

    def tick(self) -> None:
        if self.phase != RUNNING:
            return
        spawned = draw(self.bag, self.rng)
        self.state = advance_tick(self.state, spawned, self.target)
        self._play(tick_sound(self.state.tick_count))
        self._render_game()

    def key(self, ch: str) -> None:
        if self.phase == AWAITING_CONTINUE:
            self._answer(ch)
            return
        if self.phase != RUNNING:
            return

        result = resolve(ch, self.state, self.target)
        self.state = result.state
        self.feedback = result.message
        if result.sound_cue:
            self._play(result.sound_cue)
        if result.feedback_kind == SUCCESS:
            self.bag = generate_bag(self.state.typed_progress, self.target)

        if result.is_complete:
            self._complete_round()
        else:
            self._render_game()

    def _answer(self, ch: str) -> None:
        if not self._continue_by_key:
            return
        answer = ch.lower()
        if answer == "y":
            self._begin_round()
        elif answer == "n":
            self._finish()

    # -- rounds --

    def _begin_round(self) -> None:
        self.target = self._pick_target()
        self.state = create_initial_state()
        self.bag = generate_bag(self.state.typed_progress, self.target)
        self.feedback = ""
        self._continue_by_key = False
        self._round_timer = None
        self.phase = RUNNING
        logger.info("New round: %r (length %d)", self.target, len(self.target))
        self._start_ticker()
        self._render_game()

    def _next_round(self) -> None:
        self._round_timer = None
        if self.phase == AWAITING_CONTINUE:
            self._begin_round()

    def _complete_round(self) -> None:
        self._stop_ticker()
        stats = classify(self.state.error_count, self.state.missed_letters)
        self.difficulty, progression = update_difficulty(self.difficulty, self.target, stats)
        logger.info(
            "Round done: %r errors=%d missed=%d -> %s (length %d)",
            self.target,
            stats.error_count,
            stats.missed_letters,
            progression.progression_type,
            progression.new_word_length,
        )
        self.phase = AWAITING_CONTINUE

        if self.config.show_completion_screens:
            message = progression.message if self.config.show_progression_screens else ""
            self._render(
                completion_screen(
                    self.target,
                    self.level,
                    self.difficulty.completed_words,
                    self.score,
                    stats,
                    feedback(stats),
                    message,
                )
            )
            self._play("victory")
            self._continue_by_key = True
        else:
            self.feedback = f'★★★ Word done! "{self.target}" ★★★'
            self._render_game()
            self._round_timer = self.scheduler.set_timer(ROUND_DELAY, self._next_round)

    def _pick_target(self) -> str:
        length = self.difficulty.current_word_length
        used = self.difficulty.used_words
        word = select_word(self.pool, length, used, self.rng)
        if word is None:
            nearest = closest_length(self.pool, length)
            logger.warning("No word of length %d, trying length %d", length, nearest)
            word = select_word(self.pool, nearest, used, self.rng)
        if word is None:
            logger.warning("Word pool is empty, using %r", self.config.fallback_word)
            word = self.config.fallback_word
        return word

    # -- timers --

    def _start_ticker(self) -> None:
        self._stop_ticker()
        self._ticker = self.scheduler.set_interval(self.config.tick_interval, self.tick)

    def _stop_ticker(self) -> None:
        if self._ticker is not None:
            self._ticker.stop()
            self._ticker = None

    # -- output --

    def _render_game(self) -> None:
        self._render(
            game_screen(
                self.state,
                self.target,
                self.level,
                self.difficulty.completed_words,
                self.score,
                self.feedback,
                CATCH_LINE_INDEX,
            )
        )

    def _render(self, lines: List[str]) -> None:
        try:
            self.renderer.clear()
            self.renderer.render(lines)
        except Exception:
            logger.debug("Render failed", exc_info=True)

    def _play(self, cue: str) -> None:
        try:
            self.sound.play(cue)
        except Exception:
            logger.debug("Sound cue %s failed", cue, exc_info=True)
