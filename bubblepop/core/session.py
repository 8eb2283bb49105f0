from __future__ import annotations
import dataclasses
import logging
import random
from typing import Callable, List, Optional, Protocol, Tuple

from bubblepop.api.bubble import Bubble, PopEffect
from bubblepop.api.config import GameConfig
from bubblepop.api.events import Event, FastTick, PopCommand, Restart, SlowTick
from bubblepop.api.state import HighScoreEntry, SessionSnapshot
from bubblepop.const import COUNTDOWN_START, EFFECT_LIFETIME_SEC, POP_GRACE_SEC, TOP_SCORES_SHOWN

from .factory import make_bubble
from .movement import advance
from .placement import place_bubbles
from .scheduler import DeferredScheduler
from .scoring import ScoreKeeper, StreakPolicy

logger = logging.getLogger(__name__)


class HighScoreSink(Protocol):
    def update(self, name: str, score: int) -> List[HighScoreEntry]:
        ...


class GameSession:
    """
    One play from the 3-2-1 countdown through game over.

    The session never keeps time on its own. A tick source feeds it SlowTick
    (1 Hz) and FastTick (30 Hz) events, the presentation layer feeds it
    PopCommand and Restart, and everything goes through dispatch() one event
    at a time. Deferred removals (popped bubbles, "+10s" effects) are run at
    the start of each dispatch against the injected clock.
    """

    def __init__(
        self,
        player_name: str,
        area_size: Tuple[float, float],
        config: Optional[GameConfig] = None,
        highscores: Optional[HighScoreSink] = None,
        rng=None,
        clock: Optional[Callable[[], float]] = None,
        streak_policy: Optional[StreakPolicy] = None,
    ):
        self.player_name = player_name
        self.area_size = area_size
        self.config = config or GameConfig()
        self.highscores = highscores
        self.rng = rng or random.Random()
        self.scheduler = DeferredScheduler(clock)
        self.scorer = ScoreKeeper(streak_policy)

        self.score = 0
        self.time_remaining = 0
        self.bubbles: List[Bubble] = []
        self.popping_ids: set[str] = set()
        self.pop_effects: List[PopEffect] = []
        self.top_three: List[HighScoreEntry] = []
        self.is_game_over = False
        self._duration = self.config.session_duration_sec

        self._enter_countdown()

    # ------------- state -------------
    @property
    def is_active(self) -> bool:
        return not self.is_counting_down and not self.is_game_over

    @property
    def last_popped_type(self):
        return self.scorer.last_popped_type

    @property
    def pop_streak(self) -> int:
        return self.scorer.streak

    @property
    def elapsed_fraction(self) -> float:
        if self._duration <= 0:
            return 1.0
        f = (self._duration - self.time_remaining) / self._duration
        return max(0.0, min(1.0, f))

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            player_name=self.player_name,
            score=self.score,
            time_remaining=self.time_remaining,
            is_counting_down=self.is_counting_down,
            countdown_value=self.countdown_value,
            is_game_over=self.is_game_over,
            bubbles=tuple(dataclasses.replace(b) for b in self.bubbles),
            popping_ids=frozenset(self.popping_ids),
            pop_effects=tuple(self.pop_effects),
            last_popped_type=self.last_popped_type,
            pop_streak=self.pop_streak,
            top_three=tuple(self.top_three),
        )

    # ------------- external inputs -------------
    def set_play_area(self, area_size: Tuple[float, float]) -> None:
        self.area_size = area_size

    def update_config(self, config: GameConfig) -> None:
        # picked up by the next refresh/placement, never applied to current bubbles
        self.config = config

    def dispatch(self, event: Event) -> None:
        self.scheduler.run_due()

        if isinstance(event, SlowTick):
            self.on_slow_tick()
        elif isinstance(event, FastTick):
            self.on_fast_tick(event.dt)
        elif isinstance(event, PopCommand):
            self.pop(event.bubble_id)
        elif isinstance(event, Restart):
            self.restart()
        else:
            raise TypeError(f"Unknown event: {event!r}")

    def on_slow_tick(self) -> None:
        if self.is_game_over:
            return

        if self.is_counting_down:
            self.countdown_value -= 1
            if self.countdown_value <= 0:
                self.countdown_value = 0
                self.is_counting_down = False
                self._start()
            return

        if self.time_remaining <= 0:
            return

        self.time_remaining -= 1
        self._refresh_bubbles()
        if self.time_remaining == 0:
            self._finish()

    def on_fast_tick(self, dt: float) -> None:
        if not self.is_active:
            return
        self.bubbles = advance(self.bubbles, self.area_size, self.elapsed_fraction, dt, self.config)

    def pop(self, bubble_id: str) -> None:
        # expired grace windows first, so a removed bubble cannot be popped
        self.scheduler.run_due()
        if not self.is_active or bubble_id in self.popping_ids:
            return
        bubble = self._find(bubble_id)
        if bubble is None:
            return

        result = self.scorer.pop(bubble)
        self.popping_ids.add(bubble.id)
        self.score += result.points
        self.time_remaining += result.time_bonus

        if result.effect is not None:
            self.pop_effects.append(result.effect)
            effect_id = result.effect.id
            self.scheduler.call_later(EFFECT_LIFETIME_SEC, lambda: self.remove_effect(effect_id))

        self.scheduler.call_later(POP_GRACE_SEC, lambda: self._remove_popped(bubble_id))
        logger.debug("[pop] type=%s points=%d streak=%d score=%d",
                     bubble.type.label, result.points, self.scorer.streak, self.score)

    def remove_effect(self, effect_id: str) -> None:
        self.pop_effects = [e for e in self.pop_effects if e.id != effect_id]

    def restart(self) -> None:
        """Play again: only honoured once the session is over."""
        if not self.is_game_over:
            return
        self.is_game_over = False
        self.bubbles = []
        self.popping_ids.clear()
        self.pop_effects = []
        self.top_three = []
        self._enter_countdown()
        logger.info("[session-restart] player=%s", self.player_name)

    # ------------- helpers -------------
    def _enter_countdown(self) -> None:
        self.is_counting_down = True
        self.countdown_value = COUNTDOWN_START

    def _start(self) -> None:
        self.score = 0
        self.is_game_over = False
        self._duration = self.config.session_duration_sec
        self.time_remaining = self._duration
        self.popping_ids.clear()
        self.pop_effects = []
        self.top_three = []
        self.scorer.reset()

        count = self.rng.randint(1, self.config.max_bubbles)
        self.bubbles = place_bubbles(count, self.area_size, [], self.config, self.rng)
        logger.info("[session-start] player=%s duration=%ds bubbles=%d",
                    self.player_name, self.time_remaining, len(self.bubbles))

    def _refresh_bubbles(self) -> None:
        target = self.rng.randint(1, self.config.max_bubbles)
        keep = min(len(self.bubbles), target)
        kept = self.rng.sample(self.bubbles, keep)
        # top-ups skip the overlap check
        for _ in range(target - keep):
            kept.append(make_bubble(self.area_size, self.config, self.rng))
        self.bubbles = kept

    def _finish(self) -> None:
        if self.highscores is not None:
            ranked = self.highscores.update(self.player_name, self.score)
            self.top_three = list(ranked[:TOP_SCORES_SHOWN])
        self.is_game_over = True
        logger.info("[game-over] player=%s score=%d", self.player_name, self.score)

    def _find(self, bubble_id: str) -> Optional[Bubble]:
        for b in self.bubbles:
            if b.id == bubble_id:
                return b
        return None

    def _remove_popped(self, bubble_id: str) -> None:
        self.bubbles = [b for b in self.bubbles if b.id != bubble_id]
        self.popping_ids.discard(bubble_id)

