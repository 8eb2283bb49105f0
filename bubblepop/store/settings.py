from __future__ import annotations
import dataclasses
import logging
from pathlib import Path
from typing import Optional

import yaml

from bubblepop.api.config import GameConfig
from bubblepop.const import (
    MAX_BUBBLES_MAX,
    MAX_BUBBLES_MIN,
    SESSION_DURATION_MAX,
    SESSION_DURATION_MIN,
    SESSION_DURATION_STEP,
)

from .highscores import default_runtime_dir

logger = logging.getLogger(__name__)


def clamp_duration(value: int) -> int:
    # the settings stepper moves in 5 s steps from the minimum
    value = max(SESSION_DURATION_MIN, min(SESSION_DURATION_MAX, int(value)))
    steps = round((value - SESSION_DURATION_MIN) / SESSION_DURATION_STEP)
    return SESSION_DURATION_MIN + steps * SESSION_DURATION_STEP


def clamp_max_bubbles(value: int) -> int:
    return max(MAX_BUBBLES_MIN, min(MAX_BUBBLES_MAX, int(value)))


class SettingsStore:
    """Game duration and bubble limit, persisted between sessions."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else default_runtime_dir() / "settings.yaml"

    def load(self, base: Optional[GameConfig] = None) -> GameConfig:
        cfg = base or GameConfig()
        if not self.path.exists():
            return cfg

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
            duration = clamp_duration(raw.get("game_duration", cfg.session_duration_sec))
            max_bubbles = clamp_max_bubbles(raw.get("max_bubbles", cfg.max_bubbles))
        except (OSError, yaml.YAMLError, AttributeError, TypeError, ValueError) as exc:
            logger.warning("[store-decode] path=%s error=%s; using defaults", self.path, exc)
            return cfg

        return dataclasses.replace(cfg, session_duration_sec=duration, max_bubbles=max_bubbles)

    def save(self, game_duration: Optional[int] = None, max_bubbles: Optional[int] = None) -> GameConfig:
        """Persist whichever settings are given (clamped) and return the result."""
        current = self.load()
        duration = clamp_duration(game_duration) if game_duration is not None else current.session_duration_sec
        bubbles = clamp_max_bubbles(max_bubbles) if max_bubbles is not None else current.max_bubbles

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            yaml.safe_dump({"game_duration": duration, "max_bubbles": bubbles}, f, sort_keys=False)
        logger.info("[settings-save] game_duration=%d max_bubbles=%d", duration, bubbles)
        return dataclasses.replace(current, session_duration_sec=duration, max_bubbles=bubbles)

    def reset(self) -> GameConfig:
        """Back to defaults."""
        if self.path.exists():
            self.path.unlink()
        return GameConfig()
