from __future__ import annotations
import logging
import uuid
from pathlib import Path
from typing import List, Optional

import yaml

from bubblepop.api.state import HighScoreEntry
from bubblepop.const import HIGH_SCORE_LIMIT

logger = logging.getLogger(__name__)


def default_runtime_dir() -> Path:
    return Path(__file__).resolve().parents[2] / "runtime"


class HighScoreStore:
    """
    Top-10 table persisted as YAML. One entry per player name; a player's
    score only ever goes up.
    """

    def __init__(self, path: Optional[Path] = None, limit: int = HIGH_SCORE_LIMIT):
        self.path = Path(path) if path is not None else default_runtime_dir() / "highscores.yaml"
        self.limit = limit

    def load_top(self) -> List[HighScoreEntry]:
        """
        Returns the stored entries, best first. A missing or unreadable file
        means no scores yet.
        """
        if not self.path.exists():
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f)
            entries = [
                HighScoreEntry(id=str(item["id"]), name=str(item["name"]), score=int(item["score"]))
                for item in (raw or [])
            ]
        except (OSError, yaml.YAMLError, KeyError, TypeError, ValueError) as exc:
            logger.warning("[store-decode] path=%s error=%s; treating as empty", self.path, exc)
            return []

        entries.sort(key=lambda e: e.score, reverse=True)
        return entries[: self.limit]

    def update(self, name: str, score: int) -> List[HighScoreEntry]:
        scores = self.load_top()

        for idx, entry in enumerate(scores):
            if entry.name == name:
                if score > entry.score:
                    scores[idx] = HighScoreEntry(id=entry.id, name=name, score=score)
                break
        else:
            scores.append(HighScoreEntry(id=uuid.uuid4().hex, name=name, score=score))

        # sort is stable: earlier holders of a tied score stay ahead
        scores.sort(key=lambda e: e.score, reverse=True)
        scores = scores[: self.limit]
        self._save(scores)
        logger.info("[highscore-update] name=%s score=%d entries=%d", name, score, len(scores))
        return scores

    def _save(self, scores: List[HighScoreEntry]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = [{"id": e.id, "name": e.name, "score": e.score} for e in scores]
        with open(self.path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, sort_keys=False)
