"""Best score persistence."""

from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

BEST_KEY = "2048:bestScore"


class BestScoreManager:
    """Loads and saves the all-time best score from a JSON file."""

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath
        self._best: int = 0
        self._load()

    # -- persistence ----------------------------------------------------------

    def _load(self) -> None:
        if not self.filepath.exists():
            return
        try:
            data = json.loads(self.filepath.read_text())
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable best score file %s: %s", self.filepath, exc)
            return
        value = data.get(BEST_KEY, 0) if isinstance(data, dict) else 0
        if isinstance(value, int) and not isinstance(value, bool) and value > 0:
            self._best = value
        elif value:
            logger.warning("Ignoring invalid best score %r in %s", value, self.filepath)

    def save(self) -> None:
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self.filepath.write_text(json.dumps({BEST_KEY: self._best}, indent=2) + "\n")

    # -- queries --------------------------------------------------------------

    @property
    def best(self) -> int:
        return self._best

    def submit(self, score: int) -> bool:
        """Record *score* if it beats the stored best.  Returns True if saved."""
        if score <= self._best:
            return False
        self._best = score
        self.save()
        logger.debug("New best score %d saved to %s", score, self.filepath)
        return True
