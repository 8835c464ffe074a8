from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Union


logger = logging.getLogger(__name__)

DEFAULT_PATH = Path.home() / ".falling_blocks" / "best_score.json"


class BestScoreStore:
    """Keeps the best score seen across sessions in a small JSON file.

    Storage problems are logged and otherwise ignored; callers always get a
    usable value back.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self.path = Path(path) if path is not None else DEFAULT_PATH
        self.best = self.load()

    def load(self) -> int:
        try:
            if not self.path.exists():
                return 0
            data = json.loads(self.path.read_text(encoding="utf-8"))
            value = int(data["best_score"])
        except (OSError, ValueError, TypeError, KeyError) as e:
            logger.warning("Could not read best score from %s: %s", self.path, e)
            return 0
        return max(0, value)

    def record(self, score: int) -> int:
        if score <= self.best:
            return self.best
        self.best = int(score)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({"best_score": self.best}), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save best score to %s: %s", self.path, e)
        return self.best
