"""
High score persistence

The best score is kept in a small JSON object under a single key, stored as
a string. Anything unreadable or malformed counts as 0; write failures are
logged and play carries on.
"""

import json
import logging
from pathlib import Path
from typing import Union

from snake_arcade.config import DEFAULT_HIGH_SCORE_FILE, HIGH_SCORE_KEY

logger = logging.getLogger(__name__)


def parse_score(raw) -> int:
    """Coerce a stored value to a non-negative int, 0 if it is not one"""
    if isinstance(raw, bool):
        return 0
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return 0
    return max(value, 0)


class HighScoreStore:
    """Reads and writes the best score file"""

    def __init__(self, path: Union[str, Path] = DEFAULT_HIGH_SCORE_FILE,
                 key: str = HIGH_SCORE_KEY):
        self.path = Path(path)
        self.key = key

    def load(self) -> int:
        """Stored best score, 0 if absent or unusable"""
        if not self.path.exists():
            return 0
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable high score file %s: %s", self.path, e)
            return 0

        if not isinstance(data, dict) or self.key not in data:
            logger.warning("High score file %s has no %r entry", self.path, self.key)
            return 0

        score = parse_score(data[self.key])
        if str(score) != str(data[self.key]).strip():
            logger.warning("Malformed high score %r in %s, using %d",
                           data[self.key], self.path, score)
        return score

    def save(self, score: int) -> bool:
        """Persist score; returns False if the file could not be written"""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump({self.key: str(score)}, f)
        except OSError as e:
            logger.warning("Could not save high score to %s: %s", self.path, e)
            return False
        logger.info("High score %d saved to %s", score, self.path)
        return True
