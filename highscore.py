import json
import logging
from pathlib import Path

from config import HIGH_SCORE_PATH

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Keep the best score in a small JSON file between sessions.

    Storage problems never reach the game: an unreadable file loads as 0
    and a failed write is logged and otherwise ignored.
    """

    def __init__(self, path=HIGH_SCORE_PATH):
        self.path = Path(path)

    def load(self):
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            logger.info("No high score file at %s, starting from 0", self.path)
            return 0
        except (OSError, ValueError) as exc:
            logger.warning("Could not read high score from %s: %s", self.path, exc)
            return 0

        value = data.get("high_score") if isinstance(data, dict) else None
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            logger.warning("Ignoring malformed high score in %s: %r", self.path, data)
            return 0
        return value

    def save(self, score):
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({"high_score": int(score)}), encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not save high score to %s: %s", self.path, exc)
            return False
        logger.debug("High score %d saved to %s", score, self.path)
        return True
