"""Persist the game state and the best score in a JSON file."""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

BEST_SCORE_KEY = "best_score"
GAME_STATE_KEY = "game_state"


class GameStorage:
    """
    Key-value storage of the game backed by a JSON document.

    A missing or unreadable file reads as an empty store.
    """

    def __init__(self, path: str | Path):
        """
        Parameters
        ----------
        path : str or Path
            Location of the JSON document, created on first write.
        """
        self.path = Path(path)

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as error:
            logger.warning("Ignoring unreadable state file %s: %s", self.path, error)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # ##>: Write aside then swap, an interrupted write never truncates the saved state.
        staging = self.path.with_name(self.path.name + ".tmp")
        staging.write_text(json.dumps(data), encoding="utf-8")
        staging.replace(self.path)

    def get_best_score(self) -> int:
        return int(self._read().get(BEST_SCORE_KEY, 0))

    def set_best_score(self, score: int) -> None:
        data = self._read()
        data[BEST_SCORE_KEY] = int(score)
        self._write(data)

    def get_game_state(self) -> dict | None:
        """Saved game, as produced by ``TileGame.serialize``, or None."""
        return self._read().get(GAME_STATE_KEY)

    def set_game_state(self, state: dict) -> None:
        data = self._read()
        data[GAME_STATE_KEY] = state
        self._write(data)

    def clear_game_state(self) -> None:
        data = self._read()
        if data.pop(GAME_STATE_KEY, None) is not None:
            self._write(data)
