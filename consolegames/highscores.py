"""Best scores per snake game mode, kept in a small binary file."""

from __future__ import annotations

import struct
from enum import IntEnum
from pathlib import Path

MODE_NUMBER = 6
DEFAULT_PATH = Path("data") / "highest_score.dat"

_RECORD = struct.Struct(f"<{MODE_NUMBER}i")


class Mode(IntEnum):
    """Entries of the snake game menu; the first six are playable modes."""

    BASIC = 0
    ADVANCED = 1
    EXPERT = 2
    HUMAN_VS_HUMAN = 3
    HUMAN_VS_AI = 4
    AI_VS_AI = 5
    RESET_HIGHEST_SCORE = 6
    QUIT = 7


class HighScores:
    """One 32-bit little-endian score per playable mode, stored in ``path``."""

    def __init__(self, path=DEFAULT_PATH):
        self.path = Path(path)

    @staticmethod
    def _slot(mode):
        mode = Mode(mode)
        if mode >= MODE_NUMBER:
            raise ValueError(f"{mode.name} has no high score")
        return int(mode)

    def _load(self):
        data = self.path.read_bytes()
        if len(data) < _RECORD.size:
            raise ValueError(f"{self.path} holds {len(data)} bytes, expected {_RECORD.size}")
        return list(_RECORD.unpack_from(data))

    def _save(self, scores):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_bytes(_RECORD.pack(*scores))

    def read(self, mode):
        """Return the recorded score of ``mode``."""
        slot = self._slot(mode)
        return self._load()[slot]

    def update(self, mode, score):
        """Record ``score`` for ``mode``, leaving the other modes untouched."""
        slot = self._slot(mode)
        scores = self._load()
        scores[slot] = score
        self._save(scores)

    def reset(self):
        """Set every mode's score to zero."""
        self._save([0] * MODE_NUMBER)