from __future__ import annotations

import random
from typing import Iterable, List, Tuple

import numpy as np

from falling_blocks.game import GameEngine, GameEvents, ShapeKind


class ScriptedRandom(random.Random):
    """Hands out the given kinds in order, then falls back to seeded draws."""

    def __init__(self, kinds: Iterable[ShapeKind], seed: int = 0) -> None:
        super().__init__(seed)
        self.kinds = list(kinds)

    def choice(self, seq):
        if self.kinds:
            return self.kinds.pop(0)
        return super().choice(seq)


class Recorder:
    def __init__(self, events: GameEvents) -> None:
        self.scores: List[int] = []
        self.next_changes = 0
        self.game_overs: List[int] = []
        events.on_score_changed(self.scores.append)
        events.on_next_piece_changed(self._next_changed)
        events.on_game_over(self.game_overs.append)

    def _next_changed(self) -> None:
        self.next_changes += 1


def make_engine(kinds: Iterable[ShapeKind], height: int = 20, width: int = 10) -> Tuple[GameEngine, Recorder]:
    events = GameEvents()
    recorder = Recorder(events)
    engine = GameEngine(height, width, rng=ScriptedRandom(kinds), events=events)
    return engine, recorder


def occupied(board: np.ndarray) -> List[Tuple[int, int]]:
    return sorted((int(r), int(c)) for r, c in zip(*np.nonzero(board)))
