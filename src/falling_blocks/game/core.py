from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

import numpy as np

from .events import GameEvents
from .grid import GameGrid
from .pieces import Piece, PieceDescriptor
from .rules import ScoringRules
from .shapes import Orientation, ShapeKind


logger = logging.getLogger(__name__)

# Smallest board that holds a horizontal I piece at the spawn anchor.
MIN_SIZE = 4


class Action(IntEnum):
    NONE = 0
    LEFT = 1
    RIGHT = 2
    ROTATE = 3
    DOWN = 4


class GamePhase(IntEnum):
    SPAWNING = 0
    FALLING = 1
    LOCKING = 2
    ROW_CLEARING = 3
    GAME_OVER = 4


@dataclass
class GameConfig:
    height: int = 20
    width: int = 10
    random_seed: Optional[int] = None
    gravity_ms: int = 500


class GameEngine:
    """Rules engine: owns the grid, the falling piece and the next piece.

    The falling piece is always stamped into the grid. Every move erases it,
    tests the destination against what is left, and stamps it again.
    Commands are no-ops once the game is over, until `reset()`.
    """

    def __init__(
        self,
        height: int = 20,
        width: int = 10,
        rng: Optional[random.Random] = None,
        rules: Optional[ScoringRules] = None,
        events: Optional[GameEvents] = None,
    ) -> None:
        if height < MIN_SIZE or width < MIN_SIZE:
            raise ValueError(f"board must be at least {MIN_SIZE}x{MIN_SIZE}, got {height}x{width}")
        self.height = int(height)
        self.width = int(width)
        self.rng = rng if rng is not None else random.Random()
        self.rules = rules or ScoringRules()
        self.events = events if events is not None else GameEvents()
        self.grid = GameGrid(self.height, self.width)
        self.spawn_x = self.width // 2 - 2
        self.spawn_y = 0
        self.score = 0
        self.lines_cleared_total = 0
        self.phase = GamePhase.SPAWNING
        self._current: Optional[Piece] = None
        self._next: Optional[Piece] = None
        self._start()

    @classmethod
    def from_config(cls, config: GameConfig, **kwargs) -> "GameEngine":
        kwargs.setdefault("rng", random.Random(config.random_seed))
        return cls(config.height, config.width, **kwargs)

    # Queries

    @property
    def board(self) -> np.ndarray:
        snapshot = self.grid.clone_state()
        snapshot.setflags(write=False)
        return snapshot

    @property
    def next_piece(self) -> PieceDescriptor:
        assert self._next is not None
        return self._next.descriptor()

    @property
    def current_piece(self) -> PieceDescriptor:
        assert self._current is not None
        return self._current.descriptor()

    @property
    def current_position(self) -> tuple[int, int]:
        assert self._current is not None
        return self._current.x, self._current.y

    @property
    def game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    # Commands

    def tick_down(self) -> None:
        if self.game_over:
            return
        piece = self._active()

        if piece.board_bottom == self.height - 1:
            self._lock(piece)
            self._promote_next()
            return

        if self._has_landed(piece):
            self._lock(piece)
            if piece.board_top <= 0:
                self._end_game()
                return
            self._promote_next()
            return

        self.grid.erase(piece)
        piece.y += 1
        self.grid.stamp(piece)

    def rotate(self) -> None:
        if self.game_over:
            return
        piece = self._active()
        if self._outside_vertical_range(piece):
            return

        candidate = piece.rotated()
        if (
            candidate.board_bottom > self.height - 1
            or candidate.board_left < 0
            or candidate.board_right > self.width - 1
        ):
            return

        current_geo = piece.geometry
        new_geo = candidate.geometry
        for i in range(new_geo.top, new_geo.bottom + 1):
            for j in range(new_geo.left, new_geo.right + 1):
                if (
                    new_geo.is_occupied(i, j)
                    and not current_geo.is_occupied(i, j)
                    and not self.grid.is_empty(piece.y + i, piece.x + j)
                ):
                    return

        self.grid.erase(piece)
        piece.orientation = candidate.orientation
        self.grid.stamp(piece)

    def move_left(self) -> None:
        self._shift(-1)

    def move_right(self) -> None:
        self._shift(1)

    def reset(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            self.rng.seed(seed)
        self.grid.clear()
        self.score = 0
        self.lines_cleared_total = 0
        self.events.emit_score_changed(self.score)
        self._start()
        logger.info("Game reset")

    def step(self, action: Action) -> None:
        if action == Action.LEFT:
            self.move_left()
        elif action == Action.RIGHT:
            self.move_right()
        elif action == Action.ROTATE:
            self.rotate()
        elif action == Action.DOWN:
            self.tick_down()
        elif action == Action.NONE:
            pass

    # Internals

    def _active(self) -> Piece:
        assert self._current is not None
        return self._current

    def _random_piece(self) -> Piece:
        kind = self.rng.choice(list(ShapeKind))
        return Piece(kind, Orientation.BASE, self.spawn_x, self.spawn_y)

    def _start(self) -> None:
        self.phase = GamePhase.SPAWNING
        self._current = self._random_piece()
        self._next = self._random_piece()
        self.events.emit_next_piece_changed()
        self._place_spawned(self._current)
        self.phase = GamePhase.FALLING

    def _outside_vertical_range(self, piece: Piece) -> bool:
        # Pieces still entering from above, or resting on the floor, cannot move sideways or rotate.
        return piece.board_top < 0 or piece.board_bottom == self.height - 1

    def _shift(self, dx: int) -> None:
        if self.game_over:
            return
        piece = self._active()
        if self._outside_vertical_range(piece):
            return
        if dx < 0 and piece.board_left == 0:
            return
        if dx > 0 and piece.board_right == self.width - 1:
            return

        geo = piece.geometry
        for i in range(geo.top, geo.bottom + 1):
            for j in range(geo.left, geo.right + 1):
                if (
                    geo.is_occupied(i, j)
                    and not geo.is_occupied(i, j + dx)
                    and not self.grid.is_empty(piece.y + i, piece.x + j + dx)
                ):
                    return

        self.grid.erase(piece)
        piece.x += dx
        self.grid.stamp(piece)

    def _has_landed(self, piece: Piece) -> bool:
        """True when some occupied cell rests on a cell of another, already locked piece."""
        geo = piece.geometry
        for i in range(geo.top, geo.bottom + 1):
            row_below = piece.y + i + 1
            if row_below < 0:
                continue
            for j in range(geo.left, geo.right + 1):
                if (
                    geo.is_occupied(i, j)
                    and not geo.is_occupied(i + 1, j)
                    and not self.grid.is_empty(row_below, piece.x + j)
                ):
                    return True
        return False

    def _lock(self, piece: Piece) -> None:
        self.phase = GamePhase.LOCKING
        logger.debug("Locked %s at x=%d y=%d (%s)", piece.kind.name, piece.x, piece.y, piece.orientation.name)

        self.phase = GamePhase.ROW_CLEARING
        completed = self.grid.completed_rows(range(piece.board_top, piece.board_bottom + 1))
        if not completed:
            return
        lines = self.grid.remove_rows(completed)
        self.lines_cleared_total += lines
        self.score += self.rules.score_for_lines(lines)
        logger.info("Cleared %d row(s) %s, score=%d", lines, completed, self.score)
        self.events.emit_score_changed(self.score)

    def _promote_next(self) -> None:
        self.phase = GamePhase.SPAWNING
        assert self._next is not None
        piece = self._next
        piece.orientation = Orientation.BASE
        piece.x, piece.y = self.spawn_x, self.spawn_y
        self._current = piece
        self._next = self._random_piece()
        self.events.emit_next_piece_changed()
        self._place_spawned(piece)
        self.phase = GamePhase.FALLING

    def _place_spawned(self, piece: Piece) -> None:
        clean_rows = self.grid.count_clean_rows(piece.board_left, piece.board_right)
        if clean_rows < piece.height:
            # Only the lowest clean_rows rows fit; the rest stays above the grid.
            piece.y = clean_rows - 1 - piece.bottom_border
            logger.debug("Spawned %s clipped to %d visible row(s)", piece.kind.name, clean_rows)
        else:
            logger.debug("Spawned %s", piece.kind.name)
        self.grid.stamp(piece)

    def _end_game(self) -> None:
        self.phase = GamePhase.GAME_OVER
        logger.info("Game over, final score=%d", self.score)
        self.events.emit_game_over(self.score)
