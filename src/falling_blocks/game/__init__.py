"""Rules engine of the falling-block puzzle.

Exports the core game engine and supporting classes:
- Cell, ShapeKind, Orientation, geometry: Static shape catalog
- Piece: Falling piece with orientation and board anchor
- GameGrid: Grid of locked cells, stamping and row clearing
- ScoringRules: Points awarded per lock
- GameEvents: Score / next-piece / game-over notifications
- GameEngine: Movement, rotation, locking, spawning and game over
"""

from .shapes import Cell, Orientation, ShapeGeometry, ShapeKind, SHAPE_CATALOG, geometry
from .pieces import Piece, PieceDescriptor
from .grid import GameGrid, format_grid, print_grid
from .rules import ScoringRules
from .events import GameEvents
from .core import Action, GameConfig, GameEngine, GamePhase

__all__ = [
    "Cell",
    "Orientation",
    "ShapeGeometry",
    "ShapeKind",
    "SHAPE_CATALOG",
    "geometry",
    "Piece",
    "PieceDescriptor",
    "GameGrid",
    "format_grid",
    "print_grid",
    "ScoringRules",
    "GameEvents",
    "Action",
    "GameConfig",
    "GameEngine",
    "GamePhase",
]
