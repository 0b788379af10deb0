"""Falling-block puzzle: rules engine plus pygame and gymnasium drivers."""

from .game import (
    Action,
    Cell,
    GameConfig,
    GameEngine,
    GameEvents,
    GamePhase,
    Orientation,
    ScoringRules,
    ShapeKind,
)

__all__ = [
    "Action",
    "Cell",
    "GameConfig",
    "GameEngine",
    "GameEvents",
    "GamePhase",
    "Orientation",
    "ScoringRules",
    "ShapeKind",
]

__version__ = "0.1.0"
