from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Tuple

import numpy as np


class Cell(IntEnum):
    EMPTY = 0
    I = 1
    J = 2
    L = 3
    O = 4
    S = 5
    T = 6
    Z = 7


class ShapeKind(IntEnum):
    I = 1
    J = 2
    L = 3
    O = 4
    S = 5
    T = 6
    Z = 7


class Orientation(IntEnum):
    BASE = 0
    ROT90 = 1
    ROT180 = 2
    ROT270 = 3

    def next(self) -> "Orientation":
        return Orientation((self + 1) % 4)


@dataclass(frozen=True)
class ShapeGeometry:
    """Occupancy matrix of one (kind, orientation) pair and its tight borders.

    Borders are inclusive row/column offsets inside `matrix`.
    """

    matrix: np.ndarray
    top: int
    bottom: int
    left: int
    right: int

    @property
    def height(self) -> int:
        return self.bottom - self.top + 1

    @property
    def width(self) -> int:
        return self.right - self.left + 1

    def is_occupied(self, row: int, col: int) -> bool:
        rows, cols = self.matrix.shape
        if not (0 <= row < rows and 0 <= col < cols):
            return False
        return self.matrix[row, col] != Cell.EMPTY

    def cells(self) -> List[Tuple[int, int]]:
        return [(int(r), int(c)) for r, c in zip(*np.nonzero(self.matrix))]


# Local matrices, one per orientation in Orientation order.
# Every base orientation touches local row 0 so a fresh piece spawns flush with the top.
_MASKS: Dict[ShapeKind, Tuple[List[List[int]], ...]] = {
    ShapeKind.I: (
        [[1, 1, 1, 1],
         [0, 0, 0, 0],
         [0, 0, 0, 0],
         [0, 0, 0, 0]],
        [[0, 0, 1, 0],
         [0, 0, 1, 0],
         [0, 0, 1, 0],
         [0, 0, 1, 0]],
        [[0, 0, 0, 0],
         [1, 1, 1, 1],
         [0, 0, 0, 0],
         [0, 0, 0, 0]],
        [[0, 1, 0, 0],
         [0, 1, 0, 0],
         [0, 1, 0, 0],
         [0, 1, 0, 0]],
    ),
    ShapeKind.J: (
        [[0, 1, 0, 0, 0],
         [0, 1, 1, 1, 0],
         [0, 0, 0, 0, 0]],
        [[0, 0, 1, 1, 0],
         [0, 0, 1, 0, 0],
         [0, 0, 1, 0, 0],
         [0, 0, 0, 0, 0]],
        [[0, 0, 0, 0, 0],
         [0, 1, 1, 1, 0],
         [0, 0, 0, 1, 0],
         [0, 0, 0, 0, 0]],
        [[0, 0, 1, 0],
         [0, 0, 1, 0],
         [0, 1, 1, 0],
         [0, 0, 0, 0]],
    ),
    ShapeKind.L: (
        [[0, 0, 0, 1, 0],
         [0, 1, 1, 1, 0],
         [0, 0, 0, 0, 0]],
        [[0, 0, 1, 0, 0],
         [0, 0, 1, 0, 0],
         [0, 0, 1, 1, 0],
         [0, 0, 0, 0, 0]],
        [[0, 0, 0, 0, 0],
         [0, 1, 1, 1, 0],
         [0, 1, 0, 0, 0],
         [0, 0, 0, 0, 0]],
        [[0, 1, 1, 0],
         [0, 0, 1, 0],
         [0, 0, 1, 0],
         [0, 0, 0, 0]],
    ),
    ShapeKind.O: (
        [[0, 1, 1, 0],
         [0, 1, 1, 0],
         [0, 0, 0, 0]],
    ) * 4,
    ShapeKind.S: (
        [[0, 0, 1, 1, 0],
         [0, 1, 1, 0, 0],
         [0, 0, 0, 0, 0]],
        [[0, 0, 1, 0, 0],
         [0, 0, 1, 1, 0],
         [0, 0, 0, 1, 0],
         [0, 0, 0, 0, 0]],
        [[0, 0, 1, 1, 0],
         [0, 1, 1, 0, 0],
         [0, 0, 0, 0, 0]],
        [[0, 1, 0, 0],
         [0, 1, 1, 0],
         [0, 0, 1, 0],
         [0, 0, 0, 0]],
    ),
    ShapeKind.T: (
        [[0, 0, 1, 0, 0],
         [0, 1, 1, 1, 0],
         [0, 0, 0, 0, 0]],
        [[0, 0, 1, 0, 0],
         [0, 0, 1, 1, 0],
         [0, 0, 1, 0, 0],
         [0, 0, 0, 0, 0]],
        [[0, 0, 0, 0, 0],
         [0, 1, 1, 1, 0],
         [0, 0, 1, 0, 0],
         [0, 0, 0, 0, 0]],
        [[0, 0, 1, 0],
         [0, 1, 1, 0],
         [0, 0, 1, 0],
         [0, 0, 0, 0]],
    ),
    ShapeKind.Z: (
        [[0, 1, 1, 0, 0],
         [0, 0, 1, 1, 0],
         [0, 0, 0, 0, 0]],
        [[0, 0, 0, 1, 0],
         [0, 0, 1, 1, 0],
         [0, 0, 1, 0, 0],
         [0, 0, 0, 0, 0]],
        [[0, 1, 1, 0, 0],
         [0, 0, 1, 1, 0],
         [0, 0, 0, 0, 0]],
        [[0, 0, 1, 0],
         [0, 1, 1, 0],
         [0, 1, 0, 0],
         [0, 0, 0, 0]],
    ),
}


def _build_geometry(kind: ShapeKind, mask: List[List[int]]) -> ShapeGeometry:
    matrix = np.array(mask, dtype=np.int8) * np.int8(kind)
    matrix.setflags(write=False)
    rows = np.flatnonzero(np.any(matrix != 0, axis=1))
    cols = np.flatnonzero(np.any(matrix != 0, axis=0))
    return ShapeGeometry(
        matrix=matrix,
        top=int(rows[0]),
        bottom=int(rows[-1]),
        left=int(cols[0]),
        right=int(cols[-1]),
    )


SHAPE_CATALOG: Dict[Tuple[ShapeKind, Orientation], ShapeGeometry] = {
    (kind, orientation): _build_geometry(kind, masks[orientation])
    for kind, masks in _MASKS.items()
    for orientation in Orientation
}


def geometry(kind: ShapeKind, orientation: Orientation) -> ShapeGeometry:
    return SHAPE_CATALOG[(kind, orientation)]
