from __future__ import annotations

from dataclasses import dataclass
from typing import List, NamedTuple, Tuple

from .shapes import Orientation, ShapeGeometry, ShapeKind, geometry


class PieceDescriptor(NamedTuple):
    kind: ShapeKind
    orientation: Orientation


@dataclass
class Piece:
    """A falling instance of a catalog kind.

    `x`, `y` is the board position of the local matrix origin (top-left),
    which is not necessarily an occupied cell. `y` goes negative while part
    of the piece is still above the grid.
    """

    kind: ShapeKind
    orientation: Orientation = Orientation.BASE
    x: int = 0
    y: int = 0

    @property
    def geometry(self) -> ShapeGeometry:
        return geometry(self.kind, self.orientation)

    @property
    def top_border(self) -> int:
        return self.geometry.top

    @property
    def bottom_border(self) -> int:
        return self.geometry.bottom

    @property
    def left_border(self) -> int:
        return self.geometry.left

    @property
    def right_border(self) -> int:
        return self.geometry.right

    @property
    def height(self) -> int:
        return self.geometry.height

    # Board coordinates of the bounding box
    @property
    def board_top(self) -> int:
        return self.y + self.top_border

    @property
    def board_bottom(self) -> int:
        return self.y + self.bottom_border

    @property
    def board_left(self) -> int:
        return self.x + self.left_border

    @property
    def board_right(self) -> int:
        return self.x + self.right_border

    def rotated(self) -> "Piece":
        return Piece(self.kind, self.orientation.next(), self.x, self.y)

    def cells_at(self, origin_x: int, origin_y: int) -> List[Tuple[int, int]]:
        """(row, col) board cells covered when the origin is at (origin_x, origin_y)."""
        return [(origin_y + r, origin_x + c) for r, c in self.geometry.cells()]

    def cells(self) -> List[Tuple[int, int]]:
        return self.cells_at(self.x, self.y)

    def descriptor(self) -> PieceDescriptor:
        return PieceDescriptor(self.kind, self.orientation)
