import unittest

from falling_blocks.game import Orientation, Piece, PieceDescriptor, ShapeKind


class PieceTests(unittest.TestCase):
    def test_board_borders_follow_anchor(self):
        piece = Piece(ShapeKind.L, Orientation.ROT90, x=3, y=5)
        self.assertEqual((piece.top_border, piece.bottom_border), (0, 2))
        self.assertEqual((piece.left_border, piece.right_border), (2, 3))
        self.assertEqual((piece.board_top, piece.board_bottom), (5, 7))
        self.assertEqual((piece.board_left, piece.board_right), (5, 6))
        self.assertEqual(piece.height, 3)

    def test_rotated_is_a_new_piece(self):
        piece = Piece(ShapeKind.T, Orientation.ROT270, x=1, y=2)
        turned = piece.rotated()
        self.assertEqual(turned.orientation, Orientation.BASE)
        self.assertEqual((turned.x, turned.y), (1, 2))
        self.assertEqual(piece.orientation, Orientation.ROT270)

    def test_cells_are_board_coordinates(self):
        piece = Piece(ShapeKind.O, x=4, y=1)
        self.assertEqual(sorted(piece.cells()), [(1, 5), (1, 6), (2, 5), (2, 6)])
        self.assertEqual(sorted(piece.cells_at(0, 0)), [(0, 1), (0, 2), (1, 1), (1, 2)])

    def test_descriptor(self):
        piece = Piece(ShapeKind.Z, Orientation.ROT180)
        self.assertEqual(piece.descriptor(), PieceDescriptor(ShapeKind.Z, Orientation.ROT180))


if __name__ == "__main__":
    unittest.main()
