import unittest

from hiq_core.board import CENTER, ROW_WIDTHS, Board


class TestBoard(unittest.TestCase):
    def test_given_new_board_when_querying_shape_then_cross_widths(self):
        board = Board()
        self.assertEqual(board.row_count(), 7)
        self.assertEqual(board.shape(), ROW_WIDTHS)
        self.assertEqual([board.width_of(r) for r in range(7)], [3, 3, 7, 7, 7, 3, 3])
        self.assertEqual(board.width_of(-1), 0)
        self.assertEqual(board.width_of(7), 0)
        self.assertEqual(board.count_occupied(), 0)
        self.assertEqual(len(list(board.coords())), 33)

    def test_given_out_of_range_cells_when_queried_or_set_then_false_and_noop(self):
        board = Board()
        board.fill_all()
        for r, c in [(-1, 0), (0, -1), (0, 3), (1, 5), (5, 3), (7, 0), (3, 7)]:
            self.assertFalse(board.is_valid(r, c))
            self.assertFalse(board.is_occupied(r, c))
        board.clear()
        board.set_occupied(0, 5, True)
        board.set_occupied(9, 9, True)
        self.assertEqual(board.count_occupied(), 0)

    def test_given_cells_when_set_and_cleared_then_counts_follow(self):
        board = Board()
        board.set_occupied(*CENTER)
        board.set_occupied(0, 2, True)
        self.assertTrue(board.is_occupied(3, 3))
        self.assertTrue(board.is_occupied(0, 2))
        self.assertEqual(board.count_occupied(), 2)
        self.assertEqual(sorted(board.pegs()), [(0, 2), (3, 3)])
        board.set_occupied(0, 2, False)
        self.assertEqual(board.count_occupied(), 1)
        board.fill_all()
        self.assertEqual(board.count_occupied(), 33)
        board.clear()
        self.assertEqual(board.count_occupied(), 0)

    def test_given_rows_copy_when_mutated_then_board_unchanged(self):
        board = Board()
        rows = board.rows()
        rows[3][3] = True
        self.assertFalse(board.is_occupied(3, 3))

    def test_given_board_when_pretty_then_narrow_rows_indented_and_marks_rendered(self):
        board = Board()
        board.fill_all()
        board.set_occupied(3, 3, False)
        lines = board.pretty().split("\n")
        self.assertEqual(len(lines), 7)
        self.assertEqual(lines[0], "    o o o")
        self.assertEqual(lines[3], "o o o . o o o")

        txt = board.pretty(highlight=[(3, 3)], selected=(3, 1))
        self.assertEqual(txt.split("\n")[3], "o @ o * o o o")

    def test_given_public_api_when_inspected_then_every_method_documented(self):
        from hiq_core.jumps import Direction, JumpEngine, SelectResult, Selection

        for cls in (Board, JumpEngine, Direction, SelectResult, Selection):
            for name, member in vars(cls).items():
                if name.startswith("_"):
                    continue
                func = member.fget if isinstance(member, property) else member
                if callable(func):
                    self.assertTrue(func.__doc__, f"{cls.__name__}.{name}")


if __name__ == '__main__':
    unittest.main(verbosity=2)
