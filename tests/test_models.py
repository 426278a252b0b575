import unittest

from gunpey.core.constants import Adjacency, FragmentKind
from gunpey.core.models import Cell, GridPos, LineFragment, corner_nodes, gp


class GridPosTests(unittest.TestCase):
    def test_arithmetic_is_componentwise(self) -> None:
        self.assertEqual(gp(1, 2) + gp(3, 4), gp(4, 6))
        self.assertEqual(gp(1, 2) - gp(3, 4), gp(-2, -2))
        self.assertEqual(gp(5, 7).to_tuple(), (5, 7))

    def test_positions_are_hashable_values(self) -> None:
        self.assertEqual({gp(0, 0), GridPos(0, 0), gp(1, 0)}, {gp(0, 0), gp(1, 0)})

    def test_adjacency_classification(self) -> None:
        origin = gp(1, 1)
        cases = {
            gp(1, 1): Adjacency.SAME,
            gp(1, 2): Adjacency.ABOVE,
            gp(1, 0): Adjacency.BELOW,
            gp(0, 1): Adjacency.LEFT,
            gp(2, 1): Adjacency.RIGHT,
            gp(0, 2): Adjacency.ABOVE_LEFT,
            gp(2, 2): Adjacency.ABOVE_RIGHT,
            gp(0, 0): Adjacency.BELOW_LEFT,
            gp(2, 0): Adjacency.BELOW_RIGHT,
            gp(3, 1): Adjacency.NOT_ADJACENT,
            gp(1, 3): Adjacency.NOT_ADJACENT,
        }
        for other, expected in cases.items():
            with self.subTest(other=other):
                self.assertEqual(origin.adjacency(other), expected)

    def test_step_round_trips_through_adjacency(self) -> None:
        origin = gp(4, 4)
        for adjacency in Adjacency:
            if adjacency == Adjacency.NOT_ADJACENT:
                continue
            with self.subTest(adjacency=adjacency):
                self.assertEqual(origin.adjacency(origin.step(adjacency)), adjacency)

    def test_opposites_pair_up(self) -> None:
        for adjacency in Adjacency:
            self.assertEqual(adjacency.opposite.opposite, adjacency)
        self.assertEqual(Adjacency.ABOVE_RIGHT.opposite, Adjacency.BELOW_LEFT)


class CornerNodeTests(unittest.TestCase):
    def test_corner_nodes_per_kind(self) -> None:
        pos = gp(2, 3)
        self.assertEqual(corner_nodes(pos, FragmentKind.CARET), (gp(2, 3), gp(3, 3)))
        self.assertEqual(corner_nodes(pos, FragmentKind.INVERTED_CARET), (gp(2, 4), gp(3, 4)))
        self.assertEqual(corner_nodes(pos, FragmentKind.LEFT_SLASH), (gp(2, 4), gp(3, 3)))
        self.assertEqual(corner_nodes(pos, FragmentKind.RIGHT_SLASH), (gp(2, 3), gp(3, 4)))

    def test_empty_cell_has_no_corner_nodes(self) -> None:
        cell = Cell.empty()
        self.assertEqual(cell.corner_nodes(gp(0, 0)), ())
        self.assertFalse(cell.has_corner_node(gp(0, 0), gp(0, 0)))

    def test_has_corner_node(self) -> None:
        cell = Cell.filled(FragmentKind.LEFT_SLASH)
        self.assertTrue(cell.has_corner_node(gp(0, 0), gp(0, 1)))
        self.assertTrue(cell.has_corner_node(gp(0, 0), gp(1, 0)))
        self.assertFalse(cell.has_corner_node(gp(0, 0), gp(0, 0)))


class FragmentParsingTests(unittest.TestCase):
    def test_glyphs_parse_inactive(self) -> None:
        for glyph, kind in (("∧", FragmentKind.CARET), ("∨", FragmentKind.INVERTED_CARET),
                            ("\\", FragmentKind.LEFT_SLASH), ("/", FragmentKind.RIGHT_SLASH)):
            fragment = LineFragment.from_char(glyph)
            self.assertEqual(fragment.kind, kind)
            self.assertFalse(fragment.is_active)
            self.assertEqual(fragment.to_char(), glyph)

    def test_codes_carry_activation(self) -> None:
        self.assertEqual(LineFragment.from_char("C"), LineFragment(FragmentKind.CARET, True))
        self.assertEqual(LineFragment.from_char("i"), LineFragment(FragmentKind.INVERTED_CARET, False))
        self.assertEqual(LineFragment.from_char("L").to_str(), "L")
        self.assertEqual(LineFragment.from_char("r").to_str(), "r")

    def test_unknown_character_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            LineFragment.from_char("x")

    def test_dot_is_empty_cell(self) -> None:
        self.assertTrue(Cell.from_char(".").is_empty())
        self.assertEqual(Cell.from_char(".").to_str(), ".")

    def test_kind_labels(self) -> None:
        self.assertEqual(str(FragmentKind.INVERTED_CARET), "inverted caret")


class CellTests(unittest.TestCase):
    def test_activation_is_noop_on_empty(self) -> None:
        cell = Cell.empty()
        cell.activate()
        self.assertFalse(cell.is_active())

    def test_activate_and_deactivate(self) -> None:
        cell = Cell.filled(FragmentKind.CARET)
        cell.activate()
        self.assertTrue(cell.is_active())
        cell.deactivate()
        self.assertFalse(cell.is_active())

    def test_empty_cells_never_connect(self) -> None:
        caret = Cell.filled(FragmentKind.CARET)
        self.assertFalse(caret.is_connected_to(Cell.empty(), Adjacency.RIGHT))
        self.assertFalse(Cell.empty().is_connected_to(caret, Adjacency.LEFT))
        self.assertTrue(caret.is_connected_to(Cell.filled(FragmentKind.CARET), Adjacency.RIGHT))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
