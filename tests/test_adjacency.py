import itertools
import unittest

from gunpey.core.constants import COMPASS_ADJACENCIES, Adjacency, Corner, FragmentKind
from gunpey.core.models import LineFragment, corner_nodes, gp
from gunpey.core.adjacency import CONNECTION_TABLE, are_fragments_connecting, kinds_connect


def fragment(char: str) -> LineFragment:
    return LineFragment.from_char(char)


class ConnectionRuleTests(unittest.TestCase):
    def test_right_slashes_side_by_side_do_not_connect(self) -> None:
        self.assertFalse(are_fragments_connecting(fragment("/"), Adjacency.RIGHT, fragment("/")))

    def test_right_slashes_below_right_do_not_connect(self) -> None:
        self.assertFalse(are_fragments_connecting(fragment("/"), Adjacency.BELOW_RIGHT, fragment("/")))

    def test_right_slashes_stacked_do_not_connect(self) -> None:
        self.assertFalse(are_fragments_connecting(fragment("/"), Adjacency.BELOW, fragment("/")))

    def test_right_slashes_on_a_diagonal_connect(self) -> None:
        self.assertTrue(are_fragments_connecting(fragment("/"), Adjacency.BELOW_LEFT, fragment("/")))
        self.assertTrue(are_fragments_connecting(fragment("/"), Adjacency.ABOVE_RIGHT, fragment("/")))

    def test_caret_over_inverted_caret_connects(self) -> None:
        self.assertTrue(are_fragments_connecting(fragment("∧"), Adjacency.BELOW, fragment("∨")))
        self.assertFalse(are_fragments_connecting(fragment("∨"), Adjacency.BELOW, fragment("∧")))

    def test_carets_side_by_side_connect(self) -> None:
        self.assertTrue(are_fragments_connecting(fragment("∧"), Adjacency.RIGHT, fragment("∧")))
        self.assertTrue(are_fragments_connecting(fragment("∨"), Adjacency.LEFT, fragment("∨")))
        self.assertFalse(are_fragments_connecting(fragment("∧"), Adjacency.RIGHT, fragment("∨")))

    def test_same_and_not_adjacent_conventions(self) -> None:
        for a, b in itertools.product(FragmentKind, repeat=2):
            self.assertTrue(kinds_connect(a, Adjacency.SAME, b))
            self.assertFalse(kinds_connect(a, Adjacency.NOT_ADJACENT, b))


class ConnectionTableTests(unittest.TestCase):
    def test_table_covers_every_compass_direction(self) -> None:
        self.assertEqual(set(CONNECTION_TABLE), set(COMPASS_ADJACENCIES))

    def test_table_is_symmetric(self) -> None:
        for adjacency in COMPASS_ADJACENCIES:
            for a, b in itertools.product(FragmentKind, repeat=2):
                with self.subTest(a=a, adjacency=adjacency, b=b):
                    self.assertEqual(
                        kinds_connect(a, adjacency, b),
                        kinds_connect(b, adjacency.opposite, a),
                    )

    def test_table_matches_shared_corner_geometry(self) -> None:
        origin = gp(1, 1)
        for adjacency in COMPASS_ADJACENCIES:
            other = origin.step(adjacency)
            for a, b in itertools.product(FragmentKind, repeat=2):
                shares_node = bool(set(corner_nodes(origin, a)) & set(corner_nodes(other, b)))
                with self.subTest(a=a, adjacency=adjacency, b=b):
                    self.assertEqual(kinds_connect(a, adjacency, b), shares_node)

    def test_table_matches_corner_masks(self) -> None:
        # Diagonals share exactly one corner: the one facing the direction.
        facing = {
            Adjacency.ABOVE_RIGHT: (Corner.ABOVE_RIGHT, Corner.BELOW_LEFT),
            Adjacency.ABOVE_LEFT: (Corner.ABOVE_LEFT, Corner.BELOW_RIGHT),
            Adjacency.BELOW_RIGHT: (Corner.BELOW_RIGHT, Corner.ABOVE_LEFT),
            Adjacency.BELOW_LEFT: (Corner.BELOW_LEFT, Corner.ABOVE_RIGHT),
        }
        for adjacency, (corner_a, corner_b) in facing.items():
            for a, b in itertools.product(FragmentKind, repeat=2):
                expected = bool(a.corners & corner_a) and bool(b.corners & corner_b)
                self.assertEqual(kinds_connect(a, adjacency, b), expected)

    def test_orthogonal_entry_counts(self) -> None:
        self.assertEqual(len(CONNECTION_TABLE[Adjacency.RIGHT]), 8)
        self.assertEqual(len(CONNECTION_TABLE[Adjacency.LEFT]), 8)
        self.assertEqual(len(CONNECTION_TABLE[Adjacency.ABOVE]), 7)
        self.assertEqual(len(CONNECTION_TABLE[Adjacency.BELOW]), 7)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
