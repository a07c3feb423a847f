import unittest

from planes.domain.board import candidate_count
from planes.layouts.builtins import tee_shape
from planes.layouts.cache import PlacementCache
from planes.layouts.definition import GameLayout, PlaneShape


class PlacementCacheTests(unittest.TestCase):
    def test_cache_reuses_runtime(self):
        layout = GameLayout("tiny", "Tiny", 5, 5, 1, tee_shape())
        cache = PlacementCache()
        first = cache.get(layout)
        second = cache.get(layout)

        self.assertIs(first, second)
        self.assertEqual(len(first.valid), candidate_count(5, 5))
        self.assertEqual(len(first.cover_index), 25)

    def test_plane_count_does_not_change_the_candidate_space(self):
        cache = PlacementCache()
        one = cache.get(GameLayout("a", "A", 5, 5, 1, tee_shape()))
        two = cache.get(GameLayout("b", "B", 5, 5, 2, tee_shape()))
        self.assertIs(one, two)

        other = cache.get(GameLayout("c", "C", 6, 5, 1, tee_shape()))
        self.assertIsNot(one, other)

    def test_geometry_key_ignores_names_and_plane_count(self):
        a = GameLayout("a", "A", 5, 5, 1, tee_shape())
        b = GameLayout("b", "B", 5, 5, 3, PlaneShape("other", "Other", tee_shape().cells))
        self.assertEqual(a.geometry_key, b.geometry_key)
        self.assertNotEqual(a.geometry_key, GameLayout("a", "A", 5, 6, 1, tee_shape()).geometry_key)


if __name__ == "__main__":
    unittest.main()
