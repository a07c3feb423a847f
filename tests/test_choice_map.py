import unittest

from planes.domain.board import candidate_plane
from planes.domain.config import CHOICE_CONSUMED, CHOICE_ELIMINATED, DEAD, HIT, MISS, NOT_USEFUL, ORIENTATIONS
from planes.domain.plane import Plane
from planes.domain.types import GuessPoint
from planes.engine.choice_map import ChoiceMap
from planes.layouts.builtins import classic_layout, tee_shape
from planes.layouts.definition import GameLayout
from planes.layouts.placements import contains_point, is_position_valid


def _tee_layout(rows: int = 5, cols: int = 5) -> GameLayout:
    return GameLayout("tee", "Tee", rows, cols, 1, tee_shape())


class ChoiceMapInitTests(unittest.TestCase):
    def _check_initial(self, layout: GameLayout):
        cm = ChoiceMap(layout)
        self.assertEqual(len(cm), layout.rows * layout.cols * 4)
        for idx in range(len(cm)):
            plane = candidate_plane(idx, layout.rows)
            expected = 0 if is_position_valid(plane, layout.rows, layout.cols, layout.shape) else CHOICE_ELIMINATED
            self.assertEqual(cm[idx], expected, plane)

    def test_initial_scores_small_grid(self):
        self._check_initial(_tee_layout())
        cm = ChoiceMap(_tee_layout())
        self.assertEqual(cm.viable_count(), 48)

    def test_initial_scores_rectangular_grid(self):
        self._check_initial(_tee_layout(4, 7))

    def test_initial_scores_classic(self):
        self._check_initial(classic_layout())


class ChoiceMapUpdateTests(unittest.TestCase):
    def setUp(self):
        self.layout = _tee_layout()
        self.cm = ChoiceMap(self.layout)

    def _covers(self, idx: int, cell) -> bool:
        return contains_point(candidate_plane(idx, self.layout.rows), cell, self.layout.shape)

    def test_probe_consumes_the_four_heads(self):
        self.cm.apply(GuessPoint(1, 1, HIT))
        for orientation in ORIENTATIONS:
            self.assertEqual(self.cm.score(Plane(1, 1, orientation)), CHOICE_CONSUMED)

    def test_miss_eliminates_every_cover(self):
        self.cm.apply(GuessPoint(2, 3, MISS))
        for idx in range(len(self.cm)):
            if self._covers(idx, (2, 3)):
                self.assertLess(self.cm[idx], 0)

    def test_hit_increments_viable_covers_once(self):
        before = self.cm.snapshot()
        self.cm.apply(GuessPoint(2, 2, HIT))
        after = self.cm.snapshot()
        for idx in range(len(self.cm)):
            plane = candidate_plane(idx, self.layout.rows)
            if plane.head == (2, 2):
                self.assertEqual(after[idx], CHOICE_CONSUMED)
            elif self._covers(idx, (2, 2)) and before[idx] >= 0:
                self.assertEqual(after[idx], before[idx] + 1)
            else:
                self.assertEqual(after[idx], before[idx])

    def test_repeated_hit_is_not_double_counted(self):
        self.cm.apply(GuessPoint(2, 2, HIT))
        once = self.cm.snapshot()
        self.cm.apply(GuessPoint(2, 2, HIT))
        self.assertEqual(self.cm.snapshot(), once)

    def test_repeated_miss_is_idempotent(self):
        self.cm.apply(GuessPoint(0, 4, MISS))
        once = self.cm.snapshot()
        self.cm.apply(GuessPoint(0, 4, MISS))
        self.assertEqual(self.cm.snapshot(), once)

    def test_eliminated_entries_never_score_again(self):
        self.cm.apply(GuessPoint(3, 2, MISS))
        eliminated = [idx for idx in range(len(self.cm)) if self.cm[idx] == CHOICE_ELIMINATED]
        self.cm.apply(GuessPoint(4, 2, HIT))
        self.cm.apply(GuessPoint(3, 3, HIT))
        for idx in eliminated:
            self.assertLess(self.cm[idx], 0)

    def test_dead_eliminates_like_a_miss(self):
        dead = ChoiceMap(self.layout)
        miss = ChoiceMap(self.layout)
        dead.apply(GuessPoint(2, 2, DEAD))
        miss.apply(GuessPoint(2, 2, MISS))
        self.assertEqual(dead.snapshot(), miss.snapshot())

    def test_probe_outside_grid_rejected(self):
        with self.assertRaises(ValueError):
            self.cm.apply(GuessPoint(5, 0, MISS))

    def test_apply_plane_replays_body_as_misses(self):
        plane = Plane(2, 2, 0)
        synthetic = self.cm.apply_plane(plane)
        self.assertEqual([gp.cell for gp in synthetic], [(3, 2), (4, 2), (3, 3)])
        self.assertTrue(all(gp.outcome == MISS for gp in synthetic))
        for cell in [(3, 2), (4, 2), (3, 3)]:
            for orientation in ORIENTATIONS:
                self.assertEqual(self.cm.score(Plane(cell[0], cell[1], orientation)), CHOICE_CONSUMED)


class InfluenceTests(unittest.TestCase):
    def test_influence_counts_viable_body_covers(self):
        layout = _tee_layout()
        cm = ChoiceMap(layout)
        expected = 0
        for idx in range(len(cm)):
            plane = candidate_plane(idx, layout.rows)
            if cm[idx] >= 0 and not plane.is_head((2, 2)) and contains_point(plane, (2, 2), layout.shape):
                expected += 1
        self.assertGreater(expected, 0)
        self.assertEqual(cm.points_influenced(2, 2), expected)

        cm.apply(GuessPoint(3, 2, MISS))
        self.assertLess(cm.points_influenced(2, 2), expected)

    def test_probed_cell_is_not_useful(self):
        cm = ChoiceMap(_tee_layout())
        cm.apply(GuessPoint(2, 2, HIT))
        self.assertEqual(cm.points_influenced(2, 2), NOT_USEFUL)


if __name__ == "__main__":
    unittest.main()
