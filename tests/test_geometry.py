import unittest

from planes.domain.board import candidate_count, candidate_head, candidate_index, candidate_plane, plane_index
from planes.domain.config import DEAD, EAST_WEST, HIT, NORTH_SOUTH, ORIENTATIONS, SOUTH_NORTH, WEST_EAST
from planes.domain.plane import Plane
from planes.domain.types import GuessPoint
from planes.layouts.builtins import classic_shape, tee_shape
from planes.layouts.placements import (
    contains_point,
    is_position_valid,
    plane_body,
    plane_cells,
    planes_intersecting_point,
)


class PlaneTests(unittest.TestCase):
    def test_equality_translation_rotation(self):
        plane = Plane(2, 3, NORTH_SOUTH)
        self.assertEqual(plane, Plane(2, 3, NORTH_SOUTH))
        self.assertNotEqual(plane, Plane(2, 3, SOUTH_NORTH))
        self.assertEqual(plane + (1, -2), Plane(3, 1, NORTH_SOUTH))
        self.assertEqual(plane.head, (2, 3))
        self.assertTrue(plane.is_head((2, 3)))

        seen = [plane.orientation]
        current = plane
        for _ in range(4):
            current = current.rotated()
            seen.append(current.orientation)
        self.assertEqual(seen, [NORTH_SOUTH, EAST_WEST, SOUTH_NORTH, WEST_EAST, NORTH_SOUTH])
        self.assertEqual(current.head, plane.head)

    def test_invalid_orientation_rejected(self):
        with self.assertRaises(ValueError):
            Plane(0, 0, 4)


class GuessPointTests(unittest.TestCase):
    def test_outcomes(self):
        gp = GuessPoint(1, 2, DEAD)
        self.assertEqual(gp.cell, (1, 2))
        self.assertTrue(gp.is_dead())
        self.assertFalse(GuessPoint(1, 2, HIT).is_dead())
        with self.assertRaises(ValueError):
            GuessPoint(1, 2, "?")


class FootprintTests(unittest.TestCase):
    def test_tee_footprints_per_orientation(self):
        shape = tee_shape()
        self.assertEqual(plane_cells(Plane(2, 2, NORTH_SOUTH), shape), ((2, 2), (3, 2), (4, 2), (3, 3)))
        self.assertEqual(plane_cells(Plane(2, 2, SOUTH_NORTH), shape), ((2, 2), (1, 2), (0, 2), (1, 1)))
        self.assertEqual(plane_cells(Plane(2, 2, WEST_EAST), shape), ((2, 2), (2, 3), (2, 4), (1, 3)))
        self.assertEqual(plane_cells(Plane(2, 2, EAST_WEST), shape), ((2, 2), (2, 1), (2, 0), (3, 1)))
        self.assertEqual(plane_body(Plane(2, 2, NORTH_SOUTH), shape), ((3, 2), (4, 2), (3, 3)))

    def test_rotation_preserves_footprint_size(self):
        shape = classic_shape()
        for orientation in ORIENTATIONS:
            cells = plane_cells(Plane(5, 5, orientation), shape)
            self.assertEqual(len(set(cells)), len(shape.cells))
            self.assertEqual(cells[0], (5, 5))

    def test_position_validity(self):
        shape = tee_shape()
        self.assertTrue(is_position_valid(Plane(2, 2, NORTH_SOUTH), 5, 5, shape))
        self.assertFalse(is_position_valid(Plane(3, 2, NORTH_SOUTH), 5, 5, shape))
        self.assertFalse(is_position_valid(Plane(0, 0, SOUTH_NORTH), 5, 5, shape))
        self.assertTrue(is_position_valid(Plane(0, 0, NORTH_SOUTH), 5, 5, shape))

        classic = classic_shape()
        self.assertTrue(is_position_valid(Plane(0, 2, NORTH_SOUTH), 10, 10, classic))
        self.assertFalse(is_position_valid(Plane(0, 1, NORTH_SOUTH), 10, 10, classic))

    def test_intersecting_point_iterator(self):
        shape = classic_shape()
        cell = (4, 6)
        planes = list(planes_intersecting_point(cell, shape))
        self.assertEqual(len(planes), 4 * len(shape.cells))
        self.assertEqual(len(set(planes)), len(planes))
        for plane in planes:
            self.assertTrue(contains_point(plane, cell, shape))
        self.assertEqual(sum(1 for p in planes if p.is_head(cell)), 4)


class CandidateIndexTests(unittest.TestCase):
    def test_index_layout(self):
        rows = 7
        self.assertEqual(candidate_index(0, 0, 0, rows), 0)
        self.assertEqual(candidate_index(0, 0, 3, rows), 3)
        self.assertEqual(candidate_index(1, 0, 0, rows), 4)
        self.assertEqual(candidate_index(0, 1, 0, rows), 4 * rows)

    def test_bijection(self):
        rows, cols = 4, 6
        seen = set()
        for idx in range(candidate_count(rows, cols)):
            plane = candidate_plane(idx, rows)
            self.assertTrue(0 <= plane.row < rows and 0 <= plane.col < cols)
            self.assertEqual(plane_index(plane, rows), idx)
            self.assertEqual(candidate_head(idx, rows), plane.head)
            seen.add(plane)
        self.assertEqual(len(seen), rows * cols * 4)


if __name__ == "__main__":
    unittest.main()
