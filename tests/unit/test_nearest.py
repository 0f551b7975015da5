"""Unit tests for nearest-point projection.

Tests path2d.analysis.nearest directly and the Path2d conveniences:
    - projection onto a segment, clamped to its endpoints
    - earliest segment and sub-path win exact ties
    - single-vertex and empty sub-paths
    - projection arclength is monotonic along a simple path
"""

import unittest

import numpy as np
import pytest

from path2d import Path2d
from path2d.analysis.lengths import UpdateMode, update_subpaths
from path2d.analysis.nearest import (
    _segment_distances,
    project_on_path,
    project_on_segment,
    project_on_subpath,
)
from path2d.domain.geometry import Point
from path2d.domain.subpath import SubPath
from path2d.errors import EmptyGeometryError, IndexOutOfRange


class TestProjectOnSegment(unittest.TestCase):
    """Tests for project_on_segment."""

    def setUp(self):
        self.subpath = SubPath(vertices=[(0.0, 0.0), (10.0, 0.0), (10.0, 10.0)])
        update_subpaths([self.subpath], UpdateMode.LENGTH_ONLY)

    def test_perpendicular_foot(self):
        """Segment (0,0)->(10,0), query (5,5): point (5,0), distance 5, length 5."""
        result = project_on_segment((5, 5), self.subpath, 0)
        self.assertEqual(result.point, Point(5.0, 0.0))
        self.assertEqual(result.distance, 5.0)
        self.assertEqual(result.length, 5.0)

    def test_before_start_snaps_to_start(self):
        result = project_on_segment((-4, 3), self.subpath, 0)
        self.assertEqual(result.point, Point(0.0, 0.0))
        self.assertEqual(result.distance, 5.0)
        self.assertEqual(result.length, 0.0)

    def test_past_end_snaps_to_end(self):
        result = project_on_segment((14, 3), self.subpath, 0)
        self.assertEqual(result.point, Point(10.0, 0.0))
        self.assertEqual(result.length, 10.0)

    def test_second_segment_length_includes_offset(self):
        result = project_on_segment((12, 4), self.subpath, 1)
        self.assertEqual(result.point, Point(10.0, 4.0))
        self.assertEqual(result.length, 14.0)
        self.assertEqual(result.segment_index, 1)

    def test_zero_length_segment(self):
        subpath = SubPath(vertices=[(1.0, 1.0), (1.0, 1.0)])
        update_subpaths([subpath], UpdateMode.LENGTH_ONLY)
        result = project_on_segment((4, 5), subpath, 0)
        self.assertEqual(result.point, Point(1.0, 1.0))
        self.assertEqual(result.distance, 5.0)


class TestProjectOnSubpathAndPath(unittest.TestCase):
    """Tests for sub-path and path level projection."""

    def test_earliest_segment_wins_tie(self):
        """A point equidistant from two segments projects onto the first."""
        subpath = SubPath(vertices=[(0.0, 0.0), (10.0, 0.0), (10.0, 10.0)])
        update_subpaths([subpath], UpdateMode.LENGTH_ONLY)
        result = project_on_subpath((5, 5), subpath)
        self.assertEqual(result.segment_index, 0)
        self.assertEqual(result.point, Point(5.0, 0.0))

    def test_single_vertex_subpath(self):
        lonely = SubPath(vertices=[(0.0, 0.0), (6.0, 0.0)])
        dot = SubPath(vertices=[(3.0, 4.0)])
        update_subpaths([lonely, dot], UpdateMode.LENGTH_ONLY)
        result = project_on_subpath((3, 8), dot, 1)
        self.assertEqual(result.point, Point(3.0, 4.0))
        self.assertEqual(result.distance, 4.0)
        self.assertEqual(result.length, 6.0)
        self.assertEqual(result.segment_index, 0)

    def test_earliest_segment_wins_tie_at_shared_vertex(self):
        """A point nearest to a shared vertex projects onto the segment ending there."""
        subpath = SubPath(vertices=[(0.901, 0.0), (0.031, 0.0), (0.031, 1.0)])
        update_subpaths([subpath], UpdateMode.LENGTH_ONLY)
        query = (-0.069, -0.1)
        first = project_on_segment(query, subpath, 0)
        second = project_on_segment(query, subpath, 1)
        self.assertEqual(first.distance, second.distance)

        result = project_on_subpath(query, subpath)
        self.assertEqual(result.segment_index, 0)
        self.assertEqual(result.point, Point(0.031, 0.0))
        self.assertEqual(result.distance, first.distance)

    def test_scan_distances_match_segment_projection(self):
        """The vectorized scan reports the same distances as per-segment projection."""
        rng = np.random.default_rng(11)
        subpath = SubPath(vertices=[tuple(v) for v in rng.uniform(-1, 1, size=(25, 2))])
        update_subpaths([subpath], UpdateMode.LENGTH_ONLY)
        vertices = np.asarray(subpath.vertices)
        for query in rng.uniform(-1.5, 1.5, size=(20, 2)):
            p = Point(float(query[0]), float(query[1]))
            scanned = _segment_distances(p, vertices)
            expected = [project_on_segment(p, subpath, i).distance
                        for i in range(subpath.segment_count)]
            self.assertEqual(scanned.tolist(), expected)

    def test_empty_subpath(self):
        with self.assertRaises(EmptyGeometryError):
            project_on_subpath((0, 0), SubPath())

    def test_path_skips_empty_subpaths(self):
        subpaths = [SubPath(), SubPath(vertices=[(0.0, 0.0), (10.0, 0.0)])]
        update_subpaths(subpaths, UpdateMode.LENGTH_ONLY)
        result = project_on_path((5, 1), subpaths)
        self.assertEqual(result.subpath_index, 1)

    def test_path_without_vertices(self):
        with self.assertRaises(EmptyGeometryError):
            project_on_path((0, 0), [SubPath(), SubPath()])


class TestPathNearest:
    """Tests for the nearest-point queries on Path2d."""

    def test_nearest_on_path(self, straight_path):
        result = straight_path.nearest_point_on_path((5, 5))
        assert result.point == Point(5.0, 0.0)
        assert result.distance == 5.0
        assert result.length == 5.0

    def test_closer_subpath_wins(self, two_subpath_path):
        result = two_subpath_path.nearest_point_on_path((5, 6))
        assert result.subpath_index == 1
        assert result.distance == 4.0
        assert result.length == 15.0

    def test_earliest_subpath_wins_tie(self, two_subpath_path):
        assert two_subpath_path.subpath_index_nearest_to_point((5, 5)) == 0

    def test_shared_vertex_tie_on_path(self):
        path = Path2d()
        path.move_to((0.901, 0))
        path.lines_to([(0.031, 0), (0.031, 1)])
        assert path.segment_index_nearest_to_point((-0.069, -0.1)) == (0, 0)
        assert path.distance_to_path((-0.069, -0.1)) == path.distance_to_segment((-0.069, -0.1), 0, 1)

    def test_projection_to_dict(self, straight_path):
        data = straight_path.nearest_point_on_path((4, 3)).to_dict()
        assert data == {
            'x': 4.0,
            'y': 0.0,
            'distance': 3.0,
            'length': 4.0,
            'subpath_index': 0,
            'segment_index': 0,
        }

    def test_nearest_on_subpath(self, two_subpath_path):
        result = two_subpath_path.nearest_point_on_subpath((5, 1), 1)
        assert result.point == Point(5.0, 10.0)
        assert result.distance == 9.0

    def test_nearest_on_segment(self, square_path):
        result = square_path.nearest_point_on_segment((5, 5), 0, 2)
        assert result.point == Point(5.0, 10.0)
        assert result.length == 25.0

    def test_distances(self, square_path):
        assert square_path.distance_to_path((5, 2)) == 2.0
        assert square_path.distance_to_subpath((5, 2), 0) == 2.0
        assert square_path.distance_to_segment((5, 2), 0, 1) == 5.0

    def test_lengths(self, square_path):
        assert square_path.length_on_path((12, 5)) == 15.0
        assert square_path.length_on_subpath((12, 5), 0) == 15.0
        assert square_path.length_on_segment((5, -3), 0, 0) == 5.0

    def test_nearest_segment_and_subpath(self, two_subpath_path):
        start, end = two_subpath_path.segment_nearest_to_point((5, 8))
        assert (start, end) == (Point(0.0, 10.0), Point(10.0, 10.0))
        assert two_subpath_path.segment_index_nearest_to_point((5, 8)) == (1, 0)
        view = two_subpath_path.subpath_nearest_to_point((5, 8))
        assert np.array_equal(view.vertices, [[0, 10], [10, 10]])

    def test_index_errors(self, two_subpath_path):
        with pytest.raises(IndexOutOfRange):
            two_subpath_path.nearest_point_on_subpath((0, 0), 2)
        with pytest.raises(IndexOutOfRange):
            two_subpath_path.nearest_point_on_subpath((0, 0), -1)
        with pytest.raises(IndexOutOfRange):
            two_subpath_path.nearest_point_on_segment((0, 0), 0, 1)
        with pytest.raises(IndexError):
            two_subpath_path.distance_to_segment((0, 0), 5, 0)

    def test_empty_path(self):
        with pytest.raises(EmptyGeometryError):
            Path2d().nearest_point_on_path((0, 0))

    def test_projection_length_monotonic(self, curved_path):
        """Points further along the path project to larger arclengths."""
        total = curved_path.total_length()
        lengths = [
            curved_path.length_on_path(curved_path.point_at_length(length))
            for length in np.linspace(0.0, total, 50)
        ]
        assert all(b >= a - 1e-9 for a, b in zip(lengths, lengths[1:]))
        assert lengths[-1] == pytest.approx(total)

    def test_projection_recovers_length(self, curved_path):
        length = curved_path.total_length() * 0.37
        point = curved_path.point_at_length(length)
        assert curved_path.length_on_path(point) == pytest.approx(length, abs=1e-9)
        assert curved_path.distance_to_path(point) == pytest.approx(0.0, abs=1e-9)
