"""Unit tests for path2d.utils.svg.

Tests SVG path data export of sub-path views:
    - open and closed sub-paths
    - multiple sub-paths and skipped empty ones
    - number formatting
"""

import pytest

from path2d import Path2d
from path2d.utils.svg import format_number, to_svg_path_data


class TestFormatNumber:
    """Tests for format_number."""

    @pytest.mark.parametrize("value,expected", [
        (0, '0'),
        (10.0, '10'),
        (1.5, '1.5'),
        (-2.25, '-2.25'),
        (-0.0, '0'),
        (-0.0000001, '0'),
        (1 / 3, '0.333333'),
    ])
    def test_formatting(self, value, expected):
        assert format_number(value) == expected

    def test_precision(self):
        assert format_number(1 / 3, precision=2) == '0.33'
        assert format_number(2.5, precision=0) == '2'


class TestToSvgPathData:
    """Tests for to_svg_path_data."""

    def test_open_line(self, straight_path):
        assert to_svg_path_data(straight_path.sub_paths()) == 'M 0 0 L 10 0'

    def test_rect_closing_vertex_not_repeated(self, square_path):
        data = to_svg_path_data(square_path.sub_paths())
        assert data == 'M 0 0 L 10 0 L 10 10 L 0 10 Z'

    def test_multiple_subpaths(self, two_subpath_path):
        data = two_subpath_path.to_svg_path_data()
        assert data == 'M 0 0 L 10 0 M 0 10 L 10 10'

    def test_empty_subpaths_skipped(self, two_subpath_path):
        two_subpath_path.clear_subpath_at(0)
        assert two_subpath_path.to_svg_path_data() == 'M 0 10 L 10 10'

    def test_empty_path(self):
        assert Path2d().to_svg_path_data() == ''

    def test_curve_exported_as_polyline(self):
        path = Path2d()
        path.move_to((0, 0))
        path.quadratic_curve_to((1, 2), (2, 0), sample_count=3)
        assert path.to_svg_path_data(precision=3) == 'M 0 0 L 0 0 L 1 1 L 2 0'

    def test_negative_precision(self, straight_path):
        with pytest.raises(ValueError):
            to_svg_path_data(straight_path.sub_paths(), precision=-1)
