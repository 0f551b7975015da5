"""Path construction and arclength queries.

This module provides ``Path2d``, the facade that owns a path's sub-paths
and exposes the mutation surface (``move_to``, ``line_to``, curves, arcs,
ellipses, rectangles) and the query surface (length, position, tangent,
normal and nearest-point lookups).

The path is a two-state machine. Every mutation marks it dirty; every
query first calls ``update()``, which recomputes only the sub-paths that
changed. Sub-paths live in an ordered list and the active sub-path is
tracked by index, so ``copy()`` is a plain deep copy.

Example usage:
    Building and querying a path::

        from path2d import Path2d

        path = Path2d()
        path.move_to((0, 0))
        path.line_to((100, 0))
        path.quadratic_curve_to((150, 0), (150, 50))

        total = path.total_length()
        mid = path.point_at_length(total / 2)
        frame = path.point_tangent_normal_at_length(total / 2)
        nearest = path.nearest_point_on_path((120, 20))
"""

from __future__ import annotations

import copy
import logging
import math
from numbers import Real
from typing import Iterable, List, Optional, Tuple

import numpy as np

from ..analysis.lengths import update_subpaths
from ..analysis.locator import locate, normal_at, point_at, tangent_at
from ..analysis.nearest import project_on_path, project_on_segment, project_on_subpath
from ..config import OptionsLike, PathOptions, resolve_options
from ..domain.geometry import Point, PointLike, as_point
from ..domain.results import PointFrame, Projection, SegmentLocation
from ..domain.subpath import SubPath, SubPathKind, SubPathView
from ..errors import CapabilityDisabled, EmptyGeometryError, IndexOutOfRange, check_index
from ..tessellation.curves import (
    arc_points,
    clamp_sample_count,
    cubic_bezier_points,
    ellipse_point,
    ellipse_points,
    quadratic_bezier_points,
    rect_points,
    tangent_arc,
)

logger = logging.getLogger(__name__)


def _coerce_points(points: Iterable) -> List[Tuple[float, float]]:
    """Accept a flat coordinate stream or a sequence of (x, y) pairs."""
    items = list(points)
    if not items:
        return []
    if isinstance(items[0], Real):
        if len(items) % 2:
            raise ValueError(f"Flat coordinate stream has odd length {len(items)}")
        return [(float(items[i]), float(items[i + 1])) for i in range(0, len(items), 2)]
    return [as_point(item).to_tuple() for item in items]


class Path2d:
    """2D path made of connected sub-paths.

    Args:
        options: ``PathOptions``, a mapping of option names, or None for
            ``DEFAULT_OPTIONS``.

    Raises:
        ConfigurationError: If the options are invalid.
    """

    def __init__(self, options: OptionsLike = None):
        self._options: PathOptions = resolve_options(options)
        self._mode = self._options.update_mode

        self._subpaths: List[SubPath] = []
        self._active: Optional[int] = None

        self._dirty = False
        self._total_length = 0.0

        # Last located length and its result, valid while clean
        self._memo: Optional[Tuple[float, SegmentLocation]] = None

    def __repr__(self) -> str:
        return (f"Path2d(subpaths={len(self._subpaths)}, active={self._active}, "
                f"dirty={self._dirty})")

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def options(self) -> PathOptions:
        return self._options

    @property
    def is_dirty(self) -> bool:
        return self._dirty

    @property
    def subpath_count(self) -> int:
        return len(self._subpaths)

    @property
    def active_subpath_index(self) -> Optional[int]:
        return self._active

    def _active_subpath(self) -> Optional[SubPath]:
        if self._active is None:
            return None
        return self._subpaths[self._active]

    def _require_active(self) -> SubPath:
        subpath = self._active_subpath()
        if subpath is None or subpath.is_empty:
            raise EmptyGeometryError("No current point to continue from; call move_to first")
        return subpath

    def _invalidate(self) -> None:
        self._dirty = True
        self._memo = None

    def _touch(self, subpath: SubPath) -> None:
        subpath.dirty = True
        self._invalidate()

    def _append_subpath(self, subpath: SubPath) -> SubPath:
        self._subpaths.append(subpath)
        self._active = len(self._subpaths) - 1
        self._touch(subpath)
        logger.debug("Started sub-path %d", self._active)
        return subpath

    def _extend(self, subpath: SubPath, samples) -> None:
        subpath.vertices.extend((float(x), float(y)) for x, y in samples)
        self._touch(subpath)

    def _ensure_kind(self, kind: SubPathKind) -> SubPath:
        """Return the sub-path to append a primitive of ``kind`` to.

        A single-vertex sub-path adopts the kind. A longer sub-path of the
        other kind is left as is and a new one starts at its last vertex.
        """
        subpath = self._require_active()
        if len(subpath) == 1:
            subpath.kind = kind
            return subpath
        if subpath.kind is not kind:
            subpath = self._append_subpath(SubPath(vertices=[subpath.last], kind=kind))
        return subpath

    def _sample_count(self, requested: Optional[int], default: int) -> int:
        if requested is None:
            return default
        return clamp_sample_count(requested)

    def update(self) -> None:
        """Recompute dirty sub-paths and global offsets.

        Called by every query. A clean path returns immediately.
        """
        if not self._dirty:
            return
        self._total_length = update_subpaths(self._subpaths, self._mode)
        self._dirty = False

    # ------------------------------------------------------------------
    # Sub-path management
    # ------------------------------------------------------------------

    def create_subpath_at(self, index: int) -> None:
        """Insert an empty sub-path at ``index`` and make it active.

        Raises:
            IndexOutOfRange: If ``index`` is not in ``[0, subpath_count]``.
        """
        if not 0 <= index <= len(self._subpaths):
            raise IndexOutOfRange(
                f"Sub-path index {index} out of range (count={len(self._subpaths)})"
            )
        subpath = SubPath()
        self._subpaths.insert(index, subpath)
        self._active = index
        self._touch(subpath)
        logger.debug("Created sub-path at %d", index)

    def remove_subpath_at(self, index: int) -> None:
        """Remove the sub-path at ``index``.

        Removing the active sub-path leaves the path without one.
        """
        check_index(index, len(self._subpaths), "Sub-path")
        del self._subpaths[index]
        if self._active is not None:
            if self._active == index:
                self._active = None
            elif self._active > index:
                self._active -= 1
        self._invalidate()
        logger.debug("Removed sub-path %d", index)

    def clear_subpath_at(self, index: int) -> None:
        """Drop all vertices of the sub-path at ``index``."""
        check_index(index, len(self._subpaths), "Sub-path")
        subpath = self._subpaths[index]
        subpath.clear()
        self._touch(subpath)

    def clear_subpath(self) -> None:
        """Drop all vertices of the active sub-path, if any."""
        subpath = self._active_subpath()
        if subpath is None:
            return
        subpath.clear()
        self._touch(subpath)

    def select_subpath_at(self, index: int) -> None:
        """Make the sub-path at ``index`` the one primitives append to."""
        check_index(index, len(self._subpaths), "Sub-path")
        self._active = index

    def clear(self) -> None:
        """Remove all sub-paths."""
        self._subpaths.clear()
        self._active = None
        self._total_length = 0.0
        self._invalidate()

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def move_to(self, point: PointLike) -> None:
        """Start a new sub-path at ``point``.

        An empty active sub-path is reused instead of adding another.
        """
        p = as_point(point)
        subpath = self._active_subpath()
        if subpath is not None and subpath.is_empty:
            subpath.vertices.append(p.to_tuple())
            self._touch(subpath)
        else:
            self._append_subpath(SubPath(vertices=[p.to_tuple()]))

    def line_to(self, point: PointLike) -> None:
        """Connect the current point to ``point`` with a straight segment."""
        p = as_point(point)
        subpath = self._ensure_kind(SubPathKind.LINE)
        subpath.vertices.append(p.to_tuple())
        self._touch(subpath)

    def lines_to(self, points: Iterable) -> None:
        """Append several straight segments in order.

        Args:
            points: A flat stream ``[x0, y0, x1, y1, ...]`` or a sequence
                of (x, y) pairs.

        Raises:
            ValueError: If a flat stream has an odd number of values.
            EmptyGeometryError: If there is no current point, even for empty input.
        """
        self._require_active()
        coords = _coerce_points(points)
        if not coords:
            return
        subpath = self._ensure_kind(SubPathKind.LINE)
        self._extend(subpath, coords)

    def quadratic_curve_to(
        self,
        control: PointLike,
        end: PointLike,
        sample_count: Optional[int] = None
    ) -> None:
        """Append a sampled quadratic Bezier curve from the current point.

        Appends exactly ``sample_count`` vertices; the first one repeats
        the current point.
        """
        count = self._sample_count(sample_count, self._options.sample_count_quadratic)
        start = self._require_active().last
        samples = quadratic_bezier_points(start, control, end, count)
        self._extend(self._ensure_kind(SubPathKind.CURVE), samples)

    def cubic_curve_to(
        self,
        control1: PointLike,
        control2: PointLike,
        end: PointLike,
        sample_count: Optional[int] = None
    ) -> None:
        """Append a sampled cubic Bezier curve from the current point.

        Appends exactly ``sample_count`` vertices; the first one repeats
        the current point.
        """
        count = self._sample_count(sample_count, self._options.sample_count_cubic)
        start = self._require_active().last
        samples = cubic_bezier_points(start, control1, control2, end, count)
        self._extend(self._ensure_kind(SubPathKind.CURVE), samples)

    def arc(
        self,
        center: PointLike,
        radius: float,
        start_angle: float,
        end_angle: float,
        counterclockwise: bool = False,
        sample_count: Optional[int] = None
    ) -> None:
        """Append a sampled circular arc.

        The current point is joined to the arc's first sample by a straight
        segment. Equal start and end angles append a single line to the
        point at that angle instead of sweeping a circle.

        Raises:
            ValueError: If ``radius`` is negative.
        """
        if radius < 0:
            raise ValueError(f"Negative radius: {radius}")
        c = as_point(center)

        if start_angle == end_angle:
            self.line_to((c.x + math.cos(start_angle) * radius,
                          c.y + math.sin(start_angle) * radius))
            return

        count = self._sample_count(sample_count, self._options.sample_count_arc)
        self._require_active()
        samples = arc_points(c, radius, start_angle, end_angle, counterclockwise, count)
        self._extend(self._ensure_kind(SubPathKind.CURVE), samples)

    def arc_to(
        self,
        corner: PointLike,
        end: PointLike,
        radius: float,
        sample_count: Optional[int] = None
    ) -> None:
        """Round the corner between (current point -> corner) and (corner -> end).

        Appends the arc of the circle of ``radius`` tangent to both lines.
        Degenerate input (zero radius, coincident points, collinear lines)
        appends a straight line to ``corner`` instead.

        Raises:
            ValueError: If ``radius`` is negative.
        """
        start = self._require_active().last
        arc = tangent_arc(start, corner, end, radius)
        if arc is None:
            self.line_to(corner)
            return
        self.arc(arc.center, arc.radius, arc.start_angle, arc.end_angle,
                 arc.counterclockwise, sample_count)

    def _append_ellipse(self, samples: np.ndarray, new_subpath: bool) -> None:
        active = self._active_subpath()
        if new_subpath or active is None or active.is_empty:
            self.move_to(tuple(samples[0]))
            subpath = self._active_subpath()
            subpath.kind = SubPathKind.CURVE
            self._extend(subpath, samples[1:])
        else:
            self._extend(self._ensure_kind(SubPathKind.CURVE), samples)

    def _ellipse(self, center, radius_x, radius_y, rotation, start_angle, end_angle,
                 counterclockwise, sample_count, new_subpath) -> None:
        if radius_x < 0 or radius_y < 0:
            raise ValueError(f"Negative radius: ({radius_x}, {radius_y})")
        c = as_point(center)

        if start_angle == end_angle:
            point = ellipse_point(c, radius_x, radius_y, rotation, start_angle)
            active = self._active_subpath()
            if new_subpath or active is None or active.is_empty:
                self.move_to(point)
            else:
                self.line_to(point)
            return

        count = self._sample_count(sample_count, self._options.sample_count_ellipse)
        samples = ellipse_points(c, radius_x, radius_y, rotation,
                                 start_angle, end_angle, counterclockwise, count)
        self._append_ellipse(samples, new_subpath)

    def ellipse(
        self,
        center: PointLike,
        radius_x: float,
        radius_y: float,
        rotation: float,
        start_angle: float,
        end_angle: float,
        counterclockwise: bool = False,
        sample_count: Optional[int] = None
    ) -> None:
        """Append a sampled, rotated elliptical arc.

        Without a current point the first sample starts a new sub-path, which
        then holds exactly ``sample_count`` vertices. Otherwise the current
        point is joined to the first sample and ``sample_count`` vertices are
        appended.

        Args:
            center: Ellipse center.
            radius_x: Radius along the ellipse's own x axis.
            radius_y: Radius along the ellipse's own y axis.
            rotation: Rotation of the ellipse in radians.
            start_angle: Parametric start angle in radians.
            end_angle: Parametric end angle in radians.
            counterclockwise: Direction of travel.
            sample_count: Number of samples, defaults to the options.

        Raises:
            ValueError: If a radius is negative.
        """
        self._ellipse(center, radius_x, radius_y, rotation, start_angle, end_angle,
                      counterclockwise, sample_count, new_subpath=False)

    def ellipse_at(
        self,
        center: PointLike,
        radius_x: float,
        radius_y: float,
        rotation: float,
        start_angle: float,
        end_angle: float,
        counterclockwise: bool = False,
        sample_count: Optional[int] = None
    ) -> None:
        """Like ``ellipse``, but always in a sub-path of its own."""
        self._ellipse(center, radius_x, radius_y, rotation, start_angle, end_angle,
                      counterclockwise, sample_count, new_subpath=True)

    def rect(self, x: float, y: float, width: float, height: float) -> None:
        """Add a closed rectangular sub-path starting at (x, y)."""
        corners = rect_points(x, y, width, height)
        self.move_to(tuple(corners[0]))
        subpath = self._active_subpath()
        subpath.kind = SubPathKind.LINE
        subpath.closed = True
        self._extend(subpath, corners[1:])

    def close(self) -> None:
        """Close the active sub-path.

        Appends a copy of the first vertex unless the last vertex already
        equals it, so closing twice adds at most one vertex.
        """
        subpath = self._require_active()
        subpath.closed = True
        if subpath.first != subpath.last:
            subpath.vertices.append(subpath.first)
        self._touch(subpath)

    # ------------------------------------------------------------------
    # Length queries
    # ------------------------------------------------------------------

    def total_length(self) -> float:
        """Total length of all sub-paths."""
        self.update()
        return self._total_length

    def _locate(self, length: float) -> SegmentLocation:
        if math.isnan(length):
            raise ValueError("Length must not be NaN")
        if not self._dirty and self._memo is not None and self._memo[0] == length:
            return self._memo[1]
        self.update()
        location = locate(self._subpaths, self._total_length, length)
        self._memo = (length, location)
        return location

    def _require_tangents(self) -> None:
        if not self._options.compute_tangents_and_normals:
            raise CapabilityDisabled(
                "Tangent and normal computation is disabled for this path"
            )

    def segment_location_at_length(self, length: float) -> SegmentLocation:
        """Sub-path index, segment index and ratio at a length."""
        return self._locate(length)

    def subpath_index_at_length(self, length: float) -> int:
        """Index of the sub-path holding a length."""
        return self._locate(length).subpath_index

    def segment_index_at_length(self, length: float) -> Tuple[int, int]:
        """(sub-path index, segment index) holding a length."""
        location = self._locate(length)
        return (location.subpath_index, location.segment_index)

    def subpath_at_length(self, length: float) -> SubPathView:
        """View of the sub-path holding a length."""
        return self._subpaths[self._locate(length).subpath_index].view()

    def segment_at_length(self, length: float) -> Tuple[Point, Point]:
        """Copy of the start and end vertex of the segment holding a length."""
        return self._segment_endpoints(self._locate(length))

    def _segment_endpoints(self, location) -> Tuple[Point, Point]:
        subpath = self._subpaths[location.subpath_index]
        start = subpath.vertex(location.segment_index)
        if subpath.segment_count == 0:
            return (start, start)
        return (start, subpath.vertex(location.segment_index + 1))

    def point_at_length(self, length: float) -> Point:
        """Position at a length along the path.

        Lengths outside ``[0, total_length()]`` clamp to the path ends.

        Raises:
            EmptyGeometryError: If the path has no vertices.
        """
        return point_at(self._subpaths, self._locate(length))

    def tangent_at_length(self, length: float) -> Point:
        """Unit tangent of the segment holding a length.

        Raises:
            CapabilityDisabled: If tangents are not computed.
        """
        self._require_tangents()
        return tangent_at(self._subpaths, self._locate(length))

    def normal_at_length(self, length: float) -> Point:
        """Unit normal of the segment holding a length.

        Raises:
            CapabilityDisabled: If normals are not computed.
        """
        self._require_tangents()
        return normal_at(self._subpaths, self._locate(length))

    def tangent_and_normal_at_length(self, length: float) -> Tuple[Point, Point]:
        """Tangent and normal of the segment holding a length."""
        self._require_tangents()
        location = self._locate(length)
        return (tangent_at(self._subpaths, location), normal_at(self._subpaths, location))

    def point_tangent_normal_at_length(self, length: float) -> PointFrame:
        """Position, tangent and normal at a length."""
        self._require_tangents()
        location = self._locate(length)
        return PointFrame(
            point=point_at(self._subpaths, location),
            tangent=tangent_at(self._subpaths, location),
            normal=normal_at(self._subpaths, location)
        )

    # ------------------------------------------------------------------
    # Nearest-point queries
    # ------------------------------------------------------------------

    def nearest_point_on_segment(
        self,
        point: PointLike,
        subpath_index: int,
        segment_index: int
    ) -> Projection:
        """Project a point onto one segment.

        Raises:
            IndexOutOfRange: If either index is out of bounds.
        """
        self.update()
        check_index(subpath_index, len(self._subpaths), "Sub-path")
        subpath = self._subpaths[subpath_index]
        check_index(segment_index, subpath.segment_count, "Segment")
        return project_on_segment(point, subpath, segment_index, subpath_index)

    def nearest_point_on_subpath(self, point: PointLike, subpath_index: int) -> Projection:
        """Project a point onto the closest segment of one sub-path.

        Raises:
            IndexOutOfRange: If the index is out of bounds.
            EmptyGeometryError: If the sub-path has no vertex.
        """
        self.update()
        check_index(subpath_index, len(self._subpaths), "Sub-path")
        return project_on_subpath(point, self._subpaths[subpath_index], subpath_index)

    def nearest_point_on_path(self, point: PointLike) -> Projection:
        """Project a point onto the closest segment of the whole path.

        Raises:
            EmptyGeometryError: If the path has no vertices.
        """
        self.update()
        return project_on_path(point, self._subpaths)

    def distance_to_segment(self, point: PointLike, subpath_index: int, segment_index: int) -> float:
        return self.nearest_point_on_segment(point, subpath_index, segment_index).distance

    def distance_to_subpath(self, point: PointLike, subpath_index: int) -> float:
        return self.nearest_point_on_subpath(point, subpath_index).distance

    def distance_to_path(self, point: PointLike) -> float:
        return self.nearest_point_on_path(point).distance

    def length_on_segment(self, point: PointLike, subpath_index: int, segment_index: int) -> float:
        return self.nearest_point_on_segment(point, subpath_index, segment_index).length

    def length_on_subpath(self, point: PointLike, subpath_index: int) -> float:
        return self.nearest_point_on_subpath(point, subpath_index).length

    def length_on_path(self, point: PointLike) -> float:
        """Arclength of the projection of a point onto the path."""
        return self.nearest_point_on_path(point).length

    def subpath_index_nearest_to_point(self, point: PointLike) -> int:
        return self.nearest_point_on_path(point).subpath_index

    def segment_index_nearest_to_point(self, point: PointLike) -> Tuple[int, int]:
        result = self.nearest_point_on_path(point)
        return (result.subpath_index, result.segment_index)

    def segment_nearest_to_point(self, point: PointLike) -> Tuple[Point, Point]:
        """Copy of the start and end vertex of the segment nearest to a point."""
        return self._segment_endpoints(self.nearest_point_on_path(point))

    def subpath_nearest_to_point(self, point: PointLike) -> SubPathView:
        return self._subpaths[self.nearest_point_on_path(point).subpath_index].view()

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def sub_paths(self) -> Tuple[SubPathView, ...]:
        """Read-only snapshots of all sub-paths, in order."""
        self.update()
        return tuple(subpath.view() for subpath in self._subpaths)

    def to_svg_path_data(self, precision: int = 6) -> str:
        """SVG path data (``M``/``L``/``Z``) for the path's vertices."""
        from ..utils.svg import to_svg_path_data
        return to_svg_path_data(self.sub_paths(), precision)

    def copy(self) -> Path2d:
        """Independent deep copy of the path."""
        return copy.deepcopy(self)
