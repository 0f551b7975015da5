"""Nearest-point projection onto segments, sub-paths and paths.

Projection is a linear scan over every segment, O(total vertex count)
per query. Exact distance ties resolve to the earliest segment and the
earliest sub-path. The sub-paths must be up to date before any query.

Example usage:
    Projecting onto a path's sub-paths::

        from path2d.analysis.nearest import project_on_path

        result = project_on_path((5.0, 5.0), subpaths)
        print(result.point, result.distance, result.length)
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from ..domain.geometry import Point, PointLike, as_point
from ..domain.results import Projection
from ..domain.subpath import SubPath
from ..errors import EmptyGeometryError


def project_on_segment(
    point: PointLike,
    subpath: SubPath,
    segment_index: int,
    subpath_index: int = 0
) -> Projection:
    """Project a point onto one segment of a sub-path.

    The projection parameter ``dot / len^2`` is clamped to the segment:
    a non-positive dot product snaps to the start vertex, a dot product
    reaching the squared length snaps to the end vertex. A zero-length
    segment therefore always projects onto its start.

    Args:
        point: Query point.
        subpath: Up-to-date sub-path holding the segment.
        segment_index: Index of the segment, assumed valid.
        subpath_index: Index reported in the result.

    Returns:
        Projection with the arclength measured from the path start.
    """
    p = as_point(point)
    start = subpath.vertex(segment_index)
    end = subpath.vertex(segment_index + 1)

    direction = end - start
    dot = (p - start).dot(direction)
    squared = direction.dot(direction)

    if dot <= 0:
        projected = start
    elif dot >= squared:
        projected = end
    else:
        projected = start + direction * (dot / squared)

    along = (
        subpath.global_offset
        + float(subpath.segment_offsets[segment_index])
        + start.distance_to(projected)
    )
    return Projection(
        point=projected,
        distance=projected.distance_to(p),
        length=along,
        subpath_index=subpath_index,
        segment_index=segment_index
    )


def _segment_distances(point: Point, vertices: np.ndarray) -> np.ndarray:
    """Distance from a point to every segment, computed as ``project_on_segment`` does.

    Clamped projections snap to the exact start or end vertex, so two
    segments sharing the nearest vertex report equal distances.
    """
    starts = vertices[:-1]
    ends = vertices[1:]
    directions = ends - starts
    offsets = np.array([point.x, point.y]) - starts

    dots = offsets[:, 0] * directions[:, 0] + offsets[:, 1] * directions[:, 1]
    squared = directions[:, 0] * directions[:, 0] + directions[:, 1] * directions[:, 1]
    inner = (dots > 0) & (dots < squared)
    t = np.divide(dots, squared, out=np.zeros_like(dots), where=inner)

    projected = np.where(
        (dots <= 0)[:, np.newaxis],
        starts,
        np.where(inner[:, np.newaxis], starts + directions * t[:, np.newaxis], ends)
    )
    dx = projected[:, 0] - point.x
    dy = projected[:, 1] - point.y
    return np.sqrt(dx * dx + dy * dy)


def project_on_subpath(
    point: PointLike,
    subpath: SubPath,
    subpath_index: int = 0
) -> Projection:
    """Project a point onto the closest segment of a sub-path.

    Segments are compared in index order and the earliest one wins an
    exact tie. A sub-path holding a single vertex projects onto it.

    Raises:
        EmptyGeometryError: If the sub-path has no vertex.
    """
    p = as_point(point)
    if subpath.is_empty:
        raise EmptyGeometryError("Cannot project onto an empty sub-path")

    if subpath.segment_count == 0:
        vertex = subpath.vertex(0)
        return Projection(vertex, vertex.distance_to(p), subpath.global_offset,
                          subpath_index, 0)

    vertices = np.asarray(subpath.vertices, dtype=np.float64)
    distances = _segment_distances(p, vertices)
    # argmin returns the first of equal minima
    best = int(np.argmin(distances))
    return project_on_segment(p, subpath, best, subpath_index)


def project_on_path(point: PointLike, subpaths: Sequence[SubPath]) -> Projection:
    """Project a point onto the closest sub-path.

    Sub-paths are compared in order and the earliest wins an exact tie.
    Empty sub-paths are skipped.

    Raises:
        EmptyGeometryError: If no sub-path has a vertex.
    """
    p = as_point(point)
    best: Optional[Projection] = None

    for index, subpath in enumerate(subpaths):
        if subpath.is_empty:
            continue
        candidate = project_on_subpath(p, subpath, index)
        if best is None or candidate.distance < best.distance:
            best = candidate

    if best is None:
        raise EmptyGeometryError("Cannot project onto a path without vertices")
    return best
