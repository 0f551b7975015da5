"""Domain objects for 2D paths.

This module provides the value objects and records used throughout the
package: the geometric primitive, the sub-path record with its read-only
view, and the immutable query results.

The module exports the following classes:

Geometry classes:
    Point: Immutable 2D point with vector operations.

Sub-path classes:
    SubPath: Mutable sub-path record owned by a path.
    SubPathKind: Interpolation family (line or curve).
    SubPathView: Read-only snapshot handed to callers.

Result classes:
    SegmentLocation: Sub-path, segment and ratio at a length.
    Projection: Nearest location on the geometry to a query point.
    PointFrame: Point, tangent and normal at a length.

Example usage:
    Working with geometry::

        from path2d.domain import Point

        p1 = Point(0, 0)
        p2 = Point(3, 4)
        distance = p1.distance_to(p2)  # 5.0
        direction = (p2 - p1).normalized()
"""

from .geometry import Point, PointLike, as_point
from .results import PointFrame, Projection, SegmentLocation
from .subpath import SubPath, SubPathKind, SubPathView

__all__ = [
    'Point', 'PointLike', 'as_point',
    'SubPath', 'SubPathKind', 'SubPathView',
    'SegmentLocation', 'Projection', 'PointFrame',
]
