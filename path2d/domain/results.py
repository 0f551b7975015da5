"""Query result value objects.

Every query on a path returns one of these frozen objects, freshly built
per call, so callers never share storage with the path or with each
other.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .geometry import Point


@dataclass(frozen=True)
class SegmentLocation:
    """Where a length along the path falls.

    Attributes:
        subpath_index: Index of the sub-path holding the length.
        segment_index: Index of the segment inside that sub-path.
        ratio: Position between the segment's start (0) and end (1)
            vertex.
    """
    subpath_index: int
    segment_index: int
    ratio: float = 0.0


@dataclass(frozen=True)
class Projection:
    """Closest location on a segment, sub-path or path to a query point.

    Attributes:
        point: The projected point.
        distance: Euclidean distance from the query point to ``point``.
        length: Arclength of ``point`` measured from the path start.
        subpath_index: Sub-path holding the projection.
        segment_index: Segment holding the projection.
    """
    point: Point
    distance: float
    length: float
    subpath_index: int
    segment_index: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'x': self.point.x,
            'y': self.point.y,
            'distance': self.distance,
            'length': self.length,
            'subpath_index': self.subpath_index,
            'segment_index': self.segment_index,
        }


@dataclass(frozen=True)
class PointFrame:
    """Position with its tangent and normal at a length along the path."""
    point: Point
    tangent: Point
    normal: Point
