"""Arclength locator.

Maps a scalar length along a path to the sub-path, segment and
interpolation ratio holding it. The sub-paths must be up to date (see
``update_subpaths``) before any lookup.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ..domain.geometry import Point
from ..domain.results import SegmentLocation
from ..domain.subpath import SubPath
from ..errors import EmptyGeometryError


def _first_nonempty(subpaths: Sequence[SubPath]) -> int:
    for index, subpath in enumerate(subpaths):
        if not subpath.is_empty:
            return index
    raise EmptyGeometryError("Path has no vertices")


def _last_nonempty(subpaths: Sequence[SubPath]) -> int:
    for index in range(len(subpaths) - 1, -1, -1):
        if not subpaths[index].is_empty:
            return index
    raise EmptyGeometryError("Path has no vertices")


def _subpath_index_at(subpaths: Sequence[SubPath], length: float) -> int:
    last = len(subpaths) - 1
    for index in range(last):
        if subpaths[index].global_offset <= length < subpaths[index + 1].global_offset:
            return index
    return last


def locate(subpaths: Sequence[SubPath], total_length: float, length: float) -> SegmentLocation:
    """Find the sub-path, segment and ratio at a length along the path.

    Lengths at or below zero clamp to the start of the first sub-path
    (ratio 0); lengths at or above the total clamp to the end of the last
    segment of the last sub-path (ratio 1). Inside a sub-path the first
    segment whose end reaches the remaining length is selected, so a
    length landing exactly on a vertex resolves to the segment ending
    there with ratio 1.

    Args:
        subpaths: Up-to-date sub-paths in path order.
        total_length: Total length of the path.
        length: Length to locate.

    Returns:
        SegmentLocation at the length.

    Raises:
        EmptyGeometryError: If no sub-path has a vertex.
    """
    if length <= 0:
        return SegmentLocation(_first_nonempty(subpaths), 0, 0.0)

    if length >= total_length:
        index = _last_nonempty(subpaths)
        return SegmentLocation(index, max(subpaths[index].segment_count - 1, 0), 1.0)

    subpath_index = _subpath_index_at(subpaths, length)
    subpath = subpaths[subpath_index]
    remaining = length - subpath.global_offset

    lengths = subpath.segment_lengths
    ends = subpath.segment_offsets + lengths
    segment_index = int(np.searchsorted(ends, remaining, side='left'))
    if segment_index >= len(lengths):
        return SegmentLocation(subpath_index, max(len(lengths) - 1, 0), 1.0)

    segment_length = float(lengths[segment_index])
    if segment_length == 0.0:
        ratio = 0.0
    else:
        remaining -= float(subpath.segment_offsets[segment_index])
        ratio = min(max(remaining / segment_length, 0.0), 1.0)
    return SegmentLocation(subpath_index, segment_index, ratio)


def point_at(subpaths: Sequence[SubPath], location: SegmentLocation) -> Point:
    """Interpolate the position of a located length."""
    subpath = subpaths[location.subpath_index]
    start = subpath.vertex(location.segment_index)
    if subpath.segment_count == 0 or location.ratio <= 0.0:
        return start
    end = subpath.vertex(location.segment_index + 1)
    if location.ratio >= 1.0:
        return end
    return start.lerp(end, location.ratio)


def tangent_at(subpaths: Sequence[SubPath], location: SegmentLocation) -> Point:
    """Tangent stored at the located segment's start vertex."""
    tangents = subpaths[location.subpath_index].tangents
    return Point(*map(float, tangents[location.segment_index]))


def normal_at(subpaths: Sequence[SubPath], location: SegmentLocation) -> Point:
    """Normal stored at the located segment's start vertex."""
    normals = subpaths[location.subpath_index].normals
    return Point(*map(float, normals[location.segment_index]))
