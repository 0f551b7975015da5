"""Sub-path length tables and the path update sweep.

``compute_subpath_metrics`` derives, in one vectorized pass over a
sub-path's vertices, the per-segment lengths, their prefix-sum offsets,
the total length and (optionally) per-vertex unit tangents and normals.

``update_subpaths`` brings a whole sequence of sub-paths up to date. It
recomputes only dirty sub-paths and only reassigns the global offset of
clean ones, so a query after a single mutation costs time proportional
to the mutated sub-path rather than to the whole path.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

import numpy as np

from ..domain.subpath import SubPath

logger = logging.getLogger(__name__)


class UpdateMode(Enum):
    """What the update sweep computes for a dirty sub-path."""
    LENGTH_ONLY = 'length_only'
    WITH_TANGENTS_AND_NORMALS = 'with_tangents_and_normals'


@dataclass(frozen=True)
class SubPathMetrics:
    """Derived tables for one sub-path.

    Attributes:
        segment_lengths: Length per segment, shape (n - 1,).
        segment_offsets: Running length before each segment, shape (n - 1,).
        total_length: Sum of all segment lengths.
        tangents: Unit tangent per vertex, shape (n, 2), or None.
        normals: Unit normal per vertex, shape (n, 2), or None.
    """
    segment_lengths: np.ndarray
    segment_offsets: np.ndarray
    total_length: float
    tangents: Optional[np.ndarray] = None
    normals: Optional[np.ndarray] = None


def _as_vertex_array(vertices: Sequence[Tuple[float, float]]) -> np.ndarray:
    return np.asarray(vertices, dtype=np.float64).reshape(-1, 2)


def compute_subpath_metrics(
    vertices: Sequence[Tuple[float, float]],
    mode: UpdateMode = UpdateMode.LENGTH_ONLY
) -> SubPathMetrics:
    """Compute segment lengths, offsets and optional tangents/normals.

    A zero-length segment gets a zero tangent and normal: its direction
    is scaled by a reciprocal length of 1.0 instead of dividing by zero.
    The last vertex copies the tangent and normal of the segment before
    it; a single vertex has a zero tangent and normal.

    Args:
        vertices: Ordered (x, y) vertices of the sub-path.
        mode: Whether to compute tangents and normals.

    Returns:
        SubPathMetrics for the vertices.
    """
    points = _as_vertex_array(vertices)
    deltas = np.diff(points, axis=0)
    lengths = np.hypot(deltas[:, 0], deltas[:, 1])

    running = np.cumsum(lengths)
    offsets = np.concatenate(([0.0], running[:-1])) if len(lengths) else np.zeros(0)
    total = float(running[-1]) if len(running) else 0.0

    if mode is UpdateMode.LENGTH_ONLY:
        return SubPathMetrics(lengths, offsets, total)

    tangents = np.zeros_like(points)
    if len(lengths):
        inv_lengths = 1.0 / np.where(lengths == 0.0, 1.0, lengths)
        tangents[:-1] = deltas * inv_lengths[:, np.newaxis]
        tangents[-1] = tangents[-2]
    normals = np.column_stack((-tangents[:, 1], tangents[:, 0]))

    return SubPathMetrics(lengths, offsets, total, tangents, normals)


def apply_metrics(subpath: SubPath, metrics: SubPathMetrics) -> None:
    """Store computed metrics on a sub-path and mark it clean."""
    subpath.segment_lengths = metrics.segment_lengths
    subpath.segment_offsets = metrics.segment_offsets
    subpath.total_length = metrics.total_length
    subpath.tangents = metrics.tangents
    subpath.normals = metrics.normals
    subpath.dirty = False


def update_subpaths(subpaths: Sequence[SubPath], mode: UpdateMode) -> float:
    """Bring every sub-path's tables and global offset up to date.

    Args:
        subpaths: Sub-paths in path order.
        mode: Length engine variant for dirty sub-paths.

    Returns:
        Total length of all sub-paths.
    """
    running = 0.0
    recomputed = 0

    for subpath in subpaths:
        if subpath.dirty:
            apply_metrics(subpath, compute_subpath_metrics(subpath.vertices, mode))
            recomputed += 1
        subpath.global_offset = running
        running += subpath.total_length

    logger.debug("Updated %d of %d sub-paths, total length %.6g",
                 recomputed, len(subpaths), running)
    return running
