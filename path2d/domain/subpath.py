"""Sub-path records.

A sub-path is a connected run of vertices sharing one interpolation
intent. ``SubPath`` is the mutable record owned by a ``Path2d``; the
derived tables (segment lengths, offsets, tangents, normals) are written
by the length engine in ``path2d.analysis.lengths`` and are only
meaningful while ``dirty`` is False.

``SubPathView`` is the read-only snapshot handed to callers. Its arrays
are private copies with the writeable flag cleared, so a view stays
valid after the owning path changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from .geometry import Point


class SubPathKind(Enum):
    """Interpolation family of the primitives a sub-path holds."""
    LINE = 'line'
    CURVE = 'curve'


def _empty_table() -> np.ndarray:
    return np.zeros(0, dtype=np.float64)


def _empty_vectors() -> np.ndarray:
    return np.zeros((0, 2), dtype=np.float64)


@dataclass
class SubPath:
    """Mutable sub-path record.

    Attributes:
        vertices: Ordered (x, y) tuples.
        kind: Family of the last appended primitive.
        closed: True once ``close()`` or ``rect()`` finished the loop.
        segment_lengths: Length per consecutive vertex pair.
        segment_offsets: Prefix sum of ``segment_lengths``, starting at 0.
        total_length: Sum of ``segment_lengths``.
        global_offset: Sum of the total lengths of all prior sub-paths.
        tangents: One unit vector per vertex, shape (n, 2), or None when
            tangent computation is disabled.
        normals: Same layout as ``tangents``.
        dirty: True when the derived tables are stale.
    """
    vertices: List[Tuple[float, float]] = field(default_factory=list)
    kind: SubPathKind = SubPathKind.LINE
    closed: bool = False
    segment_lengths: np.ndarray = field(default_factory=_empty_table)
    segment_offsets: np.ndarray = field(default_factory=_empty_table)
    total_length: float = 0.0
    global_offset: float = 0.0
    tangents: Optional[np.ndarray] = None
    normals: Optional[np.ndarray] = None
    dirty: bool = True

    def __len__(self) -> int:
        return len(self.vertices)

    @property
    def is_empty(self) -> bool:
        return not self.vertices

    @property
    def segment_count(self) -> int:
        return max(len(self.vertices) - 1, 0)

    @property
    def first(self) -> Tuple[float, float]:
        return self.vertices[0]

    @property
    def last(self) -> Tuple[float, float]:
        return self.vertices[-1]

    def vertex(self, index: int) -> Point:
        return Point.from_tuple(self.vertices[index])

    def clear(self) -> None:
        """Drop all vertices and derived data."""
        self.vertices.clear()
        self.kind = SubPathKind.LINE
        self.closed = False
        self.segment_lengths = _empty_table()
        self.segment_offsets = _empty_table()
        self.total_length = 0.0
        self.global_offset = 0.0
        self.tangents = None
        self.normals = None
        self.dirty = True

    def view(self) -> SubPathView:
        """Snapshot the sub-path as an owned, read-only view."""
        return SubPathView(
            vertices=_frozen(np.asarray(self.vertices, dtype=np.float64).reshape(-1, 2)),
            kind=self.kind,
            closed=self.closed,
            segment_lengths=_frozen(self.segment_lengths),
            segment_offsets=_frozen(self.segment_offsets),
            total_length=self.total_length,
            global_offset=self.global_offset,
            tangents=None if self.tangents is None else _frozen(self.tangents),
            normals=None if self.normals is None else _frozen(self.normals),
        )


def _frozen(array: np.ndarray) -> np.ndarray:
    out = np.array(array, dtype=np.float64, copy=True)
    out.flags.writeable = False
    return out


@dataclass(frozen=True, eq=False)
class SubPathView:
    """Read-only snapshot of a sub-path.

    This is the structural information an external serializer needs:
    vertex order, sub-path boundaries (one view per sub-path) and the
    closed flag, plus the derived length tables.
    """
    vertices: np.ndarray
    kind: SubPathKind
    closed: bool
    segment_lengths: np.ndarray
    segment_offsets: np.ndarray
    total_length: float
    global_offset: float
    tangents: Optional[np.ndarray] = None
    normals: Optional[np.ndarray] = None

    def __len__(self) -> int:
        return len(self.vertices)

    @property
    def segment_count(self) -> int:
        return len(self.segment_lengths)

    def points(self) -> List[Point]:
        """Vertices as Point objects."""
        return [Point(float(x), float(y)) for x, y in self.vertices]
