"""Length tables, arclength lookup and nearest-point projection.

The module exports the following:

Length engine:
    UpdateMode: Length-only or with tangents and normals.
    SubPathMetrics: Derived tables for one sub-path.
    compute_subpath_metrics: Compute the tables for a vertex sequence.
    update_subpaths: Lazy update sweep over a path's sub-paths.

Locator:
    locate: Sub-path, segment and ratio at a length.

Nearest point:
    project_on_segment, project_on_subpath, project_on_path.
"""

from .lengths import SubPathMetrics, UpdateMode, compute_subpath_metrics, update_subpaths
from .locator import locate, normal_at, point_at, tangent_at
from .nearest import project_on_path, project_on_segment, project_on_subpath

__all__ = [
    'UpdateMode', 'SubPathMetrics', 'compute_subpath_metrics', 'update_subpaths',
    'locate', 'point_at', 'tangent_at', 'normal_at',
    'project_on_segment', 'project_on_subpath', 'project_on_path',
]
