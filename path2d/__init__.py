"""2D Path Package.

Builds vector paths from connected straight and curved segments and
answers arclength-based queries against them: position, tangent and
normal at a length, and nearest point, distance and arclength for an
arbitrary query point.

Architecture Overview:
    Curves are tessellated into vertices as they are appended, so every
    query works on polylines. Derived tables are rebuilt lazily:

    - path2d.tessellation samples Bezier curves, arcs, ellipses and
      rectangles into vertex arrays
    - path2d.analysis holds the length engine, the arclength locator and
      the nearest-point engine
    - path2d.domain provides the value objects (Point, SubPath views,
      query results)
    - path2d.api offers the Path2d facade tying them together

The package is organized into the following modules:
    domain: Point, sub-path records and read-only views, query results.
    tessellation: Sampling of parametric primitives.
    analysis: Length tables, arclength lookup, nearest-point projection.
    api: The Path2d facade.
    config: PathOptions and DEFAULT_OPTIONS.
    errors: Exception hierarchy rooted at Path2dError.
    utils: SVG path data export.
    logging_config: Logging setup for applications.

Example usage:
    Building a path::

        from path2d import Path2d

        path = Path2d()
        path.move_to((0, 0))
        path.line_to((100, 0))
        path.arc((100, 50), 50, -1.5708, 0.0)
        print(f"Length: {path.total_length()}")

    Querying it::

        point = path.point_at_length(120.0)
        frame = path.point_tangent_normal_at_length(120.0)
        nearest = path.nearest_point_on_path((140, 10))
        print(nearest.point, nearest.distance, nearest.length)

    Building without tangents::

        from path2d import PathOptions

        path = Path2d(PathOptions(compute_tangents_and_normals=False))

Attributes:
    __version__ (str): Package version string.
    __all__ (list): List of public symbols exported by this package.
"""

from .api import Path2d
from .config import DEFAULT_OPTIONS, PathOptions
from .domain import Point, PointFrame, Projection, SegmentLocation, SubPathKind, SubPathView
from .errors import (
    CapabilityDisabled,
    ConfigurationError,
    EmptyGeometryError,
    IndexOutOfRange,
    Path2dError,
)

__all__ = [
    # Facade
    'Path2d',
    # Configuration
    'PathOptions', 'DEFAULT_OPTIONS',
    # Domain objects
    'Point', 'SubPathKind', 'SubPathView', 'SegmentLocation', 'Projection', 'PointFrame',
    # Errors
    'Path2dError', 'ConfigurationError', 'IndexOutOfRange', 'EmptyGeometryError',
    'CapabilityDisabled',
]

__version__ = '1.0.0'
