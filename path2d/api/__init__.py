"""Public facade for building and querying paths.

Classes:
    Path2d: Path construction, arclength and nearest-point queries.
"""

from .path import Path2d

__all__ = ['Path2d']
