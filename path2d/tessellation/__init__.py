"""Tessellation of parametric primitives.

Turns curve parameters into vertex arrays that a path appends to its
active sub-path.
"""

from .curves import (
    TAU,
    TangentArc,
    arc_points,
    clamp_sample_count,
    cubic_bezier_points,
    ellipse_point,
    ellipse_points,
    normalize_sweep,
    quadratic_bezier_points,
    rect_points,
    tangent_arc,
)

__all__ = [
    'TAU', 'TangentArc',
    'clamp_sample_count', 'normalize_sweep',
    'quadratic_bezier_points', 'cubic_bezier_points',
    'arc_points', 'ellipse_point', 'ellipse_points',
    'rect_points', 'tangent_arc',
]
