"""Sampling of parametric primitives into vertex arrays.

Every function returns a float64 array of shape (sample_count, 2). The
samples include both ends of the parameter range, so the first sample of
a Bezier curve coincides with its start point.

The module provides the following functions:
    clamp_sample_count: Clamp a requested sample count to the minimum.
    quadratic_bezier_points: Sample a quadratic Bezier curve.
    cubic_bezier_points: Sample a cubic Bezier curve.
    normalize_sweep: Resolve start angle and signed sweep of an arc.
    arc_points: Sample a circular arc.
    ellipse_points: Sample a rotated elliptical arc.
    rect_points: Corner loop of an axis-aligned rectangle.
    tangent_arc: Circle tangent to two lines meeting at a corner.

Example usage:
    Sampling a curve::

        from path2d.tessellation.curves import cubic_bezier_points

        pts = cubic_bezier_points((0, 0), (0, 10), (10, 10), (10, 0), 16)
        assert pts.shape == (16, 2)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from ..config import MIN_SAMPLE_COUNT
from ..domain.geometry import Point, PointLike, as_point

TAU = 2.0 * math.pi

logger = logging.getLogger(__name__)


def clamp_sample_count(sample_count: int) -> int:
    """Clamp a per-call sample count to at least two samples."""
    count = int(sample_count)
    if count < MIN_SAMPLE_COUNT:
        logger.debug("Sample count %d clamped to %d", count, MIN_SAMPLE_COUNT)
        return MIN_SAMPLE_COUNT
    return count


def _xy(point: PointLike) -> np.ndarray:
    return np.array(as_point(point).to_tuple(), dtype=np.float64)


def _parameters(sample_count: int) -> np.ndarray:
    return np.linspace(0.0, 1.0, sample_count)[:, np.newaxis]


def quadratic_bezier_points(
    start: PointLike,
    control: PointLike,
    end: PointLike,
    sample_count: int
) -> np.ndarray:
    """Sample a quadratic Bezier curve at uniform parameter steps.

    Args:
        start: Start point (t = 0).
        control: Control point.
        end: End point (t = 1).
        sample_count: Number of samples, including both ends.

    Returns:
        Array of shape (sample_count, 2).
    """
    p0, p1, p2 = (_xy(p) for p in (start, control, end))
    t = _parameters(sample_count)
    mt = 1.0 - t
    return mt * mt * p0 + 2.0 * mt * t * p1 + t * t * p2


def cubic_bezier_points(
    start: PointLike,
    control1: PointLike,
    control2: PointLike,
    end: PointLike,
    sample_count: int
) -> np.ndarray:
    """Sample a cubic Bezier curve at uniform parameter steps.

    Args:
        start: Start point (t = 0).
        control1: First control point.
        control2: Second control point.
        end: End point (t = 1).
        sample_count: Number of samples, including both ends.

    Returns:
        Array of shape (sample_count, 2).
    """
    p0, p1, p2, p3 = (_xy(p) for p in (start, control1, control2, end))
    t = _parameters(sample_count)
    mt = 1.0 - t
    return (mt ** 3) * p0 + 3.0 * mt * mt * t * p1 + 3.0 * mt * t * t * p2 + (t ** 3) * p3


def normalize_sweep(
    start_angle: float,
    end_angle: float,
    counterclockwise: bool
) -> Tuple[float, float]:
    """Resolve the start angle and signed sweep of an arc.

    Both angles are wrapped into [0, 2*pi). Sweeping counterclockwise from
    a start not above the end adds a full turn to the start; sweeping
    clockwise to an end not above the start adds a full turn to the end.

    Args:
        start_angle: Start angle in radians.
        end_angle: End angle in radians.
        counterclockwise: Direction of travel. Clockwise sweeps increase
            the angle.

    Returns:
        Tuple of (start angle, signed sweep). The sweep is negative for
        counterclockwise travel.
    """
    start = start_angle % TAU
    end = end_angle % TAU

    if counterclockwise and start <= end:
        start += TAU
    elif not counterclockwise and end <= start:
        end += TAU

    return start, end - start


def _angles(start_angle, end_angle, counterclockwise, sample_count) -> np.ndarray:
    start, sweep = normalize_sweep(start_angle, end_angle, counterclockwise)
    return start + sweep * np.linspace(0.0, 1.0, sample_count)


def arc_points(
    center: PointLike,
    radius: float,
    start_angle: float,
    end_angle: float,
    counterclockwise: bool,
    sample_count: int
) -> np.ndarray:
    """Sample a circular arc at uniform angle steps.

    Args:
        center: Arc center.
        radius: Arc radius. A zero radius yields samples at the center.
        start_angle: Start angle in radians.
        end_angle: End angle in radians.
        counterclockwise: Direction of travel.
        sample_count: Number of samples, including both ends.

    Returns:
        Array of shape (sample_count, 2).
    """
    c = _xy(center)
    angles = _angles(start_angle, end_angle, counterclockwise, sample_count)
    return c + radius * np.column_stack((np.cos(angles), np.sin(angles)))


def ellipse_point(
    center: PointLike,
    radius_x: float,
    radius_y: float,
    rotation: float,
    angle: float
) -> Point:
    """Point at a parametric angle on a rotated ellipse."""
    c = as_point(center)
    px = radius_x * math.cos(angle)
    py = radius_y * math.sin(angle)
    cos_rot = math.cos(rotation)
    sin_rot = math.sin(rotation)
    return Point(
        px * cos_rot - py * sin_rot + c.x,
        px * sin_rot + py * cos_rot + c.y
    )


def ellipse_points(
    center: PointLike,
    radius_x: float,
    radius_y: float,
    rotation: float,
    start_angle: float,
    end_angle: float,
    counterclockwise: bool,
    sample_count: int
) -> np.ndarray:
    """Sample a rotated elliptical arc at uniform parametric angle steps.

    Each sample on the unit circle is scaled by (radius_x, radius_y),
    rotated by ``rotation`` and translated to ``center``.

    Returns:
        Array of shape (sample_count, 2).
    """
    c = _xy(center)
    angles = _angles(start_angle, end_angle, counterclockwise, sample_count)
    local = np.column_stack((radius_x * np.cos(angles), radius_y * np.sin(angles)))

    cos_rot = math.cos(rotation)
    sin_rot = math.sin(rotation)
    rot = np.array([[cos_rot, sin_rot], [-sin_rot, cos_rot]])
    return local @ rot + c


def rect_points(x: float, y: float, width: float, height: float) -> np.ndarray:
    """Corner loop of a rectangle, ending back at the start corner.

    Returns:
        Array of shape (5, 2): (x, y), (x+w, y), (x+w, y+h), (x, y+h), (x, y).
    """
    xw = x + width
    yh = y + height
    return np.array(
        [[x, y], [xw, y], [xw, yh], [x, yh], [x, y]],
        dtype=np.float64
    )


@dataclass(frozen=True)
class TangentArc:
    """Arc of a circle tangent to two lines meeting at a corner.

    Attributes:
        center: Circle center.
        radius: Circle radius.
        start_angle: Angle of the tangent point on the incoming line.
        end_angle: Angle of the tangent point on the outgoing line.
        counterclockwise: Direction that sweeps the short way between
            the two tangent points.
    """
    center: Point
    radius: float
    start_angle: float
    end_angle: float
    counterclockwise: bool

    @property
    def start_point(self) -> Point:
        return Point(
            self.center.x + self.radius * math.cos(self.start_angle),
            self.center.y + self.radius * math.sin(self.start_angle)
        )


def tangent_arc(
    previous: PointLike,
    corner: PointLike,
    end: PointLike,
    radius: float
) -> Optional[TangentArc]:
    """Circle of ``radius`` tangent to (previous -> corner) and (corner -> end).

    The circle sits inside the corner. Its tangent points lie on the rays
    from the corner towards ``previous`` and ``end``, at distance
    ``radius / tan(theta / 2)`` from the corner, where theta is the angle
    between the rays. The center lies on the bisector at distance
    ``radius / sin(theta / 2)``.

    Args:
        previous: Current point before the corner.
        corner: Corner where the two lines meet.
        end: Point the outgoing line heads towards.
        radius: Circle radius, must not be negative.

    Returns:
        The tangent arc, or None when the construction is degenerate
        (zero radius, coincident points or collinear lines). Callers then
        draw a straight line to the corner.

    Raises:
        ValueError: If ``radius`` is negative.
    """
    if radius < 0:
        raise ValueError(f"Negative radius: {radius}")

    p0 = as_point(previous)
    p1 = as_point(corner)
    p2 = as_point(end)

    to_prev = p0 - p1
    to_end = p2 - p1
    if radius == 0 or to_prev.length() == 0.0 or to_end.length() == 0.0:
        return None

    u1 = to_prev.normalized()
    u2 = to_end.normalized()
    if u1.cross(u2) == 0.0:
        return None

    theta = math.acos(max(-1.0, min(1.0, u1.dot(u2))))
    half = theta / 2.0
    tangent_distance = radius / math.tan(half)
    center_distance = radius / math.sin(half)

    bisector = (u1 + u2).normalized()
    center = p1 + bisector * center_distance
    t1 = p1 + u1 * tangent_distance
    t2 = p1 + u2 * tangent_distance

    start_angle = math.atan2(t1.y - center.y, t1.x - center.x)
    end_angle = math.atan2(t2.y - center.y, t2.x - center.x)

    # Left turn in the direction of travel sweeps the angle upwards
    turn = (p1 - p0).cross(p2 - p1)
    return TangentArc(
        center=center,
        radius=radius,
        start_angle=start_angle,
        end_angle=end_angle,
        counterclockwise=turn < 0.0
    )
