"""SVG path data export.

Renders sub-path views as polyline path data: ``M`` for the first vertex,
``L`` for every following one and ``Z`` for closed sub-paths. Curves are
exported as their sampled vertices.

Example usage:
    Exporting a path::

        from path2d import Path2d
        from path2d.utils.svg import to_svg_path_data

        path = Path2d()
        path.rect(0, 0, 10, 5)
        to_svg_path_data(path.sub_paths())
        # 'M 0 0 L 10 0 L 10 5 L 0 5 Z'
"""

from __future__ import annotations

from typing import Iterable, List

import numpy as np

from ..domain.subpath import SubPathView


def format_number(value: float, precision: int = 6) -> str:
    """Format a coordinate with at most ``precision`` decimals.

    Trailing zeros and a trailing decimal point are dropped and negative
    zero prints as ``0``.
    """
    text = f"{float(value):.{precision}f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    if text in ('-0', ''):
        text = '0'
    return text


def _subpath_commands(view: SubPathView, precision: int) -> List[str]:
    vertices = view.vertices
    if view.closed and len(vertices) > 1 and np.array_equal(vertices[0], vertices[-1]):
        vertices = vertices[:-1]

    commands = []
    for index, (x, y) in enumerate(vertices):
        op = 'M' if index == 0 else 'L'
        commands.append(f"{op} {format_number(x, precision)} {format_number(y, precision)}")
    if view.closed:
        commands.append('Z')
    return commands


def to_svg_path_data(views: Iterable[SubPathView], precision: int = 6) -> str:
    """Render sub-path views as an SVG ``d`` attribute.

    Args:
        views: Sub-path views in path order, as returned by
            ``Path2d.sub_paths()``.
        precision: Maximum number of decimals per coordinate.

    Returns:
        Space separated path data. Empty sub-paths contribute nothing.

    Raises:
        ValueError: If ``precision`` is negative.
    """
    if precision < 0:
        raise ValueError(f"Precision must not be negative, got {precision}")

    commands: List[str] = []
    for view in views:
        if len(view) == 0:
            continue
        commands.extend(_subpath_commands(view, precision))
    return ' '.join(commands)
