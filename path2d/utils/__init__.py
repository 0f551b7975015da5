"""Utility functions for exporting path data.

Export functions:
    to_svg_path_data: Render sub-path views as SVG path data.
    format_number: Compact coordinate formatting.
"""

from .svg import format_number, to_svg_path_data

__all__ = ['to_svg_path_data', 'format_number']
