"""Construction options for paths.

This module centralizes the tessellation resolutions and computation
switches a ``Path2d`` is built with. Options are an immutable value
supplied once per path; ``DEFAULT_OPTIONS`` is the named default and is
never mutated.

Typical usage example:

    from path2d.config import PathOptions

    options = PathOptions(sample_count_arc=64, compute_tangents_and_normals=False)
    options = PathOptions.from_mapping({'sample_count_cubic': 12})
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from numbers import Integral
from typing import Any, Dict, Mapping, Union

from .analysis.lengths import UpdateMode
from .errors import ConfigurationError

# Default number of vertices generated per primitive
SAMPLE_COUNT_CUBIC = 30
SAMPLE_COUNT_QUADRATIC = 30
SAMPLE_COUNT_ARC = 30
SAMPLE_COUNT_ELLIPSE = 60

# A primitive needs at least its start and end sample
MIN_SAMPLE_COUNT = 2

_SAMPLE_COUNT_FIELDS = (
    'sample_count_cubic',
    'sample_count_quadratic',
    'sample_count_arc',
    'sample_count_ellipse',
)


@dataclass(frozen=True)
class PathOptions:
    """Options a path is constructed with.

    Attributes:
        sample_count_cubic: Vertices generated per ``cubic_curve_to``.
        sample_count_quadratic: Vertices generated per
            ``quadratic_curve_to``.
        sample_count_arc: Vertices generated per ``arc`` and ``arc_to``.
        sample_count_ellipse: Vertices generated per ``ellipse`` and
            ``ellipse_at``.
        record_vertices: Keep sub-path vertices. Required, since vertex
            recording is the only recording mode.
        compute_tangents_and_normals: Compute per-vertex unit tangents
            and normals on update. Requires ``record_vertices``.

    Raises:
        ConfigurationError: On an invalid combination or sample count.
    """
    sample_count_cubic: int = SAMPLE_COUNT_CUBIC
    sample_count_quadratic: int = SAMPLE_COUNT_QUADRATIC
    sample_count_arc: int = SAMPLE_COUNT_ARC
    sample_count_ellipse: int = SAMPLE_COUNT_ELLIPSE
    record_vertices: bool = True
    compute_tangents_and_normals: bool = True

    def __post_init__(self):
        for name in _SAMPLE_COUNT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
            if value < MIN_SAMPLE_COUNT:
                raise ConfigurationError(
                    f"{name} must be at least {MIN_SAMPLE_COUNT}, got {value}"
                )
        if not self.record_vertices:
            if self.compute_tangents_and_normals:
                raise ConfigurationError(
                    "Tangent and normal computation requires vertex recording"
                )
            raise ConfigurationError("No recording mode enabled: record_vertices is False")

    @property
    def update_mode(self) -> UpdateMode:
        """Length engine variant selected by these options."""
        if self.compute_tangents_and_normals:
            return UpdateMode.WITH_TANGENTS_AND_NORMALS
        return UpdateMode.LENGTH_ONLY

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> PathOptions:
        """Create options from a mapping, filling unspecified keys with defaults.

        Raises:
            ConfigurationError: If the mapping holds an unrecognized key or
                the resulting options are invalid.
        """
        unknown = sorted(set(mapping) - OPTION_KEYS)
        if unknown:
            raise ConfigurationError(f"Invalid option(s): {', '.join(map(repr, unknown))}")
        return cls(**dict(mapping))


OPTION_KEYS = frozenset(f.name for f in fields(PathOptions))

DEFAULT_OPTIONS = PathOptions()

OptionsLike = Union[PathOptions, Mapping[str, Any], None]


def resolve_options(options: OptionsLike = None) -> PathOptions:
    """Turn None, a PathOptions or a mapping into a validated PathOptions."""
    if options is None:
        return DEFAULT_OPTIONS
    if isinstance(options, PathOptions):
        return options
    if isinstance(options, Mapping):
        return PathOptions.from_mapping(options)
    raise ConfigurationError(
        f"Options must be a PathOptions or a mapping, got {type(options).__name__}"
    )
