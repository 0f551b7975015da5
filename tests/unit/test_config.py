"""Unit tests for path2d.config.

Tests PathOptions validation, mapping conversion and option resolution,
and that Path2d rejects invalid options at construction.
"""

import pytest

from path2d import Path2d
from path2d.analysis.lengths import UpdateMode
from path2d.config import (
    DEFAULT_OPTIONS,
    OPTION_KEYS,
    PathOptions,
    resolve_options,
)
from path2d.errors import ConfigurationError, Path2dError


class TestPathOptionsDefaults:
    """Tests for the default option values."""

    def test_default_sample_counts(self):
        assert DEFAULT_OPTIONS.sample_count_cubic == 30
        assert DEFAULT_OPTIONS.sample_count_quadratic == 30
        assert DEFAULT_OPTIONS.sample_count_arc == 30
        assert DEFAULT_OPTIONS.sample_count_ellipse == 60

    def test_default_switches(self):
        assert DEFAULT_OPTIONS.record_vertices is True
        assert DEFAULT_OPTIONS.compute_tangents_and_normals is True
        assert DEFAULT_OPTIONS.update_mode is UpdateMode.WITH_TANGENTS_AND_NORMALS

    def test_defaults_are_frozen(self):
        """The shared default cannot be mutated."""
        with pytest.raises(AttributeError):
            DEFAULT_OPTIONS.sample_count_arc = 5

    def test_length_only_mode(self):
        options = PathOptions(compute_tangents_and_normals=False)
        assert options.update_mode is UpdateMode.LENGTH_ONLY


class TestPathOptionsValidation:
    """Tests for rejected option combinations."""

    def test_tangents_without_recording(self):
        with pytest.raises(ConfigurationError, match="requires vertex recording"):
            PathOptions(record_vertices=False)

    def test_no_recording_mode(self):
        with pytest.raises(ConfigurationError, match="No recording mode"):
            PathOptions(record_vertices=False, compute_tangents_and_normals=False)

    @pytest.mark.parametrize("value", [0, 1, -4])
    def test_sample_count_below_minimum(self, value):
        with pytest.raises(ConfigurationError):
            PathOptions(sample_count_cubic=value)

    @pytest.mark.parametrize("value", [2.5, "30", True, None])
    def test_sample_count_not_integer(self, value):
        with pytest.raises(ConfigurationError):
            PathOptions(sample_count_arc=value)

    def test_configuration_error_is_value_error(self):
        """Callers catching ValueError also catch configuration errors."""
        with pytest.raises(ValueError):
            PathOptions(sample_count_ellipse=1)
        assert issubclass(ConfigurationError, Path2dError)


class TestFromMapping:
    """Tests for PathOptions.from_mapping and resolve_options."""

    def test_partial_mapping_uses_defaults(self):
        options = PathOptions.from_mapping({'sample_count_cubic': 12})
        assert options.sample_count_cubic == 12
        assert options.sample_count_ellipse == 60

    def test_unknown_key_rejected(self):
        with pytest.raises(ConfigurationError, match="bogus"):
            PathOptions.from_mapping({'bogus': 1})

    def test_to_dict_values(self):
        assert PathOptions(sample_count_arc=8).to_dict() == {
            'sample_count_cubic': 30,
            'sample_count_quadratic': 30,
            'sample_count_arc': 8,
            'sample_count_ellipse': 60,
            'record_vertices': True,
            'compute_tangents_and_normals': True,
        }

    def test_to_dict_round_trip(self):
        options = PathOptions(sample_count_arc=8)
        assert set(options.to_dict()) == OPTION_KEYS
        assert PathOptions.from_mapping(options.to_dict()) == options

    def test_resolve_none_is_default(self):
        assert resolve_options(None) is DEFAULT_OPTIONS

    def test_resolve_instance_passes_through(self):
        options = PathOptions(sample_count_quadratic=4)
        assert resolve_options(options) is options

    def test_resolve_rejects_other_types(self):
        with pytest.raises(ConfigurationError):
            resolve_options(42)


class TestPathConstruction:
    """Tests for options handed to Path2d."""

    def test_mapping_accepted(self):
        path = Path2d({'sample_count_quadratic': 5})
        assert path.options.sample_count_quadratic == 5

    def test_unknown_key_fails_construction(self):
        with pytest.raises(ConfigurationError):
            Path2d({'sample_count': 10})

    def test_tangents_without_recording_fails_construction(self):
        with pytest.raises(ConfigurationError):
            Path2d({'record_vertices': False})

    def test_default_path_uses_default_options(self):
        assert Path2d().options is DEFAULT_OPTIONS
