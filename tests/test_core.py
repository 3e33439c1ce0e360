"""Tests for core functionality."""

import math

import pytest

from geoproj_lib.core.exceptions import (
    FormatError,
    GeometryError,
    GeoProjError,
    ProjectionError,
    RangeError,
    ValidationError,
)
from geoproj_lib.core.helpers import ang_normalize, is_finite_pair


class TestAngNormalize:
    """Tests for longitude normalization."""

    @pytest.mark.parametrize(
        "angle, expected",
        [
            (0.0, 0.0),
            (179.5, 179.5),
            (180.0, -180.0),
            (-180.0, -180.0),
            (190.0, -170.0),
            (-190.0, 170.0),
            (540.0, -180.0),
            (-725.0, -5.0),
        ],
    )
    def test_range(self, angle, expected):
        """Test angles are reduced into [-180, 180)."""
        assert ang_normalize(angle) == pytest.approx(expected)

    def test_tiny_negative_kept(self):
        """Test tiny negative angles are not rounded to zero."""
        assert ang_normalize(-1e-20) == -1e-20

    def test_non_finite(self):
        """Test non-finite angles become NaN."""
        assert math.isnan(ang_normalize(math.inf))
        assert math.isnan(ang_normalize(math.nan))


class TestIsFinitePair:
    """Tests for the finite pair check."""

    def test_values(self):
        """Test finite and non-finite pairs."""
        assert is_finite_pair(1.0, -2.0)
        assert not is_finite_pair(math.nan, 0.0)
        assert not is_finite_pair(0.0, -math.inf)


class TestExceptions:
    """Tests for custom exceptions."""

    @pytest.mark.parametrize(
        "exc", [RangeError, FormatError, ProjectionError, GeometryError, ValidationError]
    )
    def test_inherits_from_base(self, exc):
        """Test every library error derives from GeoProjError."""
        with pytest.raises(GeoProjError):
            raise exc("Test error")

    def test_exception_messages(self):
        """Test exception messages are preserved."""
        message = "Bad longitude tile letter"

        try:
            raise FormatError(message)
        except FormatError as e:
            assert str(e) == message
