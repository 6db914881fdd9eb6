"""
Tests for exception hierarchy.
"""

from __future__ import annotations

import pytest

from pyhermite.exceptions import (
    ConfigNotFoundError,
    ConfigValidationError,
    ConfigurationError,
    DegenerateCurveError,
    EvaluationError,
    InvalidSampleCountError,
    PyHermiteError,
    RegistryError,
    UnknownAxisError,
)


class TestPyHermiteError:
    """Tests for base PyHermiteError."""

    def test_basic_message(self):
        error = PyHermiteError("Test error")
        assert str(error) == "Test error"
        assert error.message == "Test error"

    def test_message_with_details(self):
        error = PyHermiteError("Test error", details={"key": "value"})
        assert "key=value" in str(error)
        assert error.details == {"key": "value"}

    def test_can_be_raised(self):
        with pytest.raises(PyHermiteError):
            raise PyHermiteError("Test error")


class TestConfigurationErrors:
    def test_config_not_found(self):
        error = ConfigNotFoundError("/path/to/config.yml")
        assert "/path/to/config.yml" in str(error)
        assert error.details["path"] == "/path/to/config.yml"
        assert isinstance(error, ConfigurationError)

    def test_config_validation(self):
        error = ConfigValidationError("cost.num_samples", "must be >= 1", 0)
        assert "cost.num_samples" in str(error)
        assert error.details["value"] == "0"


class TestEvaluationErrors:
    def test_degenerate_curve(self):
        error = DegenerateCurveError("curvature", 0.25)
        assert "curvature" in str(error)
        assert error.details == {"quantity": "curvature", "t": 0.25}
        assert isinstance(error, EvaluationError)

    def test_invalid_sample_count(self):
        error = InvalidSampleCountError(0)
        assert error.details["minimum"] == 1
        assert isinstance(error, PyHermiteError)


class TestRegistryErrors:
    def test_unknown_axis(self):
        error = UnknownAxisError("z", available=["x", "y"])
        assert "'z'" in str(error)
        assert isinstance(error, RegistryError)

    def test_catch_all(self):
        """Every error is catchable as PyHermiteError."""
        for error in (UnknownAxisError("z"), DegenerateCurveError("heading", 0.0)):
            with pytest.raises(PyHermiteError):
                raise error
