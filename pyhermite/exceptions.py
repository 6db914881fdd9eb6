"""
PyHermite Exception Hierarchy.

Degenerate geometry is reported through non-finite floats by default; the
evaluation errors below are only raised when the ``raise`` policy is
selected or when a caller passes an unusable argument.
"""

from typing import Any, Optional


class PyHermiteError(Exception):
    """Base exception for all PyHermite errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(PyHermiteError):
    """Error in configuration loading or validation."""

    pass


class ConfigNotFoundError(ConfigurationError):
    """Configuration file not found."""

    def __init__(self, config_path: str):
        super().__init__(
            f"Configuration file not found: {config_path}",
            details={"path": config_path},
        )


class ConfigValidationError(ConfigurationError):
    """Configuration validation failed."""

    def __init__(self, key: str, reason: str, value: Any = None):
        details = {"key": key, "reason": reason}
        if value is not None:
            details["value"] = str(value)
        super().__init__(
            f"Invalid configuration for '{key}': {reason}",
            details=details,
        )


# =============================================================================
# Evaluation Errors
# =============================================================================


class EvaluationError(PyHermiteError):
    """Base class for spline evaluation errors."""

    pass


class DegenerateCurveError(EvaluationError):
    """A geometric quantity is undefined at the requested parameter."""

    def __init__(self, quantity: str, t: float):
        super().__init__(
            f"'{quantity}' is undefined at t={t} (zero velocity)",
            details={"quantity": quantity, "t": t},
        )


class InvalidSampleCountError(EvaluationError):
    """Sample count is not an integer or is too small for the requested operation."""

    def __init__(self, num_samples: int, minimum: int = 1):
        super().__init__(
            f"Number of samples must be an integer >= {minimum}, got {num_samples!r}",
            details={"num_samples": num_samples, "minimum": minimum},
        )


# =============================================================================
# Registry Errors
# =============================================================================


class RegistryError(PyHermiteError):
    """Base class for registry lookups."""

    pass


class UnknownAxisError(RegistryError):
    """Requested axis has no registered variant factory."""

    def __init__(self, axis: str, available: Optional[list] = None):
        details = {"axis": axis}
        if available:
            details["available"] = available
        super().__init__(
            f"No variant factory registered for axis '{axis}'",
            details=details,
        )
