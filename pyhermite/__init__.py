"""
PyHermite - Quintic Hermite splines for smooth planar paths.

This package evaluates planar curves made of two quintic Hermite splines,
one per axis: pose, heading, signed curvature, its rate of change, and the
integrated squared curvature-derivative used as a smoothness cost.

Basic Usage:
    from pyhermite import Pose2d, QuinticHermiteSpline2d

    spline = QuinticHermiteSpline2d.from_poses(
        Pose2d.from_xy_heading(0.0, 0.0, 0.0),
        Pose2d.from_xy_heading(10.0, 5.0, 1.57),
    )
    samples = spline.sample(50)
    cost = spline.sum_dcurvature_squared(100)

For more control:
    from pyhermite.config import SplineConfig, ConfigManager
    from pyhermite.sensitivity import boundary_sensitivities
    from pyhermite.exceptions import DegenerateCurveError
"""

from __future__ import annotations

__version__ = "0.1.0"

# =============================================================================
# Core API
# =============================================================================

from pyhermite.geometry import (
    Translation2d,
    Rotation2d,
    Pose2d,
    Pose2dWithCurvature,
)

from pyhermite.spline1 import QuinticHermiteSpline1d
from pyhermite.spline2 import QuinticHermiteSpline2d

from pyhermite.registry import (
    register_axis_variant,
    get_axis_variant,
    list_axis_variants,
    AXIS_VARIANTS,
)

from pyhermite.sensitivity import boundary_sensitivities

from pyhermite.config import (
    create_default_config,
    SplineConfig,
    ConfigManager,
    get_config,
    init_config,
)

# =============================================================================
# Logging
# =============================================================================

from pyhermite.logging import (
    LOG_DEBUG,
    get_logger,
    setup_logging,
    profile_scope,
    timed,
)

# =============================================================================
# Exceptions
# =============================================================================

from pyhermite.exceptions import (
    PyHermiteError,
    ConfigurationError,
    ConfigNotFoundError,
    ConfigValidationError,
    EvaluationError,
    DegenerateCurveError,
    InvalidSampleCountError,
    RegistryError,
    UnknownAxisError,
)

__all__ = [
    "__version__",
    # Geometry
    "Translation2d",
    "Rotation2d",
    "Pose2d",
    "Pose2dWithCurvature",
    # Splines
    "QuinticHermiteSpline1d",
    "QuinticHermiteSpline2d",
    # Registry
    "register_axis_variant",
    "get_axis_variant",
    "list_axis_variants",
    "AXIS_VARIANTS",
    # Sensitivity
    "boundary_sensitivities",
    # Config
    "create_default_config",
    "SplineConfig",
    "ConfigManager",
    "get_config",
    "init_config",
    # Logging
    "LOG_DEBUG",
    "get_logger",
    "setup_logging",
    "profile_scope",
    "timed",
    # Exceptions
    "PyHermiteError",
    "ConfigurationError",
    "ConfigNotFoundError",
    "ConfigValidationError",
    "EvaluationError",
    "DegenerateCurveError",
    "InvalidSampleCountError",
    "RegistryError",
    "UnknownAxisError",
]
