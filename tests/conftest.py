"""
Pytest configuration and fixtures for PyHermite tests.

This module provides shared fixtures for testing:
- Configuration fixtures
- Pose fixtures
- Spline fixtures
"""

from __future__ import annotations

import math
from pathlib import Path

import pytest


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_global_config(monkeypatch):
    """Give every test a fresh global configuration manager."""
    import pyhermite.config

    monkeypatch.setattr(pyhermite.config, "_global_config", None)


@pytest.fixture
def spline_config():
    """Create typed default configuration."""
    from pyhermite.config import SplineConfig

    return SplineConfig()


@pytest.fixture
def temp_config_file(tmp_path) -> Path:
    """Write a small YAML configuration file."""
    path = tmp_path / "pyhermite.yml"
    path.write_text(
        "construction:\n"
        "  pose_tangent_scale: 1.5\n"
        "cost:\n"
        "  num_samples: 50\n"
    )
    return path


def make_config(zero_velocity: str = "propagate", cache_enabled: bool = True):
    from pyhermite.config import EvaluationConfig, SplineConfig

    return SplineConfig(
        evaluation=EvaluationConfig(cache_enabled=cache_enabled, zero_velocity=zero_velocity)
    )


# =============================================================================
# Pose Fixtures
# =============================================================================


@pytest.fixture
def origin_pose():
    """Pose at the origin facing +x."""
    from pyhermite.geometry import Pose2d

    return Pose2d.from_xy_heading(0.0, 0.0, 0.0)


@pytest.fixture
def ahead_pose():
    """Pose 10 m ahead on the x axis facing +x."""
    from pyhermite.geometry import Pose2d

    return Pose2d.from_xy_heading(10.0, 0.0, 0.0)


# =============================================================================
# Spline Fixtures
# =============================================================================


@pytest.fixture
def straight_spline(origin_pose, ahead_pose, spline_config):
    """Straight spline from (0, 0) to (10, 0)."""
    from pyhermite.spline2 import QuinticHermiteSpline2d

    return QuinticHermiteSpline2d.from_poses(origin_pose, ahead_pose, config=spline_config)


@pytest.fixture
def curved_spline(origin_pose, spline_config):
    """Left turn from (0, 0) facing +x to (10, 5) facing +y."""
    from pyhermite.geometry import Pose2d
    from pyhermite.spline2 import QuinticHermiteSpline2d

    end = Pose2d.from_xy_heading(10.0, 5.0, math.pi / 2)
    return QuinticHermiteSpline2d.from_poses(origin_pose, end, config=spline_config)


@pytest.fixture
def parabola_spline(spline_config):
    """Spline that reproduces x = t, y = t^2 / 2 exactly."""
    from pyhermite.spline2 import QuinticHermiteSpline2d

    return QuinticHermiteSpline2d.from_control_points(
        0.0, 0.0, 1.0, 0.0, 0.0, 1.0,
        1.0, 0.5, 1.0, 1.0, 0.0, 1.0,
        config=spline_config,
    )


@pytest.fixture
def stationary_spline():
    """Spline with zero velocity everywhere."""
    def build(zero_velocity: str = "propagate"):
        from pyhermite.spline2 import QuinticHermiteSpline2d

        return QuinticHermiteSpline2d.from_control_points(
            1.0, 2.0, 0.0, 0.0, 0.0, 0.0,
            1.0, 2.0, 0.0, 0.0, 0.0, 0.0,
            config=make_config(zero_velocity=zero_velocity),
        )

    return build


@pytest.fixture
def config_factory():
    """Build a SplineConfig with custom evaluation settings."""
    return make_config
