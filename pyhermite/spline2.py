"""
Two-dimensional quintic Hermite spline.

The curve (x(t), y(t)) is built from one QuinticHermiteSpline1d per axis,
both evaluated at the same parameter t in [0, 1]. All coupling between the
axes happens here: heading, signed curvature

    k(t) = (x' y'' - x'' y') / (x'^2 + y'^2)^(3/2)

and its derivative with respect to t, obtained with the quotient rule:

    num(t) = (x' y''' - x''' y') (x'^2 + y'^2) - 3 (x' y'' - x'' y') (x' x'' + y' y'')
    dk/dt  = num(t) / (x'^2 + y'^2)^(5/2)

Per-axis derivatives are memoized for the most recently queried t only.
Each derivative order is computed at most once per t and shared by every
query that needs it; a query at any other t starts from an empty record.
The memo slot is private to the instance and not thread-safe.

Zero velocity makes heading and curvature undefined. Arithmetic is carried
out on numpy floats so that such points yield inf/nan instead of raising;
what callers see is controlled by ``evaluation.zero_velocity``:

- ``propagate``: non-finite values are returned as-is
- ``zero``: non-finite values are replaced by 0.0
- ``raise``: DegenerateCurveError is raised

Heading at zero velocity falls back to the identity rotation unless the
policy is ``raise``.
"""

import operator
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from pyhermite.config import SplineConfig, get_config
from pyhermite.exceptions import DegenerateCurveError, InvalidSampleCountError
from pyhermite.geometry import Pose2d, Pose2dWithCurvature, Rotation2d, Translation2d
from pyhermite.logging import get_logger, profile_scope
from pyhermite.spline1 import QuinticHermiteSpline1d

logger = get_logger("spline2")


def _sample_count(num_samples, minimum: int) -> int:
    """Coerce a sample count to int; integral floats such as 10.0 are accepted."""
    try:
        count = operator.index(num_samples)
    except TypeError:
        if not (isinstance(num_samples, float) and num_samples.is_integer()):
            raise InvalidSampleCountError(num_samples, minimum) from None
        count = int(num_samples)
    if count < minimum:
        raise InvalidSampleCountError(num_samples, minimum)
    return count


@dataclass
class _EvalCache:
    """Per-axis derivatives at a single parameter value."""
    t: float
    x: Optional[np.float64] = None
    y: Optional[np.float64] = None
    dx: Optional[np.float64] = None
    dy: Optional[np.float64] = None
    ddx: Optional[np.float64] = None
    ddy: Optional[np.float64] = None
    dddx: Optional[np.float64] = None
    dddy: Optional[np.float64] = None


class QuinticHermiteSpline2d:
    """Planar curve made of two independent quintic Hermite splines."""

    def __init__(
        self,
        spline_x: QuinticHermiteSpline1d,
        spline_y: QuinticHermiteSpline1d,
        config: Optional[SplineConfig] = None,
    ):
        self._x = spline_x
        self._y = spline_y
        self._config = config if config is not None else get_config().config
        self._cache: Optional[_EvalCache] = None

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def from_control_points(
        cls,
        x0, y0, dx0, dy0, ddx0, ddy0,
        x1, y1, dx1, dy1, ddx1, ddy1,
        config: Optional[SplineConfig] = None,
    ) -> "QuinticHermiteSpline2d":
        """Build from position, first and second derivative at t=0 and t=1."""
        return cls(
            QuinticHermiteSpline1d.from_boundary(x0, dx0, ddx0, x1, dx1, ddx1),
            QuinticHermiteSpline1d.from_boundary(y0, dy0, ddy0, y1, dy1, ddy1),
            config=config,
        )

    @classmethod
    def from_poses(
        cls, p0: Pose2d, p1: Pose2d, config: Optional[SplineConfig] = None
    ) -> "QuinticHermiteSpline2d":
        """Build a spline through two poses with the poses' headings as tangents.

        Both tangents get the magnitude ``pose_tangent_scale`` times the
        distance between the poses. A pose carries no curvature, so the
        endpoint second derivatives are zero.
        """
        config = config if config is not None else get_config().config
        t0, r0 = p0.translation, p0.rotation
        t1, r1 = p1.translation, p1.rotation
        scale = config.construction.pose_tangent_scale * t0.distance(t1)
        logger.debug(f"from_poses: ({t0.x}, {t0.y}) -> ({t1.x}, {t1.y}), tangent scale {scale:.4f}")
        return cls.from_control_points(
            t0.x, t0.y,
            r0.cos * scale, r0.sin * scale,
            0.0, 0.0,
            t1.x, t1.y,
            r1.cos * scale, r1.sin * scale,
            0.0, 0.0,
            config=config,
        )

    @classmethod
    def from_spline2_vary_ddx(
        cls, spline: "QuinticHermiteSpline2d", ddx0, ddx1
    ) -> "QuinticHermiteSpline2d":
        """Copy ``spline`` with new x second derivatives at both ends.

        The y axis is shared with ``spline``.
        """
        return cls(
            QuinticHermiteSpline1d.from_spline_vary_dd(spline.x, ddx0, ddx1),
            spline.y,
            config=spline.config,
        )

    @classmethod
    def from_spline2_vary_ddy(
        cls, spline: "QuinticHermiteSpline2d", ddy0, ddy1
    ) -> "QuinticHermiteSpline2d":
        """Copy ``spline`` with new y second derivatives at both ends.

        The x axis is shared with ``spline``.
        """
        return cls(
            spline.x,
            QuinticHermiteSpline1d.from_spline_vary_dd(spline.y, ddy0, ddy1),
            config=spline.config,
        )

    @property
    def x(self) -> QuinticHermiteSpline1d:
        return self._x

    @property
    def y(self) -> QuinticHermiteSpline1d:
        return self._y

    @property
    def config(self) -> SplineConfig:
        return self._config

    # =========================================================================
    # Evaluation cache
    # =========================================================================

    def clear_cache(self) -> None:
        self._cache = None

    def _eval(self, t) -> _EvalCache:
        """Return the memo record for ``t``, starting a new one if needed."""
        if not self._config.evaluation.cache_enabled:
            return _EvalCache(t)
        if self._cache is None or self._cache.t != t:
            self._cache = _EvalCache(t)
        return self._cache

    def _ensure_position(self, c: _EvalCache) -> None:
        if c.x is None:
            c.x = np.float64(self._x.position(c.t))
            c.y = np.float64(self._y.position(c.t))

    def _ensure_tangent(self, c: _EvalCache) -> None:
        if c.dx is None:
            c.dx = np.float64(self._x.tangent(c.t))
            c.dy = np.float64(self._y.tangent(c.t))

    def _ensure_second(self, c: _EvalCache) -> None:
        if c.ddx is None:
            c.ddx = np.float64(self._x.second_derivative(c.t))
            c.ddy = np.float64(self._y.second_derivative(c.t))

    def _ensure_third(self, c: _EvalCache) -> None:
        if c.dddx is None:
            c.dddx = np.float64(self._x.third_derivative(c.t))
            c.dddy = np.float64(self._y.third_derivative(c.t))

    def _resolve(self, quantity: str, t, value) -> float:
        """Apply the zero-velocity policy to a possibly non-finite result."""
        if np.isfinite(value):
            return float(value)
        policy = self._config.evaluation.zero_velocity
        if policy == "raise":
            raise DegenerateCurveError(quantity, t)
        if policy == "zero":
            logger.debug(f"{quantity} undefined at t={t}, substituting 0.0")
            return 0.0
        return float(value)

    # =========================================================================
    # Queries
    # =========================================================================

    def pose(self, t) -> Pose2d:
        c = self._eval(t)
        self._ensure_position(c)
        self._ensure_tangent(c)
        return Pose2d(Translation2d(float(c.x), float(c.y)), self._heading(c))

    def start_pose(self) -> Pose2d:
        return self.pose(0.0)

    def end_pose(self) -> Pose2d:
        return self.pose(1.0)

    def pose_with_curvature(self, t) -> Pose2dWithCurvature:
        """Pose plus curvature and curvature rate per unit arc length.

        The rate is dk/dt divided by the tangential speed.
        """
        pose = self.pose(t)
        curvature = self.curvature(t)
        dcurvature = self.dcurvature(t)
        speed = self.velocity(t)
        with np.errstate(divide="ignore", invalid="ignore"):
            dcurvature_ds = np.divide(dcurvature, speed)
        return Pose2dWithCurvature(pose, curvature, self._resolve("dcurvature_ds", t, dcurvature_ds))

    def velocity(self, t) -> float:
        """Tangential speed, hypot(x', y')."""
        c = self._eval(t)
        self._ensure_tangent(c)
        return float(np.hypot(c.dx, c.dy))

    def heading(self, t) -> Rotation2d:
        c = self._eval(t)
        self._ensure_tangent(c)
        return self._heading(c)

    def _heading(self, c: _EvalCache) -> Rotation2d:
        if c.dx == 0.0 and c.dy == 0.0 and self._config.evaluation.zero_velocity == "raise":
            raise DegenerateCurveError("heading", c.t)
        return Rotation2d(float(c.dx), float(c.dy), normalize=True)

    def curvature(self, t) -> float:
        """Signed curvature, positive when turning counter-clockwise."""
        c = self._eval(t)
        self._ensure_tangent(c)
        self._ensure_second(c)
        dx2dy2 = c.dx * c.dx + c.dy * c.dy
        with np.errstate(divide="ignore", invalid="ignore"):
            value = (c.dx * c.ddy - c.ddx * c.dy) / (dx2dy2 * np.sqrt(dx2dy2))
        return self._resolve("curvature", t, value)

    def _dcurvature_terms(self, t):
        c = self._eval(t)
        self._ensure_tangent(c)
        self._ensure_second(c)
        self._ensure_third(c)
        dx2dy2 = c.dx * c.dx + c.dy * c.dy
        num = (c.dx * c.dddy - c.dddx * c.dy) * dx2dy2 - 3 * (c.dx * c.ddy - c.ddx * c.dy) * (
            c.dx * c.ddx + c.dy * c.ddy
        )
        return num, dx2dy2

    def dcurvature(self, t) -> float:
        """Derivative of curvature with respect to t."""
        num, dx2dy2 = self._dcurvature_terms(t)
        with np.errstate(divide="ignore", invalid="ignore"):
            value = num / (dx2dy2 * dx2dy2 * np.sqrt(dx2dy2))
        return self._resolve("dcurvature", t, value)

    def dcurvature_squared(self, t) -> float:
        """Square of dcurvature(t), computed without the square root."""
        num, dx2dy2 = self._dcurvature_terms(t)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            value = num * num / (dx2dy2 * dx2dy2 * dx2dy2 * dx2dy2 * dx2dy2)
        return self._resolve("dcurvature_squared", t, value)

    def sum_dcurvature_squared(self, num_samples: Optional[int] = None) -> float:
        """Left Riemann sum of dcurvature_squared over [0, 1).

        This is the smoothness cost minimized when optimizing a path:
        larger values mean more aggressive changes in curvature.

        Args:
            num_samples: Number of equal-width intervals. Defaults to
                ``cost.num_samples``.
        """
        if num_samples is None:
            num_samples = self._config.cost.num_samples
        num_samples = _sample_count(num_samples, minimum=1)

        dt = 1.0 / num_samples
        total = 0.0
        with profile_scope(f"sum_dcurvature_squared({num_samples})"):
            for i in range(num_samples):
                total += dt * self.dcurvature_squared(i * dt)
        return total

    def sample(self, num_samples: int) -> List[Pose2dWithCurvature]:
        """Evaluate pose_with_curvature at evenly spaced t over [0, 1]."""
        num_samples = _sample_count(num_samples, minimum=2)
        return [self.pose_with_curvature(float(t)) for t in np.linspace(0.0, 1.0, num_samples)]

    def __repr__(self) -> str:
        return f"QuinticHermiteSpline2d(x={self._x!r}, y={self._y!r})"
