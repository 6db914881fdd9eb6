"""
Tests for boundary sensitivities of the curvature-derivative cost.
"""

from __future__ import annotations

import pytest

from pyhermite.exceptions import ConfigValidationError
from pyhermite.sensitivity import boundary_sensitivities
from pyhermite.spline2 import QuinticHermiteSpline2d


class TestBoundarySensitivities:
    def test_keys(self, curved_spline):
        gradient = boundary_sensitivities(curved_spline, num_samples=20)
        assert set(gradient) == {"ddx0", "ddx1", "ddy0", "ddy1"}

    def test_matches_manual_difference(self, curved_spline):
        step = 1e-3
        n = 20
        base = curved_spline.sum_dcurvature_squared(n)
        varied = QuinticHermiteSpline2d.from_spline2_vary_ddx(curved_spline, step, 0.0)
        expected = (varied.sum_dcurvature_squared(n) - base) / step

        gradient = boundary_sensitivities(curved_spline, num_samples=n, step=step)
        assert gradient["ddx0"] == pytest.approx(expected)

    def test_straight_line(self, straight_spline):
        """Bending a straight line only costs through the y axis."""
        gradient = boundary_sensitivities(straight_spline, num_samples=20)
        assert gradient["ddx0"] == 0.0
        assert gradient["ddx1"] == 0.0
        assert gradient["ddy0"] > 0.0
        assert gradient["ddy1"] > 0.0

    def test_spline_not_modified(self, curved_spline):
        before = curved_spline.sum_dcurvature_squared(20)
        boundary_sensitivities(curved_spline, num_samples=20)
        assert curved_spline.x.a0 == 0.0
        assert curved_spline.y.a1 == 0.0
        assert curved_spline.sum_dcurvature_squared(20) == before

    @pytest.mark.parametrize("step", [0.0, -1e-3])
    def test_invalid_step(self, curved_spline, step):
        with pytest.raises(ConfigValidationError):
            boundary_sensitivities(curved_spline, step=step)
