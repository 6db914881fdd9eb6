"""
Boundary sensitivities of the curvature-derivative cost.

An optimizer that smooths a path adjusts the endpoint second derivatives
of each spline. This module estimates, by forward differences, how the
spline's ``sum_dcurvature_squared`` cost changes with each of those four
values.
"""

from typing import Dict, Optional

from pyhermite.exceptions import ConfigValidationError
from pyhermite.logging import LOG_DEBUG, timed
from pyhermite.registry import get_axis_variant
from pyhermite.spline2 import QuinticHermiteSpline2d


@timed
def boundary_sensitivities(
    spline: QuinticHermiteSpline2d,
    num_samples: Optional[int] = None,
    step: Optional[float] = None,
) -> Dict[str, float]:
    """
    Finite-difference gradient of the cost with respect to endpoint second derivatives.

    Args:
        spline: Spline whose cost is differentiated. It is not modified.
        num_samples: Riemann sum resolution (default: ``cost.num_samples``).
        step: Perturbation size (default: ``cost.sensitivity_step``).

    Returns:
        Mapping with keys ``ddx0``, ``ddx1``, ``ddy0``, ``ddy1``.
    """
    if step is None:
        step = spline.config.cost.sensitivity_step
    if step <= 0:
        raise ConfigValidationError("cost.sensitivity_step", "must be > 0", step)

    base_cost = spline.sum_dcurvature_squared(num_samples)
    gradient = {}

    for axis in ("x", "y"):
        factory = get_axis_variant(axis)
        axis_spline = getattr(spline, axis)
        a0, a1 = axis_spline.a0, axis_spline.a1

        varied_start = factory(spline, a0 + step, a1)
        varied_end = factory(spline, a0, a1 + step)

        gradient[f"dd{axis}0"] = (varied_start.sum_dcurvature_squared(num_samples) - base_cost) / step
        gradient[f"dd{axis}1"] = (varied_end.sum_dcurvature_squared(num_samples) - base_cost) / step

    LOG_DEBUG(f"Boundary sensitivities: {gradient}")
    return gradient
