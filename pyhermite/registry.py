"""
Axis-variant registry.

Maps an axis name to the factory that copies a 2D spline with new endpoint
second derivatives on that axis. Sensitivity code looks factories up here
instead of branching on the axis.
"""

from typing import Callable, Dict, List

from pyhermite.exceptions import UnknownAxisError
from pyhermite.logging import LOG_DEBUG
from pyhermite.spline2 import QuinticHermiteSpline2d

AxisVariantFactory = Callable[[QuinticHermiteSpline2d, float, float], QuinticHermiteSpline2d]

AXIS_VARIANTS: Dict[str, AxisVariantFactory] = {}


def register_axis_variant(name: str, factory: AxisVariantFactory):
    """Register a variant factory.

    Args:
        name: Axis name (e.g., "x", "y").
        factory: Callable ``(spline, dd0, dd1) -> spline``.
    """
    LOG_DEBUG(f"Registering axis variant '{name}'")
    AXIS_VARIANTS[name] = factory


def get_axis_variant(name: str) -> AxisVariantFactory:
    """Get the variant factory for an axis.

    Raises:
        UnknownAxisError: If no factory is registered under ``name``.
    """
    try:
        return AXIS_VARIANTS[name]
    except KeyError:
        raise UnknownAxisError(name, available=list_axis_variants()) from None


def list_axis_variants() -> List[str]:
    return list(AXIS_VARIANTS.keys())


def _register_builtin_axis_variants():
    register_axis_variant("x", QuinticHermiteSpline2d.from_spline2_vary_ddx)
    register_axis_variant("y", QuinticHermiteSpline2d.from_spline2_vary_ddy)


_register_builtin_axis_variants()
