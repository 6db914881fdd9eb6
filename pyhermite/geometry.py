"""
Planar pose primitives.

A pose is a translation plus a rotation. Rotations are stored as a
(cos, sin) pair so a heading built from a tangent vector needs no
trigonometric round trip.
"""

import math
from dataclasses import dataclass

import numpy as np

@dataclass(frozen=True)
class Translation2d:
    """
    Planar translation.

    Attributes:
        x: Position x-coordinate [m]
        y: Position y-coordinate [m]
    """
    x: float = 0.0
    y: float = 0.0

    def distance(self, other: "Translation2d") -> float:
        """Euclidean distance to another translation."""
        return math.hypot(other.x - self.x, other.y - self.y)

    @property
    def norm(self) -> float:
        return math.hypot(self.x, self.y)

    def to_array(self) -> np.ndarray:
        """Convert to numpy array [x, y]."""
        return np.array([self.x, self.y])

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "Translation2d":
        return cls(x=float(arr[0]), y=float(arr[1]))

    def __add__(self, other: "Translation2d") -> "Translation2d":
        return Translation2d(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Translation2d") -> "Translation2d":
        return Translation2d(self.x - other.x, self.y - other.y)


class Rotation2d:
    """
    Planar rotation stored as a (cos, sin) pair.

    With ``normalize=True`` the pair is scaled to unit length, so any
    direction vector (e.g. a curve tangent) can be passed directly. A pair
    with no length normalizes to the identity rotation.
    """

    __slots__ = ("_cos", "_sin")

    def __init__(self, cos: float = 1.0, sin: float = 0.0, normalize: bool = False):
        if normalize:
            magnitude = math.hypot(cos, sin)
            if magnitude > 0.0:
                cos /= magnitude
                sin /= magnitude
            else:
                cos, sin = 1.0, 0.0
        self._cos = float(cos)
        self._sin = float(sin)

    @classmethod
    def from_radians(cls, radians: float) -> "Rotation2d":
        return cls(math.cos(radians), math.sin(radians))

    @classmethod
    def from_degrees(cls, degrees: float) -> "Rotation2d":
        return cls.from_radians(math.radians(degrees))

    @property
    def cos(self) -> float:
        return self._cos

    @property
    def sin(self) -> float:
        return self._sin

    @property
    def radians(self) -> float:
        return math.atan2(self._sin, self._cos)

    @property
    def degrees(self) -> float:
        return math.degrees(self.radians)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rotation2d):
            return NotImplemented
        return self._cos == other._cos and self._sin == other._sin

    def __hash__(self) -> int:
        return hash((self._cos, self._sin))

    def __repr__(self) -> str:
        return f"Rotation2d(cos={self._cos}, sin={self._sin})"


@dataclass(frozen=True)
class Pose2d:
    """Planar pose: a translation and a heading."""
    translation: Translation2d
    rotation: Rotation2d

    @classmethod
    def from_xy_heading(cls, x: float, y: float, radians: float = 0.0) -> "Pose2d":
        return cls(Translation2d(x, y), Rotation2d.from_radians(radians))

    @property
    def x(self) -> float:
        return self.translation.x

    @property
    def y(self) -> float:
        return self.translation.y

    @property
    def heading(self) -> float:
        """Heading in radians."""
        return self.rotation.radians


@dataclass(frozen=True)
class Pose2dWithCurvature:
    """
    Pose sampled from a curve together with its curvature.

    Attributes:
        pose: Position and heading
        curvature: Signed curvature [1/m], positive when turning counter-clockwise
        dcurvature_ds: Rate of change of curvature per unit arc length [1/m^2]
    """
    pose: Pose2d
    curvature: float
    dcurvature_ds: float

    @property
    def translation(self) -> Translation2d:
        return self.pose.translation

    @property
    def rotation(self) -> Rotation2d:
        return self.pose.rotation
