"""Small 3D vector types and the player's position and view."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

EYE_HEIGHT = 1.5


@dataclass(frozen=True)
class Vector:
    """An immutable point or direction in world space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self + other.scale(-1)

    def scale(self, s: float) -> Vector:
        """Return this vector multiplied by the scalar ``s``."""
        return Vector(s * self.x, s * self.y, s * self.z)

    def normalized(self) -> Vector:
        """Return a vector of length one pointing the same way."""
        length = math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)
        if length == 0:
            raise ValueError("cannot normalize a zero-length vector")
        return Vector(self.x / length, self.y / length, self.z / length)


@dataclass(frozen=True)
class ViewAngles:
    """Viewing direction as elevation ``psi`` and heading ``phi``, in radians."""

    psi: float = 0.0
    phi: float = 0.0

    def to_vector(self) -> Vector:
        """Return the unit vector these angles point along."""
        return Vector(
            math.cos(self.psi) * math.cos(self.phi),
            math.cos(self.psi) * math.sin(self.phi),
            math.sin(self.psi),
        )


@dataclass
class PosView:
    """Where the player's eye is and where it looks."""

    pos: Vector = field(default_factory=Vector)
    view: ViewAngles = field(default_factory=ViewAngles)


def initial_pos_view() -> PosView:
    """Return the player's starting position and view."""
    return PosView(Vector(5.0, 5.0, 4 + EYE_HEIGHT), ViewAngles(0.0, 0.0))