"""
Ray class for representing rays in 3D space.

A ray is defined by an origin point and a direction vector.
Ray(t) = origin + t * direction
"""

from __future__ import annotations
from .vec3 import Direction, Point


class Ray:
    """A ray with origin and direction.

    The parametric form is: P(t) = origin + t * direction
    where t >= 0 represents points along the ray.
    """

    __slots__ = ('origin', 'direction')

    def __init__(self, origin: Point = None, direction: Direction = None):
        """Create a ray with given origin and direction.

        Args:
            origin: The starting point of the ray (defaults to the world origin)
            direction: The direction vector (defaults to +X)
        """
        self.origin = origin if origin is not None else Point(0, 0, 0)
        self.direction = direction if direction is not None else Direction(1, 0, 0)

    def at(self, t: float) -> Point:
        """Get the point along the ray at parameter t.

        Args:
            t: The parameter value (distance if direction is normalized)

        Returns:
            The point at origin + t * direction
        """
        return self.origin + self.direction * t

    def unit_ray(self) -> Ray:
        """Return the same ray with a unit-length direction.

        Hit distances along a unit ray are in true spatial units.
        """
        return Ray(self.origin, self.direction.unit_vector())

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin}, direction={self.direction})"
