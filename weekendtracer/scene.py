"""
Scene storage: an unordered collection of objects scanned linearly.
"""

from __future__ import annotations
from typing import Iterable, Iterator, Optional

from .ray import Ray
from .objects import Object
from .hit import HitRecord


class Scene:
    """A collection of objects the camera can render."""

    def __init__(self, objects: Optional[Iterable[Object]] = None):
        self.objects: list[Object] = list(objects) if objects is not None else []

    def add_object(self, obj: Object) -> None:
        """Add an object to the scene."""
        self.objects.append(obj)

    def clear(self) -> None:
        """Remove all objects."""
        self.objects.clear()

    def find_intersection(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Find the closest intersection among all objects.

        Every object is tested against the same [t_min, t_max] range and the
        smallest distance wins; on equal distances the earlier object wins.
        """
        hits = (obj.hit(ray, t_min, t_max) for obj in self.objects)
        return min(
            (hit for hit in hits if hit is not None),
            key=lambda hit: hit.distance,
            default=None,
        )

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Object]:
        return iter(self.objects)
