# geometry/world.py
import logging
from typing import Iterator, List, Optional

from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, Intersection

logger = logging.getLogger(__name__)


class Scene:
    """
    A list of Hittable objects answering nearest-hit queries.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = []
        for obj in objects or ():
            self.add(obj)

    def add(self, obj: Hittable) -> None:
        self.objects.append(obj)
        logger.debug("Added %r, scene now holds %d objects", obj, len(self.objects))

    def clear(self) -> None:
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def intersect(self, origin: Vector3, direction: Vector3) -> Optional[Intersection]:
        """
        Returns the nearest intersection over all objects, or None on a miss.
        """
        closest = None
        closest_so_far = float("inf")
        for obj in self.objects:
            hit = obj.intersect(origin, direction, closest_so_far)
            if hit is not None:
                closest_so_far = hit.t
                closest = hit
        return closest
