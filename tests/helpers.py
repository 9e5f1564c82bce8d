"""Test doubles for scene collaborators."""

import time

from pathtracer.core.errors import InvalidGeometry
from pathtracer.core.uv import UV
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, Intersection, SurfaceProperties


class CountingScene:
    """Wraps a scene and counts intersect() calls."""

    def __init__(self, scene):
        self.scene = scene
        self.calls = 0

    def intersect(self, origin, direction):
        self.calls += 1
        return self.scene.intersect(origin, direction)


class StubSurface(Hittable):
    """An object whose surface properties are fixed regardless of the hit."""

    def __init__(self, normal, material, color=None):
        self.normal = normal
        self.material = material
        self.color = color if color is not None else Vector3(1, 1, 1)

    def get_surface_properties(self, point, direction, index, uv):
        return SurfaceProperties(self.normal, UV(0, 0), self.color, self.material)


class ScriptedScene:
    """
    Reports a hit on `surface` at distance t for the first `hits` queries
    and misses afterwards. Records every queried direction.
    """

    def __init__(self, surface, hits=1, t=1.0):
        self.surface = surface
        self.remaining = hits
        self.t = t
        self.directions = []

    @property
    def calls(self):
        return len(self.directions)

    def intersect(self, origin, direction):
        self.directions.append(direction)
        if self.remaining <= 0:
            return None
        self.remaining -= 1
        return Intersection(self.t, 0, UV(0, 0), self.surface)


class SequenceRandom:
    """Random source replaying a fixed cycle of values."""

    def __init__(self, values):
        self.values = list(values)
        self.position = 0

    def random(self):
        value = self.values[self.position % len(self.values)]
        self.position += 1
        return value

    def uniform(self, low=0.0, high=1.0):
        return low + (high - low) * self.random()


class FailingScene:
    """
    Raises InvalidGeometry on its first query and misses afterwards, each
    later query taking `delay` seconds. Counts every query.
    """

    def __init__(self, delay=0.001):
        self.delay = delay
        self.calls = 0

    def intersect(self, origin, direction):
        self.calls += 1
        if self.calls == 1:
            raise InvalidGeometry("broken primitive")
        time.sleep(self.delay)
        return None
