from pathtracer.geometry.hittable import HitRecord, Hittable, Intersection, SurfaceProperties
from pathtracer.geometry.mesh import Triangle, TriangleMesh, make_quad
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import Scene

__all__ = [
    "HitRecord",
    "Hittable",
    "Intersection",
    "SurfaceProperties",
    "Triangle",
    "TriangleMesh",
    "make_quad",
    "Sphere",
    "Scene",
]
