"""
A recursive Monte Carlo path tracer.

Rays leave a pinhole camera, and every hit surface adds the contribution of
each of its material aspects (emissive, diffuse, specular, transparent) by
tracing further rays, until a light is hit, a ray escapes, or the recursion
depth limit is passed.

Subpackages:
    core: vectors, transforms, sampling, reflect/refract, errors
    geometry: scene query contract and the sphere/mesh collaborators
    materials: material records, textures, presets
    camera: primary ray generation
    renderer: options, the integrator and frame rendering
"""
from pathtracer.core.errors import (
    InvalidGeometry,
    InvalidMaterial,
    InvalidOptions,
    PathTracerError,
    RenderCancelled,
)
from pathtracer.core.matrix import Matrix44
from pathtracer.core.sampling import RandomSource
from pathtracer.core.vector import Vector3
from pathtracer.geometry.world import Scene
from pathtracer.logging_config import get_logger
from pathtracer.materials.material import Material
from pathtracer.renderer import CancellationToken, Options, Renderer, cast_ray, render

__version__ = "0.1.0"

__all__ = [
    "CancellationToken",
    "InvalidGeometry",
    "InvalidMaterial",
    "InvalidOptions",
    "Material",
    "Matrix44",
    "Options",
    "PathTracerError",
    "RandomSource",
    "RenderCancelled",
    "Renderer",
    "Scene",
    "Vector3",
    "cast_ray",
    "get_logger",
    "render",
]
