# scenes.py
"""Small ready-made scenes paired with camera options that frame them."""
import logging
from typing import Tuple

from pathtracer.core.matrix import Matrix44
from pathtracer.core.vector import Vector3
from pathtracer.geometry.mesh import make_quad
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import Scene
from pathtracer.materials.material import Material
from pathtracer.materials.presets import DielectricPresets, MaterialPresets
from pathtracer.materials.textures import CheckerTexture
from pathtracer.renderer.options import Options

logger = logging.getLogger(__name__)


def emissive_sphere_scene(width: int = 2, height: int = 2) -> Tuple[Scene, Options]:
    """
    A single unit-emission sphere wrapped around the camera, so every
    primary ray hits it.
    """
    light = Material(self_luminous=True, ka=Vector3(1, 1, 1), name="light")
    scene = Scene([Sphere(Vector3(0, 0, 0), 10.0, light)])
    options = Options(width=width, height=height, max_depth=1)
    return scene, options


def cornell_spheres_scene(width: int = 32, height: int = 24,
                          diffuse_samples: int = 8, max_depth: int = 1) -> Tuple[Scene, Options]:
    """
    A checkered floor, an overhead light and three spheres showing the
    diffuse, mirror and glass aspects.
    """
    logger.debug("Building cornell spheres scene")
    floor = make_quad(
        Vector3(-5, -1, 5), Vector3(5, -1, 5), Vector3(5, -1, -15), Vector3(-5, -1, -15),
        MaterialPresets.diffuse_white(0.5),
        CheckerTexture(Vector3(0.9, 0.9, 0.9), Vector3(0.2, 0.2, 0.2), scale=8.0),
    )
    scene = Scene([
        floor,
        Sphere(Vector3(0, 6, -5), 2.0, MaterialPresets.light(4.0)),
        Sphere(Vector3(-2, 0, -5), 1.0, MaterialPresets.glossy_plastic()),
        Sphere(Vector3(0, 0, -6), 1.0, MaterialPresets.mirror()),
        Sphere(Vector3(2, 0, -5), 1.0, DielectricPresets.glass()),
    ])
    options = Options(
        width=width,
        height=height,
        fov=60.0,
        camera_to_world=Matrix44.look_at(Vector3(0, 1, 2), Vector3(0, 0, -5)),
        max_depth=max_depth,
        background_color=Vector3(0.05, 0.05, 0.08),
        diffuse_samples=diffuse_samples,
        seed=7,
    )
    return scene, options
