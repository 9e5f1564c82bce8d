# camera/camera.py
import math

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3


class Camera:
    """
    Pinhole camera generating one primary ray through each pixel center.

    The image plane sits at z = -1 in camera space; camera_to_world places
    it in the scene. Rows run top to bottom, columns left to right.
    """
    def __init__(self, options):
        self.width = options.width
        self.height = options.height
        self.camera_to_world = options.camera_to_world
        self.scale = math.tan(math.radians(options.fov * 0.5))
        self.aspect_ratio = options.width / options.height
        self.origin = self.camera_to_world.mult_vec_matrix(Vector3(0, 0, 0))

    def ray_direction(self, i: int, j: int) -> Vector3:
        """Unit world-space direction through the center of pixel (i, j)."""
        x = (2 * (i + 0.5) / self.width - 1) * self.aspect_ratio * self.scale
        y = (1 - 2 * (j + 0.5) / self.height) * self.scale
        direction = self.camera_to_world.mult_dir_matrix(Vector3(x, y, -1))
        return direction.normalize_()

    def get_ray(self, i: int, j: int) -> Ray:
        return Ray(self.origin, self.ray_direction(i, j))
