from pathtracer.renderer.integrator import cast_ray
from pathtracer.renderer.options import QUALITY_LEVELS, Options
from pathtracer.renderer.raytracer import CancellationToken, Renderer, render

__all__ = ["cast_ray", "Options", "QUALITY_LEVELS", "CancellationToken", "Renderer", "render"]
