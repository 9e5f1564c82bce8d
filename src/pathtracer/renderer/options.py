# renderer/options.py
from dataclasses import dataclass, field, replace
from typing import Optional

from pathtracer.core.errors import InvalidOptions
from pathtracer.core.matrix import Matrix44
from pathtracer.core.vector import Vector3

# Hemisphere samples per diffuse hit.
DEFAULT_DIFFUSE_SAMPLES = 128

# Named quality settings. "scale" multiplies the requested resolution.
QUALITY_LEVELS = {
    "interactive": {"diffuse_samples": 8, "max_depth": 1, "scale": 0.5},
    "balanced": {"diffuse_samples": 32, "max_depth": 2, "scale": 0.67},
    "high_quality": {"diffuse_samples": DEFAULT_DIFFUSE_SAMPLES, "max_depth": 3, "scale": 1.0},
}


@dataclass(frozen=True)
class Options:
    """
    Camera and render configuration, fixed for the duration of a render.

    Attributes:
        width, height: Image resolution in pixels.
        fov: Vertical field of view in degrees.
        camera_to_world: Camera placement; the camera looks down its local -Z.
        max_depth: Deepest recursion level that is still shaded.
        background_color: Radiance of rays that escape or exceed max_depth.
        bias: Offset along the normal applied to secondary ray origins.
        diffuse_samples: Hemisphere samples per diffuse hit.
        seed: Seed of the render's random sources, None for fresh entropy.
        workers: Threads used by Renderer; render() itself is sequential.
    """
    width: int = 640
    height: int = 480
    fov: float = 90.0
    camera_to_world: Matrix44 = field(default_factory=Matrix44)
    max_depth: int = 2
    background_color: Vector3 = field(default_factory=lambda: Vector3(0, 0, 0))
    bias: float = 1e-4
    diffuse_samples: int = DEFAULT_DIFFUSE_SAMPLES
    seed: Optional[int] = None
    workers: int = 1

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise InvalidOptions(f"Image dimensions must be positive, got {self.width}x{self.height}")
        if not 0.0 < self.fov < 180.0:
            raise InvalidOptions(f"fov must lie in (0, 180) degrees, got {self.fov}")
        if self.max_depth < 0:
            raise InvalidOptions(f"max_depth must be >= 0, got {self.max_depth}")
        if self.bias < 0:
            raise InvalidOptions(f"bias must be >= 0, got {self.bias}")
        if self.diffuse_samples < 1:
            raise InvalidOptions(f"diffuse_samples must be >= 1, got {self.diffuse_samples}")
        if self.workers < 1:
            raise InvalidOptions(f"workers must be >= 1, got {self.workers}")
        if not isinstance(self.camera_to_world, Matrix44):
            raise InvalidOptions("camera_to_world must be a Matrix44")
        if not isinstance(self.background_color, Vector3):
            raise InvalidOptions("background_color must be a Vector3")

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def with_changes(self, **changes) -> "Options":
        return replace(self, **changes)

    @classmethod
    def from_quality(cls, name: str, **overrides) -> "Options":
        """
        Builds options from a named entry of QUALITY_LEVELS. width and height
        in overrides are scaled by the preset's scale factor.
        """
        try:
            quality = QUALITY_LEVELS[name]
        except KeyError:
            raise InvalidOptions(
                f"Unknown quality level {name!r}, expected one of {sorted(QUALITY_LEVELS)}"
            ) from None
        width = overrides.pop("width", cls.width)
        height = overrides.pop("height", cls.height)
        settings = {
            "diffuse_samples": quality["diffuse_samples"],
            "max_depth": quality["max_depth"],
            "width": max(1, int(width * quality["scale"])),
            "height": max(1, int(height * quality["scale"])),
        }
        settings.update(overrides)
        return cls(**settings)
