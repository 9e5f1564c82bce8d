# materials/presets.py
from pathtracer.core.vector import Vector3
from pathtracer.materials.material import Material


class MaterialPresets:
    """Predefined material records covering each aspect combination."""

    @staticmethod
    def diffuse_white(albedo: float = 0.18) -> Material:
        return Material(diffuse=True, kd=Vector3.fill(albedo), name="diffuse_white")

    @staticmethod
    def light(intensity: float = 1.0) -> Material:
        return Material(self_luminous=True, ka=Vector3.fill(intensity), name="light")

    @staticmethod
    def mirror() -> Material:
        return Material(specular=True, ks=Vector3(0.9, 0.9, 0.9), shininess=1.0, name="mirror")

    @staticmethod
    def glossy_plastic() -> Material:
        return Material(diffuse=True, specular=True,
                        kd=Vector3(0.15, 0.15, 0.15), ks=Vector3(0.2, 0.2, 0.2),
                        shininess=20.0, name="glossy_plastic")


class DielectricPresets:
    """Transparent materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Material:
        return Material(transparent=True, kr=0.1, ior=1.52, name="glass")

    @staticmethod
    def water() -> Material:
        return Material(transparent=True, kr=0.05, ior=1.33, name="water")

    @staticmethod
    def diamond() -> Material:
        return Material(transparent=True, kr=0.17, ior=2.42, name="diamond")


class LightPresets:
    """Self-luminous materials with different colors and intensities."""

    @staticmethod
    def warm_light(intensity: float = 1.0) -> Material:
        return Material(self_luminous=True, ka=Vector3(1.0, 0.95, 0.9) * intensity, name="warm_light")

    @staticmethod
    def cool_light(intensity: float = 1.0) -> Material:
        return Material(self_luminous=True, ka=Vector3(0.9, 0.95, 1.0) * intensity, name="cool_light")
