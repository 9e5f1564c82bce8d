# renderer/integrator.py
"""
Recursive radiance estimator.

cast_ray follows one ray into the scene and returns the radiance it carries
back. Every enabled aspect of the hit material (diffuse, specular,
transparent) spawns its own recursive rays one level deeper and their
contributions are added together. Recursion stops when a light is hit, the
ray escapes, or the depth exceeds options.max_depth.

Cost grows as O(diffuse_samples ** depth) along all-diffuse paths, so
max_depth is the only thing standing between a render and runaway compute.
"""
from typing import Optional

from pathtracer.core.errors import InvalidMaterial
from pathtracer.core.sampling import (
    HEMISPHERE_PDF,
    RandomSource,
    create_coordinate_system,
    local_to_world,
    uniform_sample_hemisphere,
)
from pathtracer.core.utils import reflect, refract
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material


def offset_origin(point: Vector3, normal: Vector3, direction: Vector3, bias: float) -> Vector3:
    """
    Moves a secondary ray origin off the surface, on the side the ray leaves
    towards, so it does not re-hit the surface it starts on.
    """
    if direction.dot(normal) < 0:
        return point - normal * bias
    return point + normal * bias


def resolve_hit(scene, origin: Vector3, direction: Vector3) -> Optional[HitRecord]:
    """
    Runs the scene query and resolves the surface at the nearest hit.

    Returns None on a miss. Raises InvalidMaterial, an InvalidGeometry, when
    the hit object reports no material or something that is not a Material.
    """
    hit = scene.intersect(origin, direction)
    if hit is None:
        return None
    point = origin + direction * hit.t
    props = hit.obj.get_surface_properties(point, direction, hit.index, hit.uv)
    if props is None or props.material is None:
        raise InvalidMaterial(f"Hit on {hit.obj!r} (primitive {hit.index}) resolved no material")
    if not isinstance(props.material, Material):
        raise InvalidMaterial(
            f"Hit on {hit.obj!r} resolved {type(props.material).__name__}, expected Material"
        )
    return HitRecord.from_surface(hit, point, props)


def cast_ray(origin: Vector3, direction: Vector3, scene, options,
             rng: RandomSource, depth: int = 0, cancel=None) -> Vector3:
    """
    Estimates the radiance arriving at origin from direction.

    Args:
        origin: Ray origin.
        direction: Ray direction, expected unit length.
        scene: Anything exposing intersect(origin, direction).
        options: Render Options (background, max_depth, bias, diffuse_samples).
        rng: Random source of the calling task.
        depth: Current recursion level, 0 for primary rays.
        cancel: Optional CancellationToken checked before any work.

    Returns:
        The radiance as an RGB Vector3.
    """
    if cancel is not None:
        cancel.raise_if_cancelled()

    if depth > options.max_depth:
        return options.background_color.copy()

    rec = resolve_hit(scene, origin, direction)
    if rec is None:
        return options.background_color.copy()

    m = rec.material
    if m.self_luminous:
        return m.ka * rec.color

    hit_color = options.background_color.copy()
    normal = rec.normal

    if m.diffuse:
        indirect_lighting = Vector3(0, 0, 0)
        nt, nb = create_coordinate_system(normal)
        sample_count = options.diffuse_samples
        sample_origin = rec.point + normal * options.bias
        for _ in range(sample_count):
            r1 = rng.random()
            r2 = rng.random()
            sample = uniform_sample_hemisphere(r1, r2)
            sample_world = local_to_world(sample, normal, nt, nb)
            # r1 is cos(theta) of the sample
            radiance = cast_ray(sample_origin, sample_world, scene, options, rng, depth + 1, cancel)
            indirect_lighting = indirect_lighting + radiance * (r1 / HEMISPHERE_PDF)
        indirect_lighting = indirect_lighting / sample_count
        hit_color = hit_color + indirect_lighting * m.kd

    if m.specular:
        reflect_dir = reflect(direction, normal).normalize()
        light_intensity = cast_ray(
            offset_origin(rec.point, normal, reflect_dir, options.bias),
            reflect_dir, scene, options, rng, depth + 1, cancel,
        )
        cosine_alpha = max(0.0, reflect_dir.dot(-direction))
        hit_color = hit_color + light_intensity * m.ks * (cosine_alpha ** m.shininess)

    if m.transparent:
        kr = m.kr
        refraction_color = Vector3(0, 0, 0)
        refraction_dir = refract(direction, normal, m.ior)
        # Zero vector: total internal reflection, nothing is transmitted.
        if not refraction_dir.is_zero():
            refraction_dir = refraction_dir.normalize()
            refraction_color = cast_ray(
                offset_origin(rec.point, normal, refraction_dir, options.bias),
                refraction_dir, scene, options, rng, depth + 1, cancel,
            )
        reflection_dir = reflect(direction, normal).normalize()
        reflection_color = cast_ray(
            offset_origin(rec.point, normal, reflection_dir, options.bias),
            reflection_dir, scene, options, rng, depth + 1, cancel,
        )
        hit_color = hit_color + reflection_color * kr + refraction_color * (1 - kr)

    return hit_color
