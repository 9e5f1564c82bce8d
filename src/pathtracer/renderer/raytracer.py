# renderer/raytracer.py
"""
Frame rendering: one integrator call per pixel, written into a row-major
buffer of Vector3 colors.

render() is the sequential entry point that fills a caller-owned buffer.
Renderer spreads rows over a thread pool; every row task owns a random
source spawned from the render seed, so a seeded render produces the same
image for any worker count.
"""
import logging
import threading
import time
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import List, MutableSequence, Optional

from pathtracer.camera.camera import Camera
from pathtracer.core.errors import InvalidOptions, RenderCancelled
from pathtracer.core.sampling import RandomSource
from pathtracer.core.vector import Vector3
from pathtracer.renderer.integrator import cast_ray
from pathtracer.renderer.options import Options

logger = logging.getLogger(__name__)

# Depth past which diffuse fan-out is reported as expensive.
EXPENSIVE_DEPTH = 2


class CancellationToken:
    """Cooperative cancellation flag shared by a render and its caller."""
    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise RenderCancelled("Render cancelled")


def _check_render_inputs(options: Options, pixels: MutableSequence[Vector3]) -> None:
    if not isinstance(options, Options):
        raise InvalidOptions(f"Expected Options, got {type(options).__name__}")
    if len(pixels) != options.pixel_count:
        raise InvalidOptions(
            f"Pixel buffer holds {len(pixels)} entries, expected "
            f"{options.width}x{options.height} = {options.pixel_count}"
        )


def _warn_if_expensive(options: Options) -> None:
    if options.diffuse_samples > 1 and options.max_depth > EXPENSIVE_DEPTH:
        logger.warning(
            "max_depth=%d with %d diffuse samples can cost up to %d rays per pixel",
            options.max_depth, options.diffuse_samples,
            options.diffuse_samples ** (options.max_depth + 1),
        )


def render_row(j: int, camera: Camera, options: Options, scene,
               pixels: MutableSequence[Vector3], rng: RandomSource,
               cancel: Optional[CancellationToken] = None) -> None:
    """Shades row j, writing each of its pixels exactly once."""
    row_start = j * options.width
    for i in range(options.width):
        if cancel is not None:
            cancel.raise_if_cancelled()
        direction = camera.ray_direction(i, j)
        pixels[row_start + i] = cast_ray(camera.origin, direction, scene, options, rng, 0, cancel)


def render(options: Options, scene, pixels: MutableSequence[Vector3],
           rng: Optional[RandomSource] = None,
           cancel: Optional[CancellationToken] = None) -> None:
    """
    Renders the scene into pixels, row-major, top row first.

    Args:
        options: Render configuration.
        scene: Anything exposing intersect(origin, direction).
        pixels: Caller-owned buffer of exactly width * height entries.
        rng: Random source; a new one seeded from options.seed when omitted.
        cancel: Optional token; raises RenderCancelled once set.

    Raises:
        InvalidOptions: If options or the buffer size are unusable.
    """
    _check_render_inputs(options, pixels)
    _warn_if_expensive(options)
    if rng is None:
        rng = RandomSource(options.seed)

    camera = Camera(options)
    logger.info("Rendering %dx%d, max_depth=%d, %d diffuse samples",
                options.width, options.height, options.max_depth, options.diffuse_samples)
    start = time.perf_counter()
    for j in range(options.height):
        render_row(j, camera, options, scene, pixels, rng, cancel)
    logger.info("Rendered %d pixels in %.3fs", options.pixel_count, time.perf_counter() - start)


class Renderer:
    """
    Renders frames with rows distributed over options.workers threads.

    cancel() stops the frame in progress, or the next frame when none is
    running. Each frame gets a fresh token once it finishes, so a
    cancelled renderer can render again.
    """
    def __init__(self, options: Options, scene):
        self.options = options
        self.scene = scene
        self.camera = Camera(options)
        self.cancel_token = CancellationToken()

    def cancel(self) -> None:
        self.cancel_token.cancel()

    def render(self) -> List[Vector3]:
        """
        Renders a new frame and returns its row-major pixel buffer.

        A failing row cancels every row not yet finished before the error
        propagates.

        Raises:
            RenderCancelled: If cancel() was called before the frame finished.
        """
        options = self.options
        token = self.cancel_token
        _warn_if_expensive(options)
        pixels: List[Vector3] = [options.background_color.copy() for _ in range(options.pixel_count)]
        row_sources = RandomSource(options.seed).spawn(options.height)

        logger.info("Rendering %dx%d on %d workers", options.width, options.height, options.workers)
        start = time.perf_counter()
        try:
            with ThreadPoolExecutor(max_workers=options.workers) as executor:
                futures = [
                    executor.submit(render_row, j, self.camera, options, self.scene,
                                    pixels, row_sources[j], token)
                    for j in range(options.height)
                ]
                try:
                    done, _ = wait(futures, return_when=FIRST_EXCEPTION)
                    for future in futures:
                        if future in done and future.exception() is not None:
                            raise future.exception()
                except BaseException as exc:
                    if not isinstance(exc, RenderCancelled):
                        logger.error("Render failed, cancelling remaining rows: %s", exc)
                    token.cancel()
                    for future in futures:
                        future.cancel()
                    raise
        finally:
            self.cancel_token = CancellationToken()
        logger.info("Rendered %d pixels in %.3fs", options.pixel_count, time.perf_counter() - start)
        return pixels
