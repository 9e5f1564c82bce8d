# core/errors.py
class PathTracerError(Exception):
    """Base class for errors raised by the path tracer."""


class InvalidGeometry(PathTracerError):
    """A reported hit could not be resolved into usable surface properties."""


class InvalidMaterial(InvalidGeometry, ValueError):
    """A material record is missing a field or holds an out-of-range value."""


class InvalidOptions(PathTracerError, ValueError):
    """Render configuration rejected at the render-entry boundary."""


class RenderCancelled(PathTracerError):
    """Raised when a render is cancelled through its CancellationToken."""
