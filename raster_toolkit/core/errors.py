"""
Error taxonomy for Raster Toolkit.

Each error subclasses the builtin exception it refines, so callers may
catch either the specific class or the builtin.
"""


class InvalidArgumentError(ValueError):
    """A required argument is absent, malformed or unresolvable."""


class OutOfBoundsError(IndexError):
    """A pixel coordinate lies outside the image grid."""


class InvalidConfigurationError(RuntimeError):
    """An operation was defined with an unusable kernel, matrix or registry."""
