"""Exceptions raised by the path engine."""


class PathTamerError(Exception):
    """Base class for path engine failures."""

    pass


class InvalidPath(PathTamerError):
    """Raised when a command sequence or path string is malformed.

    The common case is a segment that needs a previous point before any
    move has opened a subpath.
    """

    pass


class DegeneratePath(PathTamerError):
    """Raised when a bounding extent cannot be normalized.

    Zero width or zero height would produce non-finite coordinates.
    """

    pass
