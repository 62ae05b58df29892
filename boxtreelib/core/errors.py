"""Exceptions raised by BoxTreeLib."""


class BoxTreeError(Exception):
    """Base class for all BoxTreeLib errors."""
    pass


class IteratorOutOfBoundsError(BoxTreeError, IndexError):
    """Raised by current_item() once the iteration has terminated."""

    def __init__(self, message: str = "The iteration has already terminated"):
        super().__init__(message)


class NotALeafError(BoxTreeError, TypeError):
    """Raised when a leaf-only operation is called on a Box."""
    pass


class ConfigurationError(BoxTreeError, ValueError):
    """Raised when a TraversalConfig fails validation."""
    pass
