"""Exceptions raised while laying out and rendering documents."""


class PrettyDocError(Exception):
    """Base class for all prettydoc errors."""


class InvalidWidthError(PrettyDocError, ValueError):
    """Raised when the requested page width is not a positive integer.

    The width is checked before any part of the document is traversed,
    so nothing has been written when this is raised.

    Attributes:
        width: The rejected width value
    """

    def __init__(self, width):
        self.width = width
        super().__init__(
            f"Width must be a positive integer, got {repr(width)}"
        )


class SinkWriteError(PrettyDocError):
    """Raised when the output stream fails to accept a write.

    The render is aborted at the failing write; whatever the stream
    accepted before that stays written. The original exception is
    available as ``__cause__``.

    Attributes:
        stream: The stream whose ``write`` failed
    """

    def __init__(self, stream, message="Failed to write to output stream"):
        self.stream = stream
        super().__init__(f"{message}: {repr(stream)}")


class RecursionLimitExceeded(PrettyDocError, RecursionError):
    """Raised when a document is nested deeper than the configured maximum.

    Attributes:
        max_depth: The nesting depth limit that was exceeded
    """

    def __init__(self, max_depth):
        self.max_depth = max_depth
        super().__init__(
            f"Document nesting exceeds the maximum depth of {max_depth}"
        )
